"""Tests for the in-memory text buffer and the recording sink."""

from pathlib import Path

import pytest

from modeline_bridge.core.buffer import TextBuffer
from modeline_bridge.core.host import RecordingSink


class TestTextBuffer:
    def test_lines_are_one_based(self):
        buf = TextBuffer.from_text("a\nb\nc\n")
        assert buf.line_count() == 3
        assert buf.get_line(1) == "a"
        assert buf.get_line(3) == "c"

    def test_out_of_range(self):
        buf = TextBuffer.from_text("a\n")
        with pytest.raises(IndexError):
            buf.get_line(0)
        with pytest.raises(IndexError):
            buf.get_line(2)

    def test_crlf_and_missing_final_newline(self):
        buf = TextBuffer.from_text("a\r\nb")
        assert [buf.get_line(1), buf.get_line(2)] == ["a", "b"]

    def test_form_feed_does_not_split(self):
        buf = TextBuffer.from_text("x\fy\n")
        assert buf.line_count() == 1

    def test_final_newline(self):
        assert TextBuffer.from_text("a\n").has_final_newline()
        assert TextBuffer.from_text("a\r\n").has_final_newline()
        assert not TextBuffer.from_text("a").has_final_newline()
        assert not TextBuffer.from_text("").has_final_newline()

    def test_size_is_encoded_bytes(self):
        assert TextBuffer.from_text("é\n").file_size() == 3

    def test_from_path_uses_size_on_disk(self, tmp_path: Path):
        path = tmp_path / "f.txt"
        path.write_bytes(b"one\r\ntwo\r\n")
        buf = TextBuffer.from_path(path)
        assert buf.file_size() == 10
        assert buf.get_line(2) == "two"
        assert buf.name == path.as_posix()


class TestRecordingSink:
    def test_last_writer_wins(self):
        sink = RecordingSink()
        sink.set_numeric_option("tabstop", 8)
        sink.set_numeric_option("tabstop", 4)
        assert sink.options == {"tabstop": 4}
        assert len(sink.calls) == 2

    def test_language(self):
        sink = RecordingSink()
        sink.set_language("cpp")
        assert sink.language == "cpp"
        assert sink.calls == [("language", "filetype", "cpp")]
