"""Tests for BridgeConfig loading and schema validation."""

from pathlib import Path

import pytest

from modeline_bridge.core.config import CONFIG_ENV_VAR, BridgeConfig, ConfigError


class TestBridgeConfig:
    def test_defaults(self):
        cfg = BridgeConfig()
        assert cfg.encoding == "utf-8"
        assert cfg.aliases == {}

    def test_from_yaml(self, tmp_path: Path):
        path = tmp_path / "modeline.yaml"
        path.write_text(
            "encoding: latin-1\naliases:\n  Emacs-Lisp: lisp\n  c++: cxx\n",
            encoding="utf-8",
        )
        cfg = BridgeConfig.from_yaml(path)
        assert cfg.encoding == "latin-1"
        assert cfg.aliases == {"emacs-lisp": "lisp", "c++": "cxx"}

    def test_empty_yaml_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert BridgeConfig.from_yaml(path) == BridgeConfig()

    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("run_commands: true\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            BridgeConfig.from_yaml(path)

    def test_alias_value_with_separator_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text('aliases:\n  c: "c; !sh"\n', encoding="utf-8")
        with pytest.raises(ConfigError, match="invalid configuration"):
            BridgeConfig.from_yaml(path)

    @pytest.mark.parametrize("key, value", [("header_lines", 5), ("footer_bytes", 65536)])
    def test_scan_bounds_not_configurable(self, key, value):
        with pytest.raises(ConfigError, match="invalid configuration"):
            BridgeConfig.from_dict({key: value})

    def test_bad_encoding_name_rejected(self):
        with pytest.raises(ConfigError):
            BridgeConfig.from_dict({"encoding": "utf 8"})

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "broken.yaml"
        path.write_text("aliases: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="invalid YAML"):
            BridgeConfig.from_yaml(path)

    def test_non_mapping_top_level(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            BridgeConfig.from_yaml(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="cannot read"):
            BridgeConfig.from_yaml(tmp_path / "nope.yaml")


class TestDiscover:
    def test_no_path_no_env(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert BridgeConfig.discover() == BridgeConfig()

    def test_env_var(self, tmp_path: Path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("encoding: latin-1\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert BridgeConfig.discover().encoding == "latin-1"

    def test_explicit_path_beats_env(self, tmp_path: Path, monkeypatch):
        env_path = tmp_path / "env.yaml"
        env_path.write_text("encoding: latin-1\n", encoding="utf-8")
        explicit = tmp_path / "explicit.yaml"
        explicit.write_text("encoding: cp1252\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(env_path))
        assert BridgeConfig.discover(explicit).encoding == "cp1252"
