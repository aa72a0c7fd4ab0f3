"""Directive parser — pulls one named value out of a raw mode line.

Values end up as native editor settings, so every value grammar must be a
bounded language: an allow-list character class, a run that excludes the
``;`` separator and whitespace, or a finite set of words.  ``ValueGrammar``
checks this when it is created and ``extract`` accepts nothing else, so a
wildcard pattern cannot reach the matcher.
"""

from __future__ import annotations

import re
import string
from dataclasses import dataclass
from functools import lru_cache

# Characters an allow-list grammar may admit.
SAFE_VALUE_CHARS: frozenset[str] = frozenset(
    string.ascii_letters + string.digits + "_+-."
)

# Characters a deny-list grammar must exclude.
_REQUIRED_EXCLUSIONS: frozenset[str] = frozenset(";" + string.whitespace)

# Longest value any character-class grammar accepts.
MAX_VALUE_LEN = 64

# Numeric options stay well inside the range int() converts.
MAX_DIGITS = 9

_WORD_RE = re.compile(r"^[A-Za-z0-9_+-]+$")

# ``name:`` keys in a mode line, used for reporting only.
_NAME_RE = re.compile(r"(?:^|;)\s*([A-Za-z][A-Za-z0-9_+-]*)\s*:")


class UnboundedGrammarError(ValueError):
    """Raised when a value grammar could admit arbitrary text."""


@dataclass(frozen=True)
class ValueGrammar:
    """Bounded value language for one directive.

    Use the ``allow``/``run_until_separator``/``choice`` constructors rather
    than the raw fields.  Character-class grammars also cap the value length
    at ``max_len``; a longer run does not match and the directive is skipped.
    ``choice`` is not used by the built-in rules; it is there for directives
    whose values form a closed set of words.
    """

    name: str
    kind: str                          # allow | deny | choice
    chars: frozenset[str] = frozenset()
    choices: tuple[str, ...] = ()
    max_len: int = MAX_VALUE_LEN

    def __post_init__(self) -> None:
        if self.max_len < 1:
            raise UnboundedGrammarError(f"{self.name}: max_len must be positive")
        if self.kind == "allow":
            if not self.chars:
                raise UnboundedGrammarError(f"{self.name}: empty character class")
            unsafe = sorted(self.chars - SAFE_VALUE_CHARS)
            if unsafe:
                raise UnboundedGrammarError(
                    f"{self.name}: characters not allowed in a value grammar: {unsafe}"
                )
        elif self.kind == "deny":
            missing = sorted(_REQUIRED_EXCLUSIONS - self.chars)
            if missing:
                raise UnboundedGrammarError(
                    f"{self.name}: run must exclude separators {missing!r}"
                )
        elif self.kind == "choice":
            if not self.choices:
                raise UnboundedGrammarError(f"{self.name}: empty enumeration")
            bad = [c for c in self.choices if not _WORD_RE.match(c)]
            if bad:
                raise UnboundedGrammarError(f"{self.name}: invalid choices {bad}")
        else:
            raise UnboundedGrammarError(f"{self.name}: unknown grammar kind {self.kind!r}")

    @classmethod
    def allow(cls, name: str, chars: str, *, max_len: int = MAX_VALUE_LEN) -> "ValueGrammar":
        return cls(name=name, kind="allow", chars=frozenset(chars), max_len=max_len)

    @classmethod
    def run_until_separator(cls, name: str) -> "ValueGrammar":
        """Any run of characters that are neither whitespace nor ``;``."""
        return cls(name=name, kind="deny", chars=_REQUIRED_EXCLUSIONS)

    @classmethod
    def choice(cls, name: str, *choices: str) -> "ValueGrammar":
        return cls(name=name, kind="choice", choices=tuple(choices))

    @property
    def pattern(self) -> str:
        """Regex fragment matching exactly one value."""
        if self.kind == "choice":
            alts = sorted(self.choices, key=len, reverse=True)
            return "(?:" + "|".join(re.escape(c) for c in alts) + ")"
        body = "".join(re.escape(c) for c in sorted(self.chars))
        repeat = "{1,%d}" % self.max_len
        if self.kind == "deny":
            return "[^" + body + "]" + repeat
        return "[" + body + "]" + repeat


# ── Grammars used by the applier ────────────────────────────────────

DIGITS = ValueGrammar.allow("digits", string.digits, max_len=MAX_DIGITS)
WORD = ValueGrammar.allow("word", string.ascii_letters + string.digits + "_-")
MODE_NAME = ValueGrammar.allow("mode", string.ascii_letters + string.digits + "_+-")
FLAG = ValueGrammar.run_until_separator("flag")


@lru_cache(maxsize=None)
def _compile(option_name: str, grammar: ValueGrammar) -> re.Pattern[str]:
    return re.compile(
        r"(?:.*;)?\s*"
        + "(?i:" + re.escape(option_name) + ")"
        + r":\s*(" + grammar.pattern + r")\s*(?:;.*)?",
        re.DOTALL,
    )


def extract(modeline: str, option_name: str, grammar: ValueGrammar) -> str | None:
    """Return the value of *option_name* in *modeline*, or None.

    The value must match *grammar* in full and be followed by end of text or
    by ``;``.  A value with trailing junk is treated as absent.
    """
    if not isinstance(grammar, ValueGrammar):
        raise TypeError(
            f"grammar must be a ValueGrammar, got {type(grammar).__name__}"
        )
    m = _compile(option_name, grammar).fullmatch(modeline)
    if m is None:
        return None
    return m.group(1)


def directive_names(modeline: str) -> list[str]:
    """List every ``name:`` key present in *modeline*, lowercased."""
    return [m.group(1).lower() for m in _NAME_RE.finditer(modeline)]
