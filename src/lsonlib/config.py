"""
Immutable configuration objects for parsing, encoding and conversion.

Each public entry point builds its config from keyword arguments, so
``parse(text, lenient=True)`` is shorthand for passing
``ParseConfig(lenient=True)``.
"""

from dataclasses import dataclass
from dataclasses import field

DEFAULT_MAX_DEPTH = 256

DEFAULT_FALSE_WORDS = frozenset(
    {"", "false", "n", "no", "off", "disable", "disabled", "0"}
)
DEFAULT_TRUE_WORDS = frozenset(
    {"true", "y", "yes", "on", "enable", "enabled", "1"}
)


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    ``lenient`` enables unquoted identifier keys and single-quoted strings
    in the JSON grammar; the LSON grammar ignores it. ``max_depth`` caps
    container nesting, ``None`` disables the cap.
    """

    lenient: bool = False
    max_depth: int | None = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not isinstance(self.lenient, bool):
            raise TypeError("lenient must be a boolean")
        if self.max_depth is not None and (
            not isinstance(self.max_depth, int)
            or isinstance(self.max_depth, bool)
            or self.max_depth < 1
        ):
            raise ValueError("max_depth must be a positive integer or None")


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures serialization with immutable settings.

    ``indent`` of ``None`` selects the compact form; an int is a number of
    spaces per level and a string is used verbatim per level.
    ``ensure_ascii`` only affects the JSON encoder.
    """

    indent: str | int | None = None
    ensure_ascii: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.ensure_ascii, bool):
            raise TypeError("ensure_ascii must be a boolean")
        if self.indent is not None and (
            isinstance(self.indent, bool)
            or not isinstance(self.indent, int | str)
        ):
            raise TypeError("indent must be an int, a string or None")
        if isinstance(self.indent, int) and self.indent < 0:
            raise ValueError("indent must not be negative")

    def indent_string(self, level: int) -> str:
        """Generate indentation string for given level."""
        if self.indent is None:
            return ""
        elif isinstance(self.indent, int):
            return " " * (self.indent * level)
        else:
            return self.indent * level


@dataclass(frozen=True)
class ConversionConfig:
    """
    Vocabulary used when strings are converted to booleans.

    Words are matched case-insensitively; a string found in neither set
    fails to convert.
    """

    true_words: frozenset[str] = field(default=DEFAULT_TRUE_WORDS)
    false_words: frozenset[str] = field(default=DEFAULT_FALSE_WORDS)

    def __post_init__(self) -> None:
        true_words = frozenset(w.casefold() for w in self.true_words)
        false_words = frozenset(w.casefold() for w in self.false_words)
        if true_words & false_words:
            raise ValueError("true_words and false_words must not overlap")
        object.__setattr__(self, "true_words", true_words)
        object.__setattr__(self, "false_words", false_words)

    def lookup(self, text: str) -> bool | None:
        """Returns the boolean meaning of ``text``, or None if it has none."""
        folded = text.casefold()
        if folded in self.false_words:
            return False
        if folded in self.true_words:
            return True
        return None


DEFAULT_CONVERSION_CONFIG = ConversionConfig()

__all__ = [
    "DEFAULT_CONVERSION_CONFIG",
    "DEFAULT_FALSE_WORDS",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_TRUE_WORDS",
    "ConversionConfig",
    "EncodeConfig",
    "ParseConfig",
]
