"""
LSON reading and writing: Lua table constructors and variable
assignments, without any Lua execution.

A table holds explicit ``[key] = value`` entries and implicit entries,
which are numbered 1, 2, 3... in order of appearance, counting implicit
entries only. An implicit entry always takes its position: an explicit
key that names an already numbered position is ignored, and an implicit
entry overwrites an earlier explicit one.

    points = {
    	"first", -- [1]
    	"second", -- [2]
    	["scale"] = 1.5,
    }
"""

import re
from collections.abc import Callable
from collections.abc import Iterator
from collections.abc import Mapping
from typing import IO
from typing import Any
from typing import TypeVar

from ._profile import ProfileContext
from ._scanner import Position
from ._scanner import Scanner
from .config import EncodeConfig
from .config import ParseConfig
from .errors import ParseError
from .values import NO_VALUE
from .values import Bool
from .values import Number
from .values import String
from .values import Table
from .values import Value
from .values import number_to_text
from .values import to_lson_value

T = TypeVar("T")

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_LINE_END = re.compile(r"[\r\n]")

_KEYWORDS: dict[str, Value | None] = {
    "true": Bool(True),
    "false": Bool(False),
    "nil": None,
}


class LsonParser(Scanner):
    """Recursive-descent parser for LSON values and variable lists."""

    ESCAPES = {
        '"': '"',
        "'": "'",
        "[": "[",
        "]": "]",
        "\\": "\\",
        "a": "\a",
        "b": "\b",
        "f": "\f",
        "n": "\n",
        "r": "\r",
        "t": "\t",
        "v": "\v",
    }

    def skip_whitespace(self) -> None:
        """Skips whitespace and ``--`` comments running to end of line."""
        text = self.text
        while self.pos < self.length:
            if text[self.pos] in self.WHITESPACE:
                self.pos += 1
            elif text.startswith("--", self.pos):
                line_end = _LINE_END.search(text, self.pos)
                self.pos = self.length if line_end is None else line_end.start()
            else:
                break

    def parse_value(self) -> Value | None:
        """Parses any LSON value at the cursor."""
        self.skip_whitespace()
        char = self.peek()

        if self.at_end():
            raise self.error("Unexpected end of input")
        elif char == "{":
            return self.parse_table()
        elif char in "\"'":
            return String(self.scan_string())
        elif char == "-" or "0" <= char <= "9":
            return self.scan_number()

        start = self.pos
        word = self.scan_word(_IDENTIFIER)
        if word is None:
            raise self.error("Expecting value")
        if word not in _KEYWORDS:
            raise self.error(f'Unknown keyword: "{word}"', start)
        return _KEYWORDS[word]

    def _expect_more(self) -> None:
        if self.at_end():
            raise self.error("Unexpected end of table constructor")

    def parse_table(self) -> Table:
        """Parses a table constructor at the cursor."""
        with ProfileContext("parse_table"):
            self.enter_container()
            self.pos += 1
            result = Table()
            next_index = 1

            while True:
                self.skip_whitespace()
                self._expect_more()
                if self.peek() == "}":
                    self.pos += 1
                    break

                if self.peek() == "[":
                    key_pos = self.pos
                    self.pos += 1
                    key = self.parse_value()
                    if key is None:
                        raise self.error("Table keys cannot be nil", key_pos)
                    self.skip_whitespace()
                    self._expect_more()
                    self.expect("]", "Expected a ] at the end of a table key")
                    self.skip_whitespace()
                    self.expect("=", "Expected a = between table key and value")
                    value = self.parse_value()
                    if not _is_assigned_position(key, next_index):
                        result[key] = value
                else:
                    result[Number(next_index)] = self.parse_value()
                    next_index += 1

                self.skip_whitespace()
                self._expect_more()
                if self.peek() == ",":
                    self.pos += 1
                elif self.peek() != "}":
                    raise self.error("Expected a comma between table entries")

            self.leave_container()
            return result

    def parse_vars(self) -> dict[str, Value | None]:
        """Parses ``name = value`` assignments up to the end of input."""
        with ProfileContext("parse_vars"):
            result: dict[str, Value | None] = {}
            self.skip_whitespace()
            while not self.at_end():
                start = self.pos
                name = self.scan_word(_IDENTIFIER)
                if name is None:
                    raise self.error("Expected a variable name")
                if name in _KEYWORDS:
                    raise self.error(
                        f'"{name}" is reserved and cannot name a variable',
                        start,
                    )
                self.skip_whitespace()
                self.expect("=", "Expected an = after variable name")
                result[name] = self.parse_value()
                self.skip_whitespace()
            return result

    def scan_special_escape(self, char: str, escape_pos: Position) -> str:
        if "0" <= char <= "9":
            raise self.error(
                "String escapes like \\d - \\ddd are not yet implemented.",
                escape_pos,
            )
        raise self.error(f"Unknown escape sequence: \\{char}", escape_pos)


def _is_assigned_position(key: Value, next_index: int) -> bool:
    return (
        isinstance(key, Number)
        and key.is_integer
        and 1 <= key.raw_value < next_index
    )


def _parser_for(s: str, config: ParseConfig) -> LsonParser:
    if not isinstance(s, str):
        raise TypeError(
            f"the LSON object must be str, not {type(s).__name__}"
        )
    return LsonParser(s, config)


def _parse_whole(
    s: str, config: ParseConfig, parse: Callable[[LsonParser], T]
) -> T:
    parser = _parser_for(s, config)
    with ProfileContext("parse_lson", parser.length):
        try:
            result = parse(parser)
        except RecursionError:
            raise parser.error("Maximum nesting depth exceeded") from None
        parser.finish()
        return result


def _parse_kind(parser: LsonParser, cls: type[T], what: str) -> T:
    parser.skip_whitespace()
    start = parser.pos
    result = parser.parse_value()
    if not isinstance(result, cls):
        raise parser.error(f"Expecting {what}", start)
    return result


def parse(s: str, **kwargs: Any) -> Value | None:
    """
    Parses an LSON value.

    Keyword arguments build a ``ParseConfig``; ``lenient`` has no effect
    on this grammar.
    """
    config = ParseConfig(**kwargs)
    return _parse_whole(s, config, LsonParser.parse_value)


def parse_table(s: str, **kwargs: Any) -> Table:
    config = ParseConfig(**kwargs)
    return _parse_whole(s, config, lambda p: _parse_kind(p, Table, "table"))


def parse_string(s: str, **kwargs: Any) -> String:
    config = ParseConfig(**kwargs)
    return _parse_whole(s, config, lambda p: _parse_kind(p, String, "string"))


def parse_number(s: str, **kwargs: Any) -> Number:
    config = ParseConfig(**kwargs)
    return _parse_whole(s, config, lambda p: _parse_kind(p, Number, "number"))


def parse_bool(s: str, **kwargs: Any) -> Bool:
    config = ParseConfig(**kwargs)
    return _parse_whole(s, config, lambda p: _parse_kind(p, Bool, "boolean"))


def parse_vars(s: str, **kwargs: Any) -> dict[str, Value | None]:
    """
    Parses a list of variable assignments into a name to value mapping.

    A name assigned twice keeps its last value.
    """
    config = ParseConfig(**kwargs)
    return _parse_whole(s, config, LsonParser.parse_vars)


def _attempt(
    func: Callable[..., T], s: str, kwargs: dict[str, Any]
) -> tuple[bool, T | None]:
    try:
        return True, func(s, **kwargs)
    except ParseError:
        return False, None


def try_parse(s: str, **kwargs: Any) -> tuple[bool, Value | None]:
    """Like ``parse`` but returns ``(ok, value)`` instead of raising."""
    return _attempt(parse, s, kwargs)


def try_parse_table(s: str, **kwargs: Any) -> tuple[bool, Table | None]:
    return _attempt(parse_table, s, kwargs)


def try_parse_string(s: str, **kwargs: Any) -> tuple[bool, String | None]:
    return _attempt(parse_string, s, kwargs)


def try_parse_number(s: str, **kwargs: Any) -> tuple[bool, Number | None]:
    return _attempt(parse_number, s, kwargs)


def try_parse_bool(s: str, **kwargs: Any) -> tuple[bool, Bool | None]:
    return _attempt(parse_bool, s, kwargs)


def try_parse_vars(
    s: str, **kwargs: Any
) -> tuple[bool, dict[str, Value | None] | None]:
    return _attempt(parse_vars, s, kwargs)


def load(fp: IO[str], **kwargs: Any) -> Value | None:
    """Parses an LSON value read from a text file object."""
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return parse(fp.read(), **kwargs)


def load_vars(fp: IO[str], **kwargs: Any) -> dict[str, Value | None]:
    """Parses variable assignments read from a text file object."""
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return parse_vars(fp.read(), **kwargs)


# Encoding

_ESCAPE_TABLE = {
    ord('"'): '\\"',
    ord("\\"): "\\\\",
    ord("\a"): "\\a",
    ord("\b"): "\\b",
    ord("\f"): "\\f",
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
    ord("\v"): "\\v",
}


def _encode_string(s: str) -> str:
    return '"' + s.translate(_ESCAPE_TABLE) + '"'


def _implicit_run(table: Table) -> int:
    """Counts the leading entries keyed 1, 2, 3... in insertion order."""
    run = 0
    for key in table:
        if not (
            isinstance(key, Number)
            and key.is_integer
            and key.raw_value == run + 1
        ):
            break
        run += 1
    return run


def _iter_encode(
    value: Value | None, config: EncodeConfig, level: int
) -> Iterator[str]:
    if value is None or value is NO_VALUE:
        yield "nil"
    elif isinstance(value, Bool):
        yield "true" if value.value else "false"
    elif isinstance(value, Number):
        yield number_to_text(value)
    elif isinstance(value, String):
        yield _encode_string(value.value)
    elif isinstance(value, Table):
        if config.indent is None:
            yield from _iter_encode_table(value, config, level)
        else:
            yield from _iter_encode_table_indented(value, config, level)
    else:
        msg = f"Object of type {type(value).__name__} is not LSON serializable"
        raise TypeError(msg)


def _iter_encode_table(
    table: Table, config: EncodeConfig, level: int
) -> Iterator[str]:
    run = _implicit_run(table)
    yield "{"
    for i, (key, value) in enumerate(table.items()):
        if i:
            yield ","
        if i >= run:
            yield "["
            yield from _iter_encode(key, config, level)
            yield "]="
        yield from _iter_encode(value, config, level)
    yield "}"


def _iter_encode_table_indented(
    table: Table, config: EncodeConfig, level: int
) -> Iterator[str]:
    if not table:
        yield "{}"
        return

    run = _implicit_run(table)
    inner_indent = config.indent_string(level + 1)
    yield "{"
    for i, (key, value) in enumerate(table.items()):
        yield "\n" + inner_indent
        if i < run:
            yield from _iter_encode(value, config, level + 1)
            yield f", -- [{i + 1}]"
        else:
            yield "["
            yield from _iter_encode(key, config, level + 1)
            yield "] = "
            yield from _iter_encode(value, config, level + 1)
            yield ","
    yield "\n" + config.indent_string(level) + "}"


def iter_encode(obj: Any, **kwargs: Any) -> Iterator[str]:
    """
    Lazily yields the LSON text for ``obj`` in chunks.

    ``obj`` may be a value tree or any host object ``to_lson_value``
    accepts; host mappings, lists and tuples are written as tables.
    """
    config = EncodeConfig(**kwargs)
    return _iter_encode(to_lson_value(obj), config, 0)


def dumps(obj: Any, **kwargs: Any) -> str:
    """
    Serializes a value tree to LSON text.

    ``List`` and ``Dict`` values have no LSON form and raise
    ``TypeError``; convert them to a ``Table`` first.
    """
    with ProfileContext("dumps_lson"):
        return "".join(iter_encode(obj, **kwargs))


def dumps_indented(obj: Any, **kwargs: Any) -> str:
    """Serializes with one entry per line, indented with tabs by default."""
    kwargs.setdefault("indent", "\t")
    return dumps(obj, **kwargs)


def dump(obj: Any, fp: IO[str], **kwargs: Any) -> None:
    """Serializes a value tree as LSON to a text file object."""
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    for chunk in iter_encode(obj, **kwargs):
        fp.write(chunk)


def format_vars(variables: Mapping[str, Any], **kwargs: Any) -> str:
    """
    Serializes a name to value mapping as one assignment per line.

    The result parses back with ``parse_vars``.
    """
    kwargs.setdefault("indent", "\t")
    lines = []
    for name, value in variables.items():
        if (
            not isinstance(name, str)
            or not _IDENTIFIER.fullmatch(name)
            or name in _KEYWORDS
        ):
            raise ValueError(f"{name!r} is not a valid variable name")
        lines.append(f"{name} = {dumps(value, **kwargs)}\n")
    return "".join(lines)


def dump_vars(
    variables: Mapping[str, Any], fp: IO[str], **kwargs: Any
) -> None:
    """Writes variable assignments to a text file object."""
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(format_vars(variables, **kwargs))


__all__ = [
    "LsonParser",
    "dump",
    "dump_vars",
    "dumps",
    "dumps_indented",
    "format_vars",
    "iter_encode",
    "load",
    "load_vars",
    "parse",
    "parse_bool",
    "parse_number",
    "parse_string",
    "parse_table",
    "parse_vars",
    "try_parse",
    "try_parse_bool",
    "try_parse_number",
    "try_parse_string",
    "try_parse_table",
    "try_parse_vars",
]
