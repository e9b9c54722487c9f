"""
JSON reading and writing over the value model.

Strict mode accepts RFC 8259 JSON, except that duplicate keys in one
object are rejected. ``lenient=True`` additionally accepts unquoted
identifier keys and single-quoted strings.
"""

import re
from collections.abc import Callable
from collections.abc import Iterator
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
from .values import Dict
from .values import List
from .values import Number
from .values import String
from .values import Value
from .values import number_to_text
from .values import to_value

T = TypeVar("T")

_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
_HEX4 = re.compile(r"[0-9a-fA-F]{4}")

_LITERALS: dict[str, Value | None] = {
    "true": Bool(True),
    "false": Bool(False),
    "null": None,
}


class JsonParser(Scanner):
    """Recursive-descent JSON parser producing ``Value`` trees."""

    ESCAPES = {
        '"': '"',
        "\\": "\\",
        "/": "/",
        "b": "\b",
        "f": "\f",
        "n": "\n",
        "r": "\r",
        "t": "\t",
    }
    ALLOW_CONTROL_CHARACTERS = False

    def parse_value(self) -> Value | None:
        """Parses any JSON value at the cursor."""
        self.skip_whitespace()
        char = self.peek()

        if char == "{":
            return self.parse_dict()
        elif char == "[":
            return self.parse_list()
        elif char == '"' or (char == "'" and self.config.lenient):
            return String(self.scan_string())
        elif char == "-" or "0" <= char <= "9":
            return self.scan_number()
        elif char in "tfn":
            return self._parse_literal()
        else:
            raise self.error("Expecting value")

    def _parse_literal(self) -> Value | None:
        for word, value in _LITERALS.items():
            if self.text.startswith(word, self.pos):
                self.pos += len(word)
                return value
        raise self.error("Expecting value")

    def _parse_key(self) -> str:
        char = self.peek()
        if char == '"' or (char == "'" and self.config.lenient):
            return self.scan_string()
        if self.config.lenient:
            key = self.scan_word(_IDENTIFIER)
            if key is not None:
                return key
        raise self.error("Expecting property name enclosed in double quotes")

    def _end_of_entry(self, closing: str, kind: str) -> bool:
        """Consumes a separator; returns False once ``closing`` is reached."""
        self.skip_whitespace()
        char = self.peek()
        if char == closing:
            self.pos += 1
            return False
        elif char == ",":
            comma_pos = self.pos
            self.pos += 1
            self.skip_whitespace()
            if self.peek() == closing:
                raise self.error(
                    f"Illegal trailing comma before end of {kind}", comma_pos
                )
            return True
        else:
            raise self.error("Expecting ',' delimiter")

    def parse_dict(self) -> Dict:
        """Parses a JSON object at the cursor."""
        with ProfileContext("parse_dict"):
            self.enter_container()
            self.pos += 1
            result = Dict()

            self.skip_whitespace()
            if self.peek() == "}":
                self.pos += 1
                self.leave_container()
                return result

            while True:
                self.skip_whitespace()
                key_pos = self.pos
                key = self._parse_key()
                self.skip_whitespace()
                self.expect(":", "Expecting ':' delimiter")
                value = self.parse_value()
                if key in result:
                    raise self.error(f"Duplicate key {key!r}", key_pos)
                result[key] = value

                if not self._end_of_entry("}", "object"):
                    break

            self.leave_container()
            return result

    def parse_list(self) -> List:
        """Parses a JSON array at the cursor."""
        with ProfileContext("parse_list"):
            self.enter_container()
            self.pos += 1
            items: list[Value | None] = []

            self.skip_whitespace()
            if self.peek() == "]":
                self.pos += 1
                self.leave_container()
                return List()

            while True:
                items.append(self.parse_value())
                if not self._end_of_entry("]", "array"):
                    break

            self.leave_container()
            return List(items)

    def scan_special_escape(self, char: str, escape_pos: Position) -> str:
        if char == "u":
            code_point = self._scan_hex4(escape_pos)
            if 0xD800 <= code_point <= 0xDBFF and self.text.startswith(
                "\\u", self.pos
            ):
                # Combine a surrogate pair; a lone surrogate is kept as is.
                low_start = self.pos
                self.pos += 2
                low = self._scan_hex4(low_start)
                if 0xDC00 <= low <= 0xDFFF:
                    code_point = (
                        0x10000 + ((code_point - 0xD800) << 10) + (low - 0xDC00)
                    )
                else:
                    self.pos = low_start
            return chr(code_point)
        elif char == "'" and self.config.lenient:
            return "'"
        return super().scan_special_escape(char, escape_pos)

    def _scan_hex4(self, escape_pos: Position) -> int:
        digits = self.text[self.pos : self.pos + 4]
        if not _HEX4.fullmatch(digits):
            raise self.error(
                f"Invalid \\uXXXX escape sequence: \\u{digits}", escape_pos
            )
        self.pos += 4
        return int(digits, 16)


def _parser_for(s: str, config: ParseConfig) -> JsonParser:
    if not isinstance(s, str):
        raise TypeError(
            f"the JSON object must be str, not {type(s).__name__}"
        )
    if s.startswith("\ufeff"):
        raise ParseError(
            "JSON input should not contain BOM (Byte Order Mark)", s, 0
        )
    return JsonParser(s, config)


def _parse_whole(
    s: str, config: ParseConfig, parse: Callable[[JsonParser], T]
) -> T:
    parser = _parser_for(s, config)
    with ProfileContext("parse_json", parser.length):
        try:
            result = parse(parser)
        except RecursionError:
            raise parser.error("Maximum nesting depth exceeded") from None
        parser.finish()
        return result


def _parse_kind(parser: JsonParser, cls: type[T], what: str) -> T:
    parser.skip_whitespace()
    start = parser.pos
    result = parser.parse_value()
    if not isinstance(result, cls):
        raise parser.error(f"Expecting {what}", start)
    return result


def parse(s: str, **kwargs: Any) -> Value | None:
    """
    Parses a JSON document into a value tree.

    Keyword arguments build a ``ParseConfig``. Raises ``ParseError`` with
    the offending position on malformed input.
    """
    config = ParseConfig(**kwargs)
    return _parse_whole(s, config, JsonParser.parse_value)


def parse_dict(s: str, **kwargs: Any) -> Dict:
    """Parses a document that must be a JSON object."""
    config = ParseConfig(**kwargs)
    return _parse_whole(s, config, lambda p: _parse_kind(p, Dict, "object"))


def parse_list(s: str, **kwargs: Any) -> List:
    """Parses a document that must be a JSON array."""
    config = ParseConfig(**kwargs)
    return _parse_whole(s, config, lambda p: _parse_kind(p, List, "array"))


def parse_string(s: str, **kwargs: Any) -> String:
    config = ParseConfig(**kwargs)
    return _parse_whole(s, config, lambda p: _parse_kind(p, String, "string"))


def parse_number(s: str, **kwargs: Any) -> Number:
    config = ParseConfig(**kwargs)
    return _parse_whole(s, config, lambda p: _parse_kind(p, Number, "number"))


def parse_bool(s: str, **kwargs: Any) -> Bool:
    config = ParseConfig(**kwargs)
    return _parse_whole(s, config, lambda p: _parse_kind(p, Bool, "boolean"))


def _attempt(
    func: Callable[..., T], s: str, kwargs: dict[str, Any]
) -> tuple[bool, T | None]:
    try:
        return True, func(s, **kwargs)
    except ParseError:
        return False, None


def try_parse(s: str, **kwargs: Any) -> tuple[bool, Value | None]:
    """
    Like ``parse`` but returns ``(ok, value)`` instead of raising.

    A document consisting of ``null`` yields ``(True, None)``.
    """
    return _attempt(parse, s, kwargs)


def try_parse_dict(s: str, **kwargs: Any) -> tuple[bool, Dict | None]:
    return _attempt(parse_dict, s, kwargs)


def try_parse_list(s: str, **kwargs: Any) -> tuple[bool, List | None]:
    return _attempt(parse_list, s, kwargs)


def try_parse_string(s: str, **kwargs: Any) -> tuple[bool, String | None]:
    return _attempt(parse_string, s, kwargs)


def try_parse_number(s: str, **kwargs: Any) -> tuple[bool, Number | None]:
    return _attempt(parse_number, s, kwargs)


def try_parse_bool(s: str, **kwargs: Any) -> tuple[bool, Bool | None]:
    return _attempt(parse_bool, s, kwargs)


def load(fp: IO[str], **kwargs: Any) -> Value | None:
    """Parses JSON read from a text file object."""
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return parse(fp.read(), **kwargs)


# Encoding

_ESCAPE_TABLE = {i: f"\\u{i:04x}" for i in range(0x20)}
_ESCAPE_TABLE.update(
    {
        ord('"'): '\\"',
        ord("\\"): "\\\\",
        ord("\b"): "\\b",
        ord("\f"): "\\f",
        ord("\n"): "\\n",
        ord("\r"): "\\r",
        ord("\t"): "\\t",
    }
)

_NON_ASCII = re.compile(r"[^\x00-\x7f]")


def _escape_non_ascii(match: re.Match[str]) -> str:
    code_point = ord(match.group())
    if code_point > 0xFFFF:
        code_point -= 0x10000
        high = 0xD800 | (code_point >> 10)
        low = 0xDC00 | (code_point & 0x3FF)
        return f"\\u{high:04x}\\u{low:04x}"
    return f"\\u{code_point:04x}"


def _encode_string(s: str, ensure_ascii: bool) -> str:
    """Encode string with proper escape sequences."""
    escaped = s.translate(_ESCAPE_TABLE)
    if ensure_ascii:
        escaped = _NON_ASCII.sub(_escape_non_ascii, escaped)
    return f'"{escaped}"'


def _iter_encode(
    value: Value | None, config: EncodeConfig, level: int
) -> Iterator[str]:
    if value is None or value is NO_VALUE:
        yield "null"
    elif isinstance(value, Bool):
        yield "true" if value.value else "false"
    elif isinstance(value, Number):
        yield number_to_text(value)
    elif isinstance(value, String):
        yield _encode_string(value.value, config.ensure_ascii)
    elif isinstance(value, List):
        yield from _iter_encode_list(value, config, level)
    elif isinstance(value, Dict):
        yield from _iter_encode_dict(value, config, level)
    else:
        msg = f"Object of type {type(value).__name__} is not JSON serializable"
        raise TypeError(msg)


def _iter_encode_list(
    items: List, config: EncodeConfig, level: int
) -> Iterator[str]:
    if not items:
        yield "[]"
        return

    if config.indent is None:
        yield "["
        for i, item in enumerate(items):
            if i:
                yield ","
            yield from _iter_encode(item, config, level)
        yield "]"
        return

    inner_indent = config.indent_string(level + 1)
    yield "["
    for i, item in enumerate(items):
        yield ",\n" if i else "\n"
        yield inner_indent
        yield from _iter_encode(item, config, level + 1)
    yield "\n" + config.indent_string(level) + "]"


def _iter_encode_dict(
    items: Dict, config: EncodeConfig, level: int
) -> Iterator[str]:
    if not items:
        yield "{}"
        return

    if config.indent is None:
        yield "{"
        for i, (key, value) in enumerate(items.items()):
            if i:
                yield ","
            yield _encode_string(key, config.ensure_ascii)
            yield ":"
            yield from _iter_encode(value, config, level)
        yield "}"
        return

    inner_indent = config.indent_string(level + 1)
    yield "{"
    for i, (key, value) in enumerate(items.items()):
        yield ",\n" if i else "\n"
        yield inner_indent
        yield _encode_string(key, config.ensure_ascii)
        yield ": "
        yield from _iter_encode(value, config, level + 1)
    yield "\n" + config.indent_string(level) + "}"


def iter_encode(obj: Any, **kwargs: Any) -> Iterator[str]:
    """
    Lazily yields the JSON text for ``obj`` in chunks.

    ``obj`` may be a value tree or any host object ``to_value`` accepts.
    """
    config = EncodeConfig(**kwargs)
    return _iter_encode(to_value(obj), config, 0)


def dumps(obj: Any, **kwargs: Any) -> str:
    """
    Serializes a value tree to JSON text.

    Compact unless an ``indent`` is given. Tables have no JSON form and
    raise ``TypeError``.
    """
    with ProfileContext("dumps_json"):
        return "".join(iter_encode(obj, **kwargs))


def dumps_indented(obj: Any, **kwargs: Any) -> str:
    """Serializes with one entry per line, two spaces per level by default."""
    kwargs.setdefault("indent", 2)
    return dumps(obj, **kwargs)


def dump(obj: Any, fp: IO[str], **kwargs: Any) -> None:
    """Serializes a value tree as JSON to a text file object."""
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    for chunk in iter_encode(obj, **kwargs):
        fp.write(chunk)


__all__ = [
    "JsonParser",
    "dump",
    "dumps",
    "dumps_indented",
    "iter_encode",
    "load",
    "parse",
    "parse_bool",
    "parse_dict",
    "parse_list",
    "parse_number",
    "parse_string",
    "try_parse",
    "try_parse_bool",
    "try_parse_dict",
    "try_parse_list",
    "try_parse_number",
    "try_parse_string",
]
