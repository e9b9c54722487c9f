"""
Character cursor shared by the JSON and LSON recursive-descent parsers.

A parser subclasses ``Scanner``, supplies its escape table and
whitespace rules, and builds containers on top of the shared number,
string and word scanning.
"""

import re
from typing import ClassVar

from ._profile import ProfileContext
from .config import ParseConfig
from .errors import ParseError
from .values import INT64_MAX
from .values import INT64_MIN
from .values import Number

Position = int

_END = "\0"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


class Scanner:
    """
    Single-pass cursor over an immutable document with one character of
    lookahead.

    ``peek`` returns ``"\\0"`` at the end of input; callers that must tell
    a real NUL from the end compare ``pos`` with ``length``.
    """

    WHITESPACE: ClassVar[str] = " \t\n\r"
    ESCAPES: ClassVar[dict[str, str]] = {}
    ALLOW_CONTROL_CHARACTERS: ClassVar[bool] = True
    UNTERMINATED_STRING: ClassVar[str] = "Unterminated string starting at"

    def __init__(self, text: str, config: ParseConfig) -> None:
        self.text = text
        self.pos = 0
        self.length = len(text)
        self.config = config
        self.depth = 0

    def peek(self) -> str:
        """Returns current character without advancing."""
        return self.text[self.pos] if self.pos < self.length else _END

    def advance(self) -> str:
        """Returns current character and advances position."""
        char = self.peek()
        if self.pos < self.length:
            self.pos += 1
        return char

    def at_end(self) -> bool:
        return self.pos >= self.length

    def error(self, msg: str, pos: Position | None = None) -> ParseError:
        return ParseError(msg, self.text, self.pos if pos is None else pos)

    def skip_whitespace(self) -> None:
        """Skips insignificant whitespace."""
        while self.pos < self.length and self.text[self.pos] in self.WHITESPACE:
            self.pos += 1

    def expect(self, char: str, msg: str) -> None:
        """Consumes ``char`` or fails with ``msg`` at the current position."""
        if self.peek() != char or self.at_end():
            raise self.error(msg)
        self.pos += 1

    def enter_container(self) -> None:
        self.depth += 1
        max_depth = self.config.max_depth
        if max_depth is not None and self.depth > max_depth:
            raise self.error("Maximum nesting depth exceeded")

    def leave_container(self) -> None:
        self.depth -= 1

    def finish(self) -> None:
        """Fails unless only whitespace remains."""
        self.skip_whitespace()
        if self.pos < self.length:
            raise self.error("Extra data")

    def scan_word(self, pattern: re.Pattern[str]) -> str | None:
        """Consumes a match of ``pattern`` at the cursor, if any."""
        match = pattern.match(self.text, self.pos)
        if match is None or not match.group():
            return None
        self.pos = match.end()
        return match.group()

    # Numbers

    def _scan_integer_part(self, start: Position) -> None:
        """Scans the integer part of a number."""
        if not _is_digit(self.peek()):
            raise self.error("Invalid number", start)

        if self.peek() == "0":
            self.pos += 1
            if _is_digit(self.peek()):
                raise self.error("Leading zeros not allowed", start)
        else:
            while _is_digit(self.peek()):
                self.pos += 1

    def _scan_decimal_part(self, start: Position) -> None:
        """Scans the decimal part of a number if present."""
        if self.peek() == ".":
            self.pos += 1
            if not _is_digit(self.peek()):
                raise self.error("Invalid decimal number", start)
            while _is_digit(self.peek()):
                self.pos += 1

    def _scan_exponent_part(self, start: Position) -> None:
        """Scans the exponent part of a number if present."""
        if self.peek() in "eE":
            self.pos += 1
            if self.peek() in "+-":
                self.pos += 1
            if not _is_digit(self.peek()):
                raise self.error("Invalid exponent", start)
            while _is_digit(self.peek()):
                self.pos += 1

    def scan_number(self) -> Number:
        """
        Scans a number token and converts it.

        The token becomes a 64-bit integer when it is written without a
        fraction or exponent and fits, otherwise a float.
        """
        with ProfileContext("scan_number"):
            start = self.pos
            if self.peek() == "-":
                self.pos += 1

            self._scan_integer_part(start)
            int_end = self.pos
            self._scan_decimal_part(start)
            self._scan_exponent_part(start)

            token = self.text[start : self.pos]
            if self.pos == int_end and len(token) <= len(str(INT64_MIN)):
                integer = int(token)
                if INT64_MIN <= integer <= INT64_MAX:
                    return Number(integer)

            result = float(token)
            if result in (float("inf"), float("-inf")):
                raise self.error("Number out of range", start)
            return Number(result)

    # Strings

    def scan_string(self) -> str:
        """Scans a string literal delimited by the quote under the cursor."""
        with ProfileContext("scan_string"):
            start = self.pos
            quote = self.text[self.pos]
            self.pos += 1

            chunks: list[str] = []
            chunk_start = self.pos
            text = self.text
            while self.pos < self.length:
                char = text[self.pos]
                if char == quote:
                    chunks.append(text[chunk_start : self.pos])
                    self.pos += 1
                    return "".join(chunks)
                elif char == "\\":
                    chunks.append(text[chunk_start : self.pos])
                    chunks.append(self._scan_escape(start))
                    chunk_start = self.pos
                elif char < " " and not self.ALLOW_CONTROL_CHARACTERS:
                    raise self.error("Invalid control character in string")
                else:
                    self.pos += 1

            raise self.error(self.UNTERMINATED_STRING, start)

    def _scan_escape(self, string_start: Position) -> str:
        escape_pos = self.pos
        self.pos += 1
        if self.pos >= self.length:
            raise self.error(self.UNTERMINATED_STRING, string_start)

        char = self.text[self.pos]
        self.pos += 1
        replacement = self.ESCAPES.get(char)
        if replacement is not None:
            return replacement
        return self.scan_special_escape(char, escape_pos)

    def scan_special_escape(self, char: str, escape_pos: Position) -> str:
        """
        Handles an escape missing from ``ESCAPES``. The cursor is already
        past ``char``.
        """
        raise self.error(f"Invalid escape sequence: \\{char}", escape_pos)


__all__ = ["Position", "Scanner"]
