"""
Exception types raised by lsonlib.

Every error derives from ``LsonError`` and from the built-in exception a
caller would naturally catch for that failure, so ``except ValueError``
keeps working around parse and conversion calls.
"""

from ._offsets import OffsetIndex

_SNIPPET_RADIUS = 15


class LsonError(Exception):
    """Base class for all lsonlib errors."""


class ParseError(LsonError, ValueError):
    """
    Handles parsing failures with precise position and context information.

    Carries the failing offset; line, column and the text snippet around the
    failure are computed on first access from an offset index over
    ``doc``.
    """

    def __init__(
        self,
        msg: str,
        doc: str = "",
        pos: int = 0,
        offsets: OffsetIndex | None = None,
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos
        self._offsets = offsets
        super().__init__(msg, doc, pos)

    @property
    def offsets(self) -> OffsetIndex:
        if self._offsets is None:
            self._offsets = OffsetIndex(self.doc)
        return self._offsets

    @property
    def lineno(self) -> int:
        return self.offsets.line_of(self.pos)

    @property
    def colno(self) -> int:
        return self.offsets.column_of(self.pos)

    @property
    def snippet(self) -> str:
        """Text on either side of the failure point, with its location."""
        start = max(self.pos - _SNIPPET_RADIUS, 0)
        before = self.doc[start : self.pos]
        after = self.doc[self.pos : self.pos + _SNIPPET_RADIUS]
        return (
            f"Before: {before}   After: {after}   "
            f"At: {self.lineno},{self.colno}"
        )

    def __str__(self) -> str:
        return f"{self.msg} at line {self.lineno}, column {self.colno}"

    def __reduce__(self):  # type: ignore[no-untyped-def]
        return (self.__class__, (self.msg, self.doc, self.pos))


class ConversionError(LsonError, ValueError):
    """
    Raised when a value cannot be converted to the requested host type.

    ``target`` names the requested type (``"int"``, ``"bool"``...) and
    ``kind`` the kind of the value that was offered.
    """

    def __init__(self, target: str, kind: str, msg: str | None = None) -> None:
        self.target = target
        self.kind = kind
        if msg is None:
            msg = f"Cannot convert {kind} value to {target}"
        self.msg = msg
        super().__init__(msg)


class NotAContainerError(LsonError, TypeError):
    """Raised when a container-only operation is invoked on a scalar value."""

    def __init__(self, kind: str, operation: str) -> None:
        self.kind = kind
        self.operation = operation
        super().__init__(
            f"{operation} is only supported on container values, not {kind}"
        )


class KeyCollisionError(LsonError, KeyError):
    """Raised when a dictionary is built from entries that repeat a key."""

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"An entry with the key {self.key!r} already exists"


__all__ = [
    "ConversionError",
    "KeyCollisionError",
    "LsonError",
    "NotAContainerError",
    "ParseError",
]
