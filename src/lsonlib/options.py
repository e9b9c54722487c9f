"""Strictness flags for converting values to host types."""

from enum import Flag


class NumericOptions(Flag):
    """
    Controls leniency when converting a value to ``int``, ``long``,
    ``float`` or ``Decimal``.

    ``STRICT`` only accepts a Number whose value the target represents
    exactly.
    """

    STRICT = 0
    # Accept a String with numeric content.
    ALLOW_FROM_STRING = 1 << 0
    # With ALLOW_FROM_STRING: "3.0" converts to an integer target.
    ALLOW_ZERO_FRACTION_TO_INTEGER = 1 << 1
    # true/false convert to 1/0.
    ALLOW_FROM_BOOL = 1 << 2
    # Non-integral numbers truncate toward zero for integer targets. With
    # ALLOW_FROM_STRING this also applies to strings with a fraction.
    ALLOW_TRUNCATION = 1 << 3

    LENIENT = (
        ALLOW_FROM_STRING
        | ALLOW_ZERO_FRACTION_TO_INTEGER
        | ALLOW_FROM_BOOL
        | ALLOW_TRUNCATION
    )


class StringOptions(Flag):
    """Controls leniency when converting a value to ``str``."""

    STRICT = 0
    ALLOW_FROM_NUMBER = 1 << 0
    ALLOW_FROM_BOOL = 1 << 1

    LENIENT = ALLOW_FROM_NUMBER | ALLOW_FROM_BOOL


class BoolOptions(Flag):
    """
    Controls leniency when converting a value to ``bool``.

    Numbers convert as zero/non-zero. Strings convert through the
    vocabulary held by ``ConversionConfig``.
    """

    STRICT = 0
    ALLOW_FROM_NUMBER = 1 << 0
    ALLOW_FROM_STRING = 1 << 1

    LENIENT = ALLOW_FROM_NUMBER | ALLOW_FROM_STRING


__all__ = ["BoolOptions", "NumericOptions", "StringOptions"]
