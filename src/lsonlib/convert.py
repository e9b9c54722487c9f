"""
Conversion between values and host types.

Every ``as_*`` function takes the value (or ``None`` for null), a flag set
selecting which coercions are allowed, and a ``safe`` switch. With
``safe=False`` a failed conversion raises ``ConversionError``; with
``safe=True`` it returns None. ``NO_VALUE`` always converts to None.

Integer targets come in two widths: ``as_int`` checks the signed 32-bit
range and ``as_long`` the signed 64-bit range.
"""

import math
import re
from decimal import Decimal
from decimal import InvalidOperation

from .config import DEFAULT_CONVERSION_CONFIG
from .config import ConversionConfig
from .errors import ConversionError
from .options import BoolOptions
from .options import NumericOptions
from .options import StringOptions
from .values import INT32_MAX
from .values import INT32_MIN
from .values import INT64_MAX
from .values import INT64_MIN
from .values import NO_VALUE
from .values import Bool
from .values import Dict
from .values import List
from .values import Number
from .values import String
from .values import Table
from .values import Value
from .values import kind_name
from .values import number_to_text

# Locale-independent numeric text, optionally signed, with surrounding
# whitespace stripped beforehand.
_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+", re.ASCII)
_NUMBER_TEXT = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", re.ASCII
)

# Decimal exponents beyond this can never fit in 64 bits.
_MAX_INTEGER_MAGNITUDE = 20


def _fail(
    target: str, value: Value | None, safe: bool, msg: str | None = None
) -> None:
    if safe:
        return None
    raise ConversionError(target, kind_name(value), msg)


def _parse_float_text(text: str) -> float | None:
    text = text.strip()
    if not _NUMBER_TEXT.fullmatch(text):
        return None
    result = float(text)
    if math.isinf(result):
        return None
    return result


def _parse_decimal_text(text: str) -> Decimal | None:
    text = text.strip()
    if not _NUMBER_TEXT.fullmatch(text):
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


def _parse_integer_text(
    text: str, options: NumericOptions
) -> tuple[int | None, str | None]:
    """Parses an integer out of ``text``; returns ``(result, error)``."""
    stripped = text.strip()
    if _INTEGER_TEXT.fullmatch(stripped):
        return int(stripped), None

    fraction_flags = (
        NumericOptions.ALLOW_ZERO_FRACTION_TO_INTEGER
        | NumericOptions.ALLOW_TRUNCATION
    )
    if not options & fraction_flags:
        return None, f'String "{text}" is not an integer'

    number = _parse_decimal_text(stripped)
    if number is None:
        return None, f'String "{text}" is not a number'
    if number.adjusted() >= _MAX_INTEGER_MAGNITUDE:
        return None, f'String "{text}" exceeds the representable range'
    if (
        number != number.to_integral_value()
        and NumericOptions.ALLOW_TRUNCATION not in options
    ):
        return None, (
            f'String must represent an integer, but "{text}" has a '
            "fractional part"
        )
    # int() on a Decimal truncates toward zero
    return int(number), None


def _as_integer(
    value: Value | None,
    options: NumericOptions,
    safe: bool,
    target: str,
    low: int,
    high: int,
) -> int | None:
    if value is NO_VALUE:
        return None

    if isinstance(value, Number):
        raw = value.raw_value
        if isinstance(raw, float):
            if (
                not raw.is_integer()
                and NumericOptions.ALLOW_TRUNCATION not in options
            ):
                return _fail(
                    target,
                    value,
                    safe,
                    f"Only integer values can be converted to {target}",
                )
            raw = math.trunc(raw)
        result = raw
    elif (
        isinstance(value, String)
        and NumericOptions.ALLOW_FROM_STRING in options
    ):
        parsed, error = _parse_integer_text(value.value, options)
        if parsed is None:
            return _fail(target, value, safe, error)
        result = parsed
    elif isinstance(value, Bool) and NumericOptions.ALLOW_FROM_BOOL in options:
        result = 1 if value.value else 0
    else:
        return _fail(target, value, safe)

    if not low <= result <= high:
        return _fail(
            target,
            value,
            safe,
            f"Cannot convert to {target} because the value exceeds the "
            "representable range",
        )
    return result


def as_int(
    value: Value | None,
    options: NumericOptions = NumericOptions.STRICT,
    safe: bool = False,
) -> int | None:
    """Converts to an integer in the signed 32-bit range."""
    return _as_integer(value, options, safe, "int", INT32_MIN, INT32_MAX)


def as_long(
    value: Value | None,
    options: NumericOptions = NumericOptions.STRICT,
    safe: bool = False,
) -> int | None:
    """Converts to an integer in the signed 64-bit range."""
    return _as_integer(value, options, safe, "long", INT64_MIN, INT64_MAX)


def as_float(
    value: Value | None,
    options: NumericOptions = NumericOptions.STRICT,
    safe: bool = False,
) -> float | None:
    """Converts to a float. Strings must not spell NaN or overflow."""
    if value is NO_VALUE:
        return None
    if isinstance(value, Number):
        return float(value.raw_value)
    if isinstance(value, String) and NumericOptions.ALLOW_FROM_STRING in options:
        result = _parse_float_text(value.value)
        if result is None:
            return _fail(
                "float", value, safe, f'String "{value.value}" is not a number'
            )
        return result
    if isinstance(value, Bool) and NumericOptions.ALLOW_FROM_BOOL in options:
        return 1.0 if value.value else 0.0
    return _fail("float", value, safe)


def as_decimal(
    value: Value | None,
    options: NumericOptions = NumericOptions.STRICT,
    safe: bool = False,
) -> Decimal | None:
    """
    Converts to a ``Decimal``.

    Exact for integers; a float converts through its shortest round-trip
    text, so ``0.1`` becomes ``Decimal("0.1")``.
    """
    if value is NO_VALUE:
        return None
    if isinstance(value, Number):
        return Decimal(number_to_text(value))
    if isinstance(value, String) and NumericOptions.ALLOW_FROM_STRING in options:
        result = _parse_decimal_text(value.value)
        if result is None:
            return _fail(
                "decimal",
                value,
                safe,
                f'String "{value.value}" is not a number',
            )
        return result
    if isinstance(value, Bool) and NumericOptions.ALLOW_FROM_BOOL in options:
        return Decimal(1) if value.value else Decimal(0)
    return _fail("decimal", value, safe)


def as_bool(
    value: Value | None,
    options: BoolOptions = BoolOptions.STRICT,
    safe: bool = False,
    config: ConversionConfig = DEFAULT_CONVERSION_CONFIG,
) -> bool | None:
    """
    Converts to a bool.

    Numbers map zero to False. Strings are looked up in the
    case-insensitive vocabulary of ``config``; other text fails.
    """
    if value is NO_VALUE:
        return None
    if isinstance(value, Bool):
        return value.value
    if isinstance(value, Number) and BoolOptions.ALLOW_FROM_NUMBER in options:
        return value.raw_value != 0
    if isinstance(value, String) and BoolOptions.ALLOW_FROM_STRING in options:
        result = config.lookup(value.value)
        if result is None:
            return _fail(
                "bool",
                value,
                safe,
                f'String "{value.value}" has no boolean meaning',
            )
        return result
    return _fail("bool", value, safe)


def as_string(
    value: Value | None,
    options: StringOptions = StringOptions.STRICT,
    safe: bool = False,
) -> str | None:
    """Converts to a str. Numbers render in round-trip exact form."""
    if value is NO_VALUE:
        return None
    if isinstance(value, String):
        return value.value
    if isinstance(value, Number) and StringOptions.ALLOW_FROM_NUMBER in options:
        return number_to_text(value)
    if isinstance(value, Bool) and StringOptions.ALLOW_FROM_BOOL in options:
        return "true" if value.value else "false"
    return _fail("str", value, safe)


def as_list(value: Value | None, safe: bool = False) -> List | None:
    if isinstance(value, List):
        return value
    if value is NO_VALUE:
        return None
    return _fail("list", value, safe)


def as_dict(value: Value | None, safe: bool = False) -> Dict | None:
    if isinstance(value, Dict):
        return value
    if value is NO_VALUE:
        return None
    return _fail("dict", value, safe)


def as_table(value: Value | None, safe: bool = False) -> Table | None:
    if isinstance(value, Table):
        return value
    if value is NO_VALUE:
        return None
    return _fail("table", value, safe)


__all__ = [
    "as_bool",
    "as_decimal",
    "as_dict",
    "as_float",
    "as_int",
    "as_list",
    "as_long",
    "as_string",
    "as_table",
]
