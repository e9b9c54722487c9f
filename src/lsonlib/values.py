"""
The value model shared by the JSON and LSON formats.

A parsed document is a tree of ``Value`` nodes. Null is represented by
Python's ``None`` rather than by a node, so container slots typed
``Value | None`` may hold it. Scalars (``Bool``, ``Number``, ``String``)
are immutable; containers (``List``, ``Dict``, ``Table``) are mutable in
content but never change kind.
"""

from __future__ import annotations

import math
from abc import ABC
from abc import abstractmethod
from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any
from typing import ClassVar

from .errors import KeyCollisionError
from .errors import NotAContainerError
from .options import BoolOptions
from .options import NumericOptions
from .options import StringOptions

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

NULL_KIND = "null"


class ValueKind(Enum):
    """Discriminant of a ``Value`` node."""

    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    LIST = "list"
    DICT = "dict"
    TABLE = "table"
    NO_VALUE = "no value"


def kind_name(value: Value | None) -> str:
    """Returns a printable kind for ``value``, including ``"null"``."""
    return NULL_KIND if value is None else value.kind.value


class LookupStatus(Enum):
    FOUND = "found"
    FOUND_NULL = "found_null"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Lookup:
    """
    Result of a non-throwing key or index lookup.

    Distinguishes a key that is missing from a key that is present but
    holds null, which a bare ``None`` cannot.
    """

    status: LookupStatus
    value: Value | None = None

    @property
    def found(self) -> bool:
        return self.status is not LookupStatus.NOT_FOUND

    @classmethod
    def of(cls, value: Value | None) -> Lookup:
        if value is None:
            return _FOUND_NULL
        return cls(LookupStatus.FOUND, value)


_NOT_FOUND = Lookup(LookupStatus.NOT_FOUND)
_FOUND_NULL = Lookup(LookupStatus.FOUND_NULL)


class Value(ABC):
    """
    Base class of every node in a value tree.

    Scalars accept the container methods too but raise
    ``NotAContainerError``; nothing silently no-ops.
    """

    __slots__ = ()

    kind: ClassVar[ValueKind]
    is_container: ClassVar[bool] = False

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        """Equal only to a value of the same kind and content."""

    @abstractmethod
    def __hash__(self) -> int:
        """Consistent with ``__eq__``; containers hash their content."""

    def __bool__(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.to_json()

    # Encoding

    def to_json(self, **kwargs: Any) -> str:
        """Compact JSON text that parses back to an equal value."""
        return _json_format.dumps(self, **kwargs)

    def to_json_indented(self, **kwargs: Any) -> str:
        return _json_format.dumps_indented(self, **kwargs)

    def iter_json(self, **kwargs: Any) -> Iterator[str]:
        """Lazily yields the compact JSON text in chunks."""
        return _json_format.iter_encode(self, **kwargs)

    def to_lson(self, **kwargs: Any) -> str:
        """Compact LSON text that parses back to an equal value."""
        return _lson_format.dumps(self, **kwargs)

    def to_lson_indented(self, **kwargs: Any) -> str:
        return _lson_format.dumps_indented(self, **kwargs)

    def iter_lson(self, **kwargs: Any) -> Iterator[str]:
        """Lazily yields the compact LSON text in chunks."""
        return _lson_format.iter_encode(self, **kwargs)

    # Container contract

    def _not_a_container(self, operation: str) -> NotAContainerError:
        return NotAContainerError(self.kind.value, operation)

    def __len__(self) -> int:
        raise self._not_a_container("len")

    def __iter__(self) -> Iterator[Any]:
        raise self._not_a_container("iteration")

    def __getitem__(self, key: Any) -> Value | None:
        raise self._not_a_container("indexing")

    def __setitem__(self, key: Any, value: Any) -> None:
        raise self._not_a_container("item assignment")

    def __delitem__(self, key: Any) -> None:
        raise self._not_a_container("item deletion")

    def __contains__(self, item: Any) -> bool:
        raise self._not_a_container("membership test")

    def clear(self) -> None:
        raise self._not_a_container("clear")

    def add(self, *args: Any) -> None:
        raise self._not_a_container("add")

    def remove(self, item: Any) -> bool:
        raise self._not_a_container("remove")

    def contains(self, item: Any) -> bool:
        raise self._not_a_container("contains")

    def contains_key(self, key: Any) -> bool:
        raise self._not_a_container("contains_key")

    def keys(self) -> Any:
        raise self._not_a_container("keys")

    def values(self) -> Any:
        raise self._not_a_container("values")

    def items(self) -> Any:
        raise self._not_a_container("items")

    # Lookups

    def lookup(self, key: Any) -> Lookup:
        """Looks up ``key`` without raising; scalars never contain anything."""
        return _NOT_FOUND

    @property
    def safe(self) -> SafeValue:
        """A view whose ``[]`` returns ``NO_VALUE`` instead of raising."""
        return SafeValue(self)

    # Conversions (see lsonlib.convert for the rules)

    def get_int(self, options: NumericOptions = NumericOptions.STRICT) -> int:
        return _convert.as_int(self, options)

    def get_int_lenient(self) -> int:
        return _convert.as_int(self, NumericOptions.LENIENT)

    def get_int_safe(
        self, options: NumericOptions = NumericOptions.STRICT
    ) -> int | None:
        return _convert.as_int(self, options, safe=True)

    def get_int_lenient_safe(self) -> int | None:
        return _convert.as_int(self, NumericOptions.LENIENT, safe=True)

    def get_long(self, options: NumericOptions = NumericOptions.STRICT) -> int:
        return _convert.as_long(self, options)

    def get_long_lenient(self) -> int:
        return _convert.as_long(self, NumericOptions.LENIENT)

    def get_long_safe(
        self, options: NumericOptions = NumericOptions.STRICT
    ) -> int | None:
        return _convert.as_long(self, options, safe=True)

    def get_long_lenient_safe(self) -> int | None:
        return _convert.as_long(self, NumericOptions.LENIENT, safe=True)

    def get_float(
        self, options: NumericOptions = NumericOptions.STRICT
    ) -> float:
        return _convert.as_float(self, options)

    def get_float_lenient(self) -> float:
        return _convert.as_float(self, NumericOptions.LENIENT)

    def get_float_safe(
        self, options: NumericOptions = NumericOptions.STRICT
    ) -> float | None:
        return _convert.as_float(self, options, safe=True)

    def get_float_lenient_safe(self) -> float | None:
        return _convert.as_float(self, NumericOptions.LENIENT, safe=True)

    def get_decimal(
        self, options: NumericOptions = NumericOptions.STRICT
    ) -> Decimal:
        return _convert.as_decimal(self, options)

    def get_decimal_lenient(self) -> Decimal:
        return _convert.as_decimal(self, NumericOptions.LENIENT)

    def get_decimal_safe(
        self, options: NumericOptions = NumericOptions.STRICT
    ) -> Decimal | None:
        return _convert.as_decimal(self, options, safe=True)

    def get_decimal_lenient_safe(self) -> Decimal | None:
        return _convert.as_decimal(self, NumericOptions.LENIENT, safe=True)

    def get_bool(self, options: BoolOptions = BoolOptions.STRICT) -> bool:
        return _convert.as_bool(self, options)

    def get_bool_lenient(self) -> bool:
        return _convert.as_bool(self, BoolOptions.LENIENT)

    def get_bool_safe(
        self, options: BoolOptions = BoolOptions.STRICT
    ) -> bool | None:
        return _convert.as_bool(self, options, safe=True)

    def get_bool_lenient_safe(self) -> bool | None:
        return _convert.as_bool(self, BoolOptions.LENIENT, safe=True)

    def get_string(self, options: StringOptions = StringOptions.STRICT) -> str:
        return _convert.as_string(self, options)

    def get_string_lenient(self) -> str:
        return _convert.as_string(self, StringOptions.LENIENT)

    def get_string_safe(
        self, options: StringOptions = StringOptions.STRICT
    ) -> str | None:
        return _convert.as_string(self, options, safe=True)

    def get_string_lenient_safe(self) -> str | None:
        return _convert.as_string(self, StringOptions.LENIENT, safe=True)

    def get_list(self) -> List:
        return _convert.as_list(self)

    def get_list_safe(self) -> List | None:
        return _convert.as_list(self, safe=True)

    def get_dict(self) -> Dict:
        return _convert.as_dict(self)

    def get_dict_safe(self) -> Dict | None:
        return _convert.as_dict(self, safe=True)

    def get_table(self) -> Table:
        return _convert.as_table(self)

    def get_table_safe(self) -> Table | None:
        return _convert.as_table(self, safe=True)


class Bool(Value):
    """Encapsulates a boolean."""

    __slots__ = ("_value",)

    kind = ValueKind.BOOL

    def __init__(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError(f"Bool requires a bool, not {type(value).__name__}")
        self._value = value

    @property
    def value(self) -> bool:
        return self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Bool) and self._value == other._value

    def __hash__(self) -> int:
        return 13259 if self._value else 22093

    def __repr__(self) -> str:
        return f"Bool({self._value!r})"


class Number(Value):
    """
    Encapsulates a number held as either an int64 or a finite float.

    The active representation is part of the value's identity:
    ``Number(5) != Number(5.0)``. A ``Decimal`` or ``Fraction`` becomes an
    integer when it is whole and fits in 64 bits, otherwise a float, which
    may lose precision.
    """

    __slots__ = ("_int", "_float")

    kind = ValueKind.NUMBER

    def __init__(self, value: int | float | Decimal | Fraction) -> None:
        self._int: int | None = None
        self._float: float | None = None

        if isinstance(value, bool):
            raise TypeError("Number does not accept bool; use Bool")
        elif isinstance(value, int):
            if not INT64_MIN <= value <= INT64_MAX:
                raise ValueError(
                    "Integer is outside the signed 64-bit range; "
                    "pass a float to store it approximately"
                )
            self._int = int(value)
        elif isinstance(value, float):
            self._float = _finite(value)
        elif isinstance(value, Decimal | Fraction):
            if isinstance(value, Decimal) and not value.is_finite():
                raise ValueError("Numbers cannot be NaN or infinite")
            if value == int(value) and INT64_MIN <= int(value) <= INT64_MAX:
                self._int = int(value)
            else:
                self._float = _finite(float(value))
        else:
            raise TypeError(
                f"Number requires int, float, Decimal or Fraction, "
                f"not {type(value).__name__}"
            )

    @property
    def raw_value(self) -> int | float:
        """The active representation, as an ``int`` or a ``float``."""
        return self._int if self._int is not None else self._float  # type: ignore[return-value]

    @property
    def is_integer(self) -> bool:
        """True when the integer representation is active."""
        return self._int is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return False
        if self._int is not None:
            return other._int is not None and self._int == other._int
        return other._float is not None and self._float == other._float

    def __hash__(self) -> int:
        return hash(self.raw_value)

    def __repr__(self) -> str:
        return f"Number({self.raw_value!r})"


def number_to_text(number: Number) -> str:
    """
    Renders a number so that reparsing yields an equal number.

    Integers print in base 10. Floats use the shortest round-trip form,
    which always contains a ``.`` or an exponent and so never reparses as
    an integer.
    """
    raw = number.raw_value
    if number.is_integer:
        return str(raw)
    return repr(raw)


def _finite(value: float) -> float:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Numbers cannot be NaN or infinite")
    return value


class String(Value):
    """Encapsulates an immutable string. Never holds None."""

    __slots__ = ("_value",)

    kind = ValueKind.STRING

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(
                f"String requires a str, not {type(value).__name__}"
            )
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, String) and self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"String({self._value!r})"


class List(Value):
    """An ordered list of values; elements may be None. JSON only."""

    __slots__ = ("_items",)

    kind = ValueKind.LIST
    is_container = True

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Value | None] = [to_value(item) for item in items]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, List) and self._items == other._items

    def __hash__(self) -> int:
        return hash(tuple(self._items))

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"List({self._items!r})"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Value | None]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Value | None:
        return self._items[_list_index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[_list_index(index)] = to_value(value)

    def __delitem__(self, index: int) -> None:
        del self._items[_list_index(index)]

    def __contains__(self, item: Any) -> bool:
        return to_value(item) in self._items

    def contains(self, item: Any) -> bool:
        return item in self

    def clear(self) -> None:
        self._items.clear()

    def add(self, value: Any) -> None:  # type: ignore[override]
        self._items.append(to_value(value))

    append = add

    def insert(self, index: int, value: Any) -> None:
        self._items.insert(index, to_value(value))

    def extend(self, values: Iterable[Any]) -> None:
        self._items.extend(to_value(v) for v in values)

    def remove(self, item: Any) -> bool:
        """Removes the first element equal to ``item``; False if absent."""
        target = to_value(item)
        for i, existing in enumerate(self._items):
            if existing == target:
                del self._items[i]
                return True
        return False

    def index(self, item: Any) -> int:
        return self._items.index(to_value(item))

    def lookup(self, key: Any) -> Lookup:
        if not isinstance(key, int) or isinstance(key, bool):
            return _NOT_FOUND
        if not -len(self._items) <= key < len(self._items):
            return _NOT_FOUND
        return Lookup.of(self._items[key])


def _list_index(index: Any) -> int:
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError(
            f"List indices must be integers, not {type(index).__name__}"
        )
    return index


class Dict(Value):
    """
    A string-keyed dictionary. JSON only.

    Keys are case-sensitive and keep insertion order for serialization.
    Building from a sequence of pairs that repeats a key raises
    ``KeyCollisionError``.
    """

    __slots__ = ("_items",)

    kind = ValueKind.DICT
    is_container = True

    def __init__(
        self, items: Mapping[str, Any] | Iterable[tuple[str, Any]] = ()
    ) -> None:
        self._items: dict[str, Value | None] = {}
        self.add_range(items)

    @classmethod
    def from_items(
        cls,
        source: Iterable[Any],
        key: Callable[[Any], str],
        value: Callable[[Any], Any],
    ) -> Dict:
        """Builds a dict by mapping each element of ``source`` to a pair."""
        return cls((key(element), value(element)) for element in source)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Dict) and self._items == other._items

    def __hash__(self) -> int:
        return hash(frozenset(self._items.items()))

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Dict({self._items!r})"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __getitem__(self, key: str) -> Value | None:
        return self._items[_dict_key(key)]

    def __setitem__(self, key: str, value: Any) -> None:
        self._items[_dict_key(key)] = to_value(value)

    def __delitem__(self, key: str) -> None:
        del self._items[_dict_key(key)]

    def __contains__(self, key: Any) -> bool:
        return isinstance(key, str) and key in self._items

    def contains_key(self, key: Any) -> bool:
        return key in self

    def contains(self, item: Any) -> bool:
        return item in self

    def keys(self):  # type: ignore[no-untyped-def]
        return self._items.keys()

    def values(self):  # type: ignore[no-untyped-def]
        return self._items.values()

    def items(self):  # type: ignore[no-untyped-def]
        return self._items.items()

    def get(self, key: str, default: Value | None = None) -> Value | None:
        return self._items.get(key, default)

    def clear(self) -> None:
        self._items.clear()

    def add(self, key: str, value: Any) -> None:  # type: ignore[override]
        """Adds a new entry; raises ``KeyCollisionError`` if ``key`` exists."""
        key = _dict_key(key)
        if key in self._items:
            raise KeyCollisionError(key)
        self._items[key] = to_value(value)

    def add_range(
        self, items: Mapping[str, Any] | Iterable[tuple[str, Any]]
    ) -> None:
        pairs = (
            items.items()
            if isinstance(items, Mapping | Dict | Table)
            else items
        )
        for key, value in pairs:
            self.add(key, value)

    def remove(self, key: Any) -> bool:
        """Removes the entry for ``key``; False if there was none."""
        if key in self:
            del self._items[key]
            return True
        return False

    def lookup(self, key: Any) -> Lookup:
        if key not in self:
            return _NOT_FOUND
        return Lookup.of(self._items[key])

    def get_member(self, name: str) -> Value | None:
        """Member-style access: the value stored under ``name``."""
        try:
            return self._items[name]
        except KeyError:
            raise AttributeError(name) from None


def _dict_key(key: Any) -> str:
    if not isinstance(key, str):
        raise TypeError(f"Dict keys must be str, not {type(key).__name__}")
    return key


class Table(Value):
    """
    A Lua-style table whose keys are values of any kind. LSON only.

    Python primitives used as keys are converted with ``to_value``, so
    ``table[1]`` and ``table[Number(1)]`` address the same entry. Keys
    must not be mutated while they are in a table.
    """

    __slots__ = ("_items",)

    kind = ValueKind.TABLE
    is_container = True

    def __init__(
        self, items: Mapping[Any, Any] | Iterable[tuple[Any, Any]] = ()
    ) -> None:
        self._items: dict[Value, Value | None] = {}
        self.add_range(items)

    @classmethod
    def sequence(cls, values: Iterable[Any]) -> Table:
        """Builds a table with implicit keys 1, 2, 3, ... for ``values``."""
        table = cls()
        for value in values:
            table.append(value)
        return table

    @classmethod
    def from_items(
        cls,
        source: Iterable[Any],
        key: Callable[[Any], Any],
        value: Callable[[Any], Any],
    ) -> Table:
        """Builds a table by mapping each element of ``source`` to a pair."""
        return cls((key(element), value(element)) for element in source)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Table) and self._items == other._items

    def __hash__(self) -> int:
        return hash(frozenset(self._items.items()))

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Table({self._items!r})"

    def __str__(self) -> str:
        return self.to_lson()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self._items)

    def __getitem__(self, key: Any) -> Value | None:
        return self._items[_table_key(key)]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._items[_table_key(key)] = to_lson_value(value)

    def __delitem__(self, key: Any) -> None:
        del self._items[_table_key(key)]

    def __contains__(self, key: Any) -> bool:
        try:
            return _table_key(key) in self._items
        except (TypeError, ValueError):
            return False

    def contains_key(self, key: Any) -> bool:
        return key in self

    def contains(self, item: Any) -> bool:
        return item in self

    def keys(self):  # type: ignore[no-untyped-def]
        return self._items.keys()

    def values(self):  # type: ignore[no-untyped-def]
        return self._items.values()

    def items(self):  # type: ignore[no-untyped-def]
        return self._items.items()

    def get(self, key: Any, default: Value | None = None) -> Value | None:
        result = self.lookup(key)
        return result.value if result.found else default

    def clear(self) -> None:
        self._items.clear()

    def add(self, key: Any, value: Any) -> None:  # type: ignore[override]
        """Adds a new entry; raises ``KeyCollisionError`` if ``key`` exists."""
        key = _table_key(key)
        if key in self._items:
            raise KeyCollisionError(key)
        self._items[key] = to_lson_value(value)

    def add_range(
        self, items: Mapping[Any, Any] | Iterable[tuple[Any, Any]]
    ) -> None:
        pairs = (
            items.items()
            if isinstance(items, Mapping | Dict | Table)
            else items
        )
        for key, value in pairs:
            self.add(key, value)

    def append(self, value: Any) -> Number:
        """Stores ``value`` under the first free positional key and returns it."""
        index = 1
        while Number(index) in self._items:
            index += 1
        key = Number(index)
        self._items[key] = to_lson_value(value)
        return key

    def remove(self, key: Any) -> bool:
        """Removes the entry for ``key``; False if there was none."""
        if key in self:
            del self._items[_table_key(key)]
            return True
        return False

    def lookup(self, key: Any) -> Lookup:
        if key not in self:
            return _NOT_FOUND
        return Lookup.of(self._items[_table_key(key)])

    def get_member(self, name: str) -> Value | None:
        """Member-style access: the value stored under the string ``name``."""
        try:
            return self._items[String(name)]
        except KeyError:
            raise AttributeError(name) from None


def _table_key(key: Any) -> Value:
    value = to_lson_value(key)
    if value is None:
        raise ValueError("Table keys cannot be nil")
    return value


class NoValue(Value):
    """
    Marks a lookup that found nothing. Produced only by safe navigation.

    There is a single instance, ``NO_VALUE``. It is falsy, it serializes
    as null, and every conversion on it returns None instead of raising.
    """

    __slots__ = ()

    kind = ValueKind.NO_VALUE

    _instance: ClassVar[NoValue | None] = None

    def __new__(cls) -> NoValue:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        return other is self

    def __hash__(self) -> int:
        return 0

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_VALUE"

    def __reduce__(self) -> str:
        return "NO_VALUE"


NO_VALUE = NoValue()


class SafeValue:
    """
    Non-throwing view over a value's lookups.

    ``value.safe["a"].safe["b"].get_int_safe()`` resolves to None when any
    step misses, indexes a scalar or meets a stored null.
    """

    __slots__ = ("value",)

    def __init__(self, value: Value | None) -> None:
        self.value = None if value is NO_VALUE else value

    def __getitem__(self, key: Any) -> Value:
        result = self.lookup(key)
        if result.status is LookupStatus.FOUND:
            return result.value  # type: ignore[return-value]
        return NO_VALUE

    def lookup(self, key: Any) -> Lookup:
        if self.value is None:
            return _NOT_FOUND
        return self.value.lookup(key)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SafeValue) and self.value == other.value

    def __hash__(self) -> int:
        return 1 if self.value is None else hash(self.value) + 1

    def __repr__(self) -> str:
        return f"SafeValue({self.value!r})"


def to_value(obj: Any) -> Value | None:
    """
    Converts a host object into a value tree.

    ``None`` stays ``None``. Mappings with only ``str`` keys become
    ``Dict``; other mappings become ``Table``, converting their contents
    with ``to_lson_value``. Existing values are
    returned unchanged, except ``NO_VALUE`` which becomes ``None``.
    """
    if obj is None or obj is NO_VALUE:
        return None
    elif isinstance(obj, Value):
        return obj
    elif isinstance(obj, bool):
        return Bool(obj)
    elif isinstance(obj, int | float | Decimal | Fraction):
        return Number(obj)
    elif isinstance(obj, str):
        return String(obj)
    elif isinstance(obj, Mapping):
        if all(isinstance(key, str) for key in obj):
            return Dict(obj)
        return Table(obj)
    elif isinstance(obj, list | tuple):
        return List(obj)
    else:
        msg = f"Object of type {type(obj).__name__} cannot be converted to a value"
        raise TypeError(msg)


def to_lson_value(obj: Any) -> Value | None:
    """
    Converts a host object into a value tree with an LSON form.

    Like ``to_value``, but every mapping becomes a ``Table`` and lists and
    tuples become tables keyed 1, 2, 3... Values that are already nodes
    are returned unchanged.
    """
    if isinstance(obj, Mapping):
        return Table(obj)
    elif isinstance(obj, list | tuple):
        return Table.sequence(obj)
    return to_value(obj)


__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "NO_VALUE",
    "Bool",
    "Dict",
    "List",
    "Lookup",
    "LookupStatus",
    "NoValue",
    "Number",
    "SafeValue",
    "String",
    "Table",
    "Value",
    "ValueKind",
    "kind_name",
    "number_to_text",
    "to_lson_value",
    "to_value",
]

# Late imports: these modules depend on the classes defined above.
from . import convert as _convert  # noqa: E402
from . import json_format as _json_format  # noqa: E402
from . import lson_format as _lson_format  # noqa: E402
