"""
Substitution of values into snippets of JavaScript-like source.

``fmt`` replaces ``{{name}}`` placeholders with the compact JSON form of
the named value. Placeholders inside string literals, regular expression
literals and comments are left alone. Comments and whitespace are
dropped from the output; a single space is kept wherever two tokens
would otherwise run together into a different token.

    >>> fmt("var x = {{x}}; // {{x}}", "x", [1, 2])
    'var x=[1,2];'
"""

import re
from typing import Any

from . import json_format
from .values import to_value

_TOKEN = re.compile(
    r"""
      (?P<placeholder>\{\{(?P<name>\w+)\}\})
    | (?P<comment>//[^\r\n]*|/\*.*?(?:\*/|\Z))
    | (?P<string>"(?:\\.|[^"\\\r\n])*"|'(?:\\.|[^'\\\r\n])*'|`(?:\\.|[^`\\])*`)
    | (?P<space>\s+)
    | (?P<number>0[xXbBoO][0-9a-fA-F_]+n?
        |(?:[0-9][0-9_]*\.?[0-9_]*|\.[0-9][0-9_]*)(?:[eE][+-]?[0-9]+)?n?)
    | (?P<word>[\w$]+)
    | (?P<increment>\+\+|--)
    | (?P<slash>/)
    | (?P<punct>.)
    """,
    re.VERBOSE | re.DOTALL,
)

_REGEX_LITERAL = re.compile(
    r"/(?:\\.|\[(?:\\.|[^\]\\\r\n])*\]|[^/\\\[\r\n])+/[A-Za-z]*"
)

# Words after which a "/" starts a regular expression, not a division.
_KEYWORDS_BEFORE_EXPRESSION = frozenset(
    {
        "return",
        "typeof",
        "instanceof",
        "in",
        "of",
        "new",
        "delete",
        "void",
        "throw",
        "case",
        "do",
        "else",
        "yield",
        "await",
    }
)

_CLOSING_PUNCTUATION = frozenset(")]}")


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char in "_$"


def _needs_space(prev: str, prev_kind: str, token: str) -> bool:
    """True when writing ``token`` straight after ``prev`` would fuse them."""
    last = prev[-1]
    first = token[0]
    if _is_word_char(last) and _is_word_char(first):
        return True
    if last in "+-" and first == last:
        return True
    if last == "/" and first in "/*":
        return True
    return prev_kind == "number" and first == "."


def _values_from(
    pairs: tuple[Any, ...], values: dict[str, Any]
) -> dict[str, Any]:
    if len(pairs) % 2:
        raise ValueError(
            "Positional arguments must alternate between names and values"
        )
    result = dict(values)
    for name, value in zip(pairs[::2], pairs[1::2], strict=True):
        if not isinstance(name, str):
            raise TypeError(
                f"Placeholder names must be str, not {type(name).__name__}"
            )
        result[name] = value
    return result


def fmt(js: str, *name_value_pairs: Any, **values: Any) -> str:
    """
    Substitutes placeholders in ``js`` and minifies the result.

    Values are given either as alternating positional ``name, value``
    arguments or as keyword arguments. Each value passes through
    ``to_value`` and is written as compact JSON; the substituted text is
    never scanned for placeholders again. Raises ``KeyError`` for a
    placeholder with no value.
    """
    substitutions = _values_from(name_value_pairs, values)

    out: list[str] = []
    prev = ""
    prev_kind = ""
    # Whether the previous significant token can end an expression.
    after_operand = False

    pos = 0
    length = len(js)
    while pos < length:
        match = _TOKEN.match(js, pos)
        # The last alternative matches any single character.
        assert match is not None
        kind = match.lastgroup
        token = match.group()

        if kind in ("comment", "space"):
            pos = match.end()
            continue

        if kind == "placeholder":
            name = match.group("name")
            if name not in substitutions:
                raise KeyError(name)
            token = json_format.dumps(to_value(substitutions[name]))
            operand = True
        elif kind == "slash":
            regex = None if after_operand else _REGEX_LITERAL.match(js, pos)
            if regex is not None:
                kind = "regex"
                token = regex.group()
                match = regex
                operand = True
            else:
                operand = False
        elif kind == "word":
            operand = token not in _KEYWORDS_BEFORE_EXPRESSION
        elif kind == "punct":
            if token in "\"'`":
                raise ValueError(f"Unterminated string literal at offset {pos}")
            operand = token in _CLOSING_PUNCTUATION
        else:
            operand = True

        if prev and _needs_space(prev, prev_kind, token):
            out.append(" ")
        out.append(token)
        prev = token
        prev_kind = kind
        after_operand = operand
        pos = match.end()

    return "".join(out)


__all__ = ["fmt"]
