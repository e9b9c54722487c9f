"""
Pytest configuration and shared fixtures for lsonlib tests.

Provides immutable test data fixtures: JSON_checker documents, basic
values in both text formats, and sample trees used by the round-trip
and serializer tests.
"""

from dataclasses import dataclass
from typing import Any

import pytest

from lsonlib import Table
from lsonlib import to_value


@dataclass(frozen=True)
class DocumentCase:
    """
    Immutable container for a text document test case.

    Holds test input and expected behavior for consistent test execution.
    ``expected_output`` is a host object compared through ``to_value``, or
    ``to_lson_value`` for LSON documents.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    skip_reason: str = ""


@pytest.fixture
def json_fail_cases() -> list[DocumentCase]:
    """
    Provides JSON strings that must fail strict parsing.

    The json.org JSON_checker failure documents, plus a raw control
    character case.
    """
    fail_docs = [
        # https://json.org/JSON_checker/test/fail1.json
        '"A JSON payload should be an object or array, not a string."',
        # https://json.org/JSON_checker/test/fail2.json
        '["Unclosed array"',
        # https://json.org/JSON_checker/test/fail3.json
        '{unquoted_key: "keys must be quoted"}',
        # https://json.org/JSON_checker/test/fail4.json
        '["extra comma",]',
        # https://json.org/JSON_checker/test/fail5.json
        '["double extra comma",,]',
        # https://json.org/JSON_checker/test/fail6.json
        '[   , "<-- missing value"]',
        # https://json.org/JSON_checker/test/fail7.json
        '["Comma after the close"],',
        # https://json.org/JSON_checker/test/fail8.json
        '["Extra close"]]',
        # https://json.org/JSON_checker/test/fail9.json
        '{"Extra comma": true,}',
        # https://json.org/JSON_checker/test/fail10.json
        '{"Extra value after close": true} "misplaced quoted value"',
        # https://json.org/JSON_checker/test/fail11.json
        '{"Illegal expression": 1 + 2}',
        # https://json.org/JSON_checker/test/fail12.json
        '{"Illegal invocation": alert()}',
        # https://json.org/JSON_checker/test/fail13.json
        '{"Numbers cannot have leading zeroes": 013}',
        # https://json.org/JSON_checker/test/fail14.json
        '{"Numbers cannot be hex": 0x14}',
        # https://json.org/JSON_checker/test/fail15.json
        '["Illegal backslash escape: \\x15"]',
        # https://json.org/JSON_checker/test/fail16.json
        "[\\naked]",
        # https://json.org/JSON_checker/test/fail17.json
        '["Illegal backslash escape: \\017"]',
        # https://json.org/JSON_checker/test/fail18.json
        '[[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]]',
        # https://json.org/JSON_checker/test/fail19.json
        '{"Missing colon" null}',
        # https://json.org/JSON_checker/test/fail20.json
        '{"Double colon":: null}',
        # https://json.org/JSON_checker/test/fail21.json
        '{"Comma instead of colon", null}',
        # https://json.org/JSON_checker/test/fail22.json
        '["Colon instead of comma": false]',
        # https://json.org/JSON_checker/test/fail23.json
        '["Bad value", truth]',
        # https://json.org/JSON_checker/test/fail24.json
        "['single quote']",
        # https://json.org/JSON_checker/test/fail25.json
        '["\ttab\tcharacter\tin\tstring\t"]',
        # https://json.org/JSON_checker/test/fail26.json
        '["tab\\   character\\   in\\  string\\  "]',
        # https://json.org/JSON_checker/test/fail27.json
        '["line\nbreak"]',
        # https://json.org/JSON_checker/test/fail28.json
        '["line\\\nbreak"]',
        # https://json.org/JSON_checker/test/fail29.json
        "[0e]",
        # https://json.org/JSON_checker/test/fail30.json
        "[0e+]",
        # https://json.org/JSON_checker/test/fail31.json
        "[0e+-1]",
        # https://json.org/JSON_checker/test/fail32.json
        '{"Comma instead if closing brace": true,',
        # https://json.org/JSON_checker/test/fail33.json
        '["mismatch"}',
        # https://code.google.com/archive/p/simplejson/issues/3
        '["A\u001fZ control characters in string"]',
    ]

    # Cases that are skipped with reasons
    skips = {
        1: "scalar documents are accepted",
        18: "nesting is capped by ParseConfig.max_depth, not at 20",
    }

    return [
        DocumentCase(
            description=f"fail{idx + 1}.json",
            input_data=doc,
            should_fail=True,
            skip_reason=skips.get(idx + 1, ""),
        )
        for idx, doc in enumerate(fail_docs)
    ]


@pytest.fixture
def json_pass_cases() -> list[DocumentCase]:
    """
    Provides JSON strings that must parse successfully in strict mode.
    """
    return [
        DocumentCase(
            description="pass1.json - complex nested structure",
            input_data="""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}"
    }
]""",
        ),
        DocumentCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        DocumentCase(
            description="pass3.json - simple object",
            input_data='{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[DocumentCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Covers all primitive kinds and basic container structures.
    """
    return [
        DocumentCase("null value", "null", False, None),
        DocumentCase("true boolean", "true", False, True),
        DocumentCase("false boolean", "false", False, False),
        DocumentCase("integer", "42", False, 42),
        DocumentCase("negative integer", "-17", False, -17),
        DocumentCase("float", "3.14", False, 3.14),
        DocumentCase("exponent float", "1e3", False, 1000.0),
        DocumentCase("empty string", '""', False, ""),
        DocumentCase("simple string", '"hello"', False, "hello"),
        DocumentCase("empty array", "[]", False, []),
        DocumentCase("empty object", "{}", False, {}),
        DocumentCase("simple array", "[1, 2, 3]", False, [1, 2, 3]),
        DocumentCase(
            "simple object", '{"key": "value"}', False, {"key": "value"}
        ),
    ]


@pytest.fixture
def basic_lson_values() -> list[DocumentCase]:
    """
    Provides basic LSON value test cases.

    Tables are given as host mappings with integer keys for implicit
    entries.
    """
    return [
        DocumentCase("nil", "nil", False, None),
        DocumentCase("true boolean", "true", False, True),
        DocumentCase("false boolean", "false", False, False),
        DocumentCase("integer", "42", False, 42),
        DocumentCase("float", "-0.5", False, -0.5),
        DocumentCase("double-quoted string", '"hello"', False, "hello"),
        DocumentCase("single-quoted string", "'hello'", False, "hello"),
        DocumentCase("empty table", "{}", False, Table()),
        DocumentCase(
            "implicit entries", '{ "a", "b" }', False, {1: "a", 2: "b"}
        ),
        DocumentCase(
            "explicit entries",
            '{ ["x"] = 1, [2] = true }',
            False,
            {"x": 1, 2: True},
        ),
        DocumentCase(
            "trailing comma", '{ "a", ["k"] = "v", }', False, {1: "a", "k": "v"}
        ),
    ]


@pytest.fixture
def sample_json_tree() -> Any:
    """Provides a nested JSON tree covering every JSON kind."""
    return to_value(
        {
            "name": "sample",
            "count": 3,
            "ratio": 0.25,
            "whole_float": 5.0,
            "enabled": True,
            "missing": None,
            "tags": ["a", "b\n\"quoted\"", "é\U0001f600"],
            "nested": {"empty_list": [], "empty_dict": {}, "deep": [[1], {}]},
        }
    )


@pytest.fixture
def sample_lson_tree() -> Table:
    """Provides a nested LSON table mixing implicit and explicit keys."""
    inner = Table.sequence(["x", 1.5, None])
    inner["flag"] = False
    table = Table.sequence(["first", "second", inner])
    table["name"] = "with \"quotes\" and \\ backslash\t"
    table[10] = -7
    table[2.5] = "float key"
    table[True] = "bool key"
    table[Table.sequence([1, 2])] = "table key"
    return table
