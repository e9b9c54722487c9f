"""
LSON format tests.

Validates table constructors with implicit and explicit keys, comments,
string escapes, error reporting, both output layouts and variable
assignment lists.
"""

from io import StringIO

import pytest

import lsonlib
from lsonlib import NO_VALUE
from lsonlib import Bool
from lsonlib import Dict
from lsonlib import List
from lsonlib import Number
from lsonlib import ParseError
from lsonlib import String
from lsonlib import Table
from lsonlib import lson_format
from lsonlib import to_lson_value

from .conftest import DocumentCase


def test_basic_values(basic_lson_values: list[DocumentCase]) -> None:
    """
    Validates parsing of every primitive kind and simple tables.
    """
    for case in basic_lson_values:
        assert lson_format.parse(case.input_data) == to_lson_value(
            case.expected_output
        ), case.description


class TestImplicitKeys:
    """Implicit entries are numbered by their own count only."""

    def test_explicit_entries_do_not_advance_the_counter(self) -> None:
        """
        Validates implicit numbering skips over explicit entries.
        """
        table = lson_format.parse_table('{ "a", "b", [5] = "x", "c" }')
        assert table == to_lson_value({1: "a", 2: "b", 5: "x", 3: "c"})

    def test_explicit_key_for_numbered_position_is_ignored(self) -> None:
        """
        Validates an explicit key cannot replace an earlier implicit entry.
        """
        table = lson_format.parse_table('{ "a", [1] = "z", "b" }')
        assert table == to_lson_value({1: "a", 2: "b"})

    def test_implicit_entry_overwrites_explicit_key(self) -> None:
        """
        Validates an implicit entry replaces an earlier explicit one.
        """
        table = lson_format.parse_table('{ [2] = "z", [1] = "y", "a", "b" }')
        assert table == to_lson_value({1: "a", 2: "b"})

    def test_later_explicit_key_wins(self) -> None:
        """
        Validates repeated explicit keys keep the last value.
        """
        table = lson_format.parse_table('{ ["k"] = 1, ["k"] = 2 }')
        assert table == to_lson_value({"k": 2})

    def test_float_keys_are_not_positions(self) -> None:
        """
        Validates a float key is distinct from the integer position.
        """
        table = lson_format.parse_table('{ "a", [1.0] = "f" }')
        assert len(table) == 2
        assert table[1] == String("a")
        assert table[1.0] == String("f")

    def test_nil_entries_are_kept(self) -> None:
        """
        Validates implicit and explicit nil values occupy their keys.
        """
        table = lson_format.parse_table('{ nil, ["k"] = nil, "b" }')
        assert table == to_lson_value({1: None, "k": None, 2: "b"})
        assert table.lookup(1).status is lsonlib.LookupStatus.FOUND_NULL


def test_table_keys_of_any_kind() -> None:
    """
    Validates booleans, floats and tables as keys.
    """
    table = lson_format.parse_table(
        '{ [true] = 1, [2.5] = "f", [{ "k" }] = "t", [-3] = "n" }'
    )
    assert table[True] == Number(1)
    assert table[2.5] == String("f")
    assert table[Table.sequence(["k"])] == String("t")
    assert table[-3] == String("n")


@pytest.mark.parametrize(
    "text,expected",
    [
        ("-- leading\n42", 42),
        ("42 -- trailing", 42),
        ("{ -- open\n 1, -- one\n 2 -- two\n}", {1: 1, 2: 2}),
        ("{ 1,\r\n-- crlf\r\n2 }", {1: 1, 2: 2}),
        ('"-- not a comment"', "-- not a comment"),
        ("{ -5, --6\n }", {1: -5}),
    ],
)
def test_comments(text: str, expected: object) -> None:
    """
    Validates -- comments run to the end of the line.
    """
    assert lson_format.parse(text) == to_lson_value(expected)


@pytest.mark.parametrize(
    "text,expected",
    [
        ('"a\\nb"', "a\nb"),
        ("'it\\'s'", "it's"),
        ("'say \"hi\"'", 'say "hi"'),
        ('"\\[x\\]"', "[x]"),
        ('"\\a\\b\\f\\r\\t\\v\\\\"', "\a\b\f\r\t\v\\"),
        ('"raw\ttab"', "raw\ttab"),
    ],
)
def test_string_escapes(text: str, expected: str) -> None:
    """
    Validates the escape table and raw control characters.
    """
    assert lson_format.parse_string(text) == String(expected)


@pytest.mark.parametrize(
    "text,expected_msg,expected_pos",
    [
        ('"\\65"', "String escapes like \\d - \\ddd are not yet implemented.", 1),
        ('"ok\\q"', "Unknown escape sequence: \\q", 3),
        ('"open', "Unterminated string starting at", 0),
    ],
)
def test_string_errors(
    text: str, expected_msg: str, expected_pos: int
) -> None:
    """
    Validates unsupported escapes and unterminated strings.
    """
    with pytest.raises(ParseError) as exc_info:
        lson_format.parse(text)

    assert exc_info.value.msg == expected_msg
    assert exc_info.value.pos == expected_pos


@pytest.mark.parametrize(
    "text,expected_msg,expected_pos",
    [
        ("", "Unexpected end of input", 0),
        ("   ", "Unexpected end of input", 3),
        ("{", "Unexpected end of table constructor", 1),
        ("{ 1,", "Unexpected end of table constructor", 4),
        ("{ 1 2 }", "Expected a comma between table entries", 4),
        ("{ [nil] = 1 }", "Table keys cannot be nil", 2),
        ("{ [1 = 2 }", "Expected a ] at the end of a table key", 5),
        ("{ [1] 2 }", "Expected a = between table key and value", 6),
        ("foo", 'Unknown keyword: "foo"', 0),
        ("{ 1, null }", 'Unknown keyword: "null"', 5),
        ("}", "Expecting value", 0),
        ("1 2", "Extra data", 2),
        ("01", "Leading zeros not allowed", 0),
    ],
)
def test_parse_errors(text: str, expected_msg: str, expected_pos: int) -> None:
    """
    Validates error messages and positions for malformed LSON.
    """
    with pytest.raises(ParseError) as exc_info:
        lson_format.parse(text)

    assert exc_info.value.msg == expected_msg
    assert exc_info.value.pos == expected_pos
    assert lson_format.try_parse(text) == (False, None)


def test_error_line_and_column() -> None:
    """
    Validates multi-line documents report the failing line.
    """
    with pytest.raises(ParseError) as exc_info:
        lson_format.parse('{\n\t"a",\n\t"b" "c"\n}')

    assert exc_info.value.lineno == 3
    assert exc_info.value.colno == 6
    assert "line 3, column 6" in str(exc_info.value)


def test_nesting_cap() -> None:
    """
    Validates deeply nested tables stop at the configured depth.
    """
    assert lson_format.parse("{" * 10 + "}" * 10, max_depth=10) is not None
    with pytest.raises(ParseError, match="Maximum nesting depth exceeded"):
        lson_format.parse("{" * 11 + "}" * 11, max_depth=10)
    with pytest.raises(ParseError) as exc_info:
        lson_format.parse("{" * 600)
    assert exc_info.value.pos == 256


@pytest.mark.parametrize(
    "func,text,expected",
    [
        (lson_format.parse_table, "{ 1 }", Table.sequence([1])),
        (lson_format.parse_string, "'s'", String("s")),
        (lson_format.parse_number, "-2.5", Number(-2.5)),
        (lson_format.parse_bool, "false", Bool(False)),
    ],
)
def test_typed_entry_points(func, text: str, expected: object) -> None:  # type: ignore[no-untyped-def]
    """
    Validates typed parsing succeeds for the matching kind.
    """
    assert func(text) == expected


@pytest.mark.parametrize(
    "func,text",
    [
        (lson_format.try_parse_table, "1"),
        (lson_format.try_parse_string, "{}"),
        (lson_format.try_parse_number, '"1"'),
        (lson_format.try_parse_bool, "nil"),
    ],
)
def test_typed_entry_points_reject_other_kinds(func, text: str) -> None:  # type: ignore[no-untyped-def]
    """
    Validates typed parsing fails for any other kind.
    """
    assert func(text) == (False, None)


def test_invalid_input_type() -> None:
    """
    Validates rejection of non-string input.
    """
    with pytest.raises(TypeError, match="the LSON object must be str"):
        lson_format.parse(b"{}")  # type: ignore[arg-type]


def test_load_from_file_object() -> None:
    """
    Validates parsing from a file-like object.
    """
    assert lson_format.load(StringIO('{ "a" }')) == Table.sequence(["a"])
    assert lsonlib.lson_load(StringIO("nil")) is None


class TestCompactOutput:
    """Compact LSON writes implicit entries first, then [key]=value."""

    def test_implicit_run(self) -> None:
        """
        Validates leading positional entries are written without keys.
        """
        table = Table.sequence(["a", "b"])
        table[5] = "x"
        table["k"] = True
        assert lson_format.dumps(table) == '{"a","b",[5]="x",["k"]=true}'

    def test_run_stops_at_first_gap(self) -> None:
        """
        Validates a position after a gap is written with its key.
        """
        table = Table()
        table["k"] = 1
        table[1] = "a"
        assert lson_format.dumps(table) == '{["k"]=1,[1]="a"}'

    def test_scalars(self) -> None:
        """
        Validates scalar rendering.
        """
        assert lson_format.dumps(None) == "nil"
        assert lson_format.dumps(NO_VALUE) == "nil"
        assert lson_format.dumps(True) == "true"
        assert lson_format.dumps(7) == "7"
        assert lson_format.dumps(7.0) == "7.0"
        assert lson_format.dumps(Table()) == "{}"

    def test_nested_tables_and_keys(self) -> None:
        """
        Validates nested tables as values and as keys.
        """
        table = Table.sequence([Table.sequence([1]), None])
        table[Table.sequence(["k"])] = 2.5
        assert lson_format.dumps(table) == '{{1},nil,[{"k"}]=2.5}'

    @pytest.mark.parametrize(
        "text,expected",
        [
            ('a"b', '"a\\"b"'),
            ("a\\b", '"a\\\\b"'),
            ("\a\b\f\n\r\t\v", '"\\a\\b\\f\\n\\r\\t\\v"'),
            ("it's", '"it\'s"'),
            ("[x]", '"[x]"'),
            ("\x01", '"\x01"'),
        ],
    )
    def test_string_escaping(self, text: str, expected: str) -> None:
        """
        Validates only quotes, backslashes and named controls are escaped.
        """
        assert lson_format.dumps(String(text)) == expected

    def test_value_methods(self) -> None:
        """
        Validates the encoding methods on values.
        """
        table = Table.sequence(["a"])
        assert table.to_lson() == '{"a"}'
        assert str(table) == '{"a"}'
        assert "".join(table.iter_lson()) == '{"a"}'
        assert String("s").to_lson() == '"s"'


class TestIndentedOutput:
    """Indented LSON puts each entry on its own line."""

    def test_layout(self) -> None:
        """
        Validates implicit entries carry their position as a comment.
        """
        table = Table.sequence(["first", "second"])
        table["scale"] = 1.5
        assert lson_format.dumps_indented(table) == (
            '{\n\t"first", -- [1]\n\t"second", -- [2]\n\t["scale"] = 1.5,\n}'
        )

    def test_nested(self) -> None:
        """
        Validates nested tables indent one level deeper.
        """
        table = Table.sequence([Table.sequence([1]), Table()])
        assert table.to_lson_indented() == (
            "{\n\t{\n\t\t1, -- [1]\n\t}, -- [1]\n\t{}, -- [2]\n}"
        )

    def test_custom_indent(self) -> None:
        """
        Validates a custom indentation unit.
        """
        table = Table({"k": Table.sequence([True])})
        assert lson_format.dumps_indented(table, indent=2) == (
            '{\n  ["k"] = {\n    true, -- [1]\n  },\n}'
        )

    def test_empty_and_scalars(self) -> None:
        """
        Validates empty tables and scalars have no line breaks.
        """
        assert lson_format.dumps_indented(Table()) == "{}"
        assert lson_format.dumps_indented("x") == '"x"'


def test_json_containers_are_not_lson_serializable() -> None:
    """
    Validates List and Dict values must be converted to tables first.
    """
    with pytest.raises(TypeError, match="List is not LSON serializable"):
        lson_format.dumps(List([1]))
    with pytest.raises(TypeError, match="Dict is not LSON serializable"):
        lson_format.dumps(Dict({"a": 1}))
    with pytest.raises(TypeError, match="not LSON serializable"):
        Table.sequence([Dict()]).to_lson()


def test_host_containers_are_written_as_tables() -> None:
    """
    Validates host dicts, lists and tuples encode as tables.
    """
    assert lson_format.dumps({"a": [1, 2], 3: ("x",)}) == (
        '{["a"]={1,2},[3]={"x"}}'
    )
    assert lson_format.dumps([]) == "{}"
    assert lson_format.dumps_indented({"k": True}) == '{\n\t["k"] = true,\n}'
    assert lson_format.format_vars({"x": {"a": 1}, "l": [1, 2]}) == (
        'x = {\n\t["a"] = 1,\n}\nl = {\n\t1, -- [1]\n\t2, -- [2]\n}\n'
    )


def test_dump_to_file_object() -> None:
    """
    Validates dump to file-like object.
    """
    sio = StringIO()
    lson_format.dump(Table.sequence([1, 2]), sio)
    assert sio.getvalue() == "{1,2}"

    with pytest.raises(TypeError, match="write"):
        lson_format.dump(Table(), None)  # type: ignore[arg-type]


class TestVariables:
    """Variable assignment lists: name = value, one after another."""

    def test_parse_vars(self) -> None:
        """
        Validates assignments with comments and any value kind.
        """
        result = lson_format.parse_vars(
            'a = 1\nb = { "x" } -- list\n\nc = nil\nflag=true'
        )
        assert result == {
            "a": Number(1),
            "b": Table.sequence(["x"]),
            "c": None,
            "flag": Bool(True),
        }
        assert list(result) == ["a", "b", "c", "flag"]

    def test_empty_input(self) -> None:
        """
        Validates whitespace and comments alone give no variables.
        """
        assert lson_format.parse_vars("") == {}
        assert lson_format.parse_vars("  -- nothing\n") == {}

    def test_later_assignment_wins(self) -> None:
        """
        Validates a reassigned name keeps its last value.
        """
        assert lson_format.parse_vars("a = 1 a = 2") == {"a": Number(2)}

    @pytest.mark.parametrize(
        "text,expected_msg,expected_pos",
        [
            ("1 = 2", "Expected a variable name", 0),
            ("nil = 1", '"nil" is reserved and cannot name a variable', 0),
            ("x = 1\ntrue = 2", '"true" is reserved and cannot name a variable', 6),
            ("a 1", "Expected an = after variable name", 2),
            ("a =", "Unexpected end of input", 3),
            ("a = {", "Unexpected end of table constructor", 5),
        ],
    )
    def test_parse_vars_errors(
        self, text: str, expected_msg: str, expected_pos: int
    ) -> None:
        """
        Validates malformed assignment lists.
        """
        with pytest.raises(ParseError) as exc_info:
            lson_format.parse_vars(text)

        assert exc_info.value.msg == expected_msg
        assert exc_info.value.pos == expected_pos
        assert lson_format.try_parse_vars(text) == (False, None)

    def test_format_vars(self) -> None:
        """
        Validates one assignment per line with indented tables.
        """
        text = lson_format.format_vars(
            {"a": 1, "t": Table.sequence(["x"]), "n": None}
        )
        assert text == 'a = 1\nt = {\n\t"x", -- [1]\n}\nn = nil\n'
        assert lson_format.parse_vars(text) == {
            "a": Number(1),
            "t": Table.sequence(["x"]),
            "n": None,
        }

    @pytest.mark.parametrize("name", ["nil", "1a", "a b", "", "é"])
    def test_format_vars_rejects_bad_names(self, name: str) -> None:
        """
        Validates names must be identifiers other than keywords.
        """
        with pytest.raises(ValueError, match="not a valid variable name"):
            lson_format.format_vars({name: 1})

    def test_load_and_dump_vars(self) -> None:
        """
        Validates variable lists through file-like objects.
        """
        sio = StringIO()
        lsonlib.lson_dump_vars({"size": 3}, sio)
        assert sio.getvalue() == "size = 3\n"

        sio.seek(0)
        assert lson_format.load_vars(sio) == {"size": Number(3)}
        assert lsonlib.lson_parse_vars("v = 'x'") == {"v": String("x")}
        assert lsonlib.lson_format_vars({}) == ""
