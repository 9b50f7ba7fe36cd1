import logging

import pytest

from upparse import (
    BlockValue,
    ListValue,
    ParserOptions,
    StringValue,
    UnterminatedConstructError,
    UpParser,
    parse,
)
from upparse.parsing.parser import split_entry

SAMPLE_DOCUMENT = (
    "name John Doe\n"
    "age!int 30\n"
    "active!bool true\n"
    "\n"
    "server {\n"
    "  host localhost\n"
    "  port!int 8080\n"
    "  debug!bool false\n"
    "}\n"
    "\n"
    "items [\n"
    "apple\n"
    "banana\n"
    "cherry\n"
    "]\n"
)

PLAIN_VALUES = [
    "hello",
    "John Doe",
    "  padded value  ",
    "\"quoted\" and \\escaped\\",
    "{ not bare }",
    "[x",
    "a ``` in the middle",
    "}",
]


def test_sample_document():
    """SMOKE TEST: the canonical example parses into the expected tree."""
    doc = parse(SAMPLE_DOCUMENT)

    assert doc.keys() == ["name", "age", "active", "server", "items"]
    assert doc.get("name").value == StringValue("John Doe")

    server = doc.get("server").value
    assert isinstance(server, BlockValue)
    assert server.keys() == ["host", "port", "debug"]
    assert server.nodes[1].type_annotation == "int"
    assert server.get("port").data == "8080"

    items = doc.get("items").value
    assert isinstance(items, ListValue)
    assert [item.data for item in items] == ["apple", "banana", "cherry"]


@pytest.mark.parametrize("value_text", PLAIN_VALUES)
def test_plain_value_is_trimmed_text(value_text):
    """A single 'key value' line yields the key and the trimmed value verbatim."""
    doc = parse(f"key {value_text}")
    node = doc.get("key")
    assert node.value.kind == "string"
    assert node.value.data == value_text.strip()
    assert node.type_annotation is None


def test_order_and_duplicates_are_preserved():
    doc = parse("b 1\n# note\na 2\n\nb 3\n")
    assert [(n.key, n.value.data) for n in doc] == [("b", "1"), ("a", "2"), ("b", "3")]
    assert [n.line_no for n in doc] == [1, 3, 5]


def test_nested_block():
    doc = parse("k {\na 1\nb 2\n}")
    assert doc.size() == 1
    block = doc.get("k").value
    assert [(n.key, n.value.data) for n in block] == [("a", "1"), ("b", "2")]


def test_blocks_recurse_into_blocks_and_lists():
    text = "outer {\n  inner {\n    deep!int 1\n  }\n  tags [\n    x\n  ]\n  # skipped\n\n}\nafter yes"
    doc = parse(text)
    outer = doc.get("outer").value
    assert outer.keys() == ["inner", "tags"]
    assert outer.get("inner").get("deep").data == "1"
    assert outer.nodes[0].value.nodes[0].type_annotation == "int"
    assert [i.data for i in outer.get("tags")] == ["x"]
    assert doc.get("after").value.data == "yes"


def test_list_items_are_opaque():
    """List lines are never parsed as entries or nested constructs."""
    doc = parse("k [\n{ not a block }\nx\n]")
    items = doc.get("k").value
    assert isinstance(items, ListValue)
    assert [item.data for item in items] == ["{ not a block }", "x"]
    assert all(item.kind == "string" for item in items)


def test_list_openers_inside_list_stay_text():
    doc = parse("k [\n[\n{\nkey value\n  # comment\n\n]\nnext 1")
    assert [item.data for item in doc.get("k").value] == ["[", "{", "key value"]
    assert doc.get("next").value.data == "1"


def test_multiline_exact_body():
    doc = parse("k ```\nline1\nline2\n```")
    assert doc.get("k").value.data == "line1\nline2"


def test_multiline_keeps_raw_lines():
    """Indentation, blank lines and '#' lines inside the fence are body text."""
    doc = parse("script!sh ```ignored tail\n  indented\n\n# not a comment\n  ```  \nnext 1")
    node = doc.get("script")
    assert node.type_annotation == "sh"
    assert node.value.data == "  indented\n\n# not a comment"
    assert doc.get("next").value.data == "1"


def test_empty_multiline():
    assert parse("k ```\n```").get("k").value.data == ""


@pytest.mark.parametrize("text, kind", [
    ("k {\na 1", "block"),
    ("k [\na", "list"),
    ("k ```\nbody", "string"),
])
def test_unterminated_constructs_close_at_end_of_input(text, kind):
    doc = parse(text)
    assert doc.size() == 1
    assert doc.get("k").value.kind == kind


def test_unterminated_block_keeps_entries():
    block = parse("k {\na 1").get("k").value
    assert [(n.key, n.value.data) for n in block] == [("a", "1")]


def test_unterminated_multiline_keeps_body():
    assert parse("k ```\none\ntwo").get("k").value.data == "one\ntwo"


@pytest.mark.parametrize("text, construct, line_no", [
    ("k {\na 1", "block", 1),
    ("x 1\nk [\na", "list", 2),
    ("outer {\n  k ```\nbody\n}", "multiline string", 2),
])
def test_strict_mode_rejects_unterminated(text, construct, line_no):
    parser = UpParser(ParserOptions(strict=True))
    with pytest.raises(UnterminatedConstructError) as exc:
        parser.parse(text)
    assert exc.value.construct == construct
    assert exc.value.line_no == line_no


def test_strict_mode_accepts_balanced_input():
    doc = UpParser(ParserOptions(strict=True)).parse(SAMPLE_DOCUMENT)
    assert doc.size() == 5


def test_annotation_is_stored_not_applied():
    node = parse("age!int 30").get("age")
    assert node.key == "age"
    assert node.type_annotation == "int"
    assert node.value == StringValue("30")


@pytest.mark.parametrize("line, expected", [
    ("age!int 30", ("age", "int", "30")),
    ("flag", ("flag", None, "")),
    ("k!", ("k", "", "")),
    ("a!b!c v", ("a", "b!c", "v")),
    ("key\tvalue with spaces", ("key", None, "value with spaces")),
    ("key \t  spaced", ("key", None, "spaced")),
    ("tab\there too", ("tab", None, "here too")),
    ("!int 5", ("", "int", "5")),
])
def test_split_entry(line, expected):
    assert split_entry(line) == expected


def test_key_without_value_is_empty_string():
    node = parse("   lonely   ").get("lonely")
    assert node.value.data == ""


def test_blank_and_comment_only_input():
    assert parse("\n   \n# just a comment\n\t#another\n").is_empty()


def test_parser_instances_do_not_share_state():
    parser = UpParser()
    first = parser.parse("a {\nx 1")
    second = parser.parse("b 2")
    assert first.keys() == ["a"]
    assert second.keys() == ["b"]


def test_stray_closer_at_top_level_is_an_entry():
    """Closing markers only mean something inside their construct."""
    doc = parse("}\n]")
    assert doc.keys() == ["}", "]"]


def test_multiline_body_starting_with_blank_line():
    """Every body line after the first is joined with one separator, blank ones included."""
    assert parse("k ```\n\nx\n```").get("k").value.data == "\nx"
    assert parse("k ```\nx\n\n```").get("k").value.data == "x\n"


@pytest.mark.parametrize("text, construct", [
    ("k {\na 1", "block"),
    ("k [\na", "list"),
    ("k ```\nbody", "multiline string"),
])
def test_implicit_close_is_logged_at_debug(caplog, text, construct):
    caplog.set_level(logging.DEBUG, logger="upparse.parser")
    parse(text)
    closing = [r for r in caplog.records if "Implicitly closing" in r.getMessage()]
    assert len(closing) == 1
    assert closing[0].levelno == logging.DEBUG
    assert f"{construct} opened at line 1" in closing[0].getMessage()


def test_balanced_input_logs_no_implicit_close(caplog):
    caplog.set_level(logging.DEBUG, logger="upparse.parser")
    parse("k {\na 1\n}\nl [\nx\n]")
    assert not any("Implicitly closing" in r.getMessage() for r in caplog.records)
