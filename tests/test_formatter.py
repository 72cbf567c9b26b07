"""Tests for rendering documents back into YINI text."""

from __future__ import annotations

from textwrap import dedent

import pytest

from yini import (
    ArrayValue,
    BoolValue,
    ConversionError,
    Document,
    FloatValue,
    IntValue,
    StringValue,
    YiniFormatter,
    format_value,
    parse,
    parse_value,
    serialize,
)

# ==========================================
# 1. Value rendering
# ==========================================


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (StringValue("hello world"), "'hello world'"),
        (StringValue(""), "''"),
        (IntValue(-12), "-12"),
        (FloatValue(30.5), "30.5"),
        (FloatValue(2.0), "2.0"),
        (BoolValue(True), "true"),
        (BoolValue(False), "false"),
        (ArrayValue([]), "[]"),
        (ArrayValue([IntValue(1), StringValue("a"), ArrayValue([BoolValue(False)])]), "[1, 'a', [false]]"),
    ],
)
def test_format_value(value, expected: str):
    assert format_value(value) == expected


def test_strings_are_not_escaped():
    assert format_value(StringValue("it's")) == "'it's'"


@pytest.mark.parametrize(
    "value",
    [
        StringValue("plain text"),
        StringValue("[1,2]"),
        StringValue("true"),
        IntValue(0),
        IntValue(-42),
        FloatValue(3.14),
        FloatValue(-0.001),
        FloatValue(1e-07),
        FloatValue(12345678901234.5),
        FloatValue(1e22),
        BoolValue(True),
        BoolValue(False),
    ],
)
def test_scalar_round_trip(value):
    assert parse_value(format_value(value)) == value


# ==========================================
# 2. Document rendering
# ==========================================


def test_empty_document_serializes_to_empty_text():
    assert serialize(Document()) == ""


def test_root_keys_then_sections():
    doc = Document()
    doc["a"] = 1
    doc.section("s")["b"] = 2
    doc.section("t")["c"] = "x"
    assert serialize(doc) == "a = 1\n^ s\n    b = 2\n\n^ t\n    c = 'x'\n"


def test_nested_layout():
    doc = Document()
    doc.section("server").section("connection")["host"] = "localhost"
    doc.section("server").section("connection")["port"] = 8080
    doc.section("server").section("auth")["enabled"] = True
    doc.section("server").section("auth").section("credentials")["username"] = "admin"

    expected = dedent(
        """\
        ^ server

            ^^ connection
                host = 'localhost'
                port = 8080

            ^^ auth
                enabled = true

                ^^^ credentials
                    username = 'admin'
        """
    )
    assert serialize(doc) == expected


def test_indent_width_is_configurable():
    doc = Document()
    doc.section("s")["k"] = 1
    assert serialize(doc, config={"indent_width": 2}) == "^ s\n  k = 1\n"
    assert YiniFormatter(indent_width=0).format_document(doc) == "^ s\nk = 1\n"


def test_empty_sections_are_written():
    doc = Document()
    doc.section("empty")
    assert serialize(doc) == "^ empty\n"
    assert parse(serialize(doc)).has_section("empty")


def test_booleans_are_canonicalized():
    doc = parse("a = yes\nb = OFF\nc = On")
    assert serialize(doc) == "a = true\nb = false\nc = true\n"


def test_document_serialize_method():
    doc = Document()
    doc["k"] = [1, 2]
    assert doc.serialize() == "k = [1, 2]\n"


# ==========================================
# 3. Round trip
# ==========================================


def test_document_round_trip():
    doc = Document()
    doc["host"] = "localhost"
    doc["port"] = 8080
    doc["enabled"] = True
    doc["timeout"] = 30.5
    doc["numbers"] = [1, 2, 3]
    doc["names"] = ["alice", "bob", "charlie"]
    doc.section("server").section("auth").section("credentials")["password"] = "secret"
    doc.section("server")["debug"] = False

    assert parse(serialize(doc)) == doc


def test_round_trip_is_stable():
    src = dedent(
        """
        // comments disappear
        name = "quoted"
        ^ one
            x = 1.50
            ^^ two
            y = [ 'a' , 2 ]
        ^ three
        flag = yes
        """
    )
    once = serialize(parse(src))
    assert serialize(parse(once)) == once
    assert "comments" not in once
    assert "x = 1.5\n" in once


def test_oversized_int_is_rejected_before_it_reaches_the_tree():
    doc = Document()
    with pytest.raises(ConversionError):
        doc.set("n", 10**5000)
    assert not doc.has_value("n")
    doc.set("n", 10**400)
    assert parse(serialize(doc))["n"] == IntValue(10**400)
