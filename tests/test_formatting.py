"""Unit tests for template formatting and value inspection."""

import pytest

from coded_errors.formatting import (
    INSPECT_MAX_LENGTH,
    format_template,
    inspect_value,
    placeholder_kinds,
    to_json,
    truncate,
)


def test_placeholder_kinds_skip_percent_escapes() -> None:
    assert placeholder_kinds("%s took %d ms (100%%) %j %o %O %i %f") == (
        "s",
        "d",
        "j",
        "o",
        "O",
        "i",
        "f",
    )


def test_placeholder_kinds_empty_for_plain_text() -> None:
    assert placeholder_kinds("Directory import is not supported") == ()


def test_format_template_substitutes_left_to_right() -> None:
    assert format_template("Directory import '%s' from %s", ["/pkg/dir", "/app"]) == (
        "Directory import '/pkg/dir' from /app"
    )


def test_format_template_unescapes_percent() -> None:
    assert format_template("%d%% of %s", [50, "cases"]) == "50% of cases"


@pytest.mark.parametrize(
    "value, expected",
    [
        (42, "42"),
        (4.5, "4.5"),
        (4.0, "4"),
        ("12", "12"),
        ("", "0"),
        (True, "1"),
        ("abc", "NaN"),
        (None, "NaN"),
        (float("inf"), "Infinity"),
    ],
    ids=["int", "float", "integral_float", "numeric_str", "empty_str", "bool", "text", "none", "inf"],
)
def test_decimal_placeholder(value: object, expected: str) -> None:
    assert format_template("%d", [value]) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(42.9, "42"), ("  -7px", "-7"), ("px", "NaN")],
    ids=["float", "leading_digits", "text"],
)
def test_integer_placeholder(value: object, expected: str) -> None:
    assert format_template("%i", [value]) == expected


@pytest.mark.parametrize(
    "value, expected",
    [("3.25abc", "3.25"), (2, "2"), ("-Infinity", "-Infinity"), ("x", "NaN")],
    ids=["leading_float", "int", "infinity", "text"],
)
def test_float_placeholder(value: object, expected: str) -> None:
    assert format_template("%f", [value]) == expected


def test_json_placeholder_is_compact() -> None:
    assert format_template("%j", [{"exports": ["./a", None]}]) == '{"exports":["./a",null]}'


def test_json_of_circular_structure() -> None:
    loop: list[object] = []
    loop.append(loop)
    assert to_json(loop) == "[Circular]"


def test_inspect_placeholders_bound_depth() -> None:
    nested = {"a": {"b": {"c": 1}}}
    assert format_template("%O", [nested]) == "{'a': {'b': {...}}}"
    assert format_template("%o", [nested]) == "{'a': {'b': {'c': 1}}}"


def test_inspect_value_quotes_strings() -> None:
    assert inspect_value("./x") == "'./x'"


def test_truncate_keeps_short_text() -> None:
    text = "x" * INSPECT_MAX_LENGTH
    assert truncate(text) == text


def test_truncate_long_text() -> None:
    result = truncate("y" * 500)
    assert result == "y" * 128 + "..."
