import pytest

from csstyping.reduce import (
    LENGTH,
    NUMBER,
    STRING,
    Generic,
    TypeDescriptor,
    alias,
    data_type,
    format_type_descriptor,
    format_type_set,
    numeric_literal,
    string_literal,
)


def test_format_type_set_union() -> None:
    types = (
        string_literal("left"),
        numeric_literal(0),
        numeric_literal(1.5),
        STRING,
        NUMBER,
        LENGTH,
        data_type("color"),
    )
    assert format_type_set(types) == '"left" | 0 | 1.5 | string | number | length | <color>'


def test_format_empty_set() -> None:
    assert format_type_set(()) == "never"


def test_string_literal_is_escaped() -> None:
    assert format_type_descriptor(string_literal('a"b')) == '"a\\"b"'


def test_format_alias_with_generics() -> None:
    assert format_type_descriptor(alias("Globals")) == "Globals"
    described = alias("Property", [Generic("TLength", "string | 0"), Generic("TTime")])
    assert format_type_descriptor(described) == "Property<TLength = string | 0, TTime>"


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValueError):
        format_type_descriptor(TypeDescriptor(kind="tuple"))  # type: ignore[arg-type]
