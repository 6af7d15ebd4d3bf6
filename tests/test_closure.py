import logging

import pytest

from csstyping.data import build_css_dataset
from csstyping.reduce import (
    LENGTH,
    STRING,
    collect_data_types,
    data_type,
    string_literal,
    type_property,
)


def test_collects_direct_references_in_first_reference_order() -> None:
    collected = collect_data_types([type_property("font-size")])
    assert list(collected) == ["absolute-size", "relative-size", "length-percentage"]
    assert collected["relative-size"] == (string_literal("larger"), string_literal("smaller"))
    assert collected["length-percentage"] == (LENGTH, STRING)


def test_collects_transitively_and_skips_unresolved_names() -> None:
    collected = collect_data_types([type_property("background-image")])
    # image() and the gradient functions have no syntax entry and are left out.
    assert list(collected) == ["bg-image", "image", "url", "gradient"]
    assert collected["bg-image"] == (string_literal("none"), data_type("image"))
    assert collected["url"] == (STRING,)


def test_excluded_operands_are_not_followed() -> None:
    collected = collect_data_types([type_property("box-shadow")])
    assert collected == {"shadow": (STRING, LENGTH)}


def test_each_name_is_reduced_once_across_sets() -> None:
    collected = collect_data_types([type_property("color"), type_property("background-color")])
    assert list(collected) == ["color", "named-color", "deprecated-system-color"]


def test_cyclic_syntaxes_terminate() -> None:
    dataset = build_css_dataset(syntaxes={"a": "<b> | x", "b": "<a> | y"})
    assert collect_data_types([(data_type("a"),)], dataset=dataset) == {
        "a": (data_type("b"), string_literal("x")),
        "b": (data_type("a"), string_literal("y")),
    }


def test_unresolved_names_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    dataset = build_css_dataset(syntaxes={})
    with caplog.at_level(logging.DEBUG, logger="csstyping.reduce.closure"):
        assert collect_data_types([(data_type("ghost"), STRING)], dataset=dataset) == {}
    assert "ghost" in caplog.text
