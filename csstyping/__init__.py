"""Reduce CSS property value grammars to deduplicated semantic type descriptors."""

from csstyping.data import CssDataset, build_css_dataset, load_css_dataset, load_default_css_dataset
from csstyping.reduce import (
    LENGTH,
    NUMBER,
    STRING,
    GrammarReducer,
    ReducerPolicy,
    TypeDescriptor,
    collect_data_types,
    format_type_set,
    reduce_entities,
    type_all_properties,
    type_property,
)
from csstyping.syntax import parse_value_syntax, parse_value_syntax_result

__all__ = [
    "LENGTH",
    "NUMBER",
    "STRING",
    "CssDataset",
    "GrammarReducer",
    "ReducerPolicy",
    "TypeDescriptor",
    "build_css_dataset",
    "collect_data_types",
    "format_type_set",
    "load_css_dataset",
    "load_default_css_dataset",
    "parse_value_syntax",
    "parse_value_syntax_result",
    "reduce_entities",
    "type_all_properties",
    "type_property",
]
