"""Grammar reduction to deduplicated type descriptors."""

from csstyping.reduce.catalog import (
    build_scalar_type_catalog,
    build_scalar_type_catalog_for,
    load_scalar_type_catalog,
)
from csstyping.reduce.closure import collect_data_types
from csstyping.reduce.descriptors import (
    LENGTH,
    NUMBER,
    STRING,
    Generic,
    TypeDescriptor,
    TypeDescriptorKind,
    TypeSet,
    alias,
    data_type,
    merge_type_descriptors,
    numeric_literal,
    string_literal,
)
from csstyping.reduce.policy import CyclePolicy, ReducerPolicy
from csstyping.reduce.reducer import (
    GrammarReducer,
    inclusion_mask,
    keyword_descriptor,
    reduce_entities,
    type_all_properties,
    type_property,
)
from csstyping.reduce.render import format_type_descriptor, format_type_set

__all__ = [
    "LENGTH",
    "NUMBER",
    "STRING",
    "CyclePolicy",
    "Generic",
    "GrammarReducer",
    "ReducerPolicy",
    "TypeDescriptor",
    "TypeDescriptorKind",
    "TypeSet",
    "alias",
    "build_scalar_type_catalog",
    "build_scalar_type_catalog_for",
    "collect_data_types",
    "data_type",
    "format_type_descriptor",
    "format_type_set",
    "inclusion_mask",
    "keyword_descriptor",
    "load_scalar_type_catalog",
    "merge_type_descriptors",
    "numeric_literal",
    "reduce_entities",
    "string_literal",
    "type_all_properties",
    "type_property",
]
