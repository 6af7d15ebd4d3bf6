"""Scalar-type catalog: elementary grammar names flattened to primitive descriptors."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Final

from csstyping.data import CssDataset, load_default_css_dataset
from csstyping.reduce.descriptors import LENGTH, NUMBER, STRING, TypeDescriptor

# Not listed among the dataset's types but used as a plain reference by color grammars.
EXTRA_TYPE_NAMES: Final[tuple[str, ...]] = ("hex-color",)

NUMERIC_TYPE_NAMES: Final[frozenset[str]] = frozenset({"number", "integer"})
LENGTH_TYPE_NAMES: Final[frozenset[str]] = frozenset({"length"})


def build_scalar_type_catalog(
    type_names: Iterable[str],
    syntax_names: Collection[str],
) -> Mapping[str, TypeDescriptor]:
    """Map elementary type names to NUMBER, LENGTH or STRING.

    Names with their own composite syntax are left out so they stay symbolic
    `data_type` references for the reducer.
    """
    catalog: dict[str, TypeDescriptor] = {}
    for name in (*type_names, *EXTRA_TYPE_NAMES):
        if name in NUMERIC_TYPE_NAMES:
            catalog[name] = NUMBER
        elif name in LENGTH_TYPE_NAMES:
            catalog[name] = LENGTH
        elif name not in syntax_names:
            catalog[name] = STRING
    return MappingProxyType(catalog)


def build_scalar_type_catalog_for(dataset: CssDataset) -> Mapping[str, TypeDescriptor]:
    return build_scalar_type_catalog(sorted(dataset.types), dataset.syntaxes)


@lru_cache(maxsize=1)
def load_scalar_type_catalog() -> Mapping[str, TypeDescriptor]:
    """Process-wide catalog for the default dataset, built on first use."""
    return build_scalar_type_catalog_for(load_default_css_dataset())
