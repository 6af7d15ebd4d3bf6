"""Transitive typing of the named syntaxes that reduced grammars reference symbolically."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
import logging

from csstyping.data import CssDataset
from csstyping.reduce.descriptors import TypeDescriptor
from csstyping.reduce.policy import ReducerPolicy
from csstyping.reduce.reducer import GrammarReducer

logger = logging.getLogger(__name__)


def collect_data_types(
    descriptor_sets: Iterable[Iterable[TypeDescriptor]],
    *,
    dataset: CssDataset | None = None,
    policy: ReducerPolicy | None = None,
) -> dict[str, tuple[TypeDescriptor, ...]]:
    """Reduce every named syntax reachable through `data_type` descriptors.

    Each name is reduced once, in first-reference order. Names without an entry in
    the syntaxes table stay unresolved and are left out of the result.
    """
    reducer = GrammarReducer(dataset, policy=policy)
    pending: deque[str] = deque()
    for descriptors in descriptor_sets:
        pending.extend(_data_type_names(descriptors))

    resolved: dict[str, tuple[TypeDescriptor, ...]] = {}
    unresolved: set[str] = set()
    while pending:
        name = pending.popleft()
        if name in resolved or name in unresolved:
            continue
        syntax = reducer.dataset.syntax(name)
        if syntax is None:
            logger.debug("No syntax for data type <%s>; leaving it unresolved", name)
            unresolved.add(name)
            continue
        types = reducer.reduce_syntax(syntax)
        resolved[name] = types
        pending.extend(_data_type_names(types))
    return resolved


def _data_type_names(descriptors: Iterable[TypeDescriptor]) -> list[str]:
    return [descriptor.name for descriptor in descriptors if descriptor.kind == "data_type" and descriptor.name]
