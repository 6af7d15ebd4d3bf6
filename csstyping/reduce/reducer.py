"""Reduction of value syntax entity sequences to type descriptors.

Each sequence is folded left to right into one `TypeSet`:

- a component contributes only when it can occur without a non-optional
  partner tied to it by juxtaposition or `&&` (see `inclusion_mask`);
- keywords become numeric or string literals;
- `<name>` references resolve through the scalar-type catalog or stay symbolic;
- `<'property'>` references expand the referenced property's own grammar;
- juxtaposition, `&&`, `||` and functions fall back to the generic STRING.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
import logging
import re

from csstyping.data import CssDataset, load_default_css_dataset
from csstyping.reduce.catalog import build_scalar_type_catalog_for, load_scalar_type_catalog
from csstyping.reduce.descriptors import (
    STRING,
    TypeDescriptor,
    TypeSet,
    data_type,
    numeric_literal,
    string_literal,
)
from csstyping.reduce.policy import ReducerPolicy
from csstyping.syntax import (
    Combinator,
    CombinatorKind,
    DataTypeReference,
    Entity,
    Function,
    Group,
    Keyword,
    is_component,
    is_expansive_entity,
    is_optional_entity,
    parse_value_syntax_cached,
)

logger = logging.getLogger(__name__)

_PLAIN_NUMBER = re.compile(r"^-?(?:\d+|\d*\.\d+)$")


class GrammarReducer:
    """Reduces grammars against one dataset and its scalar-type catalog."""

    def __init__(
        self,
        dataset: CssDataset | None = None,
        *,
        catalog: Mapping[str, TypeDescriptor] | None = None,
        policy: ReducerPolicy | None = None,
    ) -> None:
        if dataset is None:
            dataset = load_default_css_dataset()
            if catalog is None:
                catalog = load_scalar_type_catalog()
        elif catalog is None:
            catalog = build_scalar_type_catalog_for(dataset)
        self._dataset = dataset
        self._catalog = catalog
        self._policy = policy or ReducerPolicy()

    @property
    def dataset(self) -> CssDataset:
        return self._dataset

    @property
    def catalog(self) -> Mapping[str, TypeDescriptor]:
        return self._catalog

    @property
    def policy(self) -> ReducerPolicy:
        return self._policy

    def reduce(self, entities: tuple[Entity, ...]) -> tuple[TypeDescriptor, ...]:
        """Descriptors for every value the entity sequence can produce."""
        return self._reduce(entities, chain=())

    def reduce_syntax(self, text: str) -> tuple[TypeDescriptor, ...]:
        return self.reduce(parse_value_syntax_cached(text).entities)

    def reduce_property(self, name: str) -> tuple[TypeDescriptor, ...]:
        """Descriptors for one property's grammar; unknown properties reduce to STRING."""
        if name not in self._dataset.properties:
            logger.debug("Unknown property %r; falling back to string", name)
            return (STRING,)
        return self._reduce_property(name, chain=())

    def _reduce_property(self, name: str, chain: tuple[str, ...]) -> tuple[TypeDescriptor, ...]:
        parsed = parse_value_syntax_cached(self._dataset.properties[name])
        if parsed.has_errors:
            logger.warning(
                "Grammar of property %r has syntax errors (%s); reducing recovered entities",
                name,
                ", ".join(diagnostic.code for diagnostic in parsed.diagnostics),
            )
        return self._reduce(parsed.entities, chain=(*chain, name))

    def _reduce(self, entities: tuple[Entity, ...], chain: tuple[str, ...]) -> tuple[TypeDescriptor, ...]:
        types = TypeSet()
        mask = inclusion_mask(entities)
        for index, entity in enumerate(entities):
            match entity:
                case Combinator(kind=kind):
                    if kind != CombinatorKind.EXACTLY_ONE:
                        types.add(STRING)
                case Function():
                    types.add(STRING)
                case _ if not mask[index]:
                    continue
                case Keyword(value=value):
                    types.add(keyword_descriptor(value))
                case DataTypeReference():
                    types.update(self._reduce_reference(entity, chain))
                case Group(entities=inner):
                    if is_expansive_entity(entity):
                        types.add(STRING)
                    types.update(self._reduce(inner, chain))
        return types.freeze()

    def _reduce_reference(self, reference: DataTypeReference, chain: tuple[str, ...]) -> tuple[TypeDescriptor, ...]:
        if reference.property_reference:
            return self._reduce_property_reference(reference, chain)
        scalar = self._catalog.get(reference.name)
        if scalar is not None:
            return (scalar,)
        return (data_type(reference.name),)

    def _reduce_property_reference(
        self,
        reference: DataTypeReference,
        chain: tuple[str, ...],
    ) -> tuple[TypeDescriptor, ...]:
        name = reference.name
        if name not in self._dataset.properties:
            logger.debug("Unknown property reference %s; falling back to string", reference.text)
            return (STRING,)

        types = TypeSet()
        # The reference may occur more than once, so the joined text needs the fallback too.
        if is_expansive_entity(reference):
            types.add(STRING)
        if name in chain:
            logger.debug(
                "Property reference cycle %s; applying %r policy",
                " -> ".join((*chain, name)),
                self._policy.on_cycle,
            )
            types.add(self._cycle_descriptor(name))
        else:
            types.update(self._reduce_property(name, chain))
        return types.freeze()

    def _cycle_descriptor(self, name: str) -> TypeDescriptor:
        if self._policy.on_cycle == "string":
            return STRING
        return data_type(f"'{name}'")


def inclusion_mask(entities: tuple[Entity, ...]) -> tuple[bool, ...]:
    """Per position: is this a component that can appear without its neighbours?

    Alternation combinators (`|`, `||`) split the sequence into runs. Inside a
    run, juxtaposition and `&&` tie their operands together, and a component is
    included only when every other tied operand is optional.
    """
    mask = [False] * len(entities)
    for start, end in _alternation_runs(entities):
        required: set[int] = set()
        for index in range(start, end):
            entity = entities[index]
            if not (isinstance(entity, Combinator) and entity.kind.is_mandatory):
                continue
            for operand in (index - 1, index + 1):
                if start <= operand < end and not isinstance(entities[operand], Combinator):
                    if not is_optional_entity(entities[operand]):
                        required.add(operand)
        for index in range(start, end):
            if is_component(entities[index]):
                mask[index] = required <= {index}
    return tuple(mask)


def _alternation_runs(entities: tuple[Entity, ...]) -> Iterator[tuple[int, int]]:
    start = 0
    for index, entity in enumerate(entities):
        if isinstance(entity, Combinator) and not entity.kind.is_mandatory:
            yield start, index
            start = index + 1
    yield start, len(entities)


def keyword_descriptor(text: str) -> TypeDescriptor:
    """Numeric literal when the text survives a number round trip unchanged, else string literal."""
    value = _round_trip_number(text)
    if value is None:
        return string_literal(text)
    return numeric_literal(value)


def _round_trip_number(text: str) -> int | float | None:
    # Only plain decimal notation can be reproduced exactly; `+0`, `007`, `.5`
    # and `1e3` are normalized away by the round trip.
    if _PLAIN_NUMBER.match(text) is None:
        return None
    parsed = float(text)
    value: int | float = int(parsed) if parsed.is_integer() else parsed
    return value if _format_number(value) == text else None


def _format_number(value: int | float) -> str:
    return str(value) if isinstance(value, int) else repr(value)


def reduce_entities(
    entities: tuple[Entity, ...],
    *,
    dataset: CssDataset | None = None,
    policy: ReducerPolicy | None = None,
) -> tuple[TypeDescriptor, ...]:
    return GrammarReducer(dataset, policy=policy).reduce(entities)


def type_property(
    name: str,
    *,
    dataset: CssDataset | None = None,
    policy: ReducerPolicy | None = None,
) -> tuple[TypeDescriptor, ...]:
    return GrammarReducer(dataset, policy=policy).reduce_property(name)


def type_all_properties(
    *,
    dataset: CssDataset | None = None,
    policy: ReducerPolicy | None = None,
) -> dict[str, tuple[TypeDescriptor, ...]]:
    """Reduce every property of the dataset, keyed in dataset order."""
    reducer = GrammarReducer(dataset, policy=policy)
    return {name: reducer.reduce_property(name) for name in reducer.dataset.properties}
