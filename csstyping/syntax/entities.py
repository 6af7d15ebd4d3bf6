"""Entity tree produced by the value definition syntax parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class MultiplierKind(StrEnum):
    OPTIONAL = "?"
    ZERO_OR_MORE = "*"
    ONE_OR_MORE = "+"
    COMMA_REPEATED = "#"
    RANGE = "{}"
    REQUIRED = "!"


class CombinatorKind(StrEnum):
    JUXTAPOSITION = " "
    ALL_ANY_ORDER = "&&"
    ONE_OR_MORE_ANY_ORDER = "||"
    EXACTLY_ONE = "|"

    @property
    def is_mandatory(self) -> bool:
        """Operands of this combinator must all be present together."""
        return self in (CombinatorKind.JUXTAPOSITION, CombinatorKind.ALL_ANY_ORDER)


@dataclass(frozen=True, slots=True)
class Multiplier:
    """Occurrence-count annotation; `maximum=None` means unbounded."""

    kind: MultiplierKind
    minimum: int = 0
    maximum: int | None = None

    @staticmethod
    def optional() -> Multiplier:
        return Multiplier(MultiplierKind.OPTIONAL, 0, 1)

    @staticmethod
    def zero_or_more() -> Multiplier:
        return Multiplier(MultiplierKind.ZERO_OR_MORE, 0, None)

    @staticmethod
    def one_or_more() -> Multiplier:
        return Multiplier(MultiplierKind.ONE_OR_MORE, 1, None)

    @staticmethod
    def comma_repeated(minimum: int = 1, maximum: int | None = None) -> Multiplier:
        return Multiplier(MultiplierKind.COMMA_REPEATED, minimum, maximum)

    @staticmethod
    def range(minimum: int, maximum: int | None) -> Multiplier:
        return Multiplier(MultiplierKind.RANGE, minimum, maximum)

    @staticmethod
    def required() -> Multiplier:
        return Multiplier(MultiplierKind.REQUIRED, 1, 1)

    @property
    def is_optional(self) -> bool:
        """The component may be left out entirely."""
        match self.kind:
            case MultiplierKind.OPTIONAL | MultiplierKind.ZERO_OR_MORE:
                return True
            case MultiplierKind.RANGE:
                return self.minimum == 0
            case _:
                return False

    @property
    def is_expansive(self) -> bool:
        """The component may yield more than one value instance."""
        match self.kind:
            case MultiplierKind.OPTIONAL:
                return False
            case MultiplierKind.RANGE:
                return self.maximum is None or self.maximum > 1
            case _:
                return True

    def __str__(self) -> str:
        if self.kind == MultiplierKind.RANGE:
            return _format_range(self.minimum, self.maximum)
        if self.kind == MultiplierKind.COMMA_REPEATED and (self.minimum, self.maximum) != (1, None):
            return "#" + _format_range(self.minimum, self.maximum)
        return self.kind.value


@dataclass(frozen=True, slots=True)
class Keyword:
    value: str
    multiplier: Multiplier | None = None


@dataclass(frozen=True, slots=True)
class DataTypeReference:
    """`<name>` or, with `property_reference`, `<'property-name'>`."""

    name: str
    multiplier: Multiplier | None = None
    property_reference: bool = False

    @property
    def text(self) -> str:
        if self.property_reference:
            return f"<'{self.name}'>"
        return f"<{self.name}>"


@dataclass(frozen=True, slots=True)
class Group:
    entities: tuple[Entity, ...]
    multiplier: Multiplier | None = None


@dataclass(frozen=True, slots=True)
class Combinator:
    kind: CombinatorKind


@dataclass(frozen=True, slots=True)
class Function:
    """Functional notation; the arguments are kept verbatim and never modeled."""

    name: str
    arguments: str = ""


type Component = Keyword | DataTypeReference | Group
type Entity = Keyword | DataTypeReference | Group | Combinator | Function

COMPONENT_TYPES = (Keyword, DataTypeReference, Group)


def is_component(entity: Entity) -> bool:
    return isinstance(entity, COMPONENT_TYPES)


def is_optional_entity(entity: Entity) -> bool:
    multiplier = getattr(entity, "multiplier", None)
    return multiplier is not None and multiplier.is_optional


def is_expansive_entity(entity: Entity) -> bool:
    multiplier = getattr(entity, "multiplier", None)
    return multiplier is not None and multiplier.is_expansive


def format_entities(entities: tuple[Entity, ...]) -> str:
    """Render an entity sequence back to value definition syntax."""
    parts: list[str] = []
    for entity in entities:
        if isinstance(entity, Combinator):
            if entity.kind != CombinatorKind.JUXTAPOSITION:
                parts.append(entity.kind.value)
            continue
        parts.append(_format_entity(entity))
    return " ".join(parts)


def _format_entity(entity: Entity) -> str:
    if isinstance(entity, Keyword):
        return entity.value + _format_multiplier(entity.multiplier)
    if isinstance(entity, DataTypeReference):
        return entity.text + _format_multiplier(entity.multiplier)
    if isinstance(entity, Group):
        return f"[ {format_entities(entity.entities)} ]" + _format_multiplier(entity.multiplier)
    if isinstance(entity, Function):
        return f"{entity.name}({entity.arguments})"
    return ""


def _format_multiplier(multiplier: Multiplier | None) -> str:
    return "" if multiplier is None else str(multiplier)


def _format_range(minimum: int, maximum: int | None) -> str:
    if maximum is None:
        return f"{{{minimum},}}"
    if maximum == minimum:
        return f"{{{minimum}}}"
    return f"{{{minimum},{maximum}}}"
