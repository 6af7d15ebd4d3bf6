"""Type descriptors and the structurally deduplicated descriptor set."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Final, Literal

type TypeDescriptorKind = Literal[
    "alias",
    "data_type",
    "length",
    "string_literal",
    "numeric_literal",
    "string",
    "number",
]

type DescriptorKey = tuple[TypeDescriptorKind, str | int | float | None, str | None]


@dataclass(frozen=True, slots=True)
class Generic:
    """Type parameter of an alias descriptor."""

    name: str
    default: str | None = None


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    kind: TypeDescriptorKind
    literal: str | int | float | None = None
    name: str | None = None
    generics: tuple[Generic, ...] = ()

    @property
    def key(self) -> DescriptorKey:
        """Structural identity: kind, plus literal or name where the kind carries one."""
        return (self.kind, self.literal, self.name)

    def __repr__(self) -> str:
        if self.kind in ("string_literal", "numeric_literal"):
            return f"TypeDescriptor({self.kind} {self.literal!r})"
        if self.name is not None:
            return f"TypeDescriptor({self.kind} {self.name!r})"
        return f"TypeDescriptor({self.kind})"


STRING: Final[TypeDescriptor] = TypeDescriptor(kind="string")
NUMBER: Final[TypeDescriptor] = TypeDescriptor(kind="number")
LENGTH: Final[TypeDescriptor] = TypeDescriptor(kind="length")


def string_literal(text: str) -> TypeDescriptor:
    return TypeDescriptor(kind="string_literal", literal=text)


def numeric_literal(value: int | float) -> TypeDescriptor:
    return TypeDescriptor(kind="numeric_literal", literal=value)


def data_type(name: str) -> TypeDescriptor:
    return TypeDescriptor(kind="data_type", name=name)


def alias(name: str, generics: Iterable[Generic] = ()) -> TypeDescriptor:
    return TypeDescriptor(kind="alias", name=name, generics=tuple(generics))


class TypeSet:
    """Insertion-ordered descriptor collection with set semantics on `TypeDescriptor.key`.

    Adding a descriptor whose key is already present is a no-op, so the first
    occurrence keeps its position.
    """

    __slots__ = ("_items",)

    def __init__(self, descriptors: Iterable[TypeDescriptor] = ()) -> None:
        self._items: dict[DescriptorKey, TypeDescriptor] = {}
        self.update(descriptors)

    def add(self, descriptor: TypeDescriptor) -> bool:
        """Insert `descriptor`; return whether it was new."""
        key = descriptor.key
        if key in self._items:
            return False
        self._items[key] = descriptor
        return True

    def update(self, descriptors: Iterable[TypeDescriptor]) -> None:
        for descriptor in descriptors:
            self.add(descriptor)

    def freeze(self) -> tuple[TypeDescriptor, ...]:
        return tuple(self._items.values())

    def __contains__(self, descriptor: object) -> bool:
        return isinstance(descriptor, TypeDescriptor) and descriptor.key in self._items

    def __iter__(self) -> Iterator[TypeDescriptor]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"TypeSet({list(self._items.values())!r})"


def merge_type_descriptors(
    left: tuple[TypeDescriptor, ...],
    right: Iterable[TypeDescriptor],
) -> tuple[TypeDescriptor, ...]:
    merged = TypeSet(left)
    merged.update(right)
    return merged.freeze()
