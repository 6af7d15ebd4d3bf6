"""Human readable rendering of descriptor sets."""

from __future__ import annotations

from collections.abc import Iterable
import json

from csstyping.reduce.descriptors import Generic, TypeDescriptor


def format_type_descriptor(descriptor: TypeDescriptor) -> str:
    match descriptor.kind:
        case "string" | "number" | "length":
            return descriptor.kind
        case "string_literal":
            return json.dumps(descriptor.literal, ensure_ascii=False)
        case "numeric_literal":
            return str(descriptor.literal)
        case "data_type":
            return f"<{descriptor.name}>"
        case "alias":
            name = descriptor.name or ""
            if not descriptor.generics:
                return name
            return f"{name}<{', '.join(_format_generic(generic) for generic in descriptor.generics)}>"
        case _:
            raise ValueError(f"Unsupported descriptor kind: {descriptor.kind!r}")


def format_type_set(descriptors: Iterable[TypeDescriptor]) -> str:
    """Union text such as `"left" | "right" | string`; `never` when empty."""
    parts = [format_type_descriptor(descriptor) for descriptor in descriptors]
    return " | ".join(parts) if parts else "never"


def _format_generic(generic: Generic) -> str:
    if generic.default is None:
        return generic.name
    return f"{generic.name} = {generic.default}"
