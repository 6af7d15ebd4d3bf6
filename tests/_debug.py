"""Shared debug printers for lexer/parser/reducer tests."""

from __future__ import annotations

import os

from csstyping.diagnostics import Diagnostic
from csstyping.reduce import TypeDescriptor, format_type_set
from csstyping.syntax import Entity, Token, dump_tokens, format_entities

_TRUTHY = {"1", "true", "yes", "on"}

PRINT_TOKENS = os.getenv("PRINT_TOKENS", "0").lower() in _TRUTHY
PRINT_ENTITIES = os.getenv("PRINT_ENTITIES", "0").lower() in _TRUTHY
PRINT_TYPES = os.getenv("PRINT_TYPES", "0").lower() in _TRUTHY
PRINT_DIAGNOSTICS = os.getenv("PRINT_DIAGNOSTICS", "0").lower() in _TRUTHY


def debug_dump_tokens(test_name: str, source: str, tokens: list[Token]) -> None:
    if not PRINT_TOKENS:
        return
    print(f"\n===== {test_name} TOKENS =====")
    dump_tokens(tokens, source)


def debug_dump_entities(test_name: str, entities: tuple[Entity, ...]) -> None:
    if not PRINT_ENTITIES:
        return
    print(f"\n===== {test_name} ENTITIES =====")
    print(format_entities(entities))
    for entity in entities:
        print(f"  {entity!r}")


def debug_dump_types(test_name: str, types: tuple[TypeDescriptor, ...]) -> None:
    if not PRINT_TYPES:
        return
    print(f"\n===== {test_name} TYPES =====")
    print(format_type_set(types))


def debug_dump_diagnostics(test_name: str, diagnostics: tuple[Diagnostic, ...] | list[Diagnostic]) -> None:
    if not PRINT_DIAGNOSTICS:
        return
    print(f"===== {test_name} DIAGNOSTICS =====")
    if not diagnostics:
        print("(none)")
        return
    for diagnostic in diagnostics:
        print(diagnostic)
