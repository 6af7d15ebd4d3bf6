"""Loading of mdn-data shaped CSS tables (properties, syntaxes, types)."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import json
import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping

logger = logging.getLogger(__name__)

DATA_DIR_ENV = "CSSTYPING_DATA_DIR"
DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "mdn"

PROPERTIES_FILE = "properties.json"
SYNTAXES_FILE = "syntaxes.json"
TYPES_FILE = "types.json"


@dataclass(frozen=True, slots=True)
class CssDataset:
    """Read-only grammar tables for one dataset root."""

    source_root: str
    properties: Mapping[str, str]
    syntaxes: Mapping[str, str]
    types: frozenset[str]

    def property_syntax(self, name: str) -> str | None:
        return self.properties.get(name)

    def syntax(self, name: str) -> str | None:
        return self.syntaxes.get(name)


def build_css_dataset(
    *,
    properties: Mapping[str, str] | None = None,
    syntaxes: Mapping[str, str] | None = None,
    types: Iterable[str] = (),
    source_root: str = "<memory>",
) -> CssDataset:
    """Build a dataset from in-memory name -> grammar mappings."""
    return CssDataset(
        source_root=source_root,
        properties=MappingProxyType(dict(properties or {})),
        syntaxes=MappingProxyType(dict(syntaxes or {})),
        types=frozenset(types),
    )


def load_css_dataset(root: str | Path) -> CssDataset:
    """Load `properties.json`, `syntaxes.json` and `types.json` from one directory."""
    root_path = Path(root)
    if not root_path.is_dir():
        raise FileNotFoundError(f"CSS dataset directory not found: {root_path}")

    properties = _read_syntax_table(root_path / PROPERTIES_FILE)
    syntaxes = _read_syntax_table(root_path / SYNTAXES_FILE)
    types = _read_table(root_path / TYPES_FILE).keys()
    logger.info(
        "Loaded CSS dataset from %s: %d properties, %d syntaxes, %d types",
        root_path,
        len(properties),
        len(syntaxes),
        len(types),
    )
    return build_css_dataset(
        properties=properties,
        syntaxes=syntaxes,
        types=types,
        source_root=str(root_path),
    )


@lru_cache(maxsize=1)
def load_default_css_dataset() -> CssDataset:
    """Load the bundled dataset, or the directory named by `CSSTYPING_DATA_DIR`."""
    override = os.environ.get(DATA_DIR_ENV)
    root = Path(override).expanduser() if override else DEFAULT_DATA_DIR
    return load_css_dataset(root)


def _read_syntax_table(path: Path) -> dict[str, str]:
    table: dict[str, str] = {}
    for name, entry in _read_table(path).items():
        syntax = entry.get("syntax") if isinstance(entry, dict) else None
        if not isinstance(syntax, str):
            raise ValueError(f"{path}: entry {name!r} has no string `syntax` field")
        table[name] = syntax
    return table


def _read_table(path: Path) -> dict[str, Any]:
    if not path.is_file():
        logger.debug("CSS dataset table %s is missing; treating it as empty", path)
        return {}
    with path.open(encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object at the top level")
    return data
