import json
from pathlib import Path
from types import MappingProxyType

import pytest

from csstyping.data import (
    DATA_DIR_ENV,
    DEFAULT_DATA_DIR,
    build_css_dataset,
    load_css_dataset,
    load_default_css_dataset,
)


def _write(root: Path, name: str, payload: object) -> None:
    (root / name).write_text(json.dumps(payload), encoding="utf-8")


def test_default_dataset_is_bundled_and_cached() -> None:
    dataset = load_default_css_dataset()
    assert dataset is load_default_css_dataset()
    assert dataset.source_root == str(DEFAULT_DATA_DIR)
    assert dataset.property_syntax("z-index") == "auto | <integer>"
    assert dataset.syntax("relative-size") == "larger | smaller"
    assert "length" in dataset.types
    assert dataset.property_syntax("not-a-property") is None


def test_load_css_dataset_from_directory(tmp_path: Path) -> None:
    _write(tmp_path, "properties.json", {"float": {"syntax": "left | right", "inherited": False}})
    _write(tmp_path, "syntaxes.json", {"side": {"syntax": "left | right"}})
    _write(tmp_path, "types.json", {"length": {"groups": ["CSS Types"]}})

    dataset = load_css_dataset(tmp_path)

    assert dataset.source_root == str(tmp_path)
    assert dict(dataset.properties) == {"float": "left | right"}
    assert dict(dataset.syntaxes) == {"side": "left | right"}
    assert dataset.types == frozenset({"length"})
    assert isinstance(dataset.properties, MappingProxyType)


def test_missing_tables_are_empty(tmp_path: Path) -> None:
    _write(tmp_path, "properties.json", {"order": {"syntax": "<integer>"}})
    dataset = load_css_dataset(tmp_path)
    assert dict(dataset.syntaxes) == {}
    assert dataset.types == frozenset()


def test_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_css_dataset(tmp_path / "absent")


def test_malformed_tables_raise(tmp_path: Path) -> None:
    _write(tmp_path, "properties.json", ["not", "an", "object"])
    with pytest.raises(ValueError):
        load_css_dataset(tmp_path)

    _write(tmp_path, "properties.json", {"order": {"inherited": False}})
    with pytest.raises(ValueError):
        load_css_dataset(tmp_path)


def test_data_dir_environment_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write(tmp_path, "properties.json", {"only": {"syntax": "a | b"}})
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path))
    load_default_css_dataset.cache_clear()
    try:
        dataset = load_default_css_dataset()
        assert list(dataset.properties) == ["only"]
    finally:
        load_default_css_dataset.cache_clear()


def test_build_css_dataset_copies_its_input() -> None:
    properties = {"a": "x | y"}
    dataset = build_css_dataset(properties=properties, types=["number"])
    properties["b"] = "z"
    assert list(dataset.properties) == ["a"]
    assert dataset.source_root == "<memory>"
    assert dataset.types == frozenset({"number"})
