#!/usr/bin/env python
"""Print the reduced type union of CSS properties."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from csstyping.data import load_css_dataset, load_default_css_dataset
from csstyping.reduce import (
    GrammarReducer,
    ReducerPolicy,
    collect_data_types,
    format_type_set,
)


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump reduced type descriptors of CSS properties")
    parser.add_argument("properties", nargs="*", help="Property names (default: every property in the dataset)")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory with properties.json/syntaxes.json/types.json (default: bundled dataset)",
    )
    parser.add_argument(
        "--on-cycle",
        choices=["data_type", "string"],
        default="data_type",
        help="What a cyclic property reference reduces to (default: data_type)",
    )
    parser.add_argument(
        "--data-types",
        action="store_true",
        help="Also print the named syntaxes referenced by the dumped properties",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    dataset = load_css_dataset(args.data_dir) if args.data_dir is not None else load_default_css_dataset()
    policy = ReducerPolicy(on_cycle=args.on_cycle)
    reducer = GrammarReducer(dataset, policy=policy)

    names = args.properties or list(dataset.properties)
    reduced = {name: reducer.reduce_property(name) for name in names}
    for name, types in reduced.items():
        print(f"{name}: {format_type_set(types)}")

    if args.data_types:
        print()
        for name, types in collect_data_types(reduced.values(), dataset=dataset, policy=policy).items():
            print(f"<{name}>: {format_type_set(types)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
