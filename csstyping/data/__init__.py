"""CSS grammar datasets."""

from csstyping.data.dataset import (
    DATA_DIR_ENV,
    DEFAULT_DATA_DIR,
    CssDataset,
    build_css_dataset,
    load_css_dataset,
    load_default_css_dataset,
)

__all__ = [
    "DATA_DIR_ENV",
    "DEFAULT_DATA_DIR",
    "CssDataset",
    "build_css_dataset",
    "load_css_dataset",
    "load_default_css_dataset",
]
