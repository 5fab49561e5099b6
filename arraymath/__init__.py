"""Sorting, selection and search over one-dimensional numeric sequences."""

from importlib.metadata import PackageNotFoundError, version

from . import arrays
from .kinds import ELEMENT_KINDS
from .median import MedianFinder
from .search import binary_search
from .sorting import (
    SORT_BACKEND,
    index_sort,
    insertion_sort,
    partial_index_sort,
    partial_sort,
    quick_index_sort,
    quick_partial_index_sort,
    quick_partial_sort,
    quick_sort,
    sort,
)

try:  # pragma: no cover - metadata is provided at build time
    __version__ = version("arraymath")
except PackageNotFoundError:  # pragma: no cover - fallback during development
    __version__ = "0.0.0.dev0"


__all__ = [
    "ELEMENT_KINDS",
    "MedianFinder",
    "SORT_BACKEND",
    "__version__",
    "arrays",
    "binary_search",
    "index_sort",
    "insertion_sort",
    "partial_index_sort",
    "partial_sort",
    "quick_index_sort",
    "quick_partial_index_sort",
    "quick_partial_sort",
    "quick_sort",
    "sort",
]
