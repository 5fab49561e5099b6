"""Bridge that delegates sorts of NumPy arrays to NumPy's own kernels.

Only ``numpy.ndarray`` operands are handled; every function returns ``None``
for anything else so the caller falls back to the quicksort engine.
"""

from __future__ import annotations

from typing import Any

import numpy as _np


def is_available() -> bool:
    return True


def _handles(*arrays: Any) -> bool:
    return all(isinstance(arr, _np.ndarray) for arr in arrays)


def sort(x):
    if not _handles(x):
        return None
    x.sort(kind="quicksort")
    return x


def index_sort(x, index):
    if not _handles(x, index):
        return None
    order = _np.argsort(x[index], kind="stable")
    index[:] = index[order]
    return index


def partial_sort(k, x):
    if not _handles(x):
        return None
    x[:] = _np.partition(x, k)
    return x


def partial_index_sort(k, x, index):
    if not _handles(x, index):
        return None
    order = _np.argpartition(x[index], k)
    index[:] = index[order]
    return index
