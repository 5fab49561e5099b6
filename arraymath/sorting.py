"""In-place sorts, index sorts and partial sorts for numeric sequences.

The quicksort engine in ``_sort_engine`` is the default implementation.  The
``ARRAYMATH_SORT_BACKEND`` environment variable may route ``numpy.ndarray``
operands to NumPy's kernels instead; ``ARRAYMATH_STRICT`` decides whether a
failing backend raises or falls back to the engine.
"""

from __future__ import annotations

import logging
import operator
import os
from typing import Any, Tuple

from . import _sort_engine
from . import numpy_backend as _numpy_backend
from .kinds import check_index, check_sequence, work_buffer, write_back

LOGGER = logging.getLogger(__name__)


def _parse_bool_env(value: str) -> bool | None:
    lowered = value.strip().lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    return None


def _select_backend(preference: str) -> Tuple[str, Any | None]:
    preference = (preference or "engine").strip().lower()
    if preference in {"auto", "numpy"}:
        if _numpy_backend.is_available():
            return "numpy", _numpy_backend
        LOGGER.warning("Sort backend %r requested but NumPy bridge is unavailable", preference)
    elif preference not in {"engine", ""}:
        LOGGER.warning("Unknown sort backend %r; using the quicksort engine", preference)
    return "engine", None


_BACKEND_PREF = os.getenv("ARRAYMATH_SORT_BACKEND", "engine").strip().lower()
_BACKEND_NAME, _ACCEL_BACKEND = _select_backend(_BACKEND_PREF)
SORT_BACKEND = _BACKEND_NAME

_STRICT_PREF = os.getenv("ARRAYMATH_STRICT", "auto")
_STRICT_BACKEND_OVERRIDE = _parse_bool_env(_STRICT_PREF)
_STRICT_BACKEND = (
    _STRICT_BACKEND_OVERRIDE
    if _STRICT_BACKEND_OVERRIDE is not None
    else _BACKEND_PREF == "numpy" and _BACKEND_NAME == "numpy"
)

_CHECK_INDEX_OVERRIDE = _parse_bool_env(os.getenv("ARRAYMATH_CHECK_INDEX", "on"))
_CHECK_INDEX = True if _CHECK_INDEX_OVERRIDE is None else _CHECK_INDEX_OVERRIDE

LOGGER.debug("Sort backend %s (strict=%s, check_index=%s)", _BACKEND_NAME, _STRICT_BACKEND, _CHECK_INDEX)


def _backend_call(name: str, *args):
    if _ACCEL_BACKEND is None:
        return None
    func = getattr(_ACCEL_BACKEND, name, None)
    if func is None:
        return None
    try:
        return func(*args)
    except Exception:
        if _STRICT_BACKEND:
            raise
        LOGGER.warning("Sort backend %s failed in %s; falling back to the engine", _BACKEND_NAME, name, exc_info=True)
        return None


def _check_k(k: Any, n: int) -> int:
    k = operator.index(k)
    if k < 0 or k >= n:
        raise IndexError("k=%d is out of range for length %d" % (k, n))
    return k


def _index_keys(x: Any, perm: list) -> list:
    values = work_buffer(x)
    return [values[i] for i in perm]


def quick_sort(x) -> None:
    """Sort ``x`` ascending in place."""

    check_sequence(x)
    if len(x) < 2:
        return
    if _backend_call("sort", x) is not None:
        return
    work = work_buffer(x)
    _sort_engine.quick_sort(work)
    write_back(x, work)


def quick_index_sort(x, index) -> None:
    """Reorder ``index`` so that ``x[index[0]] <= x[index[1]] <= ...``.

    ``x`` is left untouched.  ``index`` must hold a permutation of
    ``0..len(x)-1`` and still holds one afterwards.
    """

    check_sequence(x)
    check_index(x, index, validate=_CHECK_INDEX)
    if len(x) < 2:
        return
    if _backend_call("index_sort", x, index) is not None:
        return
    perm = work_buffer(index)
    keys = _index_keys(x, perm)
    _sort_engine.quick_sort(keys, perm)
    write_back(index, perm)


def quick_partial_sort(k: int, x) -> None:
    """Partially sort ``x`` so that ``x[k]`` holds its fully-sorted value.

    Elements before ``k`` are no greater and elements after ``k`` no less than
    ``x[k]``; neither side is otherwise ordered.
    """

    check_sequence(x)
    k = _check_k(k, len(x))
    if _backend_call("partial_sort", k, x) is not None:
        return
    work = work_buffer(x)
    _sort_engine.partial_sort(k, work)
    write_back(x, work)


def quick_partial_index_sort(k: int, x, index) -> None:
    """Partial sort of ``index`` around position ``k``; ``x`` is untouched."""

    check_sequence(x)
    k = _check_k(k, len(x))
    check_index(x, index, validate=_CHECK_INDEX)
    if _backend_call("partial_index_sort", k, x, index) is not None:
        return
    perm = work_buffer(index)
    keys = _index_keys(x, perm)
    _sort_engine.partial_sort(k, keys, perm)
    write_back(index, perm)


def insertion_sort(x, p: int = 0, q: int | None = None) -> None:
    """Insertion-sort the inclusive range ``x[p..q]`` in place."""

    check_sequence(x)
    n = len(x)
    q = n - 1 if q is None else q
    _sort_engine.check_range(n, p, q)
    work = work_buffer(x)
    _sort_engine.insertion_sort(work, p, q)
    write_back(x, work)


sort = quick_sort
index_sort = quick_index_sort
partial_sort = quick_partial_sort
partial_index_sort = quick_partial_index_sort


__all__ = [
    "SORT_BACKEND",
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
