"""Element kinds and work-buffer conversion for the sort/search engine.

Sequences are either one-dimensional NumPy arrays holding one of the six
supported numeric kinds, or plain Python lists of mutually comparable values.
The engine never touches NumPy scalars directly: arrays are copied into a list
work buffer with ``tolist`` and written back in place once the engine is done.
"""

from __future__ import annotations

from typing import Any, List

import numpy as _np

ELEMENT_KINDS = ("int8", "int16", "int32", "int64", "float32", "float64")
_KIND_DTYPES = {name: _np.dtype(name) for name in ELEMENT_KINDS}


def resolve_kind(dtype: Any) -> _np.dtype:
    """Map ``dtype`` (name, Python type or NumPy dtype) to a supported dtype."""

    if dtype in {None, float, "float", "double"}:
        return _KIND_DTYPES["float64"]
    if dtype in {int, "int", "long"}:
        return _KIND_DTYPES["int64"]
    resolved = _np.dtype(dtype)
    if resolved.name not in _KIND_DTYPES:
        raise TypeError(
            "unsupported element kind %s; expected one of %s" % (resolved.name, ", ".join(ELEMENT_KINDS))
        )
    return resolved


def check_sequence(seq: Any, name: str = "sequence") -> None:
    if isinstance(seq, _np.ndarray):
        if seq.ndim != 1:
            raise ValueError("%s must be one-dimensional; got shape %s" % (name, seq.shape))
        resolve_kind(seq.dtype)
        return
    if not isinstance(seq, list):
        raise TypeError("%s must be a numpy.ndarray or list; got %s" % (name, type(seq).__name__))


def work_buffer(seq: Any) -> List[Any]:
    """Return a list the engine may mutate; lists are used as-is."""

    if isinstance(seq, _np.ndarray):
        return seq.tolist()
    return seq


def write_back(seq: Any, work: List[Any]) -> None:
    if work is not seq:
        seq[:] = work


def check_index(seq: Any, index: Any, *, validate: bool = True) -> None:
    """Check that ``index`` is a permutation of ``0..len(seq)-1``.

    Index arrays may hold any signed or unsigned integer dtype; the six
    element kinds only constrain the data being sorted.
    """

    if isinstance(index, _np.ndarray):
        if index.ndim != 1:
            raise ValueError("index must be one-dimensional; got shape %s" % (index.shape,))
        if index.dtype.kind not in "iu":
            raise TypeError("index must hold integers; got %s" % (index.dtype.name,))
    elif not isinstance(index, list):
        raise TypeError("index must be a numpy.ndarray or list; got %s" % (type(index).__name__,))
    n = len(seq)
    if len(index) != n:
        raise ValueError("index length %d does not match sequence length %d" % (len(index), n))
    if not validate or n == 0:
        return
    idx = _np.asarray(index)
    if idx.dtype.kind not in "iu":
        raise TypeError("index must hold integers; got %s" % (idx.dtype.name,))
    if idx.min() < 0 or idx.max() >= n:
        raise ValueError("index is not a permutation of 0..%d" % (n - 1,))
    counts = _np.bincount(idx.astype(_np.intp, copy=False), minlength=n)
    if not _np.all(counts == 1):
        raise ValueError("index is not a permutation of 0..%d" % (n - 1,))


__all__ = [
    "ELEMENT_KINDS",
    "check_index",
    "check_sequence",
    "resolve_kind",
    "work_buffer",
    "write_back",
]
