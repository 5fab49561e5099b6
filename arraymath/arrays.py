"""Construction, copying, element-wise math and inspection helpers for 1-D numeric sequences."""

from __future__ import annotations

import builtins as _builtins
from typing import Any

import numpy as _np

from .kinds import check_sequence, resolve_kind

_python_min = _builtins.min
_python_max = _builtins.max


def ramp(first: float, delta: float, n: int, dtype: Any = float) -> _np.ndarray:
    """Return ``[first, first + delta, ..., first + (n-1)*delta]``."""

    resolved = resolve_kind(dtype)
    values = first + delta * _np.arange(n, dtype=_np.float64)
    return values.astype(resolved)


def rampint(first: int, delta: int, n: int) -> _np.ndarray:
    """Integer ramp, typically ``rampint(0, 1, n)`` for an identity index."""

    return (first + delta * _np.arange(n, dtype=_np.int64)).astype(_np.int64)


def fill(value: Any, n: int, dtype: Any = float) -> _np.ndarray:
    return _np.full(n, value, dtype=resolve_kind(dtype))


def zero(n: int, dtype: Any = float) -> _np.ndarray:
    return _np.zeros(n, dtype=resolve_kind(dtype))


def _strided(n: int, j: int, k: int, length: int, what: str) -> slice:
    if n < 0 or j < 0 or j > length or k < 1 or (n > 0 and j + (n - 1) * k >= length):
        raise IndexError(
            "cannot %s %d elements from offset %d with stride %d of length %d" % (what, n, j, k, length)
        )
    return slice(j, j + (n - 1) * k + 1 if n > 0 else j, k)


def copy(*args):
    """Copy a sequence or a regularly spaced part of it.

    ``copy(x)`` copies everything, ``copy(n, x)`` the first ``n`` elements,
    ``copy(n, j, x)`` the ``n`` elements starting at ``x[j]`` and
    ``copy(n, j, k, x)`` the ``n`` elements ``x[j], x[j+k], x[j+2k], ...``.
    The result has the same container type (array or list) as ``x``.
    """

    j, k = 0, 1
    if len(args) == 1:
        (x,) = args
        n = len(x)
    elif len(args) == 2:
        n, x = args
    elif len(args) == 3:
        n, j, x = args
    elif len(args) == 4:
        n, j, k, x = args
    else:
        raise TypeError("copy expects (x), (n, x), (n, j, x) or (n, j, k, x); got %d arguments" % (len(args),))
    check_sequence(x)
    part = x[_strided(n, j, k, len(x), "copy")]
    if isinstance(x, _np.ndarray):
        return part.copy()
    return list(part)


def copy_into(*args) -> None:
    """Copy elements of ``x`` into ``y`` in place.

    ``copy_into(n, jx, x, jy, y)`` copies ``x[jx:jx+n]`` to ``y[jy:jy+n]``;
    ``copy_into(n, jx, kx, x, jy, ky, y)`` reads ``x`` with stride ``kx`` and
    writes ``y`` with stride ``ky``.
    """

    if len(args) == 5:
        n, jx, x, jy, y = args
        kx = ky = 1
    elif len(args) == 7:
        n, jx, kx, x, jy, ky, y = args
    else:
        raise TypeError("copy_into expects 5 or 7 arguments; got %d" % (len(args),))
    check_sequence(x)
    check_sequence(y, "destination")
    source = _strided(n, jx, kx, len(x), "read")
    target = _strided(n, jy, ky, len(y), "write")
    y[target] = x[source]


def reverse(x):
    """Return a reversed copy of ``x``."""

    check_sequence(x)
    if isinstance(x, _np.ndarray):
        return x[::-1].copy()
    return x[::-1]


def _operand(a, name: str):
    """Return ``a`` as a checked array, or ``None`` for a scalar."""

    if isinstance(a, (_np.ndarray, list)):
        arr = _np.asarray(a)
        check_sequence(arr, name)
        return arr
    if isinstance(a, (int, float, _np.number)) and not isinstance(a, bool):
        return None
    raise TypeError("%s must be an array, a list or a number; got %s" % (name, type(a).__name__))


def _binary(ufunc, a, b) -> _np.ndarray:
    ax = _operand(a, "first operand")
    bx = _operand(b, "second operand")
    if ax is None and bx is None:
        raise TypeError("at least one operand of %s must be an array" % (ufunc.__name__,))
    if ax is not None and bx is not None:
        if ax.dtype != bx.dtype:
            raise TypeError("operands have different element kinds %s and %s" % (ax.dtype.name, bx.dtype.name))
        if len(ax) != len(bx):
            raise ValueError("operands have different lengths %d and %d" % (len(ax), len(bx)))
    dtype = ax.dtype if ax is not None else bx.dtype
    result = ufunc(a if ax is None else ax, b if bx is None else bx)
    return result.astype(dtype, copy=False)


def add(a, b) -> _np.ndarray:
    """Element-wise ``a + b``; either operand may be a scalar."""

    return _binary(_np.add, a, b)


def sub(a, b) -> _np.ndarray:
    return _binary(_np.subtract, a, b)


def mul(a, b) -> _np.ndarray:
    return _binary(_np.multiply, a, b)


def div(a, b) -> _np.ndarray:
    """Element-wise ``a / b``; integer kinds truncate toward zero."""

    return _binary(_np.true_divide, a, b)


def _floating(x, name: str) -> _np.ndarray:
    arr = _operand(x, name)
    if arr is None or arr.dtype.kind != "f":
        raise TypeError("%s needs a float32 or float64 array" % (name,))
    return arr


def sqrt(x) -> _np.ndarray:
    return _np.sqrt(_floating(x, "sqrt"))


def exp(x) -> _np.ndarray:
    return _np.exp(_floating(x, "exp"))


def log(x) -> _np.ndarray:
    return _np.log(_floating(x, "log"))


def pow(x, y) -> _np.ndarray:
    """Element-wise ``x ** y`` for a float array ``x`` and scalar or array ``y``."""

    arr = _floating(x, "pow")
    return _binary(_np.power, arr, y)


def _pairs(a) -> tuple[_np.ndarray, _np.ndarray]:
    arr = _np.asarray(a)
    return arr[:-1], arr[1:]


def is_increasing(a) -> bool:
    """``True`` if ``a`` is strictly increasing; empty and singletons are."""

    if len(a) < 2:
        return True
    left, right = _pairs(a)
    return bool(_np.all(left < right))


def is_decreasing(a) -> bool:
    if len(a) < 2:
        return True
    left, right = _pairs(a)
    return bool(_np.all(left > right))


def is_monotonic(a) -> bool:
    return is_increasing(a) or is_decreasing(a)


def _require_values(a, name: str) -> None:
    check_sequence(a)
    if len(a) == 0:
        raise ValueError("%s of an empty sequence is undefined" % (name,))


def min(a):
    _require_values(a, "min")
    if isinstance(a, _np.ndarray):
        return a.min().item()
    return _python_min(a)


def max(a):
    _require_values(a, "max")
    if isinstance(a, _np.ndarray):
        return a.max().item()
    return _python_max(a)


def argmin(a) -> int:
    """Index of the first occurrence of the minimum value."""

    _require_values(a, "argmin")
    if isinstance(a, _np.ndarray):
        return int(_np.argmin(a))
    return _python_min(range(len(a)), key=a.__getitem__)


def argmax(a) -> int:
    _require_values(a, "argmax")
    if isinstance(a, _np.ndarray):
        return int(_np.argmax(a))
    return _python_max(range(len(a)), key=a.__getitem__)


__all__ = [
    "add",
    "argmax",
    "argmin",
    "copy",
    "copy_into",
    "div",
    "exp",
    "fill",
    "is_decreasing",
    "is_increasing",
    "is_monotonic",
    "log",
    "max",
    "min",
    "mul",
    "pow",
    "ramp",
    "rampint",
    "reverse",
    "sqrt",
    "sub",
    "zero",
]
