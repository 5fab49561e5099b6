"""Pure-Python three-way quicksort engine.

The functions here operate on plain Python lists and import nothing from the
rest of the package, so ``sorting``, ``median`` and ``benchmark`` all call into
them directly.  Every routine accepts an optional companion list ``w`` that is
permuted in lockstep with the keys ``x``; index sorts pass the index
permutation as the companion and a copy of the dereferenced values as keys.

Adapted from Bentley, J.L., and McIlroy, M.D., 1993, Engineering a sort
function, Software -- Practice and Experience, v. 23(11), p. 1249-1265.
"""

from __future__ import annotations

from typing import Any, List, NamedTuple, Optional

NSMALL_SORT = 7
NLARGE_SORT = 40


class PivotRegion(NamedTuple):
    """Inclusive bounds of the run of elements equal to the pivot."""

    lo: int
    hi: int


def check_range(n: int, p: int, q: int) -> None:
    if p < 0 or q >= n or p > q + 1:
        raise IndexError("range [%d, %d] is invalid for length %d" % (p, q, n))


def _swap(x: List[Any], w: Optional[List[Any]], i: int, j: int) -> None:
    x[i], x[j] = x[j], x[i]
    if w is not None:
        w[i], w[j] = w[j], w[i]


def _swap_run(x: List[Any], w: Optional[List[Any]], i: int, j: int, n: int) -> None:
    for _ in range(n):
        _swap(x, w, i, j)
        i += 1
        j += 1


def _med3(x: List[Any], i: int, j: int, k: int) -> int:
    xi, xj, xk = x[i], x[j], x[k]
    if xi < xj:
        return j if xj < xk else (k if xi < xk else i)
    return j if xj > xk else (k if xi > xk else i)


def insertion_sort(x: List[Any], p: int, q: int, w: Optional[List[Any]] = None) -> None:
    """Sort ``x[p..q]`` (inclusive) by adjacent swaps."""

    for i in range(p + 1, q + 1):
        j = i
        while j > p and x[j - 1] > x[j]:
            _swap(x, w, j, j - 1)
            j -= 1


def _choose_pivot(x: List[Any], p: int, q: int) -> int:
    n = q - p + 1
    k = (p + q) // 2
    if n > NSMALL_SORT:
        first = p
        last = q
        if n > NLARGE_SORT:
            s = n // 8
            first = _med3(x, first, first + s, first + 2 * s)
            k = _med3(x, k - s, k, k + s)
            last = _med3(x, last - 2 * s, last - s, last)
        k = _med3(x, first, k, last)
    return k


def partition(x: List[Any], p: int, q: int, w: Optional[List[Any]] = None) -> PivotRegion:
    """Three-way partition of ``x[p..q]`` around a sampled pivot.

    On return ``x[p..lo-1] < y``, ``x[lo..hi] == y`` and ``x[hi+1..q] > y``
    where ``y`` is the pivot value.
    """

    y = x[_choose_pivot(x, p, q)]
    # x[p..front-1] == y, x[front..lt-1] < y, x[gt+1..back] > y, x[back+1..q] == y
    front = lt = p
    gt = back = q
    while True:
        while lt <= gt and x[lt] <= y:
            if x[lt] == y:
                _swap(x, w, front, lt)
                front += 1
            lt += 1
        while gt >= lt and x[gt] >= y:
            if x[gt] == y:
                _swap(x, w, gt, back)
                back -= 1
            gt -= 1
        if lt > gt:
            break
        _swap(x, w, lt, gt)
        lt += 1
        gt -= 1
    r = min(front - p, lt - front)
    s = min(back - gt, q - back)
    _swap_run(x, w, p, lt - r, r)
    _swap_run(x, w, lt, q + 1 - s, s)
    return PivotRegion(p + (lt - front), q - (back - gt))


def quick_sort_range(x: List[Any], p: int, q: int, w: Optional[List[Any]] = None) -> None:
    # Recurse into the shorter side and loop on the longer one.
    while q - p > NSMALL_SORT:
        lo, hi = partition(x, p, q, w)
        if lo - p < q - hi:
            if p < lo - 1:
                quick_sort_range(x, p, lo - 1, w)
            p = hi + 1
        else:
            if hi + 1 < q:
                quick_sort_range(x, hi + 1, q, w)
            q = lo - 1
    insertion_sort(x, p, q, w)


def quick_sort(x: List[Any], w: Optional[List[Any]] = None) -> None:
    n = len(x)
    if n < NSMALL_SORT:
        insertion_sort(x, 0, n - 1, w)
    else:
        quick_sort_range(x, 0, n - 1, w)


def partial_sort_range(k: int, x: List[Any], p: int, q: int, w: Optional[List[Any]] = None) -> None:
    """Quickselect: put the k-th smallest of ``x[p..q]`` at ``x[k]``."""

    while q - p >= NSMALL_SORT:
        lo, hi = partition(x, p, q, w)
        if k < lo:
            q = lo - 1
        elif k > hi:
            p = hi + 1
        else:
            return
    insertion_sort(x, p, q, w)


def partial_sort(k: int, x: List[Any], w: Optional[List[Any]] = None) -> None:
    partial_sort_range(k, x, 0, len(x) - 1, w)


__all__ = [
    "NLARGE_SORT",
    "NSMALL_SORT",
    "PivotRegion",
    "check_range",
    "insertion_sort",
    "partial_sort",
    "partial_sort_range",
    "partition",
    "quick_sort",
    "quick_sort_range",
]
