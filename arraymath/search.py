"""Binary search over monotonic sequences."""

from __future__ import annotations

from typing import Any, Sequence


def binary_search(a: Sequence[Any], x: Any, hint: int | None = None) -> int:
    """Search the monotonic sequence ``a`` for the value ``x``.

    The direction is taken from the first two elements: ``a`` is treated as
    increasing if it has fewer than two elements or ``a[0] < a[1]``, and as
    decreasing otherwise.  ``a`` must not contain duplicate values; this is not
    checked and violating it gives unspecified results.

    Returns the index ``i`` with ``a[i] == x`` if there is one.  Otherwise
    returns ``-(i + 1)`` where ``i`` is the index at which ``x`` would be
    inserted to keep ``a`` monotonic, so that ``-(result) - 1`` recovers it.

    ``hint`` is a previous result of this function (an index, or an encoded
    insertion point) used to start the search.  The search gallops outward
    from the hint with doubling steps before bisecting, which is cheap when
    successive queries are close together.  A hint of ``len(a)`` or more is
    ignored.  The hint never changes the result.
    """

    n = len(a)
    nm1 = n - 1
    low = 0
    high = nm1
    increasing = n < 2 or a[0] < a[1]
    if hint is not None and hint < n:
        high = hint if hint >= 0 else -(hint + 1)
        high = min(high, nm1)
        low = high - 1
        step = 1
        if increasing:
            while 0 < low and x < a[low]:
                high = low
                low -= step
                step += step
            while high < nm1 and a[high] < x:
                low = high
                high += step
                step += step
        else:
            while 0 < low and x > a[low]:
                high = low
                low -= step
                step += step
            while high < nm1 and a[high] > x:
                low = high
                high += step
                step += step
        low = max(low, 0)
        high = min(high, nm1)
    if increasing:
        while low <= high:
            mid = (low + high) >> 1
            amid = a[mid]
            if amid < x:
                low = mid + 1
            elif amid > x:
                high = mid - 1
            else:
                return mid
    else:
        while low <= high:
            mid = (low + high) >> 1
            amid = a[mid]
            if amid > x:
                low = mid + 1
            elif amid < x:
                high = mid - 1
            else:
                return mid
    return -(low + 1)


__all__ = ["binary_search"]
