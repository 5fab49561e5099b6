"""Median and weighted median of a fixed number of values.

The unweighted median uses the quickselect engine on a private copy, so the
caller's values are never reordered.  The weighted median ``x`` minimises

    f(x) = sum_i w[i] * |x[i] - x|

for positive weights ``w``.  With ``wh`` half the total weight, ``x`` is a
minimiser when the weight strictly left of it and the weight strictly right of
it are each at most ``wh``.  When the slope of ``f`` is zero between two
consecutive values, both minimise ``f`` and their average is returned; this is
always the case for an even count of equal weights, so the weighted median
then agrees with the ordinary median.
"""

from __future__ import annotations

import logging
from typing import Any, List

import numpy as _np

from . import _sort_engine

LOGGER = logging.getLogger(__name__)


def _as_values(values: Any) -> List[Any]:
    if isinstance(values, _np.ndarray):
        return values.tolist()
    return list(values)


class MedianFinder:
    """Computes medians of sequences that all have ``n`` values."""

    def __init__(self, n: int):
        if n < 1:
            raise ValueError("MedianFinder needs at least one value; got n=%d" % (n,))
        self._n = int(n)

    @property
    def n(self) -> int:
        return self._n

    def _check_length(self, values: Any, name: str) -> None:
        if len(values) != self._n:
            raise ValueError("length of %s is %d; expected %d" % (name, len(values), self._n))

    def find_median(self, x, w=None) -> float:
        """Median of ``x``, or weighted median when weights ``w`` are given."""

        self._check_length(x, "x")
        if w is None:
            return self._median(_as_values(x))
        self._check_length(w, "w")
        return self._weighted_median(_as_values(x), _as_values(w))

    def _median(self, x: List[Any]) -> float:
        n = self._n
        k = (n - 1) // 2
        _sort_engine.partial_sort(k, x)
        xmed = x[k]
        if n % 2 == 0:
            xmed = 0.5 * (xmed + min(x[k + 1 :]))
        return float(xmed)

    def _weighted_median(self, x: List[Any], w: List[Any]) -> float:
        if any(wi <= 0 for wi in w):
            raise ValueError("weights must be positive")
        _sort_engine.quick_sort(x, w)
        wh = 0.5 * sum(w)
        wl = 0.0
        for k in range(self._n):
            wl += w[k]
            if wl < wh:
                continue
            if wl == wh and k + 1 < self._n:
                LOGGER.debug("Weighted median falls between x[%d] and x[%d]", k, k + 1)
                return float(0.5 * (x[k] + x[k + 1]))
            return float(x[k])
        return float(x[-1])


__all__ = ["MedianFinder"]
