"""Sort test inputs and timing reports.

``generate_inputs`` reproduces the test-input families from Bentley and
McIlroy's "Engineering a sort function": five distributions (sawtooth, rand,
stagger, plateau, shuffle) for every modulus ``m = 1, 2, 4, ... < 2n``, each
seen in six orders (copy, reversed, first half reversed, second half reversed,
sorted, dithered).
"""

from __future__ import annotations

import json
import logging
import os
import statistics
import time
from typing import Dict, Iterator, List, Mapping, Sequence, Tuple

import numpy as _np

from . import _sort_engine
from .arrays import reverse

LOGGER = logging.getLogger(__name__)

plt = None  # type: ignore[assignment]

DISTRIBUTIONS = ("sawtooth", "rand", "stagger", "plateau", "shuffle")
ORDERS = ("copy", "reverse", "reverse_half1", "reverse_half2", "sort", "dither")


def _distribution(dist: str, n: int, m: int, rng: _np.random.Generator) -> _np.ndarray:
    x = _np.empty(n, dtype=_np.float32)
    j, k = 0, 1
    for i in range(n):
        if dist == "sawtooth":
            ix = i % m
        elif dist == "rand":
            ix = int(rng.integers(-m + 1, m))
        elif dist == "stagger":
            ix = (i * m + i) % n
        elif dist == "plateau":
            ix = min(i, m)
        elif dist == "shuffle":
            if int(rng.integers(0, m)) != 0:
                j += 2
                ix = j
            else:
                k += 2
                ix = k
        else:
            raise ValueError("unknown distribution %r" % (dist,))
        x[i] = ix
    return x


def _ordered(order: str, x: _np.ndarray) -> _np.ndarray:
    n = len(x)
    h = n // 2
    y = x.copy()
    if order == "copy":
        pass
    elif order == "reverse":
        y = reverse(x)
    elif order == "reverse_half1":
        y[:h] = reverse(x[:h])
    elif order == "reverse_half2":
        y[h : 2 * h] = reverse(x[h : 2 * h])
    elif order == "sort":
        y.sort()
    elif order == "dither":
        y += (_np.arange(n) % 5).astype(y.dtype)
    else:
        raise ValueError("unknown order %r" % (order,))
    return y


def generate_inputs(n: int, seed: int = 314159) -> Iterator[Tuple[str, _np.ndarray]]:
    """Yield ``(label, array)`` pairs covering every distribution and order."""

    rng = _np.random.default_rng(seed)
    m = 1
    while m < 2 * n:
        for dist in DISTRIBUTIONS:
            x = _distribution(dist, n, m, rng)
            for order in ORDERS:
                yield f"{dist}/m={m}/{order}", _ordered(order, x)
        m *= 2


class _CountingKey:
    """Float wrapper that counts comparisons made against it."""

    __slots__ = ("value", "counter")

    def __init__(self, value: float, counter: List[int]):
        self.value = value
        self.counter = counter

    def _cmp(self, other: "_CountingKey") -> float:
        self.counter[0] += 1
        return self.value - other.value

    def __lt__(self, other):
        return self._cmp(other) < 0

    def __le__(self, other):
        return self._cmp(other) <= 0

    def __gt__(self, other):
        return self._cmp(other) > 0

    def __ge__(self, other):
        return self._cmp(other) >= 0

    def __eq__(self, other):
        return self._cmp(other) == 0

    __hash__ = None


def count_comparisons(values: Sequence[float]) -> Tuple[int, List[float]]:
    """Sort ``values`` with the engine and return the comparison count."""

    counter = [0]
    keys = [_CountingKey(float(v), counter) for v in values]
    _sort_engine.quick_sort(keys)
    return counter[0], [key.value for key in keys]


def _time_ms(func, data: _np.ndarray, runs: int) -> List[float]:
    latencies: List[float] = []
    for _ in range(max(1, runs)):
        work = data.copy()
        start = time.perf_counter()
        func(work)
        latencies.append((time.perf_counter() - start) * 1000.0)
    return latencies


def _engine_sort(x: _np.ndarray) -> None:
    work = x.tolist()
    _sort_engine.quick_sort(work)
    x[:] = work


def run_benchmark(
    *,
    sizes: Sequence[int] = (1000, 10000),
    runs: int = 3,
    output_dir: str | None = "reports",
    seed: int = 5042,
) -> Dict[str, object]:
    """Time the engine against ``numpy.sort`` and check both results agree."""

    rng = _np.random.default_rng(seed)
    results: Dict[str, Dict[str, object]] = {}
    for n in sizes:
        data = rng.standard_normal(n)
        engine_ms = _time_ms(_engine_sort, data, runs)
        numpy_ms = _time_ms(lambda arr: arr.sort(kind="quicksort"), data, runs)
        check = data.copy()
        _engine_sort(check)
        comparisons, _ = count_comparisons(data.tolist())
        results[str(n)] = {
            "engine_ms": float(statistics.mean(engine_ms)),
            "numpy_ms": float(statistics.mean(numpy_ms)),
            "comparisons": comparisons,
            "agrees": bool(_np.array_equal(check, _np.sort(data))),
        }
        LOGGER.info("n=%d engine=%.3fms numpy=%.3fms", n, results[str(n)]["engine_ms"], results[str(n)]["numpy_ms"])

    metrics: Dict[str, object] = {"seed": seed, "runs": runs, "sizes": results}
    if output_dir is not None:
        os.makedirs(output_dir, exist_ok=True)
        json_path = os.path.join(output_dir, "sort_benchmark.json")
        with open(json_path, "w", encoding="utf-8") as fh:
            json.dump(metrics, fh, indent=2)
        _write_markdown_report(metrics, os.path.join(output_dir, "sort_benchmark.md"))
    return metrics


def _write_markdown_report(metrics: Mapping[str, object], path: str) -> None:
    sizes = metrics.get("sizes", {})
    lines = ["# arraymath sort benchmark", ""]
    lines.append(f"- Seed: {metrics.get('seed')}")
    lines.append(f"- Runs per size: {metrics.get('runs')}")
    lines.append("")
    lines.append("| n | engine (ms) | numpy (ms) | comparisons | agrees |")
    lines.append("| --- | --- | --- | --- | --- |")
    if isinstance(sizes, Mapping):
        for n, info in sizes.items():
            if not isinstance(info, Mapping):
                continue
            lines.append(
                "| {n} | {engine:.3f} | {numpy:.3f} | {cmp} | {ok} |".format(
                    n=n,
                    engine=info.get("engine_ms", 0.0),
                    numpy=info.get("numpy_ms", 0.0),
                    cmp=info.get("comparisons", 0),
                    ok="yes" if info.get("agrees") else "no",
                )
            )
    lines.append("")
    with open(path, "w", encoding="utf-8") as handle:
        handle.write("\n".join(lines))


def _ensure_matplotlib() -> None:
    global plt
    if plt is not None:
        return
    try:
        import matplotlib  # type: ignore

        matplotlib.use("Agg")
        import matplotlib.pyplot as _plt  # type: ignore
    except ImportError as exc:  # pragma: no cover - dependency guard
        raise RuntimeError(
            "Matplotlib is required to plot sort benchmarks. Install it via 'pip install arraymath[plot]'."
        ) from exc
    plt = _plt


def plot_benchmark(metrics: Mapping[str, object], path: str) -> str:
    """Plot mean sort time against array length and save the figure."""

    _ensure_matplotlib()
    assert plt is not None
    sizes = metrics.get("sizes", {})
    if not isinstance(sizes, Mapping) or not sizes:
        raise ValueError("metrics contain no benchmarked sizes")
    lengths = sorted(int(n) for n in sizes)
    fig, ax = plt.subplots(figsize=(10, 6))
    for key, label in (("engine_ms", "quicksort engine"), ("numpy_ms", "numpy.sort")):
        ax.plot(lengths, [sizes[str(n)][key] for n in lengths], marker="o", label=label)
    ax.set_xlabel("Array size")
    ax.set_ylabel("Time, ms")
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.grid(True)
    ax.legend()
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    LOGGER.info("Wrote benchmark plot to %s", path)
    return path


__all__ = [
    "DISTRIBUTIONS",
    "ORDERS",
    "count_comparisons",
    "generate_inputs",
    "plot_benchmark",
    "run_benchmark",
]
