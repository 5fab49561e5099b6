import sys
from pathlib import Path

import numpy as np
import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from arraymath.kinds import ELEMENT_KINDS


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(314159)


@pytest.fixture(params=ELEMENT_KINDS)
def kind(request) -> str:
    return request.param


@pytest.fixture
def make_values(rng):
    def _make(n: int, kind: str, spread: int = 100) -> np.ndarray:
        if kind.startswith("float"):
            return (rng.standard_normal(n) * spread).astype(kind)
        return rng.integers(-spread, spread, size=n).astype(kind)

    return _make
