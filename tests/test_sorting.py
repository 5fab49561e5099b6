from __future__ import annotations

import numpy as np
import pytest

import arraymath as am
from arraymath.arrays import rampint


def test_sort_scenario():
    s = [5, 1, 4, 2, 3]
    am.sort(s)
    assert s == [1, 2, 3, 4, 5]


def test_partial_sort_scenario():
    s = [5, 1, 4, 2, 3]
    am.partial_sort(2, s)
    assert s[2] == 3
    assert set(s[:2]) == {1, 2}
    assert set(s[3:]) == {4, 5}


def test_duplicates_scenario():
    s = np.array([2, 2, 2, 2, 1], dtype=np.int16)
    am.quick_sort(s)
    assert s.tolist() == [1, 2, 2, 2, 2]


@pytest.mark.parametrize("n", [0, 1, 2, 6, 7, 8, 41, 500])
def test_quick_sort_every_kind(kind: str, make_values, n: int):
    x = make_values(n, kind)
    expected = np.sort(x)
    am.quick_sort(x)
    assert x.dtype == np.dtype(kind)
    np.testing.assert_array_equal(x, expected)


def test_quick_sort_is_idempotent(make_values):
    x = make_values(300, "float64")
    am.quick_sort(x)
    once = x.copy()
    am.quick_sort(x)
    np.testing.assert_array_equal(x, once)


def test_quick_sort_sorts_in_place_not_a_copy(make_values):
    base = make_values(100, "int32")
    view = base[10:60]
    am.quick_sort(view)
    assert np.all(base[10:59] <= base[11:60])


def test_quick_sort_generic_list_of_strings():
    words = ["pear", "apple", "fig", "kiwi", "banana", "cherry", "date", "grape", "lime"]
    am.quick_sort(words)
    assert words == sorted(words)


@pytest.mark.parametrize("n", [0, 1, 5, 64, 257])
def test_index_sort_equivalence(kind: str, make_values, n: int):
    x = make_values(n, kind, spread=10)
    before = x.copy()
    index = rampint(0, 1, n)
    am.quick_index_sort(x, index)
    np.testing.assert_array_equal(x, before)
    np.testing.assert_array_equal(x[index], np.sort(x))
    assert sorted(index.tolist()) == list(range(n))


def test_index_sort_accepts_any_starting_permutation(rng, make_values):
    x = make_values(120, "float32")
    index = rng.permutation(120)
    am.quick_index_sort(x, index)
    np.testing.assert_array_equal(x[index], np.sort(x))


def test_index_sort_with_lists():
    x = [3.0, 1.0, 2.0]
    index = [0, 1, 2]
    am.index_sort(x, index)
    assert index == [1, 2, 0]
    assert x == [3.0, 1.0, 2.0]


@pytest.mark.parametrize("n", [1, 7, 8, 100, 333])
def test_partial_sort_every_k(kind: str, make_values, n: int):
    x = make_values(n, kind, spread=20)
    expected = np.sort(x)
    for k in sorted({0, n // 4, n // 2, n - 1}):
        y = x.copy()
        am.quick_partial_sort(k, y)
        assert y[k] == expected[k]
        assert np.all(y[:k] <= y[k])
        assert np.all(y[k + 1 :] >= y[k])
        np.testing.assert_array_equal(np.sort(y), expected)


@pytest.mark.parametrize("n", [1, 9, 150])
def test_partial_index_sort(kind: str, make_values, n: int):
    x = make_values(n, kind, spread=20)
    before = x.copy()
    expected = np.sort(x)
    for k in sorted({0, n // 3, n - 1}):
        index = rampint(0, 1, n)
        am.quick_partial_index_sort(k, x, index)
        assert x[index[k]] == expected[k]
        assert np.all(x[index[:k]] <= x[index[k]])
        assert np.all(x[index[k + 1 :]] >= x[index[k]])
        assert sorted(index.tolist()) == list(range(n))
    np.testing.assert_array_equal(x, before)


def test_insertion_sort_public_range():
    x = np.array([9.0, 4.0, 3.0, 2.0, 1.0])
    am.insertion_sort(x, 1, 3)
    assert x.tolist() == [9.0, 2.0, 3.0, 4.0, 1.0]
    am.insertion_sort(x)
    assert x.tolist() == [1.0, 2.0, 3.0, 4.0, 9.0]


def test_insertion_sort_rejects_inverted_range():
    with pytest.raises(IndexError):
        am.insertion_sort([3, 2, 1], 2, 0)


def test_empty_sequences_are_noops():
    empty = np.array([], dtype=np.float64)
    am.quick_sort(empty)
    am.quick_index_sort(empty, np.array([], dtype=np.int64))
    am.quick_sort([])
    assert empty.size == 0


@pytest.mark.parametrize("k", [-1, 5, 100])
def test_partial_sort_rejects_out_of_range_k(k: int):
    with pytest.raises(IndexError):
        am.quick_partial_sort(k, [5, 1, 4, 2, 3])
    with pytest.raises(IndexError):
        am.quick_partial_index_sort(k, [5, 1, 4, 2, 3], [0, 1, 2, 3, 4])


def test_partial_sort_on_empty_sequence_fails_fast():
    with pytest.raises(IndexError):
        am.quick_partial_sort(0, [])


def test_index_length_mismatch():
    with pytest.raises(ValueError):
        am.quick_index_sort(np.arange(4.0), np.arange(3))


def test_index_must_be_a_permutation():
    with pytest.raises(ValueError):
        am.quick_index_sort(np.arange(4.0), np.array([0, 1, 1, 3]))
    with pytest.raises(ValueError):
        am.quick_index_sort(np.arange(4.0), np.array([0, 1, 2, 4]))


def test_index_must_hold_integers():
    with pytest.raises(TypeError):
        am.quick_index_sort(np.arange(3.0), np.arange(3.0))


@pytest.mark.parametrize("dtype", ["uint8", "uint32", "uint64", "int16", "int64"])
def test_index_accepts_any_integer_dtype(dtype: str):
    x = np.array([3.0, 1.0, 2.0])
    index = np.arange(3, dtype=dtype)
    am.quick_index_sort(x, index)
    assert index.dtype == np.dtype(dtype)
    assert index.tolist() == [1, 2, 0]
    am.quick_partial_index_sort(0, x, index)
    assert index[0] == 1
    assert x.tolist() == [3.0, 1.0, 2.0]


def test_unsigned_index_out_of_range_rejected():
    with pytest.raises(ValueError):
        am.quick_index_sort(np.arange(3.0), np.array([0, 1, 3], dtype=np.uint32))


def test_index_rejects_two_dimensional_array():
    with pytest.raises(ValueError):
        am.quick_index_sort(np.arange(4.0), np.arange(4).reshape(2, 2))


def test_index_duplicate_detected_in_large_permutation(rng):
    n = 100000
    index = rng.permutation(n)
    index[0], index[1] = index[1], index[1]
    with pytest.raises(ValueError):
        am.quick_index_sort(np.zeros(n), index)


def test_unsupported_dtype_rejected():
    with pytest.raises(TypeError):
        am.quick_sort(np.arange(5, dtype=np.uint8))
    with pytest.raises(TypeError):
        am.quick_sort(np.array([1 + 2j, 3 + 0j]))


def test_two_dimensional_array_rejected():
    with pytest.raises(ValueError):
        am.quick_sort(np.zeros((2, 3)))


def test_tuple_rejected():
    with pytest.raises(TypeError):
        am.quick_sort((3, 2, 1))
