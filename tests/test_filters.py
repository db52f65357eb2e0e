import itertools

import pytest

from iterkit.adaptors import put_back
from iterkit.filters import (
    positions,
    take_while_ref,
    tuple_combinations,
    update,
    while_some,
)


def test_take_while_ref_puts_back_failing_element():
    it = put_back([1, 2, 3, 4, 1])
    taken = list(take_while_ref(it, lambda x: x < 3))
    assert taken == [1, 2]
    assert list(it) == [3, 4, 1]


def test_take_while_ref_all_taken():
    it = put_back("abc")
    assert list(take_while_ref(it, lambda c: True)) == ["a", "b", "c"]
    assert list(it) == []


def test_take_while_ref_none_taken():
    it = put_back([5, 6])
    assert list(take_while_ref(it, lambda x: x < 0)) == []
    assert list(it) == [5, 6]


def test_take_while_ref_requires_put_back():
    with pytest.raises(TypeError):
        take_while_ref(iter([1, 2]), lambda x: True)


def test_while_some_stops_at_first_none():
    it = iter([1, 2, None, 3])
    assert list(while_some(it)) == [1, 2]
    assert next(it) == 3


def test_while_some_keeps_falsy_values():
    assert list(while_some([0, "", False, None, 7])) == [0, "", False]


@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_tuple_combinations_matches_combinations(k):
    data = [1, 2, 3, 4, 5]
    result = list(tuple_combinations(data, k))
    assert result == list(itertools.combinations(data, k))
    assert all(len(t) == k for t in result)


def test_tuple_combinations_from_iris_columns():
    result = list(tuple_combinations(range(4), 2))
    assert result[0] == (0, 1)
    assert result[-1] == (2, 3)
    assert len(set(result)) == len(result)


def test_tuple_combinations_too_short():
    assert list(tuple_combinations([1, 2, 3], 4)) == []


def test_tuple_combinations_rejects_zero():
    with pytest.raises(ValueError):
        tuple_combinations([1, 2], 0)


def test_positions():
    data = [1, 2, 3, 4, 6, 7]
    result = list(positions(data, lambda x: x % 2 == 0))
    assert all(data[i] % 2 == 0 for i in result)
    assert len(result) == sum(1 for x in data if x % 2 == 0)
    assert result == sorted(result)


def test_positions_none_match():
    assert list(positions([1, 3, 5], lambda x: x > 10)) == []


def test_update_mutates_elements():
    data = [[1], [2]]
    result = list(update(data, lambda lst: lst.append(0)))
    assert result == [[1, 0], [2, 0]]
    assert result[0] is data[0]


def test_update_preserves_length_and_order():
    data = [{"n": i} for i in range(5)]
    result = list(update(data, lambda d: d.update(seen=True)))
    assert [d["n"] for d in result] == [0, 1, 2, 3, 4]
    assert all(d["seen"] for d in result)