import itertools

from iterkit.adaptors import cartesian_product
from iterkit.products import cons_tuples, multi_cartesian_product


def test_multi_cartesian_product_matches_product():
    pools = [[1, 2], "ab", (True, False, None)]
    result = list(multi_cartesian_product(pools))
    assert result == [list(t) for t in itertools.product(*pools)]


def test_multi_cartesian_product_count_is_product_of_lengths():
    pools = [range(3), range(4), range(2)]
    assert sum(1 for _ in multi_cartesian_product(pools)) == 3 * 4 * 2


def test_multi_cartesian_product_rightmost_fastest():
    result = list(multi_cartesian_product([[0, 1], [5, 6]]))
    assert result[0] == [0, 5]
    assert result[1] == [0, 6]
    assert result[-1] == [1, 6]


def test_multi_cartesian_product_empty_member():
    assert list(multi_cartesian_product([[1, 2], [], [3]])) == []


def test_multi_cartesian_product_no_iterables():
    assert list(multi_cartesian_product([])) == []


def test_multi_cartesian_product_single():
    assert list(multi_cartesian_product([iter([7, 8])])) == [[7], [8]]


def test_multi_cartesian_product_accepts_generators():
    pools = (iter(range(2)) for _ in range(3))
    result = list(multi_cartesian_product(pools))
    assert result == [list(t) for t in itertools.product(range(2), repeat=3)]


def test_cons_tuples_flattens_nested_product():
    a, b, c = [1, 2], "xy", [None, 0]
    nested = cartesian_product(cartesian_product(a, b), c)
    assert list(cons_tuples(nested)) == list(itertools.product(a, b, c))


def test_cons_tuples_simple():
    assert list(cons_tuples([((1, 2), 3), ((4, 5), 6)])) == [(1, 2, 3), (4, 5, 6)]


def test_cons_tuples_single_head():
    assert list(cons_tuples([(("a",), "b")])) == [("a", "b")]


def test_cons_tuples_empty():
    assert list(cons_tuples([])) == []