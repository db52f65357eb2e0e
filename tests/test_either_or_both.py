import pytest

from iterkit.either_or_both import Both, EitherOrBoth, Left, Right


def test_or_values_examples():
    assert Both("tree", 1).or_values("stone", 5) == ("tree", 1)
    assert Left("tree").or_values("stone", 5) == ("tree", 5)
    assert Right(1).or_values("stone", 5) == ("stone", 1)


def test_or_else_examples():
    k = 10
    assert Both("tree", 1).or_else(lambda: "stone", lambda: 2 * k) == ("tree", 1)
    assert Left("tree").or_else(lambda: "stone", lambda: 2 * k) == ("tree", 20)
    assert Right(1).or_else(lambda: "stone", lambda: 2 * k) == ("stone", 1)


def test_or_else_is_lazy():
    calls = []
    assert Both("tree", 1).or_else(lambda: calls.append("l"), lambda: calls.append("r")) == ("tree", 1)
    assert calls == []


def test_or_default_uses_none():
    assert Left("tree").or_default() == ("tree", None)
    assert Right(1).or_default() == (None, 1)
    assert Both("tree", 1).or_default() == ("tree", 1)


@pytest.mark.parametrize(
    "value, has_left, has_right, is_left, is_right, is_both",
    [
        (Left("tree"), True, False, True, False, False),
        (Right(1), False, True, False, True, False),
        (Both("tree", 1), True, True, False, False, True),
    ],
)
def test_predicates(value, has_left, has_right, is_left, is_right, is_both):
    assert value.has_left() is has_left
    assert value.has_right() is has_right
    assert value.is_left() is is_left
    assert value.is_right() is is_right
    assert value.is_both() is is_both


def test_accessors():
    assert Left("tree").left() == "tree"
    assert Left("tree").right() is None
    assert Right(1).right() == 1
    assert Right(1).left() is None
    assert Both("tree", 1).left() == "tree"
    assert Both("tree", 1).right() == 1
    assert Both("tree", 1).both() == ("tree", 1)
    assert Left("tree").both() is None


def test_flip_is_an_involution():
    for value in (Left("tree"), Right(1), Both("tree", 1)):
        assert value.flip().flip() == value
    assert Both("tree", 1).flip() == Both(1, "tree")
    assert Left("tree").flip() == Right("tree")


def test_map_left_and_right():
    pair = lambda x: (x, x)
    assert Left("tree").map_left(pair) == Left(("tree", "tree"))
    assert Right(1).map_left(pair) == Right(1)
    assert Both("tree", 1).map_right(pair) == Both("tree", (1, 1))
    assert Left("tree").map_right(pair) == Left("tree")


def test_map_any():
    value = Both("tree", 1).map_any(lambda a: [a], lambda b: (b,))
    assert value == Both(["tree"], (1,))
    assert Right(1).map_any(lambda a: [a], lambda b: (b,)) == Right((1,))


def test_and_then():
    assert Both("tree", 1).left_and_then(Left) == Left("tree")
    assert Right(1).left_and_then(Left) == Right(1)
    assert Both("tree", 1).right_and_then(Right) == Right(1)
    assert Left("tree").right_and_then(Right) == Left("tree")


def test_reduce():
    assert Both(1, 5).reduce(max) == 5
    assert Left(1).reduce(max) == 1
    assert Right(5).reduce(max) == 5


def test_variants_are_hashable_and_distinct():
    values = {Left(1), Right(1), Both(1, 1), Left(1)}
    assert len(values) == 3
    assert Left(1) != Right(1)
    assert isinstance(Both(1, 1), EitherOrBoth)