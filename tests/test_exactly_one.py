import pytest

from iterkit.exactly_one import ExactlyOneError, exactly_one


def test_single_element():
    assert exactly_one([5]) == 5
    assert exactly_one(x for x in ["only"]) == "only"


def test_empty_raises():
    with pytest.raises(ExactlyOneError) as info:
        exactly_one([])
    assert str(info.value) == "got zero elements when exactly one was expected"
    assert list(info.value) == []


def test_too_many_raises_and_keeps_elements():
    with pytest.raises(ExactlyOneError) as info:
        exactly_one([1, 2, 3, 4])
    assert str(info.value) == "got at least 2 elements when exactly one was expected"
    assert list(info.value) == [1, 2, 3, 4]


def test_error_restores_generator_elements():
    source = (n for n in range(5))
    with pytest.raises(ExactlyOneError) as info:
        exactly_one(source)
    assert list(info.value) == list(range(5))


def test_error_is_a_value_error():
    with pytest.raises(ValueError):
        exactly_one(["a", "b"])


def test_two_elements_then_exhausted():
    with pytest.raises(ExactlyOneError) as info:
        exactly_one(["a", "b"])
    err = info.value
    assert next(err) == "a"
    assert next(err) == "b"
    with pytest.raises(StopIteration):
        next(err)