import pytest

from seqfind.core import Maybe, just, nothing


def test_just_and_nothing_equality():
    assert just(4) == Maybe.just(4)
    assert nothing() == Maybe.nothing()
    assert just(4) != just(5)
    assert just(None) != nothing()


def test_map_applies_to_present_value():
    assert just(2).map(lambda x: x * 10) == just(20)


def test_map_skips_function_on_nothing():
    calls = []

    def record(x):
        calls.append(x)
        return x

    assert nothing().map(record) == nothing()
    assert calls == []


def test_truthiness_and_flags():
    assert just(0)
    assert just(0).is_just
    assert not nothing()
    assert nothing().is_nothing


def test_get_with_default():
    assert just(3).get_with_default(7) == 3
    assert nothing().get_with_default(7) == 7


def test_unsafe_get_just_raises_on_nothing():
    assert just("a").unsafe_get_just() == "a"
    with pytest.raises(ValueError, match="Nothing"):
        nothing().unsafe_get_just()


def test_repr():
    assert repr(just(4)) == "Just(4)"
    assert repr(just("x")) == "Just('x')"
    assert repr(nothing()) == "Nothing"


def test_hashable():
    assert len({just(1), just(1), nothing()}) == 2


def test_fields_are_keyword_only():
    with pytest.raises(TypeError):
        Maybe(5)


def test_nothing_cannot_carry_a_value():
    with pytest.raises(ValueError, match="Nothing cannot hold a value"):
        Maybe(value=5)
    assert Maybe(value=5, is_just=True) == just(5)
