from collections import deque

import numpy as np

from seqfind.core import bind_1st_of_2, collect, is_equal, reverse, size_of_cont


def test_bind_1st_of_2_fixes_first_argument():
    minus_from_ten = bind_1st_of_2(lambda a, b: a - b, 10)
    assert minus_from_ten(3) == 7


def test_is_equal_predicate():
    equals_four = bind_1st_of_2(is_equal, 4)
    assert equals_four(4)
    assert not equals_four(5)


def test_reverse_does_not_touch_input():
    xs = [1, 2, 3]
    assert list(reverse(xs)) == [3, 2, 1]
    assert xs == [1, 2, 3]


def test_reverse_numpy_array():
    assert list(reverse(np.array([1, 2, 3]))) == [3, 2, 1]


def test_size_of_cont():
    assert size_of_cont("abc") == 3
    assert size_of_cont(deque([1, 2])) == 2


def test_collect_uses_output_factory():
    indices = [1, 4]
    assert collect(indices) is indices
    assert collect(indices, tuple) == (1, 4)
    assert collect(indices, deque) == deque([1, 4])
    np.testing.assert_array_equal(collect(indices, np.array), np.array([1, 4]))


class TestIsEqualWithNumpy:
    """Comparisons that numpy would broadcast."""

    def test_sequence_against_numpy_scalar(self):
        assert is_equal([1, 2], np.int64(1)) is False

    def test_equal_arrays(self):
        assert is_equal([1, 2], np.array([1, 2])) is True
        assert is_equal(np.array([1, 2]), np.array([1, 3])) is False

    def test_shape_mismatch(self):
        assert is_equal(np.array([1, 2]), np.array([1, 2, 3])) is False

    def test_plain_values_return_bool(self):
        assert is_equal(np.int64(3), 3) is True
        assert is_equal("a", "b") is False
