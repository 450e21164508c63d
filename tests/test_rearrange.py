import pytest

from dsabook.rearrange import is_palindrome, partition, reorder, rotate_right
from dsabook.singly import from_values, to_values


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3, 4, 5], [1, 5, 2, 4, 3]),
        ([1, 2, 3, 4], [1, 4, 2, 3]),
        ([1, 2, 3], [1, 3, 2]),
        ([1, 2], [1, 2]),
        ([1], [1]),
        ([], []),
    ],
)
def test_reorder(values, expected):
    assert to_values(reorder(from_values(values))) == expected


@pytest.mark.parametrize(
    "values, k, expected",
    [
        ([1, 2, 3, 4, 5], 2, [4, 5, 1, 2, 3]),
        ([1, 2, 3, 4, 5], 3, [3, 4, 5, 1, 2]),
        ([1, 2, 3, 4, 5], 5, [1, 2, 3, 4, 5]),
        ([1, 2, 3, 4, 5], 1, [5, 1, 2, 3, 4]),
        ([1, 2, 3, 4, 5], 0, [1, 2, 3, 4, 5]),
        ([], 3, []),
    ],
)
def test_rotate_right(values, k, expected):
    assert to_values(rotate_right(from_values(values), k)) == expected


def test_rotate_right_wraps_past_length():
    assert to_values(rotate_right(from_values([1, 2, 3, 4, 5]), 7)) == [4, 5, 1, 2, 3]


def test_rotate_right_rejects_negative():
    with pytest.raises(ValueError):
        rotate_right(from_values([1, 2, 3]), -1)


@pytest.mark.parametrize(
    "values, k, expected",
    [
        ([1, 4, 3, 2, 5, 2], 3, [1, 2, 2, 4, 3, 5]),
        ([1, 4, 3, 2, 5, 2], 5, [1, 4, 3, 2, 2, 5]),
        ([1, 4, 3, 2, 5, 2], 1, [1, 4, 3, 2, 5, 2]),
        ([1, 4, 3, 2, 5, 2], 2, [1, 4, 3, 2, 5, 2]),
        ([1, 4, 3, 2, 5, 2], 4, [1, 3, 2, 2, 4, 5]),
        ([], 3, []),
        ([1, 2, 2], 3, [1, 2, 2]),
    ],
)
def test_partition(values, k, expected):
    assert to_values(partition(from_values(values), k)) == expected


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3, 2, 1], True),
        ([1], True),
        ([1, 2, 3, 2, 2], False),
        ([1, 2], False),
        ([], True),
        ([4, 7, 7, 4], True),
    ],
)
def test_is_palindrome(values, expected):
    assert is_palindrome(from_values(values)) is expected


@pytest.mark.parametrize("values", [[1, 2, 3, 2, 1], [1, 2, 3, 2, 2], [1, 2], [4, 7, 7, 4]])
def test_is_palindrome_leaves_list_intact(values):
    head = from_values(values)
    is_palindrome(head)
    assert to_values(head) == values