import pytest

from dsabook.josephus import josephus_survivor


@pytest.mark.parametrize(
    "n, m, expected",
    [
        (7, 3, 5),
        (5, 2, 4),
        (10, 1, 1),
        (6, 7, 6),
    ],
)
def test_josephus_survivor(n, m, expected):
    assert josephus_survivor(n, m) == expected


def test_single_person_survives():
    assert josephus_survivor(1, 4) == 1


def test_survivor_is_within_circle():
    for n in range(1, 12):
        for m in range(1, 6):
            assert 1 <= josephus_survivor(n, m) <= n


@pytest.mark.parametrize("n", [0, -3])
def test_empty_circle_rejected(n):
    with pytest.raises(ValueError):
        josephus_survivor(n, 2)