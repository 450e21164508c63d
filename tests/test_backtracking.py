import pytest

from dsabook.backtracking import n_bit_strings, n_char_strings


@pytest.mark.parametrize(
    "pool_size, length, expected",
    [
        (2, 3, ["000", "100", "010", "110", "001", "101", "011", "111"]),
        (3, 2, ["00", "10", "20", "01", "11", "21", "02", "12", "22"]),
        (0, 3, []),
        (10, 0, []),
    ],
)
def test_n_char_strings(pool_size, length, expected):
    assert sorted(n_char_strings(pool_size, length)) == sorted(expected)


def test_n_char_strings_order_first_position_fastest():
    assert n_char_strings(2, 3) == ["000", "100", "010", "110", "001", "101", "011", "111"]


def test_n_bit_strings_five():
    expected = [
        "00000", "00001", "00010", "00011", "00100", "00101", "00110", "00111",
        "01000", "01001", "01010", "01011", "01100", "01101", "01110", "01111",
        "10000", "10001", "10010", "10011", "10100", "10101", "10110", "10111",
        "11000", "11001", "11010", "11011", "11100", "11101", "11110", "11111",
    ]
    assert sorted(n_bit_strings(5)) == expected


def test_n_bit_strings_three():
    expected = ["000", "001", "010", "011", "100", "101", "110", "111"]
    assert sorted(n_bit_strings(3)) == expected


def test_n_bit_strings_zero():
    assert n_bit_strings(0) == []


def test_n_bit_strings_order():
    assert n_bit_strings(2) == ["00", "10", "01", "11"]


def test_counts_and_uniqueness():
    result = n_char_strings(4, 3)
    assert len(result) == 64
    assert len(set(result)) == 64


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        n_bit_strings(-1)
    with pytest.raises(ValueError):
        n_char_strings(3, -2)