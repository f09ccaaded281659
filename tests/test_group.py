import pytest

from miraicore.utils.group import to_group_code, to_group_uin


def test_small_group_code_maps_into_202_block():
    assert to_group_uin(123456) == 202123456


def test_group_uin_maps_back_to_small_code():
    assert to_group_code(202123456) == 123456


@pytest.mark.parametrize(
    "code",
    [
        5,
        10_999_999,
        11_000_001,
        19_500_000,
        20_000_000,
        66_123_456,
        67_000_000,
        156_999_999,
        157_000_001,
        209_000_000,
        210_000_000,
        309_999_999,
        310_000_000,
        335_555_555,
        336_000_000,
        386_000_001,
        387_000_000,
        499_999_999,
    ],
)
def test_round_trip(code):
    assert to_group_code(to_group_uin(code)) == code


@pytest.mark.parametrize("code", [1_234_567, 50_000_042, 420_000_000])
def test_low_six_digits_preserved(code):
    assert to_group_uin(code) % 1_000_000 == code % 1_000_000


def test_out_of_range_is_unchanged():
    code = 900_123_456
    assert to_group_uin(code) == code
    assert to_group_code(code) == code