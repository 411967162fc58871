import pytest

from abikit.util import pad_u32, sanitize_name


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "0000000000000000000000000000000000000000000000000000000000000000"),
        (1, "0000000000000000000000000000000000000000000000000000000000000001"),
        (0x100, "0000000000000000000000000000000000000000000000000000000000000100"),
        (0xFFFFFFFF, "00000000000000000000000000000000000000000000000000000000ffffffff"),
    ],
)
def test_pad_u32(value, expected):
    assert pad_u32(value) == bytes.fromhex(expected)


@pytest.mark.parametrize("value", [-1, 0x100000000])
def test_pad_u32_out_of_range(value):
    with pytest.raises(ValueError):
        pad_u32(value)


@pytest.mark.parametrize(
    ("name", "expected"),
    [("foo", "foo"), ("foo()", "foo"), ("()", ""), ("", ""), ("bar(uint256)", "bar")],
)
def test_sanitize_name(name, expected):
    assert sanitize_name(name) == expected