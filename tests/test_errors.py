import pytest

from abikit.errors import AbiError, InvalidDataError, InvalidNameError
from abikit.reader import read_param_type


def test_invalid_name_keeps_the_name():
    err = InvalidNameError("uint256)")
    assert err.name == "uint256)"
    assert "uint256)" in str(err)
    assert err.reason is None


def test_invalid_name_reason_in_message():
    err = InvalidNameError("intx", "bad size")
    assert err.reason == "bad size"
    assert "bad size" in str(err)


def test_errors_share_a_base():
    with pytest.raises(AbiError) as info:
        read_param_type("tuple)")
    assert isinstance(info.value, InvalidNameError)
    assert not isinstance(info.value, InvalidDataError)
    assert info.value.name == "tuple)"
    assert issubclass(InvalidDataError, AbiError)
    assert not issubclass(InvalidDataError, InvalidNameError)


def test_invalid_data_message():
    err = InvalidDataError("length mismatch")
    assert str(err) == "length mismatch"


def test_reader_error_is_caught_as_base():
    with pytest.raises(AbiError) as info:
        read_param_type("address)")
    assert isinstance(info.value, InvalidNameError)
    assert info.value.name == "address)"