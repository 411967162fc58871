import pytest

from abikit.param_type import Kind, ParamType, write_for_abi, write_param

P = ParamType


@pytest.mark.parametrize(
    "param, expected",
    [
        (P.address(), "address"),
        (P.bytes_(), "bytes"),
        (P.fixed_bytes(32), "bytes32"),
        (P.uint(256), "uint256"),
        (P.int_(64), "int64"),
        (P.bool_(), "bool"),
        (P.string(), "string"),
        (P.array(P.bool_()), "bool[]"),
        (P.fixed_array(P.uint(256), 2), "uint256[2]"),
        (P.fixed_array(P.string(), 2), "string[2]"),
        (P.fixed_array(P.array(P.bool_()), 2), "bool[][2]"),
    ],
)
def test_param_type_display(param, expected):
    assert str(param) == expected
    assert f"{param}" == expected


@pytest.mark.parametrize(
    "param, dynamic",
    [
        (P.address(), False),
        (P.bytes_(), True),
        (P.fixed_bytes(32), False),
        (P.uint(256), False),
        (P.int_(64), False),
        (P.bool_(), False),
        (P.string(), True),
        (P.array(P.bool_()), True),
        (P.fixed_array(P.uint(256), 2), False),
        (P.fixed_array(P.string(), 2), True),
        (P.fixed_array(P.array(P.bool_()), 2), True),
    ],
)
def test_is_dynamic(param, dynamic):
    assert param.is_dynamic() is dynamic


def test_tuple_is_dynamic_when_any_member_is():
    assert P.tuple_([P.address(), P.string()]).is_dynamic() is True
    assert P.tuple_([P.address(), P.uint(8)]).is_dynamic() is False
    assert P.tuple_([]).is_dynamic() is False


@pytest.mark.parametrize(
    "param, expected",
    [
        (P.address(), "address"),
        (P.bytes_(), "bytes"),
        (P.fixed_bytes(32), "bytes32"),
        (P.uint(256), "uint256"),
        (P.int_(64), "int64"),
        (P.bool_(), "bool"),
        (P.string(), "string"),
        (P.array(P.bool_()), "bool[]"),
        (P.fixed_array(P.string(), 2), "string[2]"),
        (P.fixed_array(P.array(P.bool_()), 2), "bool[][2]"),
        (
            P.array(
                P.tuple_(
                    [
                        P.array(P.tuple_([P.int_(256), P.uint(256)])),
                        P.fixed_bytes(32),
                    ]
                )
            ),
            "((int256,uint256)[],bytes32)[]",
        ),
    ],
)
def test_write_param(param, expected):
    assert write_param(param) == expected


def test_write_for_abi_without_tuple_contents():
    param = P.array(P.tuple_([P.array(P.int_(256)), P.fixed_bytes(32)]))
    assert write_for_abi(param, False) == "tuple[]"


def test_write_for_abi_with_tuple_contents_matches_write_param():
    param = P.tuple_([P.address(), P.bool_()])
    assert write_for_abi(param, True) == write_param(param) == "(address,bool)"


def test_empty_bytes_valid_encoding():
    assert P.fixed_bytes(0).is_empty_bytes_valid_encoding() is True
    assert P.fixed_array(P.address(), 0).is_empty_bytes_valid_encoding() is True
    assert P.fixed_bytes(32).is_empty_bytes_valid_encoding() is False
    assert P.fixed_array(P.address(), 2).is_empty_bytes_valid_encoding() is False
    assert P.bytes_().is_empty_bytes_valid_encoding() is False


def test_constructors_set_fields_and_compare_by_value():
    arr = P.fixed_array(P.uint(8), 3)
    assert arr.kind is Kind.FIXED_ARRAY
    assert arr.size == 3
    assert arr.inner == P.uint(8)
    assert arr == P.fixed_array(P.uint(8), 3)
    assert arr != P.fixed_array(P.uint(8), 4)
    assert P.tuple_(iter([P.bool_()])).components == (P.bool_(),)
    assert hash(P.uint(256)) == hash(P.uint(256))