import pytest

from abikit.errors import InvalidDataError
from abikit.param_type import ParamType
from abikit.token import Token
from abikit.tokenizer import Tokenizer


@pytest.fixture
def tokenizer():
    return Tokenizer()


@pytest.mark.parametrize(
    "value",
    ['[1,"0,false]', '[false"]', '[1,false"]', '[1,"0",false]'],
)
def test_single_quoted_in_array_must_error(tokenizer, value):
    with pytest.raises(InvalidDataError):
        tokenizer.tokenize_array(value, ParamType.bool_())


def test_plain_bool_array(tokenizer):
    assert tokenizer.tokenize_array("[1,0]", ParamType.bool_()) == [
        Token.bool_(True),
        Token.bool_(False),
    ]


def test_tuples_arrays_mixed(tokenizer):
    members = [
        ParamType.array(ParamType.tuple_([ParamType.bool_()])),
        ParamType.array(ParamType.tuple_([ParamType.bool_(), ParamType.bool_()])),
    ]
    expected_members = [
        Token.array([Token.tuple_([Token.bool_(True)])]),
        Token.array([Token.tuple_([Token.bool_(False), Token.bool_(True)])]),
    ]
    assert tokenizer.tokenize_array(
        "[([(true)],[(false,true)])]", ParamType.tuple_(members)
    ) == [Token.tuple_(expected_members)]
    assert tokenizer.tokenize_struct("([(true)],[(false,true)])", members) == expected_members


def test_tuple_array_nested(tokenizer):
    result = tokenizer.tokenize_struct(
        "([(5c9d55b78febcc2061715ba4f57ecf8ea2711f2c)],2)",
        [ParamType.array(ParamType.tuple_([ParamType.address()])), ParamType.uint(256)],
    )
    address = bytes.fromhex("5c9d55b78febcc2061715ba4f57ecf8ea2711f2c")
    assert result == [
        Token.array([Token.tuple_([Token.address(address)])]),
        Token.uint(2),
    ]


def test_address_with_prefix(tokenizer):
    parsed = tokenizer.tokenize(ParamType.address(), "0x" + "11" * 20)
    assert parsed == Token.address(b"\x11" * 20)


def test_address_wrong_length(tokenizer):
    with pytest.raises(InvalidDataError):
        tokenizer.tokenize(ParamType.address(), "1111")


def test_fixed_array_length_mismatch(tokenizer):
    with pytest.raises(InvalidDataError):
        tokenizer.tokenize(ParamType.fixed_array(ParamType.uint(256), 3), "[1,2]")


def test_fixed_array(tokenizer):
    parsed = tokenizer.tokenize(ParamType.fixed_array(ParamType.uint(256), 2), "[1,0x10]")
    assert parsed == Token.fixed_array([Token.uint(1), Token.uint(16)])


def test_empty_containers(tokenizer):
    assert tokenizer.tokenize_array("[]", ParamType.bool_()) == []
    assert tokenizer.tokenize_struct("()", [ParamType.bool_()]) == []


def test_struct_requires_parentheses(tokenizer):
    with pytest.raises(InvalidDataError):
        tokenizer.tokenize_struct("true,false", [ParamType.bool_(), ParamType.bool_()])


def test_struct_with_too_many_members(tokenizer):
    with pytest.raises(InvalidDataError):
        tokenizer.tokenize_struct("(true,false)", [ParamType.bool_()])


def test_negative_int(tokenizer):
    assert tokenizer.tokenize(ParamType.int_(256), "-1") == Token.int_((1 << 256) - 1)


def test_fixed_bytes(tokenizer):
    assert tokenizer.tokenize(ParamType.fixed_bytes(2), "0x1234") == Token.fixed_bytes(b"\x12\x34")
    with pytest.raises(InvalidDataError):
        tokenizer.tokenize(ParamType.fixed_bytes(3), "1234")


def test_bytes_and_string(tokenizer):
    assert tokenizer.tokenize(ParamType.bytes_(), "abcd") == Token.bytes_(b"\xab\xcd")
    assert tokenizer.tokenize(ParamType.string(), "hello") == Token.string("hello")


def test_quoted_strings_in_array(tokenizer):
    assert tokenizer.tokenize_array('["a,b","c"]', ParamType.string()) == [
        Token.string("a,b"),
        Token.string("c"),
    ]


def test_uint_rejects_garbage(tokenizer):
    with pytest.raises(InvalidDataError):
        tokenizer.tokenize_uint("12a")