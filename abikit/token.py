"""Decoded ABI values."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from .param_type import Kind, ParamType

_WORD_LIMIT = 1 << 256


class TokenKind(enum.Enum):
    """The shape of an ABI value."""

    ADDRESS = "address"
    FIXED_BYTES = "fixed_bytes"
    BYTES = "bytes"
    INT = "int"
    UINT = "uint"
    BOOL = "bool"
    STRING = "string"
    FIXED_ARRAY = "fixed_array"
    ARRAY = "array"
    TUPLE = "tuple"


_SEQUENCE_KINDS = (TokenKind.FIXED_ARRAY, TokenKind.ARRAY, TokenKind.TUPLE)


def _check_word(value: int) -> int:
    if not 0 <= value < _WORD_LIMIT:
        raise ValueError(f"value does not fit in 256 bits: {value}")
    return value


@dataclass(frozen=True)
class Token:
    """An ABI value.

    Addresses, bytes and fixed bytes hold ``bytes``; integers hold an ``int``
    in the range of an unsigned 256-bit word (signed values in two's
    complement); arrays and tuples hold a tuple of tokens.
    """

    kind: TokenKind
    value: Any

    @staticmethod
    def address(value: bytes) -> Token:
        data = bytes(value)
        if len(data) != 20:
            raise ValueError(f"an address is 20 bytes long, got {len(data)}")
        return Token(TokenKind.ADDRESS, data)

    @staticmethod
    def fixed_bytes(value: bytes) -> Token:
        return Token(TokenKind.FIXED_BYTES, bytes(value))

    @staticmethod
    def bytes_(value: bytes) -> Token:
        return Token(TokenKind.BYTES, bytes(value))

    @staticmethod
    def int_(value: int) -> Token:
        return Token(TokenKind.INT, _check_word(value))

    @staticmethod
    def uint(value: int) -> Token:
        return Token(TokenKind.UINT, _check_word(value))

    @staticmethod
    def bool_(value: bool) -> Token:
        return Token(TokenKind.BOOL, bool(value))

    @staticmethod
    def string(value: str) -> Token:
        return Token(TokenKind.STRING, value)

    @staticmethod
    def fixed_array(items: Iterable[Token]) -> Token:
        return Token(TokenKind.FIXED_ARRAY, tuple(items))

    @staticmethod
    def array(items: Iterable[Token]) -> Token:
        return Token(TokenKind.ARRAY, tuple(items))

    @staticmethod
    def tuple_(items: Iterable[Token]) -> Token:
        return Token(TokenKind.TUPLE, tuple(items))

    def type_check(self, param_type: ParamType) -> bool:
        """Whether this value matches the given parameter type.

        Integers match integer types of any width; fixed bytes match fixed
        byte types at least as long as the value.
        """
        match self.kind:
            case TokenKind.ADDRESS:
                return param_type == ParamType.address()
            case TokenKind.BYTES:
                return param_type == ParamType.bytes_()
            case TokenKind.INT:
                return param_type.kind is Kind.INT
            case TokenKind.UINT:
                return param_type.kind is Kind.UINT
            case TokenKind.BOOL:
                return param_type == ParamType.bool_()
            case TokenKind.STRING:
                return param_type == ParamType.string()
            case TokenKind.FIXED_BYTES:
                return param_type.kind is Kind.FIXED_BYTES and param_type.size >= len(self.value)
            case TokenKind.ARRAY:
                return param_type.kind is Kind.ARRAY and all(
                    item.type_check(param_type.inner) for item in self.value
                )
            case TokenKind.FIXED_ARRAY:
                return (
                    param_type.kind is Kind.FIXED_ARRAY
                    and param_type.size == len(self.value)
                    and all(item.type_check(param_type.inner) for item in self.value)
                )
            case TokenKind.TUPLE:
                if param_type.kind is not Kind.TUPLE:
                    return False
                if len(self.value) > len(param_type.components):
                    return False
                return all(
                    item.type_check(component)
                    for item, component in zip(self.value, param_type.components)
                )
        return False

    def is_dynamic(self) -> bool:
        """Whether this value is encoded through an offset."""
        if self.kind in (TokenKind.BYTES, TokenKind.STRING, TokenKind.ARRAY):
            return True
        if self.kind in (TokenKind.FIXED_ARRAY, TokenKind.TUPLE):
            return any(item.is_dynamic() for item in self.value)
        return False

    def _value_if(self, kind: TokenKind) -> Any:
        return self.value if self.kind is kind else None

    def as_address(self) -> bytes | None:
        return self._value_if(TokenKind.ADDRESS)

    def as_fixed_bytes(self) -> bytes | None:
        return self._value_if(TokenKind.FIXED_BYTES)

    def as_bytes(self) -> bytes | None:
        return self._value_if(TokenKind.BYTES)

    def as_int(self) -> int | None:
        return self._value_if(TokenKind.INT)

    def as_uint(self) -> int | None:
        return self._value_if(TokenKind.UINT)

    def as_bool(self) -> bool | None:
        return self._value_if(TokenKind.BOOL)

    def as_string(self) -> str | None:
        return self._value_if(TokenKind.STRING)

    def as_fixed_array(self) -> tuple[Token, ...] | None:
        return self._value_if(TokenKind.FIXED_ARRAY)

    def as_array(self) -> tuple[Token, ...] | None:
        return self._value_if(TokenKind.ARRAY)

    def as_tuple(self) -> tuple[Token, ...] | None:
        return self._value_if(TokenKind.TUPLE)

    def __str__(self) -> str:
        match self.kind:
            case TokenKind.BOOL:
                return "true" if self.value else "false"
            case TokenKind.STRING:
                return self.value
            case TokenKind.ADDRESS | TokenKind.BYTES | TokenKind.FIXED_BYTES:
                return self.value.hex()
            case TokenKind.INT | TokenKind.UINT:
                return format(self.value, "x")
            case TokenKind.ARRAY | TokenKind.FIXED_ARRAY:
                return "[" + ",".join(str(item) for item in self.value) + "]"
            case TokenKind.TUPLE:
                return "(" + ",".join(str(item) for item in self.value) + ")"
        raise ValueError(f"unknown token kind: {self.kind!r}")


def types_check(tokens: Sequence[Token], param_types: Sequence[ParamType]) -> bool:
    """Whether every token matches the parameter type at the same position."""
    return len(tokens) == len(param_types) and all(
        token.type_check(param_type) for token, param_type in zip(tokens, param_types)
    )