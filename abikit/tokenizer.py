"""Reading ABI values from their text form."""

from __future__ import annotations

import re
from typing import Sequence

from .errors import InvalidDataError
from .param_type import Kind, ParamType
from .token import Token

_WORD_LIMIT = 1 << 256
_HEX = re.compile(r"(?:[0-9a-fA-F]{2})*")
_DECIMAL = re.compile(r"[0-9]+")
_HEX_NUMBER = re.compile(r"0[xX][0-9a-fA-F]+")


def _decode_hex(value: str) -> bytes:
    if not _HEX.fullmatch(value):
        raise InvalidDataError(f"invalid hex: {value!r}")
    return bytes.fromhex(value)


def _parse_number(value: str) -> int:
    if _HEX_NUMBER.fullmatch(value):
        number = int(value[2:], 16)
    elif _DECIMAL.fullmatch(value):
        number = int(value)
    else:
        raise InvalidDataError(f"invalid number: {value!r}")
    if number >= _WORD_LIMIT:
        raise InvalidDataError(f"number does not fit in 256 bits: {value!r}")
    return number


class Tokenizer:
    """Parses text such as ``[1,0]`` or ``(0x11..,2)`` into tokens of a given type."""

    def tokenize(self, param: ParamType, value: str) -> Token:
        """Parse ``value`` as a token of type ``param``."""
        match param.kind:
            case Kind.ADDRESS:
                return Token.address(self.tokenize_address(value.removeprefix("0x")))
            case Kind.STRING:
                return Token.string(self.tokenize_string(value))
            case Kind.BOOL:
                return Token.bool_(self.tokenize_bool(value))
            case Kind.BYTES:
                return Token.bytes_(self.tokenize_bytes(value.removeprefix("0x")))
            case Kind.FIXED_BYTES:
                return Token.fixed_bytes(
                    self.tokenize_fixed_bytes(value.removeprefix("0x"), param.size)
                )
            case Kind.UINT:
                return Token.uint(self.tokenize_uint(value))
            case Kind.INT:
                return Token.int_(self.tokenize_int(value))
            case Kind.ARRAY:
                return Token.array(self.tokenize_array(value, param.inner))
            case Kind.FIXED_ARRAY:
                return Token.fixed_array(
                    self.tokenize_fixed_array(value, param.inner, param.size)
                )
            case Kind.TUPLE:
                return Token.tuple_(self.tokenize_struct(value, param.components))
        raise InvalidDataError(f"unknown parameter kind: {param.kind!r}")

    def tokenize_fixed_array(self, value: str, param: ParamType, length: int) -> list[Token]:
        """Parse ``value`` as an array of exactly ``length`` elements."""
        result = self.tokenize_array(value, param)
        if len(result) != length:
            raise InvalidDataError(f"expected {length} elements, got {len(result)}")
        return result

    def tokenize_struct(self, value: str, params: Sequence[ParamType]) -> list[Token]:
        """Parse ``value`` of the form ``(a,b,...)`` as tuple members."""
        if not value.startswith("(") or not value.endswith(")"):
            raise InvalidDataError(f"a tuple must be enclosed in parentheses: {value!r}")
        if len(value) == 2:
            return []

        remaining = iter(params)

        def next_param() -> ParamType:
            param = next(remaining, None)
            if param is None:
                raise InvalidDataError("more tuple members than types")
            return param

        result: list[Token] = []
        nested = 0
        ignore = False
        last_item = 1
        array_nested = 0
        array_item_start = 1
        last_is_array = False

        for pos, char in enumerate(value):
            if char == "[" and not ignore:
                if array_nested == 0:
                    array_item_start = pos
                array_nested += 1
            elif char == "]" and not ignore:
                array_nested -= 1
                if nested > 0:
                    continue
                if array_nested < 0:
                    raise InvalidDataError(f"unbalanced brackets: {value!r}")
                if array_nested == 0:
                    sub = value[array_item_start : pos + 1]
                    result.append(self.tokenize(next_param(), sub))
                    last_is_array = not last_is_array
            elif array_nested != 0:
                continue
            elif char == "(" and not ignore:
                nested += 1
            elif char == ")" and not ignore:
                nested -= 1
                if last_is_array:
                    last_is_array = False
                elif nested < 0:
                    raise InvalidDataError(f"unbalanced parentheses: {value!r}")
                elif nested == 0:
                    result.append(self.tokenize(next_param(), value[last_item:pos]))
                    last_item = pos + 1
            elif char == '"':
                ignore = not ignore
            elif char == "," and nested == 1 and not ignore:
                if last_is_array:
                    last_is_array = False
                else:
                    result.append(self.tokenize(next_param(), value[last_item:pos]))
                    last_item = pos + 1

        if ignore:
            raise InvalidDataError(f"unterminated quote: {value!r}")
        return result

    def tokenize_array(self, value: str, param: ParamType) -> list[Token]:
        """Parse ``value`` of the form ``[a,b,...]`` as elements of type ``param``."""
        if not value.startswith("[") or not value.endswith("]"):
            raise InvalidDataError(f"an array must be enclosed in brackets: {value!r}")
        if len(value) == 2:
            return []

        result: list[Token] = []
        nested = 0
        ignore = False
        last_item = 1
        tuple_nested = 0
        tuple_item_start = 1
        last_is_tuple = False

        for pos, char in enumerate(value):
            if char == "(" and not ignore:
                if tuple_nested == 0:
                    tuple_item_start = pos
                tuple_nested += 1
            elif char == ")" and not ignore:
                tuple_nested -= 1
                if tuple_nested < 0:
                    raise InvalidDataError(f"unbalanced parentheses: {value!r}")
                if tuple_nested == 0:
                    sub = value[tuple_item_start : pos + 1]
                    result.append(self.tokenize(param, sub))
                    last_is_tuple = not last_is_tuple
            elif tuple_nested != 0:
                continue
            elif char == "[" and not ignore:
                nested += 1
            elif char == "]" and not ignore:
                nested -= 1
                if last_is_tuple:
                    last_is_tuple = False
                elif nested < 0:
                    raise InvalidDataError(f"unbalanced brackets: {value!r}")
                elif nested == 0:
                    result.append(self.tokenize(param, value[last_item:pos]))
                    last_item = pos + 1
            elif char == '"':
                ignore = not ignore
            elif char == "," and nested == 1 and not ignore:
                if last_is_tuple:
                    last_is_tuple = False
                else:
                    result.append(self.tokenize(param, value[last_item:pos]))
                    last_item = pos + 1

        if ignore:
            raise InvalidDataError(f"unterminated quote: {value!r}")
        return result

    def tokenize_address(self, value: str) -> bytes:
        """Parse 40 hex digits as a 20-byte address."""
        data = _decode_hex(value)
        if len(data) != 20:
            raise InvalidDataError(f"an address is 20 bytes long: {value!r}")
        return data

    def tokenize_string(self, value: str) -> str:
        """Take the text, dropping one pair of enclosing double quotes if present."""
        if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
            return value[1:-1]
        return value

    def tokenize_bool(self, value: str) -> bool:
        """Parse ``true``/``1`` or ``false``/``0``."""
        if value in ("true", "1"):
            return True
        if value in ("false", "0"):
            return False
        raise InvalidDataError(f"invalid bool: {value!r}")

    def tokenize_bytes(self, value: str) -> bytes:
        """Parse hex digits as bytes."""
        return _decode_hex(value)

    def tokenize_fixed_bytes(self, value: str, length: int) -> bytes:
        """Parse hex digits as exactly ``length`` bytes."""
        data = _decode_hex(value)
        if len(data) != length:
            raise InvalidDataError(f"expected {length} bytes, got {len(data)}")
        return data

    def tokenize_uint(self, value: str) -> int:
        """Parse a decimal or ``0x``-prefixed hex unsigned integer."""
        return _parse_number(value)

    def tokenize_int(self, value: str) -> int:
        """Parse a signed integer into its 256-bit two's complement form."""
        if value.startswith("-"):
            magnitude = _parse_number(value[1:])
            if magnitude > 1 << 255:
                raise InvalidDataError(f"number does not fit in 256 bits: {value!r}")
            return (_WORD_LIMIT - magnitude) % _WORD_LIMIT
        return _parse_number(value)