"""Parameter types of functions and events, and their canonical names."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable


class Kind(enum.Enum):
    """The shape of a parameter type."""

    ADDRESS = "address"
    BYTES = "bytes"
    INT = "int"
    UINT = "uint"
    BOOL = "bool"
    STRING = "string"
    ARRAY = "array"
    FIXED_BYTES = "fixed_bytes"
    FIXED_ARRAY = "fixed_array"
    TUPLE = "tuple"


@dataclass(frozen=True)
class ParamType:
    """A function or event parameter type.

    ``size`` holds the bit width of integers, the length of fixed bytes and
    the length of fixed arrays; ``inner`` the element type of arrays;
    ``components`` the member types of tuples.
    """

    kind: Kind
    size: int | None = None
    inner: ParamType | None = None
    components: tuple[ParamType, ...] = ()

    @staticmethod
    def address() -> ParamType:
        return ParamType(Kind.ADDRESS)

    @staticmethod
    def bytes_() -> ParamType:
        return ParamType(Kind.BYTES)

    @staticmethod
    def int_(size: int) -> ParamType:
        return ParamType(Kind.INT, size=size)

    @staticmethod
    def uint(size: int) -> ParamType:
        return ParamType(Kind.UINT, size=size)

    @staticmethod
    def bool_() -> ParamType:
        return ParamType(Kind.BOOL)

    @staticmethod
    def string() -> ParamType:
        return ParamType(Kind.STRING)

    @staticmethod
    def array(inner: ParamType) -> ParamType:
        return ParamType(Kind.ARRAY, inner=inner)

    @staticmethod
    def fixed_bytes(size: int) -> ParamType:
        return ParamType(Kind.FIXED_BYTES, size=size)

    @staticmethod
    def fixed_array(inner: ParamType, size: int) -> ParamType:
        return ParamType(Kind.FIXED_ARRAY, size=size, inner=inner)

    @staticmethod
    def tuple_(components: Iterable[ParamType]) -> ParamType:
        return ParamType(Kind.TUPLE, components=tuple(components))

    def is_dynamic(self) -> bool:
        """Whether values of this type are encoded through an offset."""
        if self.kind in (Kind.BYTES, Kind.STRING, Kind.ARRAY):
            return True
        if self.kind is Kind.FIXED_ARRAY:
            return self.inner.is_dynamic()
        if self.kind is Kind.TUPLE:
            return any(component.is_dynamic() for component in self.components)
        return False

    def is_empty_bytes_valid_encoding(self) -> bool:
        """Whether an empty byte string is a valid encoding of this type."""
        if self.kind in (Kind.FIXED_BYTES, Kind.FIXED_ARRAY):
            return self.size == 0
        return False

    def __str__(self) -> str:
        return write_param(self)


def write_param(param: ParamType) -> str:
    """Return the canonical name of a type, spelling out tuple members."""
    return write_for_abi(param, True)


def write_for_abi(param: ParamType, serialize_tuple_contents: bool) -> str:
    """Return the name of a type.

    Tuples are written as ``(t1,t2,...)`` when ``serialize_tuple_contents``
    is true, and as the keyword ``tuple`` otherwise.
    """
    match param.kind:
        case Kind.ADDRESS | Kind.BYTES | Kind.BOOL | Kind.STRING:
            return param.kind.value
        case Kind.FIXED_BYTES:
            return f"bytes{param.size}"
        case Kind.INT:
            return f"int{param.size}"
        case Kind.UINT:
            return f"uint{param.size}"
        case Kind.FIXED_ARRAY:
            return f"{write_for_abi(param.inner, serialize_tuple_contents)}[{param.size}]"
        case Kind.ARRAY:
            return f"{write_for_abi(param.inner, serialize_tuple_contents)}[]"
        case Kind.TUPLE:
            if not serialize_tuple_contents:
                return "tuple"
            members = ",".join(
                write_for_abi(component, serialize_tuple_contents)
                for component in param.components
            )
            return f"({members})"
    raise ValueError(f"unknown parameter kind: {param.kind!r}")