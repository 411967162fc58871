"""Reading parameter types from their names."""

from __future__ import annotations

import json
import re

from .errors import InvalidDataError, InvalidNameError
from .param_type import ParamType

_SIZE = re.compile(r"\+?[0-9]+")


def _parse_size(text: str, name: str) -> int:
    if not _SIZE.fullmatch(text):
        raise InvalidNameError(name, f"invalid size {text!r}")
    return int(text)


def _read_tuple(name: str) -> ParamType:
    if not name.startswith("("):
        raise InvalidNameError(name)

    components: list[ParamType] = []
    depth = 0
    start = 0

    def take(item: str) -> None:
        if item:
            components.append(read_param_type(item))

    for pos, char in enumerate(name):
        if char == "(":
            depth += 1
            if depth == 1:
                start = pos + 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise InvalidNameError(name, "unbalanced parentheses")
            if depth == 0:
                take(name[start:pos])
                start = pos + 1
        elif char == "," and depth == 1:
            take(name[start:pos])
            start = pos + 1

    if depth != 0:
        raise InvalidNameError(name, "unbalanced parentheses")
    return ParamType.tuple_(components)


def _read_array(name: str) -> ParamType:
    open_index = name.rfind("[")
    if open_index < 0:
        raise InvalidNameError(name, "missing '['")
    count = name[open_index + 1 : -1]
    inner = read_param_type(name[:open_index])
    if not count:
        return ParamType.array(inner)
    return ParamType.fixed_array(inner, _parse_size(count, name))


def read_param_type(name: str) -> ParamType:
    """Parse a type name such as ``uint256``, ``bool[3][]`` or ``(address,bytes)``.

    Names that fit no known type are read as ``uint8``, the encoding of a
    Solidity enum.
    """
    if name.endswith(")"):
        return _read_tuple(name)
    if name.endswith("]"):
        return _read_array(name)

    simple = {
        "address": ParamType.address(),
        "bytes": ParamType.bytes_(),
        "bool": ParamType.bool_(),
        "string": ParamType.string(),
        "int": ParamType.int_(256),
        "tuple": ParamType.tuple_([]),
        "uint": ParamType.uint(256),
    }
    if name in simple:
        return simple[name]
    if name.startswith("int"):
        return ParamType.int_(_parse_size(name[3:], name))
    if name.startswith("uint"):
        return ParamType.uint(_parse_size(name[4:], name))
    if name.startswith("bytes"):
        return ParamType.fixed_bytes(_parse_size(name[5:], name))
    return ParamType.uint(8)


def load_param_types(text: str) -> list[ParamType]:
    """Read type names from a JSON string or a JSON array of strings."""
    data = json.loads(text)
    if isinstance(data, str):
        data = [data]
    if not isinstance(data, list):
        raise InvalidDataError("expected a type name or a list of type names")
    result = []
    for item in data:
        if not isinstance(item, str):
            raise InvalidDataError(f"expected a type name, got {item!r}")
        result.append(read_param_type(item))
    return result