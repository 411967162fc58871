"""Function parameters and tuple members as described in JSON ABI files."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .errors import InvalidDataError
from .param_type import Kind, ParamType, write_for_abi
from .reader import read_param_type

_FIELDS = frozenset({"name", "type", "internalType", "components"})


def _reject_duplicates(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result and key in _FIELDS:
            raise InvalidDataError(f"duplicate field `{key}`")
        result[key] = value
    return result


def _load_json(text: str) -> Any:
    try:
        return json.loads(text, object_pairs_hook=_reject_duplicates)
    except json.JSONDecodeError as exc:
        raise InvalidDataError(f"invalid JSON: {exc}") from exc


def inner_tuple(param: ParamType) -> tuple[ParamType, ...] | None:
    """Return the members of the tuple at the bottom of a (possibly array) type.

    Returns ``None`` when the type holds no tuple.
    """
    current = param
    while current.kind in (Kind.ARRAY, Kind.FIXED_ARRAY):
        current = current.inner
    if current.kind is Kind.TUPLE:
        return current.components
    return None


def _extend_tuple(kind: ParamType, extra: list[ParamType]) -> ParamType:
    if kind.kind is Kind.ARRAY:
        return ParamType.array(_extend_tuple(kind.inner, extra))
    if kind.kind is Kind.FIXED_ARRAY:
        return ParamType.fixed_array(_extend_tuple(kind.inner, extra), kind.size)
    return ParamType.tuple_([*kind.components, *extra])


def set_tuple_components(
    kind: ParamType, components: Iterable[TupleParam] | None
) -> ParamType:
    """Return ``kind`` with the given members added to its innermost tuple.

    Types without a tuple are returned unchanged; a tuple type without
    components is an error.
    """
    if inner_tuple(kind) is None:
        return kind
    if components is None:
        raise InvalidDataError("missing field `components`")
    return _extend_tuple(kind, [component.kind for component in components])


def param_type_to_dict(param: ParamType) -> dict[str, Any]:
    """Describe a bare type as an ABI JSON object with ``type`` and ``components``."""
    result: dict[str, Any] = {"type": write_for_abi(param, False)}
    members = inner_tuple(param)
    if members is not None:
        result["components"] = [param_type_to_dict(member) for member in members]
    return result


def _read_fields(
    data: Any, what: str
) -> tuple[str | None, ParamType, str | None]:
    if not isinstance(data, Mapping):
        raise InvalidDataError(f"expected {what} object, got {data!r}")

    name = data.get("name")
    if name is not None and not isinstance(name, str):
        raise InvalidDataError(f"field `name` must be a string, got {name!r}")

    internal_type = data.get("internalType")
    if internal_type is not None and not isinstance(internal_type, str):
        raise InvalidDataError(
            f"field `internalType` must be a string, got {internal_type!r}"
        )

    if "type" not in data:
        raise InvalidDataError("missing field `kind`")
    type_name = data["type"]
    if not isinstance(type_name, str):
        raise InvalidDataError(f"field `type` must be a string, got {type_name!r}")
    kind = read_param_type(type_name)

    components = None
    if "components" in data:
        raw = data["components"]
        if not isinstance(raw, list):
            raise InvalidDataError(f"field `components` must be a list, got {raw!r}")
        components = [TupleParam.from_dict(item) for item in raw]

    return name, set_tuple_components(kind, components), internal_type


def _fields_to_dict(
    name: str | None, kind: ParamType, internal_type: str | None
) -> dict[str, Any]:
    result: dict[str, Any] = {}
    if internal_type is not None:
        result["internalType"] = internal_type
    if name is not None:
        result["name"] = name
    result.update(param_type_to_dict(kind))
    return result


@dataclass(frozen=True)
class Param:
    """A named function parameter."""

    name: str
    kind: ParamType
    internal_type: str | None = None

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> Param:
        """Build a parameter from its ABI JSON object."""
        name, kind, internal_type = _read_fields(data, "a parameter")
        if name is None:
            raise InvalidDataError("missing field `name`")
        return Param(name, kind, internal_type)

    def to_dict(self) -> dict[str, Any]:
        """Return the ABI JSON object of this parameter."""
        return _fields_to_dict(self.name, self.kind, self.internal_type)

    @staticmethod
    def from_json(text: str) -> Param:
        """Parse a parameter from ABI JSON text."""
        return Param.from_dict(_load_json(text))

    def to_json(self) -> str:
        """Return this parameter as ABI JSON text."""
        return json.dumps(self.to_dict())


@dataclass(frozen=True)
class TupleParam:
    """A member of a tuple type, whose name is optional."""

    name: str | None
    kind: ParamType
    internal_type: str | None = None

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> TupleParam:
        """Build a tuple member from its ABI JSON object."""
        name, kind, internal_type = _read_fields(data, "a tuple parameter")
        return TupleParam(name, kind, internal_type)

    def to_dict(self) -> dict[str, Any]:
        """Return the ABI JSON object of this tuple member."""
        return _fields_to_dict(self.name, self.kind, self.internal_type)

    @staticmethod
    def from_json(text: str) -> TupleParam:
        """Parse a tuple member from ABI JSON text."""
        return TupleParam.from_dict(_load_json(text))

    def to_json(self) -> str:
        """Return this tuple member as ABI JSON text."""
        return json.dumps(self.to_dict())