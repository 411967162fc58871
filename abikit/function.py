"""Contract function descriptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from .errors import InvalidDataError
from .param import Param
from .param_type import ParamType
from .signature import short_signature
from .state_mutability import StateMutability
from .util import sanitize_name


def _read_params(data: Mapping[str, Any], key: str) -> list[Param]:
    if key not in data:
        raise InvalidDataError(f"missing field `{key}`")
    raw = data[key]
    if not isinstance(raw, list):
        raise InvalidDataError(f"field `{key}` must be a list, got {raw!r}")
    return [Param.from_dict(item) for item in raw]


@dataclass(frozen=True)
class Function:
    """A contract function: its name, inputs, outputs and mutability.

    ``constant`` is the attribute older compilers wrote before
    ``stateMutability`` replaced it; it is kept only when present.
    """

    name: str
    inputs: tuple[Param, ...] = ()
    outputs: tuple[Param, ...] = ()
    constant: bool | None = None
    state_mutability: StateMutability = field(default_factory=StateMutability.default)

    def __post_init__(self) -> None:
        object.__setattr__(self, "inputs", tuple(self.inputs))
        object.__setattr__(self, "outputs", tuple(self.outputs))

    def input_param_types(self) -> list[ParamType]:
        """Return the types of the inputs, in order."""
        return [param.kind for param in self.inputs]

    def output_param_types(self) -> list[ParamType]:
        """Return the types of the outputs, in order."""
        return [param.kind for param in self.outputs]

    def short_signature(self) -> bytes:
        """Return the four-byte selector of this function."""
        return short_signature(self.name, self.input_param_types())

    def signature(self) -> str:
        """Return a text signature that identifies this function.

        Examples: ``f()``, ``f():(uint256)``, ``f(bool):(uint256,string)``.
        """
        inputs = _join_types(self.inputs)
        if not self.outputs:
            return f"{self.name}({inputs})"
        return f"{self.name}({inputs}):({_join_types(self.outputs)})"

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> Function:
        """Build a function from its ABI JSON object.

        A name such as ``foo()`` is cut at its parenthesis.
        """
        if not isinstance(data, Mapping):
            raise InvalidDataError(f"expected a function object, got {data!r}")
        if "name" not in data:
            raise InvalidDataError("missing field `name`")
        name = data["name"]
        if not isinstance(name, str):
            raise InvalidDataError(f"field `name` must be a string, got {name!r}")

        constant = data.get("constant")
        if constant is not None and not isinstance(constant, bool):
            raise InvalidDataError(f"field `constant` must be a bool, got {constant!r}")

        mutability = StateMutability.default()
        if "stateMutability" in data:
            try:
                mutability = StateMutability(data["stateMutability"])
            except ValueError as exc:
                raise InvalidDataError(
                    f"unknown state mutability: {data['stateMutability']!r}"
                ) from exc

        return Function(
            name=sanitize_name(name),
            inputs=_read_params(data, "inputs"),
            outputs=_read_params(data, "outputs"),
            constant=constant,
            state_mutability=mutability,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the ABI JSON object of this function."""
        result: dict[str, Any] = {
            "name": self.name,
            "inputs": [param.to_dict() for param in self.inputs],
            "outputs": [param.to_dict() for param in self.outputs],
        }
        if self.constant is not None:
            result["constant"] = self.constant
        result["stateMutability"] = self.state_mutability.value
        return result


def _join_types(params: Iterable[Param]) -> str:
    return ",".join(str(param.kind) for param in params)