"""Raw and decoded Ethereum logs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .token import Token

_HASH_LENGTH = 32


@dataclass(frozen=True)
class RawLog:
    """A log as emitted: indexed parameters as topics, the rest as data."""

    topics: tuple[bytes, ...]
    data: bytes

    def __post_init__(self) -> None:
        topics = tuple(bytes(topic) for topic in self.topics)
        for topic in topics:
            if len(topic) != _HASH_LENGTH:
                raise ValueError(
                    f"a topic is {_HASH_LENGTH} bytes long, got {len(topic)}"
                )
        object.__setattr__(self, "topics", topics)
        object.__setattr__(self, "data", bytes(self.data))

    @staticmethod
    def from_pair(pair: tuple[Iterable[bytes], bytes]) -> RawLog:
        """Build a log from a ``(topics, data)`` pair."""
        topics, data = pair
        return RawLog(tuple(topics), data)


@dataclass(frozen=True)
class LogParam:
    """A decoded log parameter."""

    name: str
    value: Token


@dataclass(frozen=True)
class Log:
    """A decoded log."""

    params: tuple[LogParam, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))