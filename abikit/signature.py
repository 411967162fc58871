"""Keccak-256 signatures of functions and events."""

from __future__ import annotations

from typing import Sequence

from Crypto.Hash import keccak

from .param_type import ParamType, write_param


def _signature_hash(name: str, params: Sequence[ParamType]) -> bytes:
    types = ",".join(write_param(param) for param in params)
    text = f"{name}({types})".encode()
    return keccak.new(digest_bits=256, data=text).digest()


def short_signature(name: str, params: Sequence[ParamType]) -> bytes:
    """Return the first four bytes of the Keccak-256 hash of the signature."""
    return _signature_hash(name, params)[:4]


def long_signature(name: str, params: Sequence[ParamType]) -> bytes:
    """Return the full Keccak-256 hash of the signature."""
    return _signature_hash(name, params)