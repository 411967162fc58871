"""Ethereum contract ABI types, tokens, signatures and parameter specs."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "param_type",
    "reader",
    "token",
    "tokenizer",
    "signature",
    "util",
    "param",
    "state_mutability",
    "function",
    "log",
]