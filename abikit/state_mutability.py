"""How a contract function treats blockchain state."""

from __future__ import annotations

import enum


class StateMutability(enum.Enum):
    """Whether a function reads or modifies blockchain state.

    The value of each member is its name in ABI JSON.
    """

    PURE = "pure"
    VIEW = "view"
    NONPAYABLE = "nonpayable"
    PAYABLE = "payable"

    @classmethod
    def default(cls) -> StateMutability:
        """Return the mutability assumed when none is given: non-payable."""
        return cls.NONPAYABLE