"""Shared pricing dataclasses and enums."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from alp.errors import InvalidArgument


class OptionType(StrEnum):
    CALL = "call"
    PUT = "put"

    @classmethod
    def parse(cls, value: OptionType | str) -> OptionType:
        """Resolve a label once; anything but 'call'/'put' is rejected."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgument(f"Invalid option type: {value!r}") from None


class ExerciseGrid(StrEnum):
    """Prices used for the early-exercise payoff during backward induction.

    TERMINAL compares against the maturity-layer price at the same index
    (legacy /price output). NODE uses the price actually
    reached at that interior node, ``S * u**(step - i) * d**i``.
    """

    TERMINAL = "terminal"
    NODE = "node"


@dataclass(frozen=True)
class LatticeParams:
    dt: float
    u: float
    d: float
    q: float
    disc: float


@dataclass(frozen=True)
class PricingRequest:
    """Validated inputs for one pricing call."""

    S: float
    K: float
    T: float
    r: float
    sigma: float
    steps: int
    option_type: OptionType | str
