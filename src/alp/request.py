"""
Query-parameter parsing for ``GET /price``.

Everything the pricer assumes about its inputs (positivity, finiteness,
integer step count) is checked here so the pricer never sees bad numbers.
"""

from __future__ import annotations

import math
import re
from typing import Mapping

from alp.errors import MalformedParameter, MissingParameter
from alp.types import PricingRequest

REQUIRED = ("S", "K", "T", "r", "sigma", "steps", "optionType")
POSITIVE = ("S", "K", "T", "sigma")

# plain decimal literals only: no "1_0", "inf", "nan" or hex
_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_INTEGER = re.compile(r"[+-]?\d+")


def _float(name: str, raw: str) -> float:
    if not _DECIMAL.fullmatch(str(raw).strip()):
        raise MalformedParameter(name, raw, "not a number")
    x = float(raw)
    if not math.isfinite(x):
        raise MalformedParameter(name, raw, "must be finite")
    if name in POSITIVE and x <= 0:
        raise MalformedParameter(name, raw, "must be > 0")
    return x


def _steps(raw: str, max_steps: int | None) -> int:
    if not _INTEGER.fullmatch(str(raw).strip()):
        raise MalformedParameter("steps", raw, "not an integer")
    n = int(raw)
    if n < 1:
        raise MalformedParameter("steps", raw, "must be >= 1")
    if max_steps is not None and n > max_steps:
        raise MalformedParameter("steps", raw, f"must be <= {max_steps}")
    return n


def parse_pricing_request(
    params: Mapping[str, str], max_steps: int | None = None
) -> PricingRequest:
    """
    Build a PricingRequest from raw query strings.

    Raises MissingParameter if any of the seven inputs is absent or blank,
    MalformedParameter if one does not parse or ``steps`` exceeds
    ``max_steps``. The option type is passed through exactly as given and
    resolved by the pricer.
    """
    missing = [n for n in REQUIRED if str(params.get(n) or "").strip() == ""]
    if missing:
        raise MissingParameter(missing)

    values = {n: _float(n, params[n]) for n in ("S", "K", "T", "r", "sigma")}
    return PricingRequest(
        steps=_steps(params["steps"], max_steps),
        option_type=params["optionType"],
        **values,
    )


__all__ = ["REQUIRED", "parse_pricing_request"]
