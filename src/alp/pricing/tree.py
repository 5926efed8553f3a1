"""
CRR binomial tree (vectorised NumPy) for American and European options.

The early-exercise comparison reads prices from the maturity layer at the
node's index by default (``ExerciseGrid.TERMINAL``); pass
``grid=ExerciseGrid.NODE`` to compare against the interior node's own price.
"""

from __future__ import annotations

import numpy as np

from alp.errors import InvalidArgument
from alp.types import ExerciseGrid, LatticeParams, OptionType


def lattice_params(t: float, r: float, sigma: float, n_steps: int) -> LatticeParams:
    dt = t / n_steps
    u = float(np.exp(sigma * np.sqrt(dt)))      # up factor
    d = 1 / u                                   # down factor
    q = (float(np.exp(r * dt)) - d) / (u - d)   # risk-neutral prob
    disc = float(np.exp(-r * dt))
    return LatticeParams(dt=dt, u=u, d=d, q=q, disc=disc)


def terminal_prices(s0: float, params: LatticeParams, n_steps: int) -> np.ndarray:
    """S_T at each maturity node; index 0 is all up-moves."""
    j = np.arange(n_steps + 1)
    return s0 * (params.u ** (n_steps - j)) * (params.d ** j)


def intrinsic_value(prices, k: float, option_type: OptionType) -> np.ndarray:
    prices = np.asarray(prices, dtype=float)
    if option_type == OptionType.CALL:
        return np.maximum(prices - k, 0.0)
    return np.maximum(k - prices, 0.0)


def price_option(
    s0: float,
    k: float,
    t: float,
    r: float,
    sigma: float,
    n_steps: int = 200,
    option_type: OptionType | str = "call",
    exercise: str = "amer",  # "amer" or "euro"
    grid: ExerciseGrid | str = ExerciseGrid.TERMINAL,
    check_probability: bool = False,
) -> float:
    """
    Returns discounted fair value via CRR tree.

    Parameters
    ----------
    s0, k, t, r, sigma : spot, strike, years to expiry, rate, volatility
    n_steps            : tree depth (>= 1, validated by the caller)
    option_type        : "call" or "put"
    exercise           : "amer" compares against early exercise at every node,
                         "euro" only discounts the continuation value
    grid               : which prices feed the early-exercise payoff
    check_probability  : raise InvalidArgument if q falls outside [0, 1]
    """
    opt = OptionType.parse(option_type)
    try:
        grid = ExerciseGrid(grid)
    except ValueError:
        raise InvalidArgument(f"Invalid exercise grid: {grid!r}") from None
    if exercise not in ("amer", "euro"):
        raise InvalidArgument(f"Invalid exercise style: {exercise!r}")

    p = lattice_params(t, r, sigma, n_steps)
    if check_probability and not 0.0 <= p.q <= 1.0:
        raise InvalidArgument(
            f"Risk-neutral probability q={p.q:.6f} outside [0, 1]; "
            "increase steps or check inputs"
        )

    sT = terminal_prices(s0, p, n_steps)
    payoff_T = intrinsic_value(sT, k, opt)
    values = payoff_T

    # backwards induction, one layer per pass: m nodes -> m-1 nodes
    for step in range(n_steps - 1, -1, -1):
        values = p.disc * (p.q * values[:-1] + (1 - p.q) * values[1:])
        if exercise == "euro":
            continue

        if grid == ExerciseGrid.TERMINAL:
            intrinsic = payoff_T[: step + 1]
        else:
            j = np.arange(step + 1)
            s = s0 * (p.u ** (step - j)) * (p.d ** j)
            intrinsic = intrinsic_value(s, k, opt)
        values = np.maximum(values, intrinsic)

    return float(values[0])


def price_american(
    s0: float,
    k: float,
    t: float,
    r: float,
    sigma: float,
    n_steps: int,
    option_type: OptionType | str = "call",
    grid: ExerciseGrid | str = ExerciseGrid.TERMINAL,
    check_probability: bool = False,
) -> float:
    """American price at the root node (time 0)."""
    return price_option(
        s0, k, t, r, sigma,
        n_steps=n_steps,
        option_type=option_type,
        exercise="amer",
        grid=grid,
        check_probability=check_probability,
    )
