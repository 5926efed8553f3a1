"""
Step-count sweep of the CRR pricer: American vs European value per depth.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from alp.pricing.tree import price_option
from alp.types import ExerciseGrid, OptionType

DEFAULT_STEPS = (1, 2, 5, 10, 25, 50, 100, 200, 500)


def convergence_table(
    s0: float,
    k: float,
    t: float,
    r: float,
    sigma: float,
    option_type: OptionType | str = "call",
    steps_list: Iterable[int] = DEFAULT_STEPS,
    grid: ExerciseGrid | str = ExerciseGrid.TERMINAL,
) -> pd.DataFrame:
    """
    One row per tree depth with columns
    ``steps, american, european, premium`` (premium = american - european).
    """
    rows = []
    for n in steps_list:
        amer = price_option(s0, k, t, r, sigma, n_steps=int(n),
                            option_type=option_type, exercise="amer", grid=grid)
        euro = price_option(s0, k, t, r, sigma, n_steps=int(n),
                            option_type=option_type, exercise="euro")
        rows.append({"steps": int(n), "american": amer,
                     "european": euro, "premium": amer - euro})
    return pd.DataFrame(rows, columns=["steps", "american", "european", "premium"])
