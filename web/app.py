#!/usr/bin/env python3
from __future__ import annotations

# ---------------- PATH BOOTSTRAP ----------------
from pathlib import Path
import sys as _sys

ROOT = Path(__file__).resolve().parent          # .../web
PROJECT_ROOT = ROOT.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in _sys.path:
    _sys.path.insert(0, str(SRC_DIR))

# ---------------- stdlib / 3rd-party ----------------
import logging
import os
from typing import Any, Dict

import pandas as pd
import plotly.express as px
import streamlit as st

# ---------------- project imports ----------------
from alp.config import ALPConfig
from alp.errors import PricingError
from alp.logging_config import setup_logging
from alp.pricing.convergence import DEFAULT_STEPS, convergence_table
from alp.pricing.tree import price_option
from alp.request import parse_pricing_request

logger = logging.getLogger(__name__)

# ---------------- constants & small utils ----------------
DEFAULT_CONFIG = os.environ.get("ALP_CONFIG", str(PROJECT_ROOT / "config" / "server.yaml"))
DEFAULT_INPUTS: Dict[str, Any] = {
    "S": 100.0, "K": 100.0, "T": 1.0, "r": 0.05, "sigma": 0.2,
    "steps": 100, "optionType": "put",
}


def _is_running_under_pytest() -> bool:
    return "PYTEST_CURRENT_TEST" in os.environ


def _load_config() -> ALPConfig:
    path = DEFAULT_CONFIG if os.path.exists(DEFAULT_CONFIG) else None
    return ALPConfig.load(path)


def quote(inputs: Dict[str, Any], grid: str = "terminal") -> Dict[str, float]:
    """American / European values and the early-exercise premium for one form."""
    req = parse_pricing_request({k: str(v) for k, v in inputs.items()})
    kw = dict(n_steps=req.steps, option_type=req.option_type)
    amer = price_option(req.S, req.K, req.T, req.r, req.sigma, exercise="amer", grid=grid, **kw)
    euro = price_option(req.S, req.K, req.T, req.r, req.sigma, exercise="euro", **kw)
    return {"american": amer, "european": euro, "premium": amer - euro}


def convergence_frame(inputs: Dict[str, Any], grid: str = "terminal") -> pd.DataFrame:
    req = parse_pricing_request({k: str(v) for k, v in inputs.items()})
    steps = sorted({*DEFAULT_STEPS, req.steps})
    df = convergence_table(req.S, req.K, req.T, req.r, req.sigma,
                           option_type=req.option_type, steps_list=steps, grid=grid)
    return df.melt(id_vars="steps", value_vars=["american", "european"],
                   var_name="exercise", value_name="price")


# ---------------- UI ----------------
def sidebar_inputs(cfg: ALPConfig) -> tuple[Dict[str, Any], str]:
    st.sidebar.header("Contract")
    inputs = {
        "S": st.sidebar.number_input("Spot S", 0.01, 1e6, DEFAULT_INPUTS["S"], step=1.0),
        "K": st.sidebar.number_input("Strike K", 0.01, 1e6, DEFAULT_INPUTS["K"], step=1.0),
        "T": st.sidebar.number_input("Maturity T (years)", 0.001, 50.0, DEFAULT_INPUTS["T"], step=0.25),
        "r": st.sidebar.number_input("Rate r", -0.5, 0.5, DEFAULT_INPUTS["r"], step=0.005, format="%.4f"),
        "sigma": st.sidebar.number_input("Volatility σ", 0.001, 5.0, DEFAULT_INPUTS["sigma"], step=0.01),
        "steps": st.sidebar.number_input("Steps N", 1, 5000, DEFAULT_INPUTS["steps"], step=1),
        "optionType": st.sidebar.selectbox("Option type", ["call", "put"], index=1),
    }
    st.sidebar.subheader("Lattice")
    grids = ["terminal", "node"]
    grid = st.sidebar.selectbox("Early-exercise grid", grids,
                                index=grids.index(cfg["pricing"]["grid"]))
    return inputs, grid


def run() -> None:
    cfg = _load_config()
    setup_logging(cfg["logging"]["level"])
    st.set_page_config(page_title="American Lattice Pricer", layout="wide")
    st.title("American Lattice Pricer")

    inputs, grid = sidebar_inputs(cfg)
    try:
        q = quote(inputs, grid)
        df = convergence_frame(inputs, grid)
    except PricingError as e:
        logger.warning("pricing failed for %s: %s", inputs, e)
        st.error(str(e))
        return

    c1, c2, c3 = st.columns(3)
    c1.metric("American", f"{q['american']:.4f}")
    c2.metric("European", f"{q['european']:.4f}")
    c3.metric("Early-exercise premium", f"{q['premium']:.4f}")

    fig = px.line(df, x="steps", y="price", color="exercise", markers=True,
                  log_x=True, title="Convergence in tree depth")
    st.plotly_chart(fig, use_container_width=True)
    st.dataframe(df.pivot(index="steps", columns="exercise", values="price"))


if __name__ == "__main__" and not _is_running_under_pytest():
    run()
