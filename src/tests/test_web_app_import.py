# src/tests/test_web_app_import.py
import importlib


def test_quote_and_convergence_helpers():
    m = importlib.import_module("web.app")
    inputs = dict(m.DEFAULT_INPUTS, steps=25)
    q = m.quote(inputs, grid="node")
    assert q["american"] >= q["european"] >= 0
    assert abs(q["premium"] - (q["american"] - q["european"])) < 1e-12

    df = m.convergence_frame(inputs, grid="node")
    assert set(df.columns) == {"steps", "exercise", "price"}
    assert 25 in set(df["steps"])
