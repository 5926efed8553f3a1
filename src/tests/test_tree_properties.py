from hypothesis import given, settings, strategies as st

from alp.pricing.tree import price_american, price_option

spot = st.floats(min_value=10, max_value=300)
strike = st.floats(min_value=10, max_value=300)
maturity = st.floats(min_value=0.05, max_value=1.0)
rate = st.floats(min_value=0.0, max_value=0.08)
vol = st.floats(min_value=0.1, max_value=1.0)
steps = st.integers(min_value=1, max_value=120)
right = st.sampled_from(["call", "put"])
grid = st.sampled_from(["terminal", "node"])


@settings(max_examples=60, deadline=None)
@given(S=spot, K=strike, T=maturity, r=rate, sigma=vol, n=steps, opt=right, g=grid)
def test_price_never_negative(S, K, T, r, sigma, n, opt, g):
    assert price_american(S, K, T, r, sigma, n, opt, grid=g) >= 0.0


@settings(max_examples=60, deadline=None)
@given(S=spot, K=strike, T=maturity, r=rate, sigma=vol, n=steps, opt=right, g=grid)
def test_american_dominates_european(S, K, T, r, sigma, n, opt, g):
    amer = price_option(S, K, T, r, sigma, n_steps=n, option_type=opt, exercise="amer", grid=g)
    euro = price_option(S, K, T, r, sigma, n_steps=n, option_type=opt, exercise="euro")
    assert amer >= euro - 1e-9 * max(1.0, euro)


@settings(max_examples=60, deadline=None)
@given(S=spot, bump=st.floats(min_value=0.01, max_value=50), K=strike, T=maturity,
       r=rate, sigma=vol, n=steps, g=grid)
def test_monotone_in_spot(S, bump, K, T, r, sigma, n, g):
    lo, hi = S, S + bump
    call_lo = price_american(lo, K, T, r, sigma, n, "call", grid=g)
    call_hi = price_american(hi, K, T, r, sigma, n, "call", grid=g)
    put_lo = price_american(lo, K, T, r, sigma, n, "put", grid=g)
    put_hi = price_american(hi, K, T, r, sigma, n, "put", grid=g)
    tol = 1e-9 * max(1.0, call_hi, put_lo)
    assert call_hi >= call_lo - tol
    assert put_hi <= put_lo + tol


def test_node_grid_converges_in_steps():
    # bounded oscillation around a stable limit, no divergence
    for opt in ("call", "put"):
        prices = [price_american(100, 100, 1.0, 0.05, 0.2, n, opt, grid="node")
                  for n in (1, 10, 50, 100, 200, 300, 400, 500)]
        tail = prices[-4:]
        assert max(tail) - min(tail) < 0.02
        diffs = [abs(b - a) for a, b in zip(prices, prices[1:])]
        assert diffs[-1] < diffs[0]


def test_european_converges_to_black_scholes_put():
    p = price_option(100, 100, 1.0, 0.05, 0.2, n_steps=500, option_type="put", exercise="euro")
    assert abs(p - 5.5735) < 0.02
