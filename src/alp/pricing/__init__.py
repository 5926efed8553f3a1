from alp.pricing.tree import (
    intrinsic_value,
    lattice_params,
    price_american,
    price_option,
    terminal_prices,
)

__all__ = [
    "intrinsic_value",
    "lattice_params",
    "price_american",
    "price_option",
    "terminal_prices",
]
