"""American option pricing on a CRR binomial lattice."""

from alp.errors import InvalidArgument, MalformedParameter, MissingParameter
from alp.pricing.tree import price_american, price_option
from alp.types import ExerciseGrid, OptionType

__all__ = [
    "ExerciseGrid",
    "InvalidArgument",
    "MalformedParameter",
    "MissingParameter",
    "OptionType",
    "price_american",
    "price_option",
]

__version__ = "0.1.0"
