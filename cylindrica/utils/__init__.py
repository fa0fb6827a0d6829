from .default import value_or_default
from .dimension import get_dimension
from .num_utils import is_close_to_int, round_half_up, as_real

__all__ = [
    "value_or_default",
    "get_dimension",
    "is_close_to_int",
    "round_half_up",
    "as_real",
]
