from .default import value_or_default, resolve_rng
from .num_utils import finite_or_raise, round_half_up, np_round_half_up, round_channel

__all__ = [
    "value_or_default",
    "resolve_rng",
    "finite_or_raise",
    "round_half_up",
    "np_round_half_up",
    "round_channel",
]
