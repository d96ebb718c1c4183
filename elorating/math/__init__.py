from .elo import (
    elo_configure,
    expected_score,
    get_k_factor,
    k_factor,
    rating_adjustment,
    validate_k_factor,
)

__all__ = [
    "elo_configure",
    "expected_score",
    "get_k_factor",
    "k_factor",
    "rating_adjustment",
    "validate_k_factor",
]
