"""Elo ratings for matches between any number of players."""

from .errors import EloRatingError, InvalidKFactorError, InvalidMatchError, InvalidPlayerError
from .match import Match, Player
from .math import elo_configure, expected_score, get_k_factor, k_factor, rating_adjustment

__all__ = [
    "Match",
    "Player",
    "EloRatingError",
    "InvalidKFactorError",
    "InvalidMatchError",
    "InvalidPlayerError",
    "elo_configure",
    "expected_score",
    "get_k_factor",
    "k_factor",
    "rating_adjustment",
]
