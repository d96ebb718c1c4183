from .Match import Match
from .Player import Player

__all__ = [
    "Match",
    "Player",
]
