import logging
from typing import List, Optional, Tuple

from elorating.errors import InvalidMatchError
from elorating.math.elo import KFactor, validate_k_factor

from .Player import Player

__all__ = ["Match"]

logger = logging.getLogger(__name__)


class Match:
    '''
    A single game between any number of players.

    The K-factor used for every player of the match can be given here as a
    number or a function of rating; otherwise the one set with
    elo_configure() at the time ratings are computed is used.
    '''
    k_factor: Optional[KFactor]

    def __init__(self, k_factor: Optional[KFactor] = None) -> None:
        if k_factor is not None:
            validate_k_factor(k_factor)
        self.k_factor = k_factor
        self._players: List[Player] = []

    def __len__(self) -> int:
        return len(self._players)

    @property
    def players(self) -> Tuple[Player, ...]:
        return tuple(self._players)

    def add_player(self, rating: float, winner: bool = False, place: Optional[float] = None) -> "Match":
        """Adds a player to the match and returns the match, so calls can be chained.

        `place` ranks the player within the match, lower is better. Raises
        InvalidPlayerError if rating or place is not numeric, or if both
        winner and place are given.
        """
        self._players.append(Player(self, len(self._players), rating, winner=winner, place=place))
        return self

    def updated_ratings(self) -> List[int]:
        """Returns the updated rating of every player, in the order they were added.

        Raises InvalidMatchError if every player is marked as a winner, or if
        some but not all players have a place.
        """
        self._validate_players()
        logger.debug(f"Computing updated ratings for {len(self._players)} players")
        return [player.updated_rating() for player in self._players]

    def _validate_players(self) -> None:
        if self._all_winners():
            logger.debug("Rejecting match where every player is a winner")
            raise InvalidMatchError("Not all players can be winners")
        if self._inconsistent_places():
            logger.debug("Rejecting match with places given for only some players")
            raise InvalidMatchError("All players must have places if any do")

    def _all_winners(self) -> bool:
        # Only fires when every single player won; an empty match counts too.
        return len([p for p in self._players if p.winner]) == len(self._players)

    def _inconsistent_places(self) -> bool:
        placed = [p for p in self._players if p.place is not None]
        return 0 < len(placed) < len(self._players)
