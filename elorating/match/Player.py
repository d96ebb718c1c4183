import logging
from math import copysign, floor
from numbers import Real
from typing import TYPE_CHECKING, Any, List, Optional

from elorating.errors import InvalidPlayerError
from elorating.math.elo import expected_score, rating_adjustment

if TYPE_CHECKING:  # pragma: no cover
    from .Match import Match

__all__ = ["Player"]

logger = logging.getLogger(__name__)


def is_numeric(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def round_half_away_from_zero(value: float) -> int:
    return int(copysign(floor(abs(value) + 0.5), value))


class Player:
    '''
    One participant of a Match. Players are created by Match.add_player and
    look up their opponents through the match they belong to, using their
    index in it.
    '''
    rating: float
    place: Optional[float]
    match: "Match"
    index: int

    def __init__(
        self,
        match: "Match",
        index: int,
        rating: float,
        winner: Optional[bool] = False,
        place: Optional[float] = None,
    ) -> None:
        self.match = match
        self.index = index
        self.rating = rating
        self.place = place
        self._validate(winner)
        self._winner = bool(winner)

    def _validate(self, winner: Optional[bool]) -> None:
        if not is_numeric(self.rating):
            raise InvalidPlayerError("Rating must be numeric")
        if winner is not None and not isinstance(winner, bool):
            raise InvalidPlayerError("Winner must be true or false")
        if winner and self.place is not None:
            raise InvalidPlayerError("Winner and place cannot both be specified")
        if self.place is not None and not is_numeric(self.place):
            raise InvalidPlayerError("Place must be numeric")

    def __str__(self) -> str:
        return "%6.2f%s" % (self.rating, " (winner)" if self._winner else "")

    @property
    def winner(self) -> bool:
        return self._winner

    @property
    def opponents(self) -> List["Player"]:
        return [p for p in self.match.players if p.index != self.index]

    @property
    def winners(self) -> List["Player"]:
        return [p for p in self.opponents if p.winner]

    @property
    def losers(self) -> List["Player"]:
        return [p for p in self.opponents if not p.winner]

    @property
    def all_winners(self) -> List["Player"]:
        # includes self
        return [p for p in self.match.players if p.winner]

    def updated_rating(self) -> int:
        return round_half_away_from_zero(self.rating + self.total_rating_adjustment())

    def total_rating_adjustment(self) -> float:
        if not self.all_winners:
            return 0.0

        if self.winner:
            # Winners collect from every losing opponent, never from co-winners
            adjustment = sum((self.rating_adjustment_against(p) for p in self.losers), 0.0)
        elif len(self.winners) > 1:
            # A loser facing several winners loses once, against their mean rating
            ratings = [p.rating for p in self.winners]
            average_rating = sum(ratings, 0.0) / len(ratings)
            adjustment = rating_adjustment(
                expected_score(self.rating, average_rating),
                0,
                rating=self.rating,
                k=self.match.k_factor,
            )
        else:
            adjustment = self.rating_adjustment_against(self.winners[0])

        logger.debug(f"Player {self.index} ({self.rating}) adjusted by {adjustment:.4f}")
        return adjustment

    def rating_adjustment_against(self, opponent: "Player") -> float:
        adjustment = rating_adjustment(
            self.expected_score_against(opponent),
            self.actual_score_against(opponent),
            rating=self.rating,
            k=self.match.k_factor,
        )

        # A shared win is split evenly between all the winners
        if self.winner and self.winners:
            return adjustment / len(self.all_winners)

        return adjustment

    def expected_score_against(self, opponent: "Player") -> float:
        return expected_score(self.rating, opponent.rating)

    def actual_score_against(self, opponent: "Player") -> Optional[int]:
        if self.winner:
            return 1
        if self.winners:
            return 0
        return None

    def won_against(self, opponent: "Player") -> Optional[bool]:
        """True if this player won the match, or placed ahead of `opponent`.

        None when neither player won and either one has no place.
        """
        if self.winner:
            return True
        return self.placed_ahead_of(opponent)

    def placed_ahead_of(self, opponent: "Player") -> Optional[bool]:
        if self.place is not None and opponent.place is not None:
            return self.place < opponent.place
        return None
