import logging
from numbers import Real
from typing import Callable, Optional, Union

from elorating.errors import InvalidKFactorError

__all__ = [
    "elo_configure",
    "get_k_factor",
    "k_factor",
    "validate_k_factor",
    "expected_score",
    "rating_adjustment",
]

logger = logging.getLogger(__name__)

KFactor = Union[float, Callable[[float], float]]

K_FACTOR: KFactor = 24.0


def expected_score(rating: float, opponent_rating: float) -> float:
    return 1 / (1 + 10 ** ((opponent_rating - rating) / 400))


def validate_k_factor(k: KFactor) -> None:
    if not callable(k) and (isinstance(k, bool) or not isinstance(k, Real)):
        raise InvalidKFactorError("K-factor must be numeric or a function of rating")


def k_factor(rating: Optional[float] = None, override: Optional[KFactor] = None) -> float:
    """Resolves the K value to use for a player at `rating`.

    An explicit `override` wins over the globally configured one. Either may
    be a plain number or a callable taking the player's rating, in which case
    `rating` is required.
    """
    global K_FACTOR

    k = K_FACTOR if override is None else override
    if callable(k):
        if rating is None:
            raise InvalidKFactorError("A rating is required when the K-factor is a function of rating")
        return k(rating)
    return k


def rating_adjustment(
    expected: float, actual: float, rating: Optional[float] = None, k: Optional[KFactor] = None
) -> float:
    return k_factor(rating, k) * (actual - expected)


def get_k_factor() -> KFactor:
    global K_FACTOR
    return K_FACTOR


def elo_configure(k_factor: KFactor = 24.0) -> None:
    global K_FACTOR

    validate_k_factor(k_factor)

    logger.info(f"K-factor set to {k_factor!r}")
    K_FACTOR = k_factor
