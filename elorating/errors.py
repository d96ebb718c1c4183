__all__ = ["EloRatingError", "InvalidPlayerError", "InvalidMatchError", "InvalidKFactorError"]


class EloRatingError(Exception):
    pass


class InvalidPlayerError(EloRatingError, ValueError):
    '''
    Raised when a player is added to a match with a bad rating or place, or
    with both winner and place given.
    '''


class InvalidMatchError(EloRatingError, ValueError):
    '''
    Raised when ratings are requested for a match whose set of players is
    inconsistent as a whole.
    '''


class InvalidKFactorError(EloRatingError, TypeError):
    pass
