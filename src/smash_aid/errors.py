"""Exception types raised while building and narrating movesets.

Move-name classification never raises: unknown labels simply standardize
to themselves.
"""


class SmashAidError(Exception):
    """Base exception for smash_aid."""
    pass


class FetchError(SmashAidError):
    """Raised when a character's source page can't be retrieved."""
    pass


class RecordShapeError(SmashAidError, ValueError):
    """
    Raised when a table row doesn't match its move kind's expected shape.

    Usually means the upstream page layout drifted. Fatal for the
    character being extracted.
    """
    pass


class GroupingOverflowError(SmashAidError):
    """
    Raised when a special-move table yields more than four slots.

    Points at a missing entry in the per-character exception tables.
    """
    pass


class MoveNotFoundError(SmashAidError, KeyError):
    """Raised when a moveset has no entry for the requested move."""
    pass


class UnrecognizedMoveError(SmashAidError, ValueError):
    """Raised when a move group has nothing that can be narrated."""
    pass
