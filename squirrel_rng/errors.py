class SquirrelRngError(Exception):
    """Base class for errors raised by squirrel_rng."""


class EmptyCollectionError(SquirrelRngError, IndexError):
    """Raised when a selection is requested from an empty collection."""
