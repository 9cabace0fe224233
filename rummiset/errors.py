class RummisetError(Exception):
    """Base class for errors raised by rummiset."""


class InvalidTileValue(RummisetError, ValueError):
    """A basic tile was constructed with a value outside 1..13."""


class NotationError(RummisetError, ValueError):
    """Shorthand tile text could not be parsed."""


class InvariantViolation(RummisetError, RuntimeError):
    """The set validator reached a state it should never be in."""


class InvalidTileColor(RummisetError, ValueError):
    """A basic tile was constructed with something other than a Color."""
