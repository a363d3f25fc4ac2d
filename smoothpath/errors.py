class InvalidInputError(ValueError):
    """Raised when points, control points or sampling parameters are unusable."""


class InternalInvariantViolation(RuntimeError):
    """Raised when a computed result breaks an invariant that correct math
    guarantees, e.g. a missing or non-finite control point."""
