"""Domain errors raised by the estimation engine on caller contract violations."""


class DomainError(ValueError):
    """Inputs to an estimation function are malformed. Never retried."""

    code = "domain_error"


class InvalidRepsError(DomainError):
    """target_reps must be a positive integer."""

    code = "invalid_reps"


class InvalidRangeError(DomainError):
    """A [min, max] range has min > max."""

    code = "invalid_range"
