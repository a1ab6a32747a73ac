"""Centralized error types for relation statistics.

All errors are raised at the point of detection and propagate unmodified.
There is no retry and no partial result: these are deterministic logic
errors, not transient faults.
"""


class InvalidArgument(ValueError):
    """Raised when a statistic is requested over an empty scope.

    A centroid, covariance or variance of zero elements is undefined. It is
    never returned as NaN or zero.
    """
    pass


class UnsupportedOperation(TypeError):
    """Raised when a relation without a vector field descriptor is passed to
    an operation that needs a dimensionality and a vector factory.
    """
    pass


class NoSupportedDataType(LookupError):
    """Raised when a database holds no relation of the requested kind."""
    pass


class ContractViolation(RuntimeError):
    """Raised when a relation breaks its own declared invariants.

    This indicates a bug in whatever built the relation, not bad user input.

    Key distinction:
    - InvalidArgument: caller asked for an undefined statistic
    - UnsupportedOperation: caller passed the wrong kind of relation
    - ContractViolation: relation content disagrees with its descriptor
    """
    pass
