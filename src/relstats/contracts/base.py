"""Base contract enforcement utility.

The require() function is the single enforcement mechanism for all checks
in this package.
"""

from typing import Type

from relstats.contracts.failure import ContractViolation


def require(condition: bool, message: str, error: Type[Exception] = ContractViolation) -> None:
    """Enforce a contract.

    Fail-fast: no recovery, no fallback, no silence.

    Parameters
    ----------
    condition : bool
        The invariant that must be true.

    message : str
        Error message explaining the violation.

    error : type, default ContractViolation
        Exception class raised when ``condition`` is False.

    Raises
    ------
    ContractViolation
        Or ``error``, if condition is False.

    Examples
    --------
    >>> require(len(ids) > 0, "Cannot compute a centroid, because of empty list of ids!", InvalidArgument)
    """
    if not condition:
        raise error(message)
