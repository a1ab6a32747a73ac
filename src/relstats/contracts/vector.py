"""Vector field contracts.

Enforces that every element read from a vector field relation has exactly
the dimensionality its descriptor declares.
"""

from relstats.contracts.base import require


def assert_dimensionality(vector, expected: int, object_id=None) -> None:
    """Enforce the vector field invariant for a single element.

    Parameters
    ----------
    vector : NumberVector
        Element retrieved from a vector field relation.

    expected : int
        Dimensionality declared by the relation's descriptor.

    object_id : hashable, optional
        Identifier of the element, used in the error message.

    Raises
    ------
    ContractViolation
        If the element's dimensionality differs from ``expected``.
    """
    actual = vector.dimensionality
    require(
        actual == expected,
        f"Vector field contract violated: object {object_id!r} has "
        f"{actual} dimensions, descriptor declares {expected}"
    )
