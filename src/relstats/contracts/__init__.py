"""Error types and fail-fast contract enforcement.

Key principle:
- Pydantic validates config correctness
- Contracts validate relation correctness
- Statistics raise on undefined scopes
"""

from relstats.contracts.failure import (
    ContractViolation,
    InvalidArgument,
    NoSupportedDataType,
    UnsupportedOperation,
)
from relstats.contracts.base import require
from relstats.contracts.vector import assert_dimensionality

__all__ = [
    "ContractViolation",
    "InvalidArgument",
    "NoSupportedDataType",
    "UnsupportedOperation",
    "require",
    "assert_dimensionality",
]
