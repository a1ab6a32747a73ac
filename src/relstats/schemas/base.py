"""Base Pydantic model with strict defaults for relstats configs.

All config schemas inherit from this base to ensure consistent validation
behavior across parameter, user, and internal configs.
"""

from pydantic import BaseModel, ConfigDict

from relstats.data.types import LABEL_KINDS, TypeKind


class RelstatsBaseModel(BaseModel):
    """Base model for all relstats configuration schemas.

    Enforces strict validation:
    - No extra fields allowed
    - Validates assignments after initialization
    - Stores enums as their values
    - Strips whitespace from strings
    """

    model_config = ConfigDict(
        extra='forbid',           # Reject unknown fields
        validate_assignment=True, # Validate on field mutation
        use_enum_values=True,     # Convert enums to values
        str_strip_whitespace=True,# Strip whitespace from strings
    )


def check_label_order(order):
    """Validate a label fallback order.

    Must be non-empty, contain only label-like kinds, and name each kind
    at most once. Kind names are matched case-insensitively.
    """
    if order is None:
        return order
    kinds = []
    for item in order:
        kind = TypeKind(item.lower().strip() if isinstance(item, str) else item)
        if kind not in LABEL_KINDS:
            raise ValueError(f"'{kind.value}' is not a label-like kind")
        if kind in kinds:
            raise ValueError(f"Duplicate kind '{kind.value}' in label order")
        kinds.append(kind)
    if not kinds:
        raise ValueError("Label order must name at least one kind")
    return tuple(kinds)
