"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully
validated, normalized, and immutable.
"""

from typing import Literal, Optional
from pydantic import ConfigDict, field_validator
from relstats.data.types import TypeKind
from relstats.schemas.base import RelstatsBaseModel, check_label_order


class InternalLabelsConfig(RelstatsBaseModel):
    """Runtime label fallback orders."""
    class_label_order: tuple[TypeKind, ...]
    object_label_order: tuple[TypeKind, ...]

    @field_validator("class_label_order", "object_label_order", mode="before")
    @classmethod
    def validate_order(cls, v):
        return check_label_order(v)


class InternalLoggingConfig(RelstatsBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    log_file: Optional[str]
    format: str
    datefmt: str


class InternalConfig(RelstatsBaseModel):
    """Authoritative runtime configuration.

    Runtime modules receive InternalConfig and access fields directly:

        def __init__(self, config: InternalConfig):
            self.object_label_order = config.labels.object_label_order
    """

    labels: InternalLabelsConfig
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )
