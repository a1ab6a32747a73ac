"""ParamConfig: Expert defaults for relstats.

ALL tunable parameters must have defaults here. No runtime code should
define fallback values - this is the single source of truth for defaults.

Runtime code NEVER reads from ParamConfig directly - it only receives
InternalConfig.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from relstats.data.types import TypeKind
from relstats.schemas.base import RelstatsBaseModel, check_label_order


class LabelsConfig(RelstatsBaseModel):
    """Label representation fallback orders."""
    class_label_order: tuple[TypeKind, ...] = (
        TypeKind.CLASSLABEL,
        TypeKind.LABELLIST,
        TypeKind.STRING,
    )
    object_label_order: tuple[TypeKind, ...] = (
        TypeKind.LABELLIST,
        TypeKind.STRING,
        TypeKind.CLASSLABEL,
    )

    @field_validator("class_label_order", "object_label_order", mode="before")
    @classmethod
    def validate_order(cls, v):
        """Only label-like kinds, no duplicates."""
        return check_label_order(v)


class LoggingConfig(RelstatsBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Optional[str] = None
    format: str = Field("%(asctime)s - %(name)s - %(levelname)s - %(message)s", min_length=1)
    datefmt: str = "%Y-%m-%d %H:%M:%S"


class ParamConfig(RelstatsBaseModel):
    """Complete expert configuration with all defaults.

    Usage
    -----
    This config is NOT used directly by runtime code. It serves as the
    base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg)
    """

    labels: LabelsConfig = Field(default_factory=LabelsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
