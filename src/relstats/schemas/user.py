"""UserConfig: Forgiving, minimal user-facing configuration.

Users only specify what they want to override from the expert defaults.
Keys are flat, upper-case aliases are accepted, and unknown keys are
ignored.
"""

from typing import Optional
from pydantic import Field, field_validator
from relstats.schemas.base import RelstatsBaseModel, check_label_order


class UserConfig(RelstatsBaseModel):
    """User-facing configuration schema.

    Usage
    -----
        user_cfg = UserConfig(
            log_level="debug",
            object_label_order=["string", "labellist"],
        )

        internal = resolve_config(param_cfg, user_cfg)
    """

    log_level: Optional[str] = Field(None, alias="LOG_LEVEL")
    log_file: Optional[str] = Field(None, alias="LOG_FILE")
    class_label_order: Optional[tuple] = Field(None, alias="CLASS_LABEL_ORDER")
    object_label_order: Optional[tuple] = Field(None, alias="OBJECT_LABEL_ORDER")

    model_config = RelstatsBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown legacy keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Normalize level names to upper case."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    @field_validator("class_label_order", "object_label_order", mode="before")
    @classmethod
    def validate_order(cls, v):
        """Accept kind names in any case."""
        return check_label_order(v)

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        logging_cfg = {}
        if self.log_level is not None:
            logging_cfg["level"] = self.log_level
        if self.log_file is not None:
            logging_cfg["log_file"] = self.log_file
        if logging_cfg:
            overrides["logging"] = logging_cfg

        labels = {}
        if self.class_label_order is not None:
            labels["class_label_order"] = self.class_label_order
        if self.object_label_order is not None:
            labels["object_label_order"] = self.object_label_order
        if labels:
            overrides["labels"] = labels

        return overrides
