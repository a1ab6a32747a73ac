"""Test config resolution and validation with Pydantic."""

import pytest
from pydantic import ValidationError

from relstats.data import TypeKind
from relstats.schemas import InternalConfig, ParamConfig, UserConfig
from relstats.schemas.resolve import deep_merge, resolve_config

pytestmark = pytest.mark.unit


class TestConfigResolution:
    """Test resolve_config() precedence and merging."""

    def test_resolve_config_all_defaults(self):
        """Resolving with no user overrides uses all ParamConfig defaults."""
        config = resolve_config(ParamConfig(), None)

        assert isinstance(config, InternalConfig)
        assert config.logging.level == "INFO"
        assert config.logging.log_file is None
        assert tuple(config.labels.class_label_order) == ("classlabel", "labellist", "string")
        assert tuple(config.labels.object_label_order) == ("labellist", "string", "classlabel")

    def test_param_config_may_be_omitted(self):
        assert resolve_config() == resolve_config(ParamConfig(), None)

    def test_user_config_overrides_param_config(self):
        """UserConfig values override ParamConfig defaults."""
        config = resolve_config(ParamConfig(), UserConfig(log_level="debug", log_file="/tmp/x.log"))

        assert config.logging.level == "DEBUG"
        assert config.logging.log_file == "/tmp/x.log"
        # untouched sections keep defaults
        assert config.labels.class_label_order[0] == TypeKind.CLASSLABEL

    def test_user_dict_is_validated(self):
        config = resolve_config({}, {"OBJECT_LABEL_ORDER": ["string"]})
        assert tuple(config.labels.object_label_order) == ("string",)

    def test_param_dict_is_validated(self):
        config = resolve_config({"logging": {"level": "WARNING"}})
        assert config.logging.level == "WARNING"

    def test_internal_config_is_frozen(self, internal_config):
        with pytest.raises(ValidationError):
            internal_config.logging = None

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            resolve_config(ParamConfig(), UserConfig(log_level="loud"))


class TestLabelOrderValidation:

    def test_non_label_kind_rejected(self):
        with pytest.raises(ValidationError, match="not a label-like kind"):
            UserConfig(class_label_order=["vector_field"])

    def test_duplicates_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate"):
            ParamConfig.model_validate({"labels": {"object_label_order": ["string", "STRING"]}})

    def test_empty_order_rejected(self):
        with pytest.raises(ValidationError, match="at least one"):
            ParamConfig.model_validate({"labels": {"class_label_order": []}})

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            UserConfig(object_label_order=["colour"])


class TestUserConfig:

    def test_uppercase_keys_are_handled(self):
        user = UserConfig.model_validate({"LOG_LEVEL": "error", "LOG_FILE": "run.log"})
        assert user.log_level == "ERROR"
        assert user.log_file == "run.log"

    def test_unknown_keys_are_ignored(self):
        user = UserConfig.model_validate({"LOG_LEVEL": "info", "UNKNOWN_LEGACY": 12345})
        assert not hasattr(user, "UNKNOWN_LEGACY")

    def test_empty_user_config_has_no_overrides(self):
        assert UserConfig().to_internal_overrides() == {}


def test_deep_merge_nested():
    base = {"a": 1, "b": {"c": 2, "d": 3}}
    override = {"b": {"d": 4, "e": 5}, "f": 6}
    assert deep_merge(base, override) == {"a": 1, "b": {"c": 2, "d": 4, "e": 5}, "f": 6}
    assert base == {"a": 1, "b": {"c": 2, "d": 3}}
