"""Root-level pytest fixtures for the relstats test suite.

Provides shared configuration fixtures and small relations/databases used
across the statistics, label and introspection tests.
"""

import pytest
import numpy as np

from relstats.schemas import ParamConfig, UserConfig, resolve_config
from relstats.data import (
    LabelList,
    SimpleClassLabel,
    SimpleTypeInformation,
    TypeKind,
)
from relstats.database import Database, MaterializedRelation


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Expert configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Examples
    --------
    >>> def test_custom_order(make_config):
    ...     config = make_config(object_label_order=["string"])
    """
    def _make(**user_overrides):
        """Create InternalConfig with user overrides."""
        if user_overrides:
            return resolve_config(param_config, UserConfig(**user_overrides))
        return resolve_config(param_config, None)

    return _make


# =============================================================================
# Relation Fixtures
# =============================================================================

@pytest.fixture
def make_relation():
    """Factory for vector relations from nested lists."""
    def _make(rows, ids=None, **kwargs):
        return MaterializedRelation.from_array(np.asarray(rows, dtype=float), ids=ids, **kwargs)
    return _make


@pytest.fixture
def two_points(make_relation):
    """{(1,2), (3,4)} with ids 10 and 20."""
    return make_relation([[1, 2], [3, 4]], ids=[10, 20])


@pytest.fixture
def string_relation():
    return MaterializedRelation(
        SimpleTypeInformation(TypeKind.STRING, str),
        ["alpha", "beta", "gamma"],
        ids=["a", "b", "c"],
    )


@pytest.fixture
def classlabel_relation():
    return MaterializedRelation(
        SimpleTypeInformation(TypeKind.CLASSLABEL, SimpleClassLabel),
        [SimpleClassLabel("red"), SimpleClassLabel("blue"), SimpleClassLabel("red")],
        ids=["a", "b", "c"],
    )


@pytest.fixture
def labellist_relation():
    return MaterializedRelation(
        SimpleTypeInformation(TypeKind.LABELLIST, LabelList),
        [LabelList(["obj", "1"]), LabelList(["obj", "2"]), LabelList(["other"])],
        ids=["a", "b", "c"],
    )


@pytest.fixture
def full_label_db(make_relation, string_relation, classlabel_relation, labellist_relation):
    """Database with vectors and all three label kinds."""
    vectors = make_relation([[0, 0], [1, 1], [2, 2]], ids=["a", "b", "c"])
    return Database([vectors, string_relation, classlabel_relation, labellist_relation])
