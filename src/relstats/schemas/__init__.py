"""Pydantic configuration schemas for relstats.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Expert defaults (complete)
UserConfig : class
    User-facing configuration (forgiving, minimal)
"""

from relstats.schemas.resolve import resolve_config
from relstats.schemas.internal import InternalConfig
from relstats.schemas.param import ParamConfig
from relstats.schemas.user import UserConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
]
