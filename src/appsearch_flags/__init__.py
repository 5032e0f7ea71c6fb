"""
Static feature flag registry for AppSearch.

This package provides the AppSearch feature flags with separated concerns:
- flag_keys: Namespaced flag keys and the closed set of flag names
- FlagRegistry: Compiled-in flag values and typed access methods
- FlagConfig: Immutable configuration value passed to consumers
- config_loader: Builds a FlagConfig from YAML
- Flags: Main facade coordinating all components
"""

from .exceptions import FlagConfigurationError, FlagError, UnknownFlagError
from .flag_keys import (
    FLAG_ENABLE_GENERIC_DOCUMENT_COPY_CONSTRUCTOR,
    FLAG_ENABLE_GROUPING_TYPE_PER_SCHEMA,
    FLAG_ENABLE_LIST_FILTER_HAS_PROPERTY_FUNCTION,
    FLAG_ENABLE_SAFE_PARCELABLE,
    FLAG_PREFIX,
    FlagName,
    flag_key,
)
from .flag_registry import FlagRegistry
from .flag_config import DEFAULT_FLAG_CONFIG, FlagConfig
from .config_loader import config_from_mapping, load_flag_config
from .main import (
    Flags,
    enable_generic_document_copy_constructor,
    enable_grouping_type_per_schema,
    enable_list_filter_has_property_function,
    enable_safe_parcelable,
)

__all__ = [
    "FLAG_PREFIX",
    "FLAG_ENABLE_SAFE_PARCELABLE",
    "FLAG_ENABLE_LIST_FILTER_HAS_PROPERTY_FUNCTION",
    "FLAG_ENABLE_GROUPING_TYPE_PER_SCHEMA",
    "FLAG_ENABLE_GENERIC_DOCUMENT_COPY_CONSTRUCTOR",
    "FlagName",
    "flag_key",
    "FlagRegistry",
    "FlagConfig",
    "DEFAULT_FLAG_CONFIG",
    "config_from_mapping",
    "load_flag_config",
    "Flags",
    "enable_safe_parcelable",
    "enable_list_filter_has_property_function",
    "enable_grouping_type_per_schema",
    "enable_generic_document_copy_constructor",
    "FlagError",
    "UnknownFlagError",
    "FlagConfigurationError",
]
