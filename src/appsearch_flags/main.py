"""
Main Flags facade.

This module provides the Flags class that callers use to branch on
features, along with module-level accessor functions for each flag.
"""

import logging
from typing import Dict, Optional

from .flag_config import FlagConfig
from .flag_keys import FlagLike, flag_key
from .flag_registry import FlagRegistry

logger = logging.getLogger(__name__)


class Flags:
    """
    Feature flag facade.

    Delegates to FlagRegistry for the compiled-in values. Values are
    immutable, so the facade is safe to call from any thread.
    """

    @classmethod
    def flag_key(cls, flag: FlagLike) -> str:
        """Return the fully namespaced key for a known flag."""
        return flag_key(flag)

    @classmethod
    def is_enabled(cls, flag: FlagLike) -> bool:
        """Get the value of a flag by FlagName, short name or full key."""
        return FlagRegistry.is_enabled(flag)

    @classmethod
    def enable_safe_parcelable(cls) -> bool:
        """Check if SafeParcelable related features are enabled."""
        return FlagRegistry.enable_safe_parcelable()

    @classmethod
    def enable_list_filter_has_property_function(cls) -> bool:
        """Check if the hasProperty function is enabled in list filter queries."""
        return FlagRegistry.enable_list_filter_has_property_function()

    @classmethod
    def enable_grouping_type_per_schema(cls) -> bool:
        """Check if results can be grouped per schema type."""
        return FlagRegistry.enable_grouping_type_per_schema()

    @classmethod
    def enable_generic_document_copy_constructor(cls) -> bool:
        """Check if the GenericDocument copy constructor is enabled."""
        return FlagRegistry.enable_generic_document_copy_constructor()

    @classmethod
    def get_all_flags(cls) -> Dict[str, bool]:
        """Get state of all feature flags keyed by their full key."""
        return FlagRegistry.get_all_flags()

    @classmethod
    def log_current_flags(cls, config: Optional[FlagConfig] = None) -> None:
        """Log the state of all feature flags for debugging."""
        flags = config.as_dict() if config is not None else cls.get_all_flags()
        logger.info("Current feature flag state:")
        for key, value in flags.items():
            logger.info(f"  {key}: {value}")


def enable_safe_parcelable() -> bool:
    return Flags.enable_safe_parcelable()


def enable_list_filter_has_property_function() -> bool:
    return Flags.enable_list_filter_has_property_function()


def enable_grouping_type_per_schema() -> bool:
    return Flags.enable_grouping_type_per_schema()


def enable_generic_document_copy_constructor() -> bool:
    return Flags.enable_generic_document_copy_constructor()
