"""
Flag registry defining all available feature flags.

This module defines all feature flags available in the system,
their compiled-in values, and provides typed access methods.
In this build the values cannot be changed at runtime.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping

from .flag_keys import FlagLike, FlagName, resolve_flag


class FlagRegistry:
    """
    Registry of all available feature flags and their values.

    This class centralizes the definition of all feature flags
    and provides both a typed lookup and one accessor per flag.
    """

    _FLAG_DEFINITIONS: Mapping[FlagName, bool] = MappingProxyType(
        {
            FlagName.ENABLE_SAFE_PARCELABLE: True,
            FlagName.ENABLE_LIST_FILTER_HAS_PROPERTY_FUNCTION: True,
            FlagName.ENABLE_GROUPING_TYPE_PER_SCHEMA: True,
            FlagName.ENABLE_GENERIC_DOCUMENT_COPY_CONSTRUCTOR: True,
        }
    )

    @classmethod
    def get_flag_default(cls, flag: FlagLike) -> bool:
        """Get the compiled-in value for a flag."""
        return cls._FLAG_DEFINITIONS[resolve_flag(flag)]

    @classmethod
    def get_all_flag_names(cls) -> List[str]:
        """Get list of all available flag short names."""
        return [flag.value for flag in cls._FLAG_DEFINITIONS]

    @classmethod
    def get_all_flag_keys(cls) -> List[str]:
        """Get list of all fully namespaced flag keys."""
        return [flag.key for flag in cls._FLAG_DEFINITIONS]

    @classmethod
    def is_valid_flag(cls, flag: str) -> bool:
        """Check if a short name or full key names a known flag."""
        try:
            resolve_flag(flag)
        except ValueError:
            return False
        return True

    @classmethod
    def is_enabled(cls, flag: FlagLike) -> bool:
        """
        Get the value of a flag.

        Args:
            flag: A FlagName, a short name, or a fully namespaced key.

        Returns:
            bool: The value of the flag.

        Raises:
            UnknownFlagError: If the flag is not part of the registry.
        """
        return cls.get_flag_default(flag)

    @classmethod
    def enable_safe_parcelable(cls) -> bool:
        """Check if SafeParcelable related features are enabled."""
        return cls._FLAG_DEFINITIONS[FlagName.ENABLE_SAFE_PARCELABLE]

    @classmethod
    def enable_list_filter_has_property_function(cls) -> bool:
        """Check if the hasProperty function is enabled in list filter queries."""
        return cls._FLAG_DEFINITIONS[FlagName.ENABLE_LIST_FILTER_HAS_PROPERTY_FUNCTION]

    @classmethod
    def enable_grouping_type_per_schema(cls) -> bool:
        """Check if results can be grouped per schema type."""
        return cls._FLAG_DEFINITIONS[FlagName.ENABLE_GROUPING_TYPE_PER_SCHEMA]

    @classmethod
    def enable_generic_document_copy_constructor(cls) -> bool:
        """Check if the GenericDocument copy constructor is enabled."""
        return cls._FLAG_DEFINITIONS[FlagName.ENABLE_GENERIC_DOCUMENT_COPY_CONSTRUCTOR]

    @classmethod
    def get_all_flags(cls) -> Dict[str, bool]:
        """
        Get the state of all feature flags.

        Returns:
            Dict[str, bool]: Fully namespaced flag keys mapped to their values
        """
        return {
            FlagName.ENABLE_SAFE_PARCELABLE.key: cls.enable_safe_parcelable(),
            FlagName.ENABLE_LIST_FILTER_HAS_PROPERTY_FUNCTION.key: (
                cls.enable_list_filter_has_property_function()
            ),
            FlagName.ENABLE_GROUPING_TYPE_PER_SCHEMA.key: cls.enable_grouping_type_per_schema(),
            FlagName.ENABLE_GENERIC_DOCUMENT_COPY_CONSTRUCTOR.key: (
                cls.enable_generic_document_copy_constructor()
            ),
        }
