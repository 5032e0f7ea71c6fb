"""
Immutable flag configuration.

A FlagConfig carries one boolean per flag and is passed explicitly to the
components that branch on flags. The default instance mirrors the registry;
tests and embedders build alternate instances with with_overrides().
"""

import dataclasses
from dataclasses import dataclass
from typing import Dict, Mapping

from .exceptions import FlagConfigurationError
from .flag_keys import FlagLike, FlagName, resolve_flag
from .flag_registry import FlagRegistry


@dataclass(frozen=True)
class FlagConfig:
    """Snapshot of all flag values."""

    enable_safe_parcelable: bool = FlagRegistry.enable_safe_parcelable()
    enable_list_filter_has_property_function: bool = (
        FlagRegistry.enable_list_filter_has_property_function()
    )
    enable_grouping_type_per_schema: bool = FlagRegistry.enable_grouping_type_per_schema()
    enable_generic_document_copy_constructor: bool = (
        FlagRegistry.enable_generic_document_copy_constructor()
    )

    def __post_init__(self) -> None:
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, bool):
                raise TypeError(
                    f"Flag '{field.name}' must be a bool, got {type(value).__name__}"
                )

    @classmethod
    def default(cls) -> "FlagConfig":
        """Return the compiled-in flag values."""
        return cls()

    def is_enabled(self, flag: FlagLike) -> bool:
        """Get the value of a flag in this configuration."""
        return bool(getattr(self, resolve_flag(flag).value))

    def with_overrides(self, overrides: Mapping[FlagLike, bool]) -> "FlagConfig":
        """
        Return a copy of this configuration with some flags replaced.

        Args:
            overrides: Flags (FlagName, short name or full key) mapped to new values

        Returns:
            FlagConfig: A new instance; this one is left untouched.

        Raises:
            UnknownFlagError: If a flag is not part of the registry
            FlagConfigurationError: If the same flag is given more than once
        """
        changes: Dict[str, bool] = {}
        for flag, value in overrides.items():
            name = resolve_flag(flag).value
            if name in changes:
                raise FlagConfigurationError(f"Flag '{name}' is configured more than once")
            changes[name] = value
        return dataclasses.replace(self, **changes)

    def as_dict(self) -> Dict[str, bool]:
        """Fully namespaced flag keys mapped to their values."""
        return {flag.key: getattr(self, flag.value) for flag in FlagName}


DEFAULT_FLAG_CONFIG = FlagConfig.default()
