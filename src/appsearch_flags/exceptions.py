"""
Custom exceptions for the feature flag system.
"""


class FlagError(Exception):
    """Base class for feature flag errors."""

    pass


class UnknownFlagError(FlagError, ValueError):
    """Raised when a flag name is not part of the registry."""

    def __init__(self, flag_name: str):
        self.flag_name = flag_name
        super().__init__(f"Unknown flag: {flag_name}")


class FlagConfigurationError(FlagError):
    """Raised when a flag configuration source cannot be applied."""

    pass
