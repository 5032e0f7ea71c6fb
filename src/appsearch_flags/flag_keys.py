"""
Flag identifiers for AppSearch features.

Every flag is identified by a namespaced key made of FLAG_PREFIX and the
flag's short name, e.g. ``com.android.appsearch.flags.enable_safe_parcelable``.
The set of flags is closed: adding one means adding a FlagName member here
and a default in the registry.
"""

from enum import Enum
from typing import Union

from .exceptions import UnknownFlagError

# Package name of the generated AppSearch flag classes plus a trailing '.'
FLAG_PREFIX = "com.android.appsearch.flags."


class FlagName(str, Enum):
    """Short names of all known flags."""

    ENABLE_SAFE_PARCELABLE = "enable_safe_parcelable"
    ENABLE_LIST_FILTER_HAS_PROPERTY_FUNCTION = "enable_list_filter_has_property_function"
    ENABLE_GROUPING_TYPE_PER_SCHEMA = "enable_grouping_type_per_schema"
    ENABLE_GENERIC_DOCUMENT_COPY_CONSTRUCTOR = "enable_generic_document_copy_constructor"

    @property
    def key(self) -> str:
        """Fully namespaced key of this flag."""
        return FLAG_PREFIX + self.value


FlagLike = Union[FlagName, str]


def resolve_flag(flag: FlagLike) -> FlagName:
    """
    Resolve a flag given as a FlagName, a short name, or a full key.

    Raises:
        UnknownFlagError: If the flag is not part of the registry.
    """
    if isinstance(flag, FlagName):
        return flag
    if not isinstance(flag, str):
        raise UnknownFlagError(repr(flag))
    name = flag[len(FLAG_PREFIX):] if flag.startswith(FLAG_PREFIX) else flag
    try:
        return FlagName(name)
    except ValueError as e:
        raise UnknownFlagError(flag) from e


def flag_key(flag: FlagLike) -> str:
    """Return the fully namespaced key for a known flag."""
    return resolve_flag(flag).key


FLAG_ENABLE_SAFE_PARCELABLE = FlagName.ENABLE_SAFE_PARCELABLE.key
FLAG_ENABLE_LIST_FILTER_HAS_PROPERTY_FUNCTION = FlagName.ENABLE_LIST_FILTER_HAS_PROPERTY_FUNCTION.key
FLAG_ENABLE_GROUPING_TYPE_PER_SCHEMA = FlagName.ENABLE_GROUPING_TYPE_PER_SCHEMA.key
FLAG_ENABLE_GENERIC_DOCUMENT_COPY_CONSTRUCTOR = FlagName.ENABLE_GENERIC_DOCUMENT_COPY_CONSTRUCTOR.key
