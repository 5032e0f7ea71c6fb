"""
Load flag configurations from YAML files.

The document must contain a ``flags`` mapping whose keys are flag short
names or fully namespaced keys and whose values are booleans. Flags that
are not listed keep their compiled-in value. Loading never changes the
registry; it only produces a FlagConfig.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from .exceptions import FlagConfigurationError
from .flag_config import FlagConfig
from .flag_registry import FlagRegistry

logger = logging.getLogger(__name__)

FLAGS_SECTION = "flags"


def config_from_mapping(
    data: Optional[Mapping[str, Any]], base: Optional[FlagConfig] = None
) -> FlagConfig:
    """
    Build a FlagConfig from an already parsed configuration document.

    Args:
        data: Parsed document; None or an empty mapping yields the base config
        base: Configuration to apply the overrides to (defaults to compiled-in values)

    Returns:
        FlagConfig: The resulting configuration

    Raises:
        FlagConfigurationError: If the document shape, a flag name or a value is invalid
    """
    base = base if base is not None else FlagConfig.default()
    if data is None:
        return base
    if not isinstance(data, Mapping):
        raise FlagConfigurationError(
            f"Flag configuration must be a mapping, got {type(data).__name__}"
        )

    section = data.get(FLAGS_SECTION)
    if section is None:
        return base
    if not isinstance(section, Mapping):
        raise FlagConfigurationError(
            f"'{FLAGS_SECTION}' must be a mapping, got {type(section).__name__}"
        )

    overrides: dict[str, bool] = {}
    for raw_name, value in section.items():
        if not FlagRegistry.is_valid_flag(raw_name):
            raise FlagConfigurationError(f"Unknown flag in configuration: {raw_name}")
        if not isinstance(value, bool):
            raise FlagConfigurationError(
                f"Value for flag '{raw_name}' must be true or false, got {value!r}"
            )
        overrides[raw_name] = value

    if overrides:
        logger.debug("Applying flag overrides: %s", overrides)
    return base.with_overrides(overrides)


def load_flag_config(
    file_path: Union[str, Path], base: Optional[FlagConfig] = None
) -> FlagConfig:
    """
    Load a FlagConfig from a YAML file.

    Args:
        file_path: Path to the YAML file
        base: Configuration to apply the overrides to (defaults to compiled-in values)

    Returns:
        FlagConfig: The resulting configuration

    Raises:
        FlagConfigurationError: If the file cannot be read or its content is invalid
    """
    file_path = Path(file_path)
    logger.debug(f"Loading flag configuration from {file_path}")

    if not file_path.exists():
        raise FlagConfigurationError(f"Flag configuration file not found: {file_path}")
    if not file_path.is_file():
        raise FlagConfigurationError(f"Flag configuration path is not a file: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise FlagConfigurationError(f"Invalid YAML in {file_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise FlagConfigurationError(f"Cannot read {file_path}: {e}") from e

    try:
        return config_from_mapping(data, base)
    except FlagConfigurationError as e:
        raise FlagConfigurationError(f"{file_path}: {e}") from e
