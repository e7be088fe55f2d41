"""
Configuration loading for comparison runs.

A run configuration is built in layers: schema defaults, then an optional
YAML file, then per-run overrides (usually command line options). The merged
mapping is validated once against ``CompareConfig``.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from knapsack_compare.config.schemas import CompareConfig
from knapsack_compare.types import PathLike
from knapsack_compare.utils.error_handler import ConfigurationError


def read_config_file(config_path: PathLike) -> dict[str, Any]:
    """
    Read a YAML config file into a plain mapping without validating it.

    Raises:
        ConfigurationError: If the file is missing, unreadable, empty,
            not valid YAML, or not a mapping at the top level
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}",
            suggestion="Check the path or copy configs/default.yaml as a template.",
        )

    try:
        with open(config_file) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in config file: {config_path}",
            suggestion=f"Fix YAML syntax error: {e}",
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read config file: {config_path}",
            suggestion=f"Error: {e}",
        ) from e

    if raw is None:
        raise ConfigurationError(
            f"Empty configuration file: {config_path}",
            suggestion="Add settings such as seed or generator.max_value, or drop --config.",
        )
    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping: {config_path}",
            suggestion="Use top-level keys such as seed, generator, limits.",
        )

    return raw


def merge_overrides(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """
    Layer ``overrides`` on top of ``base``.

    Nested sections are merged key by key; ``None`` leaves are skipped so
    unset command line options keep the file's value.

    Example:
        >>> merge_overrides({"generator": {"min_value": 5, "max_value": 20}},
        ...                 {"seed": 3, "generator": {"max_value": 50, "min_value": None}})
        {'generator': {'min_value': 5, 'max_value': 50}, 'seed': 3}
    """
    merged = dict(base)
    for key, value in overrides.items():
        if value is None:
            continue
        if isinstance(value, Mapping):
            section = merged.get(key)
            section = merge_overrides(section if isinstance(section, Mapping) else {}, value)
            # A section with nothing set adds no key
            if section or key in merged:
                merged[key] = section
        else:
            merged[key] = value
    return merged


def load_config(
    config_path: PathLike | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> CompareConfig:
    """
    Build a validated run configuration.

    Args:
        config_path: Optional YAML file; schema defaults are used without one
        overrides: Optional nested mapping applied on top of the file

    Returns:
        Validated CompareConfig object

    Raises:
        ConfigurationError: On file problems or if the merged settings fail
            validation. The message names where the settings came from.

    Example:
        >>> config = load_config("configs/default.yaml", overrides={"seed": 7})
        >>> config.seed
        7
    """
    file_dict = read_config_file(config_path) if config_path is not None else {}
    config_dict = merge_overrides(file_dict, overrides or {})

    sources = []
    if config_path is not None:
        sources.append(str(config_path))
    if config_dict != file_dict:
        sources.append("command line overrides")
    source = " + ".join(sources) or "defaults"

    try:
        return CompareConfig(**config_dict)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            loc = " -> ".join(str(x) for x in error["loc"])
            errors.append(f"  - {loc}: {error['msg']}")

        raise ConfigurationError(
            f"Configuration validation failed for {source}:\n" + "\n".join(errors),
            suggestion="Fix the settings listed above; --seed, --min-value and --max-value "
            "override the file. See configs/default.yaml for a valid example.",
        ) from e


def validate_config_file(config_path: PathLike) -> tuple[bool, str]:
    """
    Validate config file without raising exceptions.

    Returns:
        Tuple of (is_valid, message)
    """
    try:
        load_config(config_path)
        return True, f"✓ Configuration is valid: {config_path}"
    except ConfigurationError as e:
        return False, f"✗ {e.message}"


def config_to_dict(config: CompareConfig) -> dict[str, Any]:
    """Convert CompareConfig to a plain dictionary."""
    return config.model_dump()
