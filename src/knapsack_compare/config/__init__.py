"""
Configuration management and validation.

Provides Pydantic schemas and utilities for loading and validating
comparison run configurations.
"""

from knapsack_compare.config.loader import (
    config_to_dict,
    load_config,
    validate_config_file,
)
from knapsack_compare.config.schemas import (
    CompareConfig,
    GeneratorConfig,
    LimitsConfig,
    LoggingConfig,
    TimingConfig,
)

__all__ = [
    "CompareConfig",
    "GeneratorConfig",
    "LimitsConfig",
    "TimingConfig",
    "LoggingConfig",
    "load_config",
    "validate_config_file",
    "config_to_dict",
]
