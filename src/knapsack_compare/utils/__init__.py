"""Utility functions for logging and error handling."""

from knapsack_compare.utils.error_handler import (
    ConfigurationError,
    KnapsackCompareError,
    ValidationError,
    handle_cli_errors,
    require_non_negative_int,
    validate_knapsack_arrays,
)
from knapsack_compare.utils.logger import (
    get_logger,
    log_metrics,
    log_run_config,
    setup_logger,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "log_run_config",
    "log_metrics",
    "KnapsackCompareError",
    "ConfigurationError",
    "ValidationError",
    "handle_cli_errors",
    "require_non_negative_int",
    "validate_knapsack_arrays",
]
