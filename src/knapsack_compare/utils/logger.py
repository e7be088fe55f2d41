"""
Logging configuration for knapsack-compare.

Provides a single logger setup with optional file handler, console output
and a consistent format for solver runs.
"""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = "knapsack_compare",
    log_file: Path | None = None,
    level: int = logging.INFO,
    console_output: bool = True,
) -> logging.Logger:
    """
    Configure and return a logger with file and/or console handlers.

    Args:
        name: Logger name (typically "knapsack_compare")
        log_file: Path to log file (if None, only console logging)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: If True, also log to console (stderr)

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logger(log_file=Path("runs/compare.log"))
        >>> logger.info("Comparison started")
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Console goes to stderr so report output on stdout stays clean
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.propagate = False

    return logger


def get_logger(name: str = "knapsack_compare") -> logging.Logger:
    """
    Get an existing logger or create a basic one.

    Child loggers such as ``knapsack_compare.solvers.dp`` are returned as-is
    and inherit the handlers of the package logger.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)

    if "." in name:
        return logger

    if not logger.handlers:
        logger = setup_logger(name, log_file=None, level=logging.WARNING, console_output=True)

    return logger


def log_run_config(logger: logging.Logger, config: dict, title: str = "Run Configuration") -> None:
    """
    Log run configuration in a structured format.

    Args:
        logger: Logger instance
        config: Configuration dictionary (nested sections are flattened)
        title: Title for the config block
    """
    logger.info("=" * 60)
    logger.info(f"{title:^60}")
    logger.info("=" * 60)

    for key, value in sorted(_flatten(config).items()):
        logger.info(f"  {key:.<30} {value}")

    logger.info("=" * 60)


def log_metrics(
    logger: logging.Logger, metrics: dict, prefix: str = "", precision: int = 3
) -> None:
    """
    Log metrics in a formatted way.

    Args:
        logger: Logger instance
        metrics: Dictionary of metric name -> value
        prefix: Prefix string (e.g., "greedy |")
        precision: Number of decimal places for float formatting

    Example:
        >>> log_metrics(logger, {"profit": 90, "elapsed_ms": 0.042}, prefix="dp |")
    """
    metric_strs = []
    for name, value in metrics.items():
        if isinstance(value, float):
            metric_strs.append(f"{name}: {value:.{precision}f}")
        else:
            metric_strs.append(f"{name}: {value}")

    message = " | ".join(metric_strs)
    if prefix:
        message = f"{prefix} {message}"

    logger.info(message)


def _flatten(config: dict, parent: str = "") -> dict:
    flat = {}
    for key, value in config.items():
        full_key = f"{parent}.{key}" if parent else str(key)
        if isinstance(value, dict):
            flat.update(_flatten(value, full_key))
        else:
            flat[full_key] = value
    return flat
