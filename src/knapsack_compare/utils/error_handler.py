"""
Error handling utilities for knapsack-compare.

Provides custom exception classes, input guards for the solvers and a
decorator that turns errors into readable CLI messages.
"""

import functools
import sys
import traceback
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

import click
import numpy as np

# Type variable for decorators
F = TypeVar("F", bound=Callable[..., Any])


# ============================================================================
# Custom Exception Hierarchy
# ============================================================================


class KnapsackCompareError(Exception):
    """Base exception for knapsack-compare errors."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        """
        Initialize error with message and optional suggestion.

        Args:
            message: Error description
            suggestion: Actionable suggestion for fixing the error
        """
        self.message = message
        self.suggestion = suggestion
        super().__init__(message)

    def format_error(self) -> str:
        """Format error message with suggestion."""
        parts = [f"Error: {self.message}"]
        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")
        return "\n".join(parts)


class ConfigurationError(KnapsackCompareError):
    """Error related to configuration files or parameters."""

    pass


class ValidationError(KnapsackCompareError):
    """Error related to input validation."""

    pass


# ============================================================================
# Error Handlers
# ============================================================================


def format_exception_info(exc: Exception, show_traceback: bool = False) -> str:
    """
    Format exception information for display.

    Args:
        exc: The exception to format
        show_traceback: Whether to include full traceback

    Returns:
        Formatted error string
    """
    if isinstance(exc, KnapsackCompareError):
        return exc.format_error()
    elif show_traceback:
        return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    else:
        error_type = type(exc).__name__
        return f"Error ({error_type}): {str(exc)}"


def handle_cli_errors(
    debug_flag_name: str = "debug",
) -> Callable[[F], F]:
    """
    Decorator for CLI commands to handle errors gracefully.

    Args:
        debug_flag_name: Name of the debug flag in the command signature

    Returns:
        Decorator function

    Example:
        >>> @click.command()
        >>> @click.option("--debug", is_flag=True)
        >>> @handle_cli_errors()
        >>> def solve(debug):
        ...     pass
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            debug_mode = kwargs.get(debug_flag_name, False)

            try:
                return func(*args, **kwargs)

            except KnapsackCompareError as e:
                click.secho(e.format_error(), fg="red", err=True)
                if debug_mode:
                    click.secho("\nFull traceback:", fg="yellow", err=True)
                    traceback.print_exc()
                sys.exit(1)

            except PermissionError as e:
                msg = f"Permission denied: {e.filename}"
                suggestion = "Check file permissions for the output path."
                click.secho(f"Error: {msg}", fg="red", err=True)
                click.secho(f"Suggestion: {suggestion}", fg="yellow", err=True)
                if debug_mode:
                    traceback.print_exc()
                sys.exit(1)

            except KeyboardInterrupt:
                click.secho("\n\nOperation cancelled by user.", fg="yellow", err=True)
                sys.exit(130)  # Standard exit code for SIGINT

            except MemoryError:
                click.secho("Error: ran out of memory while building the DP table", fg="red", err=True)
                click.secho(
                    "Suggestion: lower --capacity or --items, or limits.max_table_cells",
                    fg="yellow",
                    err=True,
                )
                sys.exit(1)

            except Exception as e:
                if debug_mode:
                    click.secho("Unexpected error occurred:", fg="red", err=True)
                    traceback.print_exc()
                else:
                    click.secho(format_exception_info(e), fg="red", err=True)
                    click.secho(
                        "\nTip: Run with --debug flag to see full traceback", fg="yellow", err=True
                    )
                sys.exit(1)

        return wrapper  # type: ignore

    return decorator


# ============================================================================
# Validation Utilities
# ============================================================================


def require_non_negative_int(value: int, name: str) -> int:
    """
    Validate that value is a non-negative integer.

    Args:
        value: Value to validate
        name: Parameter name for error messages

    Returns:
        Validated value as a plain int

    Raises:
        ValidationError: If value is negative or not integral
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name} must be an integer, got: {value!r}",
            suggestion=f"Parse {name} to an int before calling the solver.",
        )
    if value < 0:
        raise ValidationError(
            f"{name} must be non-negative, got: {value}",
            suggestion=f"Provide {name} >= 0.",
        )
    return int(value)


def _as_int_vector(values: Sequence[int] | np.ndarray, name: str) -> np.ndarray:
    """Convert to a 1-D int64 array without truncating or flattening anything."""
    arr = np.asarray(values)

    if arr.ndim != 1:
        raise ValidationError(
            f"{name} must be one-dimensional, got shape {arr.shape}",
            suggestion=f"Pass {name} as a flat sequence, one entry per item.",
        )
    # An empty list comes back as float64
    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        raise ValidationError(
            f"{name} must contain integers, got dtype {arr.dtype}",
            suggestion=f"Round or cast {name} to int explicitly before solving.",
        )

    return arr.astype(np.int64)


def validate_knapsack_arrays(
    capacity: int, weights: Sequence[int] | np.ndarray, profits: Sequence[int] | np.ndarray
) -> tuple[int, np.ndarray, np.ndarray]:
    """
    Check a knapsack instance before a solve and normalise it to int64 arrays.

    Args:
        capacity: Knapsack capacity
        weights: Item weights
        profits: Item profits, parallel to weights

    Returns:
        Tuple of (capacity, weights, profits)

    Raises:
        ValidationError: On negative capacity, negative weights, non-integer
            or multi-dimensional arrays, or mismatched array lengths
    """
    capacity = require_non_negative_int(capacity, "capacity")

    w = _as_int_vector(weights, "weights")
    p = _as_int_vector(profits, "profits")

    if w.shape[0] != p.shape[0]:
        raise ValidationError(
            f"weights and profits must have the same length, got {w.shape[0]} and {p.shape[0]}",
            suggestion="Generate weights and profits together so positions line up.",
        )
    if w.size and int(w.min()) < 0:
        bad = int(np.flatnonzero(w < 0)[0])
        raise ValidationError(
            f"weights must be non-negative, position {bad} has weight {int(w[bad])}",
            suggestion="Use a non-negative value range for weights.",
        )

    return capacity, w, p
