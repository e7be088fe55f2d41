"""
Pydantic schemas for configuration validation.

Defines the structure and validation rules for comparison run configuration files.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class GeneratorConfig(BaseModel):
    """Random instance generation settings."""

    min_value: int = Field(default=1, description="Smallest weight/profit drawn", ge=1)
    max_value: int = Field(
        default=100, description="Exclusive upper bound for weights/profits", ge=2
    )

    @model_validator(mode="after")
    def check_value_range(self) -> "GeneratorConfig":
        """Ensure min_value < max_value."""
        if self.min_value >= self.max_value:
            raise ValueError(
                f"min_value ({self.min_value}) must be < max_value ({self.max_value})"
            )
        return self


class LimitsConfig(BaseModel):
    """Resource limits for the DP table."""

    max_table_cells: int = Field(
        default=50_000_000,
        description="Largest (n_items + 1) * (capacity + 1) table the DP solver may allocate",
        ge=1,
    )


class TimingConfig(BaseModel):
    """Solver timing settings."""

    enabled: bool = Field(default=True, description="Measure wall-clock time of each solver")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING", description="Log level for the knapsack_compare logger"
    )
    log_file: str | None = Field(default=None, description="Optional log file path")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Accept lower-case level names."""
        return v.upper() if isinstance(v, str) else v


class CompareConfig(BaseModel):
    """Complete comparison run configuration."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    seed: int | None = Field(
        default=None, description="Random seed (None draws a fresh one per run)"
    )
    generator: GeneratorConfig = Field(
        default_factory=GeneratorConfig, description="Instance generator configuration"
    )
    limits: LimitsConfig = Field(default_factory=LimitsConfig, description="Resource limits")
    timing: TimingConfig = Field(default_factory=TimingConfig, description="Timing configuration")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    @field_validator("seed")
    @classmethod
    def validate_seed(cls, v: int | None) -> int | None:
        """Validate seed range."""
        if v is not None and not (0 <= v < 2**32):
            raise ValueError(f"Seed must be in range [0, {2**32 - 1}], got {v}")
        return v
