"""
Configuration management using Pydantic models.

The grid and the canonical offset are deployment-time constants: they are
never taken from the request, but they are passed explicitly into the
computation so tests can inject other offsets and day lengths.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

MINUTES_PER_DAY = 24 * 60


class MatchRule(str, Enum):
    """How a busy interval is mapped onto the slot grid."""
    OVERLAP = "overlap"  # any overlap marks the slot busy
    SLOT_START = "slot_start"  # only steps landing on a slot start count


class GridConfig(BaseModel):
    """Working day, slot length and canonical offset."""
    model_config = ConfigDict(frozen=True)

    day_start_hour: int = 9
    day_end_hour: int = 18
    slot_minutes: int = 30
    utc_offset_hours: float = -4
    calendar_id: Optional[str] = None
    match_rule: MatchRule = MatchRule.OVERLAP

    @field_validator("day_start_hour", "day_end_hour")
    @classmethod
    def validate_hour(cls, v: int) -> int:
        """Validate hour is between 0 and 24."""
        if not 0 <= v <= 24:
            raise ValueError(f"Hour must be between 0 and 24, got {v}")
        return v

    @field_validator("slot_minutes")
    @classmethod
    def validate_slot_minutes(cls, value: int) -> int:
        """Ensure slot length is positive."""
        if value <= 0:
            raise ValueError("slot_minutes must be greater than zero")
        return value

    @field_validator("utc_offset_hours")
    @classmethod
    def validate_offset(cls, value: float) -> float:
        """Offsets must be real-world ones: -12..+14 in quarter hours."""
        if not -12 <= value <= 14:
            raise ValueError(f"utc_offset_hours must be between -12 and 14, got {value}")
        if (value * 60) % 15:
            raise ValueError("utc_offset_hours must be a whole number of quarter hours")
        return value

    @model_validator(mode="after")
    def validate_window(self) -> "GridConfig":
        """
        Ensure the day opens before it closes and splits into whole slots.

        Slots must also tile a whole day so the grid repeats on every day a
        busy interval spans.
        """
        if self.day_end_hour <= self.day_start_hour:
            raise ValueError("day_end_hour must be later than day_start_hour")
        if self.window_minutes % self.slot_minutes:
            raise ValueError(
                f"slot_minutes ({self.slot_minutes}) must divide the working "
                f"window of {self.window_minutes} minutes"
            )
        if MINUTES_PER_DAY % self.slot_minutes:
            raise ValueError(
                f"slot_minutes ({self.slot_minutes}) must divide a day of "
                f"{MINUTES_PER_DAY} minutes"
            )
        return self

    @property
    def day_start_minutes(self) -> int:
        return self.day_start_hour * 60

    @property
    def day_end_minutes(self) -> int:
        return self.day_end_hour * 60

    @property
    def window_minutes(self) -> int:
        return self.day_end_minutes - self.day_start_minutes

    @property
    def utc_offset_seconds(self) -> int:
        return int(self.utc_offset_hours * 3600)

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "GridConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            GridConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a freeslots.yaml file or run without --config."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)


DEFAULT_CONFIG = GridConfig()


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for freeslots.yaml in current directory
    config_path = Path.cwd() / "freeslots.yaml"

    if not config_path.exists():
        # Try in the project root (parent of freeslots/)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "freeslots.yaml"

    return config_path


def load_config(config_path: Optional[Path] = None) -> GridConfig:
    """
    Load the grid configuration.

    An explicit path must exist; without one, the default location is used
    when present and the built-in defaults otherwise.
    """
    if config_path is not None:
        return GridConfig.load_from_yaml(config_path)

    default_path = get_default_config_path()
    if default_path.exists():
        return GridConfig.load_from_yaml(default_path)
    return DEFAULT_CONFIG
