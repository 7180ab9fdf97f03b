"""
Configuration schema for the mensura command-line interface.

Output formatting and structured logging settings, loaded from YAML and
overridable from command-line flags.
"""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CalculatorConfig:
    """
    Settings for the mensura CLI.

    Immutable after construction (frozen dataclass).
    """

    precision: int = 6  # decimals printed for areas
    log_level: str = "WARNING"
    component: str = "cli"  # structured log component name

    def __post_init__(self):
        """Validate configuration."""
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ValueError(
                f"precision must be an integer, got {self.precision!r}"
            )
        if not 0 <= self.precision <= 17:
            raise ValueError(
                f"precision must be in [0, 17], got {self.precision}"
            )

        if not isinstance(self.log_level, str):
            raise ValueError(
                f"log_level must be a string, got {self.log_level!r}"
            )
        level = self.log_level.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {VALID_LOG_LEVELS}"
            )
        # Normalise case (using object.__setattr__ for frozen dataclass)
        object.__setattr__(self, 'log_level', level)

        if not isinstance(self.component, str) or not self.component:
            raise ValueError("component cannot be empty")

    @property
    def log_level_value(self) -> int:
        """Numeric logging level (e.g. logging.WARNING)."""
        return getattr(logging, self.log_level)

    def with_overrides(self, **overrides: Optional[Any]) -> "CalculatorConfig":
        """
        Return a copy with the given fields replaced; None values are ignored.

        Example:
            >>> CalculatorConfig().with_overrides(precision=2, log_level=None).precision
            2
        """
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "CalculatorConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            precision: 4
            log_level: "info"
            component: "cli"

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is unreadable, its YAML is invalid, or it
                holds unknown/invalid settings
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")
        except OSError as e:
            raise ValueError(f"Cannot read config {yaml_path}: {e}")

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(
                f"Config {yaml_path} must be a mapping, got {type(data).__name__}"
            )

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(
                f"Unknown config keys in {yaml_path}: {', '.join(map(str, unknown))}"
            )

        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
