"""
Game configuration: defaults, overrides and bounds validation.

A GameConfig is immutable once built. Validation never raises; it returns a
ValidationResult carrying every violated bound so the caller can decide to
abort initialization.
"""

import logging
import os
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Mapping, Optional

from .constants import (
    DEFAULT_ROWS_COUNT,
    DEFAULT_COLS_COUNT,
    DEFAULT_SPEED,
    DEFAULT_WIN_FOOD_COUNT,
    SETTING_BOUNDS,
)

logger = logging.getLogger(__name__)

# camelCase setting names accepted as override keys
SETTING_ALIASES = {
    "rowsCount": "rows_count",
    "colsCount": "cols_count",
    "speed": "speed",
    "winFoodCount": "win_food_count",
}

ENV_VARS = {
    "rows_count": "SNAKE_ROWS_COUNT",
    "cols_count": "SNAKE_COLS_COUNT",
    "speed": "SNAKE_SPEED",
    "win_food_count": "SNAKE_WIN_FOOD_COUNT",
}


class ConfigurationError(Exception):
    """Raised by callers that prefer an exception over a ValidationResult."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        self.is_valid = False
        self.errors.append(message)

    def raise_for_errors(self) -> None:
        if not self.is_valid:
            raise ConfigurationError(self.errors)


@dataclass(frozen=True)
class GameConfig:
    """
    Game settings.

    Attributes:
        rows_count: number of grid rows
        cols_count: number of grid columns
        speed: snake steps per second
        win_food_count: the snake wins once its length exceeds this value
    """

    rows_count: Any = DEFAULT_ROWS_COUNT
    cols_count: Any = DEFAULT_COLS_COUNT
    speed: Any = DEFAULT_SPEED
    win_food_count: Any = DEFAULT_WIN_FOOD_COUNT

    @classmethod
    def init(cls, overrides: Optional[Mapping[str, Any]] = None) -> "GameConfig":
        """Merge user overrides into the defaults."""
        return cls().merged(overrides)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        """
        Build a config from SNAKE_* environment variables.

        Values that are not integers are kept as-is so validate() reports them.
        """
        environ = os.environ if environ is None else environ
        overrides: Dict[str, Any] = {}
        for name, var in ENV_VARS.items():
            raw = environ.get(var)
            if raw is None or raw == "":
                continue
            try:
                overrides[name] = int(raw)
            except ValueError:
                overrides[name] = raw
        return cls.init(overrides)

    def merged(self, overrides: Optional[Mapping[str, Any]]) -> "GameConfig":
        if not overrides:
            return self

        known = {f.name for f in fields(self)}
        changes: Dict[str, Any] = {}
        for key, value in overrides.items():
            name = SETTING_ALIASES.get(key, key)
            if name not in known:
                logger.warning(f"Ignoring unknown setting '{key}'")
                continue
            if value is None:
                continue
            changes[name] = value
        return replace(self, **changes)

    def validate(self) -> ValidationResult:
        """Check every setting against its bounds, collecting all violations."""
        result = ValidationResult()

        for name, (low, high) in SETTING_BOUNDS.items():
            value = getattr(self, name)
            if not _is_int_in_range(value, low, high):
                result.add_error(
                    f"Wrong settings. The value of {name} must be in the range [{low}, {high}]."
                )

        return result

    @property
    def tick_interval(self) -> float:
        """Seconds between two ticks."""
        return 1 / self.speed

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _is_int_in_range(value: Any, low: int, high: int) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return low <= value <= high
