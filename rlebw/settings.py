from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .image.boolean import METHOD_RUNS, METHODS

DEFAULT_BOOLEAN_METHOD = METHOD_RUNS
DEFAULT_DITHER = True
DEFAULT_THRESHOLD_BIAS = 13
DEFAULT_LOG_LEVEL = "WARNING"

ENV_PREFIX = "RLEBW_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class Settings:
    boolean_method: str = DEFAULT_BOOLEAN_METHOD
    dither: bool = DEFAULT_DITHER
    threshold_bias: int = DEFAULT_THRESHOLD_BIAS
    log_level: str = DEFAULT_LOG_LEVEL

    def validate(self) -> None:
        if self.boolean_method not in METHODS:
            raise ValueError(
                f"Unknown boolean method '{self.boolean_method}' (expected one of: {', '.join(METHODS)})"
            )
        if not 0 <= self.threshold_bias <= 255:
            raise ValueError("Threshold bias must be between 0 and 255")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level '{self.log_level}'")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``RLEBW_*`` variables, falling back to defaults."""
        if environ is None:
            environ = os.environ
        settings = cls()
        method = environ.get(ENV_PREFIX + "BOOLEAN_METHOD")
        if method:
            settings.boolean_method = method.strip().lower()
        dither = environ.get(ENV_PREFIX + "DITHER")
        if dither:
            settings.dither = _parse_bool(ENV_PREFIX + "DITHER", dither)
        bias = environ.get(ENV_PREFIX + "THRESHOLD_BIAS")
        if bias:
            try:
                settings.threshold_bias = int(bias)
            except ValueError as exc:
                raise ValueError(f"{ENV_PREFIX}THRESHOLD_BIAS must be an integer, got '{bias}'") from exc
        level = environ.get(ENV_PREFIX + "LOG_LEVEL")
        if level:
            settings.log_level = level.strip().upper()
        settings.validate()
        return settings


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got '{value}'")
