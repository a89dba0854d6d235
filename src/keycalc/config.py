"""Formatting configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from keycalc.exceptions import InvalidInputError

ENV_PREFIX = "KEYCALC_"


@dataclass(frozen=True)
class FormatConfig:
    """
    Thresholds that bound the width of the display text.

    Defaults match a 14 character display: magnitudes from 1e12 upward go
    through a 7 significant digit exponential form, and anything still
    longer than 14 characters is rounded to 12 significant digits.
    """

    exponential_threshold: float = 1e12
    exponent_digits: int = 6
    max_display_length: int = 14
    reduced_precision: int = 12

    def __post_init__(self) -> None:
        if not self.exponential_threshold > 0:
            raise InvalidInputError(self.exponential_threshold, "Threshold must be positive")
        for name in ("exponent_digits", "max_display_length", "reduced_precision"):
            if getattr(self, name) < 1:
                raise InvalidInputError(getattr(self, name), f"{name} must be at least 1")

    @classmethod
    def from_env(cls) -> FormatConfig:
        """
        Load configuration from ``KEYCALC_*`` environment variables.

        Unset variables keep their defaults.
        """
        defaults = cls()

        def get_float(key: str, default: float) -> float:
            raw = os.getenv(ENV_PREFIX + key)
            if raw is None:
                return default
            try:
                return float(raw)
            except ValueError:
                raise InvalidInputError(raw, f"{ENV_PREFIX}{key} must be a number") from None

        def get_int(key: str, default: int) -> int:
            raw = os.getenv(ENV_PREFIX + key)
            if raw is None:
                return default
            try:
                return int(raw)
            except ValueError:
                raise InvalidInputError(raw, f"{ENV_PREFIX}{key} must be an integer") from None

        return cls(
            exponential_threshold=get_float(
                "EXPONENTIAL_THRESHOLD", defaults.exponential_threshold
            ),
            exponent_digits=get_int("EXPONENT_DIGITS", defaults.exponent_digits),
            max_display_length=get_int("MAX_DISPLAY_LENGTH", defaults.max_display_length),
            reduced_precision=get_int("REDUCED_PRECISION", defaults.reduced_precision),
        )


DEFAULT_CONFIG = FormatConfig()
