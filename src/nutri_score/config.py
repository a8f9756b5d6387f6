"""Application configuration."""

import math
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from nutri_score.domain.nutrition import ScoreType
from nutri_score.domain.validation import ValidationRules, default_validation_rules
from nutri_score.services.validator import coerce_score_type

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    debug: bool = False
    validation_rules: str | None = None
    default_score_type: str = ScoreType.FOOD.value
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_validation_rules(raw: str | None) -> ValidationRules:
    """Parse rule overrides like "energy=0:5000,sodium=0:2000" onto the defaults."""
    rules = default_validation_rules()
    if raw is None:
        return rules
    for chunk in raw.split(","):
        name, sep, bounds = chunk.partition("=")
        name = name.strip()
        if not sep or name not in rules:
            continue
        low, sep, high = bounds.partition(":")
        if not sep:
            continue
        try:
            minimum, maximum = float(low), float(high)
        except ValueError:
            continue
        if not (math.isfinite(minimum) and math.isfinite(maximum)):
            continue
        if minimum > maximum:
            continue
        rules[name] = (minimum, maximum)
    return rules


def parse_score_type(raw: str | None) -> ScoreType:
    """Parse the configured default score type, falling back to food."""
    if raw is None or not raw.strip():
        return ScoreType.FOOD
    resolved = coerce_score_type(raw)
    if resolved is None:
        raise ValueError(f"Unknown default score type: {raw!r}")
    return resolved
