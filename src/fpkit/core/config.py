import json
import os
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from fpkit.logger import resolve_level, set_level


ENV_PREFIX = "FPKIT_"


class Settings(BaseModel):
    RANDOM_SEED: Optional[int] = None
    RANDOM_LOW: float = 0.0
    RANDOM_HIGH: float = 1.0
    LOG_LEVEL: str = "INFO"
    CONFIG_PATH: Path = Field(default_factory=lambda: Path().home() / ".fpkit.json")

    @field_validator("LOG_LEVEL")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        resolve_level(value)
        return value.strip().upper()

    @model_validator(mode="after")
    def check_random_bounds(self) -> "Settings":
        if self.RANDOM_LOW >= self.RANDOM_HIGH:
            raise ValueError(
                f"RANDOM_LOW ({self.RANDOM_LOW}) must be below "
                f"RANDOM_HIGH ({self.RANDOM_HIGH})"
            )
        return self

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Build settings from ``~/.fpkit.json`` overlaid with the environment.

        The JSON file is optional. Environment variables take precedence over
        values read from the file.
        """
        config_path = config_path or Path().home() / ".fpkit.json"

        values = {}
        if config_path.exists():
            with open(config_path, "r") as f:
                values.update(json.load(f))

        for field in ("RANDOM_SEED", "RANDOM_LOW", "RANDOM_HIGH"):
            env_value = os.getenv(ENV_PREFIX + field)
            if env_value is not None:
                values[field] = env_value

        if os.getenv("LOG_LEVEL"):
            values["LOG_LEVEL"] = os.environ["LOG_LEVEL"]

        values["CONFIG_PATH"] = config_path
        return cls(**values)


def configure(settings: Settings) -> Settings:
    """Apply ``settings`` to process-wide state and return them.

    Only the package logger level is applied here; the random generator reads
    its seed from the settings when :mod:`fpkit.functional.lazy` is imported.
    """
    set_level(settings.LOG_LEVEL)
    return settings


settings = configure(Settings.load())
