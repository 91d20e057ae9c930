import os
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "PAIRWISE_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    LOG_LEVEL: str = Field(default="INFO", description="Root log level.")
    SHOW_HEADERS: bool = Field(
        default=True, description="Print a heading before each demo example."
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{value}'.")
        return level

    @classmethod
    def load(cls) -> "Settings":
        values = {}

        log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level is not None:
            values["LOG_LEVEL"] = log_level

        show_headers = os.getenv(f"{ENV_PREFIX}SHOW_HEADERS")
        if show_headers is not None:
            values["SHOW_HEADERS"] = show_headers.strip()

        return cls(**values)
