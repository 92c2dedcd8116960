"""
Runtime settings.

Defaults reproduce the behaviour of the original browser game: the engine trusts its caller and does not re-validate moves.
Override through environment variables:

* XIANGQI_STRICT_MOVES: "1"/"true"/"yes" to let the engine reject moves that were not generated for the side to move.
* XIANGQI_LOG_LEVEL: name of a logging level ("DEBUG", "INFO", ...)
"""

import os
from typing import Mapping, Optional, Self

from pydantic import BaseModel, field_validator

ENV_PREFIX = "XIANGQI_"
TRUTHY = {"1", "true", "yes", "on"}
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseModel):
    strict_moves: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}. Pick one from {','.join(sorted(LOG_LEVELS))}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Self:
        """Read overrides from the environment (or any mapping, convenient in tests)"""
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}

        strict = env.get(f"{ENV_PREFIX}STRICT_MOVES")
        if strict is not None:
            overrides["strict_moves"] = strict.strip().lower() in TRUTHY

        log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level is not None:
            overrides["log_level"] = log_level.strip()

        return cls(**overrides)
