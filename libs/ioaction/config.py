"""Runtime configuration, read from the environment."""

import logging
import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, field_validator

ENV_LOG_LEVEL = "IOACTION_LOG_LEVEL"
ENV_LINE_ENDING = "IOACTION_LINE_ENDING"
ENV_TRANSCRIPT = "IOACTION_TRANSCRIPT"

_LINE_TERMINATORS: dict[str, str] = {
    "lf": "\n",
    "crlf": "\r\n",
}


class RuntimeConfig(BaseModel):
    """Settings for running an action program against the console."""

    log_level: str = "WARNING"
    line_ending: Literal["lf", "crlf"] = "lf"
    transcript_path: str | None = None

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @field_validator("line_ending", mode="before")
    @classmethod
    def _lowercase_ending(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value

    @property
    def line_terminator(self) -> str:
        return _LINE_TERMINATORS[self.line_ending]

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RuntimeConfig":
        """Build a config from `IOACTION_*` variables (default: os.environ).

        Raises:
            ValidationError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        if env.get(ENV_LOG_LEVEL):
            values["log_level"] = env[ENV_LOG_LEVEL]
        if env.get(ENV_LINE_ENDING):
            values["line_ending"] = env[ENV_LINE_ENDING]
        if env.get(ENV_TRANSCRIPT):
            values["transcript_path"] = env[ENV_TRANSCRIPT]
        return cls.model_validate(values)
