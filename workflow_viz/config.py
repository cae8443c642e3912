"""Configuration for workflow_viz.

Values come from environment variables (a .env file is loaded if present):

- WORKFLOW_VIZ_LOG_LEVEL   log level for the CLI (default WARNING)
- WORKFLOW_VIZ_SVG_WIDTH   default SVG canvas width (default 800)
- WORKFLOW_VIZ_SVG_HEIGHT  default SVG canvas height (default 600)
- WORKFLOW_VIZ_STRICT      validate input by default (default false)
- WORKFLOW_VIZ_FORMAT      default CLI output format (default dot)
"""

import logging
import os
from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, PositiveInt, field_validator

load_dotenv()  # load environment variables from .env file

OutputFormat = Literal["dot", "svg", "json", "summary"]


class Settings(BaseModel):
    """Runtime settings for the CLI and renderers."""

    log_level: str = "WARNING"
    svg_width: PositiveInt = 800
    svg_height: PositiveInt = 600
    strict: bool = False
    default_format: OutputFormat = "dot"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current environment."""
        return cls(
            log_level=os.getenv("WORKFLOW_VIZ_LOG_LEVEL", "WARNING"),
            svg_width=os.getenv("WORKFLOW_VIZ_SVG_WIDTH", "800"),
            svg_height=os.getenv("WORKFLOW_VIZ_SVG_HEIGHT", "600"),
            strict=os.getenv("WORKFLOW_VIZ_STRICT", "false").strip().lower(),
            default_format=os.getenv("WORKFLOW_VIZ_FORMAT", "dot").lower(),
        )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""
    return Settings.from_env()
