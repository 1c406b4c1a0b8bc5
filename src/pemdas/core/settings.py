"""
Parser configuration.

Settings come from environment variables so that tools embedding the
parser can tune it without code changes:

    PEMDAS_MAX_DEPTH  Maximum number of nested parenthesis levels before
                      parsing fails with NestingTooDeepError. Operators
                      do not count. Defaults to 200.

Usage:
    from pemdas.core.settings import load_settings

    settings = load_settings()
    settings.max_depth  # 200 unless PEMDAS_MAX_DEPTH is set
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

MAX_DEPTH_ENV_VAR = "PEMDAS_MAX_DEPTH"

# Keeps the recursive parse well inside Python's default recursion limit
DEFAULT_MAX_DEPTH = 200


class ParserSettings(BaseModel):
    """Tunable limits for the parser."""

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1, description="Maximum nesting depth")

    model_config = ConfigDict(frozen=True)


def load_settings() -> ParserSettings:
    """Build settings from the environment.

    Invalid values are logged and replaced by the defaults rather than
    failing the parse.
    """
    raw = os.environ.get(MAX_DEPTH_ENV_VAR, "").strip()
    if not raw:
        return ParserSettings()

    try:
        return ParserSettings(max_depth=raw)
    except ValidationError:
        logger.warning(
            "Invalid %s value '%s'. Using default %d.",
            MAX_DEPTH_ENV_VAR,
            raw,
            DEFAULT_MAX_DEPTH,
        )
        return ParserSettings()
