"""Pydantic configuration sections with code-baked defaults.

Every field can be overridden through ``PWCTL_<SECTION>__<FIELD>``
environment variables; no configuration file is read.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from pwctl.domain.alphabet import MIN_LENGTH


class GeneratorConfig(BaseModel):
    """Generator defaults for ``pwctl generate``."""

    model_config = {"frozen": True}

    default_length: int = Field(default=16, ge=MIN_LENGTH)
    default_count: int = Field(default=1, ge=1)


class ShellConfig(BaseModel):
    """Interactive loop behavior."""

    model_config = {"frozen": True}

    # Read the rest of the line for ``validate`` instead of one token.
    full_line: bool = False
