"""Unified settings — CLI flags, env vars, and defaults in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``PWCTL_*`` prefix, ``__`` for nested sections
  3. Code defaults — baked into the section models
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from pwctl.config.models import GeneratorConfig, ShellConfig


class PwSettings(BaseSettings):
    """Unified settings for the pwctl CLI.

    Frozen after construction and stored on the ``AppContext`` at the
    CLI root level.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PWCTL_",
        "env_nested_delimiter": "__",
    }

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- Sections ---
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    shell: ShellConfig = Field(default_factory=ShellConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Only init kwargs and environment variables; no files."""
        return (init_settings, env_settings)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> PwSettings:
        """Construct settings from a CLI invocation.

        Flags left at ``None`` are dropped so env vars can still apply.
        """
        overrides = {key: value for key, value in cli_flags.items() if value is not None}
        return cls(**overrides)
