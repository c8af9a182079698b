"""PageSizeSettings: CLI flags, env vars and pagesize.toml merged into one frozen object.

Priority chain (highest to lowest): CLI flags, ``PAGESIZE_*`` env vars
(``__`` separates nested keys), the TOML file, code defaults.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, TomlConfigSettingsSource

from pagesize.config.discovery import find_config
from pagesize.config.models import PresetsConfig

# Set by from_cli() for the duration of one construction.
_active_toml: ContextVar[Path | None] = ContextVar("pagesize_active_toml", default=None)


class PageSizeSettings(BaseSettings):
    """Frozen settings for the pagesize CLI.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        presets: Default preset name and user-defined presets.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PAGESIZE_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    presets: PresetsConfig = Field(default_factory=PresetsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_path = _active_toml.get()
        if toml_path is None:
            return init_settings, env_settings
        return init_settings, env_settings, TomlConfigSettingsSource(settings_cls, toml_path)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> PageSizeSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* that names no file is ignored; without one,
        ``pagesize.toml`` is discovered from *start*.

        Raises:
            click.ClickException: If the TOML file cannot be parsed.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(start)

        token = _active_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        finally:
            _active_toml.reset(token)
