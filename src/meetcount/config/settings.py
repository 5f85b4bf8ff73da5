"""MeetSettings: CLI flags, environment, and ``meetcount.toml`` merged.

Highest priority first: keyword arguments from the CLI, ``MEETCOUNT_*``
environment variables (``MEETCOUNT_COUNTING__REMAINDER_RULE=wrapped``),
the TOML file, then the defaults in :mod:`meetcount.config.models`.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from meetcount.config.discovery import find_config
from meetcount.config.models import CountingConfig, InputConfig
from meetcount.domain.errors import ConfigError

# Set by MeetSettings.from_cli for the duration of one construction.
_toml_path: ContextVar[Path | None] = ContextVar("_toml_path", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one ``meetcount.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is not None:
            self._data = _read_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc
    except OSError as exc:
        msg = f"Cannot read config {path}: {exc}"
        raise ConfigError(msg) from exc


class MeetSettings(BaseSettings):
    """Everything a command needs to know about how to run.

    Attributes:
        base_dir: Directory that relative input paths resolve against:
            the config file's directory, or the CWD without one.
        config_path: The TOML file in use, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "MEETCOUNT_",
        "env_nested_delimiter": "__",
    }

    base_dir: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    input: InputConfig = Field(default_factory=InputConfig)
    counting: CountingConfig = Field(default_factory=CountingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, _toml_path.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        base_dir: Path | None = None,
        **cli_flags: Any,
    ) -> MeetSettings:
        """Build settings for one CLI invocation.

        Raises:
            ConfigError: If the config file is missing, unreadable or invalid.
            pydantic.ValidationError: If a config value is out of range.
        """
        toml_path = find_config(base_dir, explicit=config_path)
        if base_dir is None:
            base_dir = toml_path.parent if toml_path else Path.cwd()

        token = _toml_path.set(toml_path)
        try:
            return cls(base_dir=base_dir, config_path=toml_path, **cli_flags)
        finally:
            _toml_path.reset(token)

    def resolve_path(self, value: str | Path) -> Path:
        """Resolve an input path relative to :attr:`base_dir`."""
        path = Path(value)
        if path.is_absolute():
            return path
        return self.base_dir / path
