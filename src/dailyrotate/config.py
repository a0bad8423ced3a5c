"""Rotating writer configuration loader with Pydantic v2 validation.

Loads and validates a YAML file into a typed :class:`WriterConfig` and
builds writers and logging handlers from it.  Unknown keys are allowed to
support future schema additions without breakage.

Schema
------
::

    path: /var/log/app/app.log
    retention_days: 7          # null keeps archives forever
    handler:
      level: INFO
      format: "%(asctime)s %(levelname)s %(name)s: %(message)s"
      encoding: utf-8

Example
-------
>>> loader = ConfigLoader()
>>> config = loader.load_string("path: /tmp/app.log\\nretention_days: 3")
>>> config.retention_days
3
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import yaml
from pydantic import BaseModel, Field, field_validator

from dailyrotate.retention import validate_retention
from dailyrotate.writer import DEFAULT_FILE_PATH, DEFAULT_RETENTION_DAYS, RotatingWriter

if TYPE_CHECKING:
    from dailyrotate.handler import DailyRotatingHandler

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class HandlerConfig(BaseModel):
    """Configuration for the logging front-end."""

    model_config = {"extra": "allow"}

    level: str = Field(default="INFO")
    format: str = Field(default=_DEFAULT_FORMAT)
    encoding: str = Field(default="utf-8")

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level '{value}'")
        return level


class WriterConfig(BaseModel):
    """Top-level rotating writer configuration schema.

    All fields are optional and fall back to the same defaults as
    :meth:`RotatingWriter.with_defaults`.
    """

    model_config = {"extra": "allow"}

    path: Path = Field(default=Path(DEFAULT_FILE_PATH))
    retention_days: int | None = Field(default=DEFAULT_RETENTION_DAYS, ge=0)
    handler: HandlerConfig = Field(default_factory=HandlerConfig)

    @field_validator("retention_days", mode="before")
    @classmethod
    def validate_retention_days(cls, value: object) -> int | None:
        return validate_retention(value)

    @field_validator("path")
    @classmethod
    def validate_path(cls, value: Path) -> Path:
        if not value.is_absolute():
            raise ValueError(f"Path should be absolute ('{value}' given)")
        return value

    def build_writer(self) -> RotatingWriter:
        """Open a :class:`RotatingWriter` for this configuration."""
        return RotatingWriter(self.path, self.retention_days)

    def build_handler(self) -> "DailyRotatingHandler":
        """Open a :class:`DailyRotatingHandler` owning a new writer."""
        from dailyrotate.handler import DailyRotatingHandler

        handler = DailyRotatingHandler(
            self.build_writer(),
            encoding=self.handler.encoding,
            owns_writer=True,
        )
        handler.setLevel(self.handler.level)
        handler.setFormatter(logging.Formatter(self.handler.format))
        return handler


class ConfigLoader:
    """Loads and validates rotating writer YAML configuration.

    Example
    -------
    >>> loader = ConfigLoader()
    >>> config = loader.load(Path("dailyrotate.yaml"))
    """

    def load(self, config_path: Path) -> WriterConfig:
        """Load and validate a YAML configuration file.

        Parameters
        ----------
        config_path:
            Path to the YAML file.

        Returns
        -------
        WriterConfig
            Validated configuration object.

        Raises
        ------
        FileNotFoundError:
            When the config file does not exist.
        ValueError:
            When the YAML content fails Pydantic validation.
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Rotation config not found: {config_path}")

        with config_path.open("r", encoding="utf-8") as fh:
            raw: dict[str, object] = yaml.safe_load(fh) or {}

        return WriterConfig.model_validate(raw)

    def load_string(self, yaml_content: str) -> WriterConfig:
        """Load and validate a YAML string directly."""
        raw: dict[str, object] = yaml.safe_load(yaml_content) or {}
        return WriterConfig.model_validate(raw)

    def defaults(self) -> WriterConfig:
        """Return a default configuration with all defaults applied."""
        return WriterConfig()
