# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the optional ``.sjavac.yaml`` configuration file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".sjavac.yaml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


class SJavacConfig(BaseModel):
    """Settings for checking sJava sources.

    Attributes:
        encoding: Text encoding of the source files.
        source_suffix: File suffix of the sources collected from a directory.
        log_level: Logging level applied when not running verbosely.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    encoding: str = "utf-8"
    source_suffix: str = Field(alias="source-suffix", default=".sjava")
    log_level: LogLevel = Field(alias="log-level", default="WARNING")

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)


def load_config(path: Path) -> SJavacConfig:
    """Load and validate a configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the ``.sjavac.yaml`` file.

    Returns:
        A validated SJavacConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    return _parse_config(text, source_label=str(path))


def find_config(target: Path) -> Path | None:
    """Return the configuration file governing *target*, if one exists.

    For a directory the file is looked up inside it; for a file, next to it.
    """
    directory = target if target.is_dir() else target.parent
    candidate = directory / CONFIG_FILE_NAME
    return candidate if candidate.is_file() else None


# ################
# Implementation
# ################


def _parse_config(text: str, source_label: str = "<string>") -> SJavacConfig:
    """Parse configuration YAML text into an SJavacConfig.

    Raises:
        ConfigError: If the YAML is invalid, not a mapping, or fails validation.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: configuration must be a YAML mapping")

    try:
        return SJavacConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {source_label}: {exc}") from exc
