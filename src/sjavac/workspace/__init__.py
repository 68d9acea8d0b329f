# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration for sJava checks."""

from sjavac.workspace.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    SJavacConfig,
    find_config,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "SJavacConfig",
    "find_config",
    "load_config",
]
