# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Runtime configuration read from the environment.

Variables:
    GENRO_BST_LOG_LEVEL: Level of the ``genro_bst`` logger (default WARNING).
    GENRO_BST_CHECK_INVARIANTS: When true, every mutating tree operation
        validates the whole tree afterwards (default off).

The configuration is computed once and cached; call
``reset_runtime_config_cache()`` after changing the environment. The next
``runtime_config()`` call re-reads it and applies the log level to the
``genro_bst`` logger, which every package logger inherits from.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

LOGGER_NAME = "genro_bst"

_SUPPORTED_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _bool_from_env(value: str | None, *, default: bool) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"Invalid boolean value '{value}'")


def _normalise_log_level(value: str | None) -> str:
    if value is None or value.strip() == "":
        return "WARNING"
    value = value.strip().upper()
    if value not in _SUPPORTED_LEVELS:
        raise ValueError(
            f"Unsupported log level '{value}'. Expected one of {sorted(_SUPPORTED_LEVELS)}."
        )
    return value


def _configure_logging(level: str) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)


@dataclass(frozen=True)
class RuntimeConfig:
    log_level: str
    check_invariants: bool


@lru_cache(maxsize=None)
def runtime_config() -> RuntimeConfig:
    config = RuntimeConfig(
        log_level=_normalise_log_level(os.getenv("GENRO_BST_LOG_LEVEL")),
        check_invariants=_bool_from_env(
            os.getenv("GENRO_BST_CHECK_INVARIANTS"), default=False
        ),
    )
    _configure_logging(config.log_level)
    return config


def reset_runtime_config_cache() -> None:
    runtime_config.cache_clear()
