# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Package logging utilities that honour `RuntimeConfig`."""

from __future__ import annotations

import logging

from . import config as bst_config


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a package logger.

    Only the ``genro_bst`` logger carries the configured level; child loggers
    stay at NOTSET and follow it when the configuration is reloaded.
    """

    bst_config.runtime_config()
    root = bst_config.LOGGER_NAME
    return logging.getLogger(root if name is None else f"{root}.{name}")
