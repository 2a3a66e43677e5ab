"""Shared utilities for Gavel Pairing."""

# Gavel Pairing
# Copyright (C) 2025  Gavel Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os
import sys
from typing import Optional

from gavelpairing.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV_VAR

PACKAGE_LOGGER_NAME = "gavelpairing"


def _configure_package_logger() -> logging.Logger:
    """Attach the package handler once and return the package logger."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
        level_name = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
        package_logger.setLevel(getattr(logging, level_name, logging.INFO))
    return package_logger


def setup_logger(name: str) -> logging.Logger:
    """Get a module logger hanging off the package logger.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        A configured :class:`logging.Logger`
    """
    _configure_package_logger()
    return logging.getLogger(name)


def set_log_level(level: Optional[str]) -> None:
    """Change the package log level (e.g. from a ``--verbose`` switch)."""
    if not level:
        return
    package_logger = _configure_package_logger()
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
