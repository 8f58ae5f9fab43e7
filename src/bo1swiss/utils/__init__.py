"""Shared helpers for Bo1 Swiss: logging setup and id generation."""

# Bo1 Swiss
# Copyright (C) 2025  Bo1 Swiss developers
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
import uuid

from bo1swiss.constants import LOG_LEVEL_ENV_VAR

ROOT_LOGGER_NAME = "bo1swiss"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _configure_root_logger() -> logging.Logger:
    """Attach a single stream handler to the package root logger."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        level_name = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()
        root.setLevel(getattr(logging, level_name, logging.WARNING))
    return root


def setup_logger(name: str) -> logging.Logger:
    """Return the logger for a module.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        A logger that propagates to the ``bo1swiss`` root logger
    """
    _configure_root_logger()
    return logging.getLogger(name)


def set_log_level(level: str) -> None:
    """Change the level of every Bo1 Swiss logger at runtime."""
    root = _configure_root_logger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))


def generate_id(prefix: str) -> str:
    """Generate a unique opaque identifier such as ``competitor_3f2a9c1b7d04``."""
    return f"{prefix.lower()}_{uuid.uuid4().hex[:12]}"
