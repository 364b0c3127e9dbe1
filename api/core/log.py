"""
Process-wide logging setup.

Modules log through `logging.getLogger(__name__)`; this only decides level and
format once per process.
"""

from __future__ import annotations

import logging

from . import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level()),
        format=LOG_FORMAT,
    )
