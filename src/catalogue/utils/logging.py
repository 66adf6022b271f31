"""Logging for the Catalogue domain.

Process-wide configuration happens in the identity context; this module only
hands out structlog loggers.
"""

import logging

import structlog

# Suppress noisy library loggers
logging.getLogger("protean").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
