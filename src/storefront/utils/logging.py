"""Logger lookup for the storefront client.

The client runs in-process with the backend in tests and alone in a shell;
either way structlog is configured once by ``identity.utils.logging``.
"""

import structlog


def get_logger(name: str | None = None):
    return structlog.get_logger(name)
