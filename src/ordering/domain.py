"""Ordering bounded context: orders placed at checkout and their admin-managed status.

Orders are standard CQRS aggregates backed by the configured provider
(in-memory by default).
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
