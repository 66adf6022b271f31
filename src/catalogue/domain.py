"""Catalogue bounded context: the products offered by the storefront."""

from protean.domain import Domain

from catalogue.utils.logging import get_logger

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
catalogue = Domain(name="catalogue")
