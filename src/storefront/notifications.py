"""Non-blocking user notifications raised by storefront operations."""

from enum import Enum

from pydantic import BaseModel

from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class Variant(Enum):
    DEFAULT = "default"
    SUCCESS = "success"
    WARNING = "warning"
    DESTRUCTIVE = "destructive"


class Notice(BaseModel):
    title: str
    description: str = ""
    variant: Variant = Variant.DEFAULT


class Notifier:
    """Collects notices in the order they were raised."""

    def __init__(self) -> None:
        self.notices: list[Notice] = []

    def notify(self, title: str, description: str = "", variant: Variant = Variant.DEFAULT) -> Notice:
        notice = Notice(title=title, description=description, variant=variant)
        self.notices.append(notice)
        logger.debug("notice", title=title, variant=variant.value)
        return notice

    @property
    def last(self) -> Notice | None:
        return self.notices[-1] if self.notices else None

    def clear(self) -> None:
        self.notices.clear()
