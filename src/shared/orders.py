"""Order vocabulary shared between the ordering backend and the storefront client."""

from enum import Enum


class OrderStatus(Enum):
    """Order statuses. There is no enforced lifecycle: any status may follow any other."""

    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentMethod(Enum):
    CREDIT_CARD = "credit_card"
    CASH = "cash"
    BANK_TRANSFER = "bank_transfer"


ORDER_STATUSES: tuple[str, ...] = tuple(status.value for status in OrderStatus)


def is_valid_status(value) -> bool:
    return isinstance(value, str) and value in ORDER_STATUSES
