"""Delivery status values reported by the MTS gateway and their classification."""
from __future__ import annotations

from typing import Optional

STATUS_PENDING = "Pending"
STATUS_NOT_SENT = "NotSent"
STATUS_SENT = "Sent"
STATUS_SENDING = "Sending"
STATUS_DELIVERED = "Delivered"
STATUS_NOT_DELIVERED = "NotDelivered"

KNOWN_STATUSES = frozenset({
    STATUS_PENDING,
    STATUS_NOT_SENT,
    STATUS_SENT,
    STATUS_SENDING,
    STATUS_DELIVERED,
    STATUS_NOT_DELIVERED,
})
FINAL_STATUSES = frozenset({STATUS_DELIVERED, STATUS_NOT_DELIVERED, STATUS_NOT_SENT})
FAILED_STATUSES = frozenset({STATUS_NOT_DELIVERED, STATUS_NOT_SENT})


def is_final_status(status: Optional[str]) -> bool:
    """True when the status will not change on later queries."""
    return status in FINAL_STATUSES


def is_delivered_status(status: Optional[str]) -> bool:
    return status == STATUS_DELIVERED


def is_failed_status(status: Optional[str]) -> bool:
    return status in FAILED_STATUSES


__all__ = [
    'STATUS_PENDING', 'STATUS_NOT_SENT', 'STATUS_SENT', 'STATUS_SENDING',
    'STATUS_DELIVERED', 'STATUS_NOT_DELIVERED',
    'KNOWN_STATUSES', 'FINAL_STATUSES', 'FAILED_STATUSES',
    'is_final_status', 'is_delivered_status', 'is_failed_status',
]
