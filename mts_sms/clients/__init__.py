from .base import MtsError, TransportError, DecodeError, APIError, NotFoundError
from .models import SubmitMessage, SubmitBatch, MessageStatus
from .mts_client import MtsClient, get_client, send_sms, get_sms_statuses, get_sms_status
from .status import (
    STATUS_PENDING, STATUS_NOT_SENT, STATUS_SENT, STATUS_SENDING, STATUS_DELIVERED, STATUS_NOT_DELIVERED,
    is_final_status, is_delivered_status, is_failed_status,
)

__all__ = [
    'MtsError','TransportError','DecodeError','APIError','NotFoundError',
    'SubmitMessage','SubmitBatch','MessageStatus',
    'MtsClient','get_client','send_sms','get_sms_statuses','get_sms_status',
    'STATUS_PENDING','STATUS_NOT_SENT','STATUS_SENT','STATUS_SENDING','STATUS_DELIVERED','STATUS_NOT_DELIVERED',
    'is_final_status','is_delivered_status','is_failed_status',
]
