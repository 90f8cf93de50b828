from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .status import is_final_status, is_delivered_status, is_failed_status


@dataclass
class SubmitMessage:
    msid: str  # recipient phone number
    message: str
    # set by send_sms
    message_id: Optional[int] = None
    send_error: bool = False

    def to_payload(self) -> Dict[str, Any]:
        return {"msid": self.msid, "message": self.message}


@dataclass
class SubmitBatch:
    submits: List[SubmitMessage] = field(default_factory=list)
    naming: str = ""

    def to_payload(self) -> Dict[str, Any]:
        return {
            "submits": [m.to_payload() for m in self.submits],
            "naming": self.naming,
        }

    def find(self, msid: str) -> Optional[SubmitMessage]:
        """First message addressed to ``msid``, or None."""
        for m in self.submits:
            if m.msid == msid:
                return m
        return None


@dataclass
class MessageStatus:
    message_id: str
    msid: str
    status: str
    cost: float = 0.0
    error: Optional[str] = None  # left for callers; never set by the client

    @property
    def is_final(self) -> bool:
        return is_final_status(self.status)

    @property
    def is_delivered(self) -> bool:
        return is_delivered_status(self.status)

    @property
    def is_failed(self) -> bool:
        return is_failed_status(self.status)


__all__ = ['SubmitMessage', 'SubmitBatch', 'MessageStatus']
