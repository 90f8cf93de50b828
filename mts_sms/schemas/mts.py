"""Pydantic v2 schemas for MTS gateway responses.

The gateway's JSON is loose: fields are often missing or ``null``. Those
decode to zero values (0, "", []) rather than failing. Anything that is not a
JSON object of the expected shape raises ``pydantic.ValidationError``.
"""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class GatewayModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, v, info):  # type: ignore
        if v is None:
            field = cls.model_fields[info.field_name]
            if field.default_factory is not None:
                return field.default_factory()
            return field.default
        return v


def _null_items_to_empty(v):
    # a null list item decodes as an empty object, i.e. all zero values
    if isinstance(v, list):
        return [{} if item is None else item for item in v]
    return v


# ---------------------------------------------------------------------------
# Send
# ---------------------------------------------------------------------------
class SubmitResult(GatewayModel):
    msid: str = ""
    message_id: int = Field(0, alias="messageID")
    code: str = ""


class SendData(GatewayModel):
    submit_results: List[SubmitResult] = Field(default_factory=list, alias="submitResults")

    _submit_results_items = field_validator("submit_results", mode="before")(_null_items_to_empty)


class SendResponse(GatewayModel):
    status: int = 0
    description: str = ""
    validation_errors: List[str] = Field(default_factory=list, alias="validationErrors")
    data: SendData = Field(default_factory=SendData)


# ---------------------------------------------------------------------------
# Status
# ---------------------------------------------------------------------------
class StatusEntry(GatewayModel):
    msid: str = ""
    status: str = ""
    date: Optional[str] = None
    user_delivery_date: Optional[str] = Field(None, alias="userDeliveryDate")
    part_count: int = Field(0, alias="partCount")
    is_viber: bool = Field(False, alias="isViber")
    traffic_pattern_type: Optional[str] = Field(None, alias="trafficPatternType")
    cost: float = 0.0


class MessageStatuses(GatewayModel):
    message_id: int = Field(0, alias="messageID")
    statuses: List[StatusEntry] = Field(default_factory=list)

    _statuses_items = field_validator("statuses", mode="before")(_null_items_to_empty)


class StatusResponse(GatewayModel):
    code: int = 0
    description: str = ""
    validation_errors: List[str] = Field(default_factory=list, alias="validationErrors")
    data: List[MessageStatuses] = Field(default_factory=list)

    _data_items = field_validator("data", mode="before")(_null_items_to_empty)

    @model_validator(mode="before")
    @classmethod
    def _accept_legacy_shape(cls, values: Any):
        # Older gateway builds answer with `status` instead of `code` and a
        # single object instead of a list under `data`.
        if not isinstance(values, dict):
            return values
        values = dict(values)
        if "code" not in values and "status" in values:
            values["code"] = values.pop("status")
        if isinstance(values.get("data"), dict):
            values["data"] = [values["data"]]
        return values


__all__ = [
    "SubmitResult", "SendData", "SendResponse",
    "StatusEntry", "MessageStatuses", "StatusResponse",
]
