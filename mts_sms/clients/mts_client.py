from __future__ import annotations
from functools import lru_cache
from typing import Iterable, List
import httpx
import logging

from pydantic import BaseModel, ValidationError

from mts_sms.core.settings import get_settings
from mts_sms.logging import log_sms_submitted, log_statuses_fetched
from mts_sms.schemas.mts import SendResponse, StatusResponse
from .base import TransportError, DecodeError, APIError, NotFoundError
from .models import SubmitBatch, MessageStatus

logger = logging.getLogger("mts_sms.client")


class MtsClient:
    """Blocking client for the MTS message management API.

    Every call issues exactly one HTTP request and waits for it, bounded by
    ``timeout`` seconds. Arguments left as None are taken from settings.
    """

    send_endpoint: str
    status_endpoint_template: str
    timeout: float
    token: str | None

    def __init__(
        self,
        send_endpoint: str | None = None,
        status_endpoint_template: str | None = None,
        timeout: float | None = None,
        *,
        token: str | None = None,
        http_client: httpx.Client | None = None,
    ):
        if None in (send_endpoint, status_endpoint_template, timeout, token):
            settings = get_settings()
            send_endpoint = send_endpoint if send_endpoint is not None else settings.MTS_SEND_ENDPOINT
            if status_endpoint_template is None:
                status_endpoint_template = settings.MTS_STATUS_ENDPOINT_TEMPLATE
            timeout = timeout if timeout is not None else settings.MTS_TIMEOUT_SECONDS
            token = token if token is not None else settings.MTS_API_TOKEN
        self.send_endpoint = send_endpoint
        self.status_endpoint_template = status_endpoint_template
        self.timeout = timeout
        self.token = token
        self._http = http_client
        if self.status_endpoint_template.count("%s") != 1:
            raise ValueError("status_endpoint_template must contain exactly one %s placeholder")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    def send_sms(self, batch: SubmitBatch, token: str | None = None) -> None:
        """Submit ``batch`` and write message IDs / send errors back into it.

        Results are reconciled before the gateway status is checked, so on
        APIError the batch may already hold IDs for acknowledged recipients.
        """
        headers = {"Content-Type": "application/json", "Authorization": self._bearer(token)}
        resp = self._request("POST", self.send_endpoint, headers=headers, json=batch.to_payload())
        parsed = self._decode(resp, SendResponse)

        acknowledged = rejected = 0
        for res in parsed.data.submit_results:
            msg = batch.find(res.msid)
            if msg is None:
                continue
            msg.message_id = res.message_id
            acknowledged += 1
            if res.code != "OK":
                msg.send_error = True
                rejected += 1

        log_sms_submitted(
            batch.naming or None,
            submitted=len(batch.submits),
            acknowledged=acknowledged,
            rejected=rejected,
            status=parsed.status,
        )
        if parsed.status != 0:
            logger.warning("MTS send failed status=%s: %s", parsed.status, parsed.description)
            raise APIError(f"error: {parsed.description}", description=parsed.description)

    def get_sms_statuses(self, message_ids: Iterable[int], token: str | None = None) -> List[MessageStatus]:
        ids = [int(i) for i in message_ids]
        if not ids:
            return []
        url = self.status_endpoint_template.replace("%s", ",".join(str(i) for i in ids), 1)
        resp = self._request("GET", url, headers={"Authorization": self._bearer(token)})
        parsed = self._decode(resp, StatusResponse)
        if parsed.code != 0:
            logger.warning("MTS status query failed code=%s: %s", parsed.code, parsed.description)
            raise APIError(f"API error: {parsed.description}", description=parsed.description)

        out: List[MessageStatus] = []
        for group in parsed.data:
            for st in group.statuses:
                out.append(MessageStatus(
                    message_id=str(group.message_id),
                    msid=st.msid,
                    status=st.status,
                    cost=st.cost,
                ))
        log_statuses_fetched(requested=len(ids), returned=len(out))
        return out

    def get_sms_status(self, message_id: int, token: str | None = None) -> MessageStatus:
        statuses = self.get_sms_statuses([message_id], token)
        if not statuses:
            raise NotFoundError(message_id)
        return statuses[0]

    # ------------------------------------------------------------------
    # Internal helpers

    def _bearer(self, token: str | None) -> str:
        # an empty token is sent as-is; the gateway answers 401
        tok = token if token is not None else self.token
        if tok is None:
            raise ValueError("MTS API token is not configured")
        return f"Bearer {tok}"

    def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            if self._http is not None:
                resp = self._http.request(method, url, timeout=self.timeout, **kwargs)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    resp = client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:  # network / timeout
            raise TransportError(f"MTS request failed: {exc!r}") from exc
        if resp.status_code != 200:
            logger.warning("MTS %s %s returned http status %s", method, url, resp.status_code)
            raise TransportError(f"http status: {resp.status_code}", status_code=resp.status_code)
        return resp

    @staticmethod
    def _decode(resp: httpx.Response, model: type[BaseModel]):
        try:
            return model.model_validate_json(resp.content)
        except ValidationError as exc:
            raise DecodeError(f"cannot decode MTS response, body: {resp.text[:200]!r}") from exc


@lru_cache(maxsize=1)
def get_client() -> MtsClient:
    """Process-wide client built from settings, used by the module-level helpers."""
    return MtsClient()


def send_sms(batch: SubmitBatch, token: str | None = None) -> None:
    get_client().send_sms(batch, token)


def get_sms_statuses(message_ids: Iterable[int], token: str | None = None) -> List[MessageStatus]:
    return get_client().get_sms_statuses(message_ids, token)


def get_sms_status(message_id: int, token: str | None = None) -> MessageStatus:
    return get_client().get_sms_status(message_id, token)


__all__ = ['MtsClient', 'get_client', 'send_sms', 'get_sms_statuses', 'get_sms_status']
