"""Shared fixtures.

Settings and the process-wide default client are cached; every test starts
from a clean cache so environment overrides made with ``monkeypatch`` apply.
"""
from __future__ import annotations

import pytest

from mts_sms.clients import MtsClient, get_client
from mts_sms.core.settings import get_settings

SEND_URL = "https://mts.test/messages"
STATUS_TEMPLATE = "https://mts.test/messages/status?messageIDs=%s"


@pytest.fixture(autouse=True)
def _clear_caches(monkeypatch):
    for name in ("MTS_SEND_ENDPOINT", "MTS_STATUS_ENDPOINT_TEMPLATE", "MTS_TIMEOUT_SECONDS",
                 "MTS_API_TOKEN", "MTS_DEFAULT_NAMING", "SMS_PROVIDER"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_client.cache_clear()
    yield
    get_settings.cache_clear()
    get_client.cache_clear()


@pytest.fixture
def mts_client() -> MtsClient:
    return MtsClient(send_endpoint=SEND_URL, status_endpoint_template=STATUS_TEMPLATE, timeout=5)
