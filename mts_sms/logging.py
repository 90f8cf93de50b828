"""structlog event helpers for the SMS client.

Nothing here configures structlog or attaches handlers: events are rendered by
whatever structlog configuration the host application set up and handed to
the stdlib ``mts_sms.events`` logger, so output (or silence) is the
application's choice.
"""
from __future__ import annotations

import logging
import structlog

slog = structlog.wrap_logger(logging.getLogger("mts_sms.events"))

# Event helpers

def log_sms_submitted(naming: str | None, submitted: int, acknowledged: int, rejected: int, status: int, **extra):
    slog.info("sms_submitted", naming=naming, submitted=submitted, acknowledged=acknowledged, rejected=rejected, status=status, **extra)

def log_statuses_fetched(requested: int, returned: int, **extra):
    slog.info("sms_statuses_fetched", requested=requested, returned=returned, **extra)
