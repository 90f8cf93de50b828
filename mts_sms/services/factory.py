import logging
from mts_sms.core.settings import get_settings
from mts_sms.services.providers.mts_provider import MtsSmsProvider


class NoopSmsProvider:
    def __init__(self):
        self.logger = logging.getLogger("mts_sms.NoopSmsProvider")

    def send(self, to: str, body: str, meta: dict | None = None) -> None:
        self.logger.info(f"NOOP sms to={to} body={body} meta={meta}")


def get_sms_service():
    """
    Factory for SmsService.
    - SMS_PROVIDER=mts (default): uses MTS_API_TOKEN; if missing, falls back to Noop.
    - SMS_PROVIDER=noop: always Noop.
    Raises:
        ValueError: If the provider is unsupported.
    """
    settings = get_settings()
    provider = settings.SMS_PROVIDER.lower()
    if provider == "mts":
        if settings.MTS_API_TOKEN:
            return MtsSmsProvider(settings.MTS_API_TOKEN, naming=settings.MTS_DEFAULT_NAMING)
        return NoopSmsProvider()
    if provider == "noop":
        return NoopSmsProvider()
    raise ValueError(f"Unsupported sms provider: {provider}")
