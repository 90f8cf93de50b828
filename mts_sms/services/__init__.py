from mts_sms.services.sms_service import SmsService
from mts_sms.services.factory import NoopSmsProvider, get_sms_service
from mts_sms.services.providers.mts_provider import MtsSmsProvider

__all__ = ['SmsService', 'NoopSmsProvider', 'MtsSmsProvider', 'get_sms_service']
