from mts_sms.clients import MtsClient, SubmitBatch, SubmitMessage
from mts_sms.services.sms_service import SmsService
import logging


class MtsSmsProvider(SmsService):
    """
    SmsService implementation that submits single-recipient batches to MTS.
    """
    def __init__(self, token: str, client: MtsClient | None = None, naming: str = ""):
        """
        Args:
            token (str): MTS bearer token.
            client (MtsClient | None): Client to use; built from settings when omitted.
            naming (str): Default campaign label for submitted batches.
        """
        self.token = token
        self.client = client or MtsClient(token=token)
        self.naming = naming
        self.logger = logging.getLogger("mts_sms.MtsSmsProvider")

    def send(self, to: str, body: str, meta: dict | None = None) -> SubmitMessage:
        """
        Send one SMS and return the submitted message with its gateway result.

        ``message_id`` and ``send_error`` on the returned object reflect what the
        gateway acknowledged. Client errors propagate unchanged.
        """
        naming = self.naming
        if isinstance(meta, dict) and meta.get("naming"):
            naming = meta["naming"]
        msg = SubmitMessage(msid=to, message=body)
        self.client.send_sms(SubmitBatch(submits=[msg], naming=naming), self.token)
        if msg.send_error:
            self.logger.warning(f"MTS rejected recipient {to} message_id={msg.message_id}")
        return msg
