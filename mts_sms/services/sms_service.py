class SmsService:
    """Provider-agnostic SMS sender interface."""

    def send(self, to: str, body: str, meta: dict | None = None):
        """Send an SMS message.
        Args:
            to: Recipient phone number (msid).
            body: Message text.
            meta: Optional metadata (e.g., naming for the campaign label).
        Returns:
            Provider-specific send result, or None.
        """
        raise NotImplementedError("SmsService.send() must be implemented by a provider-specific subclass.")
