"""Abstract contract for outbound contact emails."""

from abc import ABC, abstractmethod


class ContactNotifier(ABC):
    """Contract for delivering a rendered HTML email.

    Implementations could be SES, SMTP, etc.
    """

    @abstractmethod
    def send_email(
        self,
        *,
        to_address: str,
        subject: str,
        html_body: str,
        reply_to: str | None = None,
    ) -> str:
        """Send one email and return the provider message id.

        Raises:
            NotificationError: If delivery fails
        """
