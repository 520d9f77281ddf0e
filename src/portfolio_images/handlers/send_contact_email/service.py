"""
Business logic for contact form delivery.

Each inquiry produces two emails: one to the studio inbox with Reply-To
set to the client, and a confirmation to the client.
"""

import os
from typing import Any

from aws_lambda_powertools import Logger

from portfolio_images.core.infrastructure.factory import get_contact_notifier
from portfolio_images.core.models.errors import ValidationError
from portfolio_images.core.repositories.notifier_repository import ContactNotifier
from portfolio_images.core.utils.constants import ENV_FROM_NAME, ENV_TO_EMAIL

from .models import ContactInquiry
from .templates import (
    CONFIRMATION_SUBJECT,
    inquiry_subject,
    render_confirmation,
    render_inquiry,
)

logger = Logger(utc=True)


class ContactService:
    """Sends contact form inquiries through a ContactNotifier."""

    def __init__(
        self,
        notifier: ContactNotifier | None = None,
        *,
        to_email: str | None = None,
        studio_name: str | None = None,
    ) -> None:
        self.to_email = to_email or os.getenv(ENV_TO_EMAIL)
        if not self.to_email:
            raise RuntimeError(f"{ENV_TO_EMAIL} environment variable is not set")

        self.studio_name = studio_name or os.getenv(ENV_FROM_NAME)
        self.notifier = notifier or get_contact_notifier()

    @staticmethod
    def validate_inquiry(inquiry: ContactInquiry) -> None:
        if not (inquiry.name and inquiry.email and inquiry.message):
            raise ValidationError(message="Name, email, and message are required fields")

    def send_inquiry(self, inquiry: ContactInquiry) -> dict[str, Any]:
        """Send the studio inquiry and the client confirmation.

        Raises:
            ValidationError: If name, email or message is missing
            NotificationError: If either email cannot be sent
        """
        self.validate_inquiry(inquiry)

        inquiry_id = self.notifier.send_email(
            to_address=self.to_email,
            subject=inquiry_subject(inquiry),
            html_body=render_inquiry(inquiry),
            reply_to=inquiry.email,
        )

        confirmation_id = self.notifier.send_email(
            to_address=inquiry.email,
            subject=CONFIRMATION_SUBJECT,
            html_body=render_confirmation(inquiry, studio_name=self.studio_name),
        )

        logger.info(
            "Contact inquiry delivered",
            extra={"inquiry_message_id": inquiry_id, "confirmation_message_id": confirmation_id},
        )

        return {
            "inquiry_message_id": inquiry_id,
            "confirmation_message_id": confirmation_id,
        }
