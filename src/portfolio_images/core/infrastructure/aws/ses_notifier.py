"""SES-backed implementation of ContactNotifier."""

import os

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from portfolio_images.core.infrastructure.adapters.ses_adapter import SESAdapter, SESAdapterProtocol
from portfolio_images.core.models.errors import NotificationError
from portfolio_images.core.repositories.notifier_repository import ContactNotifier
from portfolio_images.core.utils.constants import ENV_FROM_EMAIL, ENV_FROM_NAME

logger = Logger(utc=True)


class SESNotifier(ContactNotifier):
    """Sends contact emails through Amazon SES from the studio address."""

    def __init__(
        self,
        adapter: SESAdapterProtocol | None = None,
        *,
        from_name: str | None = None,
        from_email: str | None = None,
    ) -> None:
        from_email = from_email or os.getenv(ENV_FROM_EMAIL)
        if not from_email:
            raise RuntimeError(f"{ENV_FROM_EMAIL} environment variable is not set")

        from_name = from_name or os.getenv(ENV_FROM_NAME)
        self._source = f"{from_name} <{from_email}>" if from_name else from_email
        self._ses: SESAdapterProtocol = adapter or SESAdapter()

    def send_email(
        self,
        *,
        to_address: str,
        subject: str,
        html_body: str,
        reply_to: str | None = None,
    ) -> str:
        logger.debug("Sending email", extra={"to": to_address, "subject": subject})

        try:
            message_id = self._ses.send_email(
                source=self._source,
                to_address=to_address,
                subject=subject,
                html_body=html_body,
                reply_to=reply_to,
            )
        except ClientError as exc:
            logger.error("SES send_email failed", extra={"to": to_address})
            raise NotificationError(
                message="Failed to send email",
                details={"reason": exc.response.get("Error", {}).get("Message", str(exc))},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error sending email")
            raise NotificationError(
                message="Failed to send email",
                details={"reason": str(exc)},
            ) from exc

        logger.info("Email sent", extra={"to": to_address, "message_id": message_id})
        return message_id
