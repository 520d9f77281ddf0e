"""Thin adapter for sending email through Amazon SES."""

import os
from typing import Any, Protocol

import boto3

from portfolio_images.core.utils.constants import ENV_AWS_ENDPOINT_URL, ENV_AWS_REGION


class _Boto3SESClient(Protocol):
    """Internal typing for boto3 SES client (AWS-facing only)."""

    def send_email(self, **kwargs: Any) -> dict[str, Any]: ...


class SESAdapterProtocol(Protocol):
    """Minimal SES adapter protocol (notifier-facing)."""

    def send_email(
        self,
        *,
        source: str,
        to_address: str,
        subject: str,
        html_body: str,
        reply_to: str | None = None,
    ) -> str: ...


class SESAdapter:
    """Low-level SES operations (mechanical, no error handling)."""

    def __init__(self) -> None:
        self._client: _Boto3SESClient = boto3.client(
            "ses",
            endpoint_url=os.getenv(ENV_AWS_ENDPOINT_URL),
            region_name=os.getenv(ENV_AWS_REGION),
        )

    def send_email(
        self,
        *,
        source: str,
        to_address: str,
        subject: str,
        html_body: str,
        reply_to: str | None = None,
    ) -> str:
        """Send a single HTML email and return the SES message id.
        Raises boto3 exceptions - caught by domain implementation.
        """
        kwargs: dict[str, Any] = {
            "Source": source,
            "Destination": {"ToAddresses": [to_address]},
            "Message": {
                "Subject": {"Data": subject, "Charset": "UTF-8"},
                "Body": {"Html": {"Data": html_body, "Charset": "UTF-8"}},
            },
        }

        if reply_to:
            kwargs["ReplyToAddresses"] = [reply_to]

        response = self._client.send_email(**kwargs)
        message_id: str = response["MessageId"]
        return message_id
