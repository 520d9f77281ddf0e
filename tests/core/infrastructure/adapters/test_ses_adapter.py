from botocore.exceptions import ClientError
import pytest

from portfolio_images.core.infrastructure.adapters.ses_adapter import SESAdapter


class TestSESAdapter:
    def test_send_email_returns_message_id(self, ses_client) -> None:
        message_id = SESAdapter().send_email(
            source="Test Studio <studio@example.com>",
            to_address="client@example.com",
            subject="Hello",
            html_body="<p>Hi</p>",
            reply_to="client@example.com",
        )

        assert message_id
        assert ses_client.get_send_quota()["SentLast24Hours"] == 1

    def test_unverified_sender_fails(self, ses_client) -> None:
        with pytest.raises(ClientError):
            SESAdapter().send_email(
                source="nobody@unverified.example",
                to_address="client@example.com",
                subject="Hello",
                html_body="<p>Hi</p>",
            )
