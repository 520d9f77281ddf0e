"""
Lambda handler for the contact form.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError as PydanticValidationError

from portfolio_images.core.models.errors import NotificationError, ValidationError
from portfolio_images.core.utils.decorators import api_gateway_handler, request_log_extra
from portfolio_images.core.utils.response import ResponseBuilder
from portfolio_images.core.utils.validators import (
    first_error_message,
    parse_json_body,
    sanitize_validation_errors,
    validate_request,
)

from .models import ContactInquiry, ContactResponse
from .service import ContactService

logger = Logger(utc=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle `POST /api/send-email`.

    Body: `{name, email, phone?, sessionType?, message}`.
    """
    logger.info("Received contact email request", extra=request_log_extra(event, context))

    try:
        body = parse_json_body(event)
    except ValidationError as exc:
        return ResponseBuilder.bad_request(exc.message, error_code=exc.error_code)

    try:
        inquiry = validate_request(ContactInquiry, body)
    except PydanticValidationError as exc:
        errors = sanitize_validation_errors(exc.errors())
        logger.error("Request validation failed", extra={"errors": errors})
        return ResponseBuilder.bad_request(
            first_error_message(exc.errors()),
            details={"errors": errors},
        )

    service = ContactService()

    try:
        service.send_inquiry(inquiry)

    except ValidationError as exc:
        return ResponseBuilder.bad_request(exc.message, error_code=exc.error_code)

    except NotificationError as exc:
        logger.exception("Email sending error")
        return ResponseBuilder.internal_error(
            exc.message,
            error_code=exc.error_code,
            details=exc.details,
        )

    response = ContactResponse(message="Emails sent successfully!")

    return ResponseBuilder.ok(response.model_dump())
