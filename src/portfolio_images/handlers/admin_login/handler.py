"""
Lambda handler for admin login.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError as PydanticValidationError

from portfolio_images.core.models.errors import AuthenticationError, ValidationError
from portfolio_images.core.utils.decorators import api_gateway_handler, request_log_extra
from portfolio_images.core.utils.response import ResponseBuilder
from portfolio_images.core.utils.validators import (
    first_error_message,
    parse_json_body,
    sanitize_validation_errors,
    validate_request,
)

from .models import AdminLoginRequest, AdminLoginResponse
from .service import AdminAuthService

logger = Logger(utc=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Handle `POST /api/admin/login` with body `{username, password}`."""
    logger.info("Received admin login request", extra=request_log_extra(event, context))

    try:
        body = parse_json_body(event)
    except ValidationError as exc:
        return ResponseBuilder.bad_request(exc.message, error_code=exc.error_code)

    try:
        request = validate_request(AdminLoginRequest, body)
    except PydanticValidationError as exc:
        return ResponseBuilder.bad_request(
            first_error_message(exc.errors()),
            details={"errors": sanitize_validation_errors(exc.errors())},
        )

    service = AdminAuthService()

    try:
        service.authenticate(request.username, request.password)
    except AuthenticationError as exc:
        return ResponseBuilder.unauthorized(exc.message, error_code=exc.error_code)

    return ResponseBuilder.ok(AdminLoginResponse(message="Login successful").model_dump())
