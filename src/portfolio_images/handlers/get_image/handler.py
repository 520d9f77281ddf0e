"""
Lambda handler responsible for retrieving a single image record.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from portfolio_images.core.models.errors import NotFoundError, StorageError
from portfolio_images.core.utils.decorators import api_gateway_handler, request_log_extra
from portfolio_images.core.utils.response import ResponseBuilder
from portfolio_images.core.utils.validators import (
    first_error_message,
    sanitize_validation_errors,
    validate_request,
)

from .models import GetImageRequest
from .service import GetService

logger = Logger(utc=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle `GET /api/images/{key}`.

    Returns the record's value shape
    `{url, publicId?, originalName, size, mimetype, uploadedAt}`.

    Args:
        event: API Gateway event payload.
        context: AWS Lambda runtime context.

    Returns:
        API Gateway-compatible response dictionary.
    """
    logger.info("Received image get request", extra=request_log_extra(event, context))

    path_params = event.get("pathParameters") or {}

    try:
        request = validate_request(GetImageRequest, {"key": path_params.get("key")})
    except ValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": sanitize_validation_errors(exc.errors())},
        )
        return ResponseBuilder.bad_request(
            first_error_message(exc.errors()),
            details={"errors": sanitize_validation_errors(exc.errors())},
        )

    service = GetService()

    try:
        record = service.get_image(request.image_key)

    except NotFoundError as exc:
        return ResponseBuilder.not_found(exc.message, error_code=exc.error_code)

    except StorageError as exc:
        logger.exception(
            "Get image failed",
            extra={"image_key": request.image_key},
        )
        return ResponseBuilder.internal_error(exc.message, error_code=exc.error_code)

    return ResponseBuilder.ok(record.to_response())
