"""
Lambda handler responsible for deleting an image and its record.
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

from .models import DeleteImageRequest, DeleteImageResponse
from .service import DeleteService

logger = Logger(utc=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle `DELETE /api/images/{key}`.

    This function:
    - Extracts the image key from API Gateway path parameters
    - Delegates deletion to the service layer
    - Translates domain errors into HTTP responses

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    logger.info("Received image delete request", extra=request_log_extra(event, context))

    path_params = event.get("pathParameters") or {}

    try:
        request = validate_request(DeleteImageRequest, {"key": path_params.get("key")})
    except ValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": sanitize_validation_errors(exc.errors())},
        )
        return ResponseBuilder.bad_request(
            first_error_message(exc.errors()),
            details={"errors": sanitize_validation_errors(exc.errors())},
        )

    service = DeleteService()

    try:
        service.delete_image(request.image_key)

    except NotFoundError as exc:
        return ResponseBuilder.not_found(exc.message, error_code=exc.error_code)

    except StorageError as exc:
        logger.exception(
            "Deletion failed",
            extra={"image_key": request.image_key},
        )
        return ResponseBuilder.internal_error(exc.message, error_code=exc.error_code)

    response = DeleteImageResponse(message="Image deleted successfully")

    return ResponseBuilder.ok(response.model_dump())
