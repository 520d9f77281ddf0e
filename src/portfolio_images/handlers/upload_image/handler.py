"""
Lambda handler responsible for image upload and metadata creation.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError as PydanticValidationError

from portfolio_images.core.models.errors import StorageError, ValidationError
from portfolio_images.core.utils.decorators import api_gateway_handler, request_log_extra
from portfolio_images.core.utils.response import ResponseBuilder
from portfolio_images.core.utils.validators import (
    first_error_message,
    parse_json_body,
    sanitize_validation_errors,
    validate_request,
)

from .models import ImageUploadRequest, ImageUploadResponse
from .service import UploadService

logger = Logger(utc=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle image upload requests.

    Expected API Gateway event structure:
    {
        "body": "{\"image\": \"<base64>\", \"imageKey\": \"hero-1\", ...}",
        "isBase64Encoded": false
    }

    Args:
        event: API Gateway Lambda proxy event containing the upload payload
        context: AWS Lambda execution context

    Returns:
        200 with `{success, imageUrl, imageKey, publicId?}`, 400 on invalid
        input, 500 on storage failure
    """
    logger.info("Received image upload request", extra=request_log_extra(event, context))

    try:
        body = parse_json_body(event)
    except ValidationError as exc:
        logger.warning("Invalid JSON body received")
        return ResponseBuilder.bad_request(exc.message, error_code=exc.error_code)

    try:
        request = validate_request(ImageUploadRequest, body)
    except PydanticValidationError as exc:
        errors = sanitize_validation_errors(exc.errors())
        logger.error("Request validation failed", extra={"errors": errors})
        return ResponseBuilder.bad_request(
            first_error_message(exc.errors()),
            details={"errors": errors},
        )

    service = UploadService()

    try:
        record = service.upload_image(
            image_key=request.image_key,
            file=request.to_uploaded_file(),
        )

    except ValidationError as exc:
        logger.warning(
            "Upload rejected",
            extra={"image_key": request.image_key, "error_code": exc.error_code},
        )
        return ResponseBuilder.bad_request(exc.message, error_code=exc.error_code)

    except StorageError as exc:
        logger.exception(
            "Infrastructure error during image upload",
            extra={"image_key": request.image_key},
        )
        return ResponseBuilder.internal_error(exc.message, error_code=exc.error_code)

    response = ImageUploadResponse(
        image_url=record.url,
        image_key=record.image_key,
        public_id=record.storage_handle,
    )

    return ResponseBuilder.ok(response.model_dump(by_alias=True, exclude_none=True))
