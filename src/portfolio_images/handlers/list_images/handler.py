"""
Lambda handler responsible for listing all image records.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from portfolio_images.core.models.errors import StorageError
from portfolio_images.core.utils.decorators import api_gateway_handler, request_log_extra
from portfolio_images.core.utils.response import ResponseBuilder

from .service import ListService

logger = Logger(utc=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle `GET /api/images`.

    The response body is a JSON object mapping each image key to
    `{url, publicId?, originalName, size, mimetype, uploadedAt}`.

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    logger.info("Received image list request", extra=request_log_extra(event, context))

    service = ListService()

    try:
        images = service.list_images()
    except StorageError as exc:
        logger.exception("Error listing images")
        return ResponseBuilder.internal_error(exc.message, error_code=exc.error_code)

    return ResponseBuilder.ok({key: record.to_response() for key, record in images.items()})
