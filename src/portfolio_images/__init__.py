"""Portfolio Images Service Package."""

__version__ = "1.0.0"
__description__ = (
    "Image upload, metadata and contact backend for a photography portfolio "
    "using AWS Lambda, S3 and DynamoDB"
)

__all__ = ["handlers", "core"]
