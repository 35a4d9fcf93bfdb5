"""Mapping of domain errors to HTTP responses."""

from rest_framework import status
from rest_framework.response import Response

from events.domain.errors import DomainError, ErrorCode

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DUPLICATE_EVENT_NAME: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_DATE_RANGE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
}


def error_response(error: DomainError) -> Response:
    """Build a response carrying only the error code and user-safe message."""
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS[error.code],
    )
