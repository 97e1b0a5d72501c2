"""Error classifiers for resource loading exceptions.

Converts exceptions raised while fetching resources (HTTP client, file
system, payload decoding) into standardized OperationResult objects.
Centralizes error classification so loaders never raise for a failed source.

Key Functions:
- classify_http_error(): requests exceptions → OperationResult
- classify_file_error(): OS/file system errors → OperationResult
- classify_payload_error(): decoding and shape errors → OperationResult

Usage:
    from infrastructure.operations.classifiers import classify_http_error

    try:
        response = session.get(url, timeout=10)
        response.raise_for_status()
    except requests.RequestException as exc:
        return classify_http_error(exc)
"""

from typing import Optional

import requests

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus


def classify_http_error(exc: Exception) -> OperationResult:
    """Classify requests errors into OperationResult.

    Status Code Mapping:
    - 429: Rate limiting → TRANSIENT_ERROR
    - 404: Not found → NOT_FOUND
    - 5xx: Server error → TRANSIENT_ERROR
    - Other 4xx: Client error → PERMANENT_ERROR
    - Connection errors and timeouts → TRANSIENT_ERROR

    Args:
        exc: Exception raised by the requests library

    Returns:
        OperationResult with appropriate status, message and error_code
    """
    if isinstance(exc, requests.Timeout):
        return OperationResult.transient_error(
            f"Request timed out: {str(exc)}",
            error_code="TIMEOUT",
        )

    if not isinstance(exc, requests.HTTPError):
        # Connection refused, DNS failure, etc.
        return OperationResult.transient_error(
            f"Connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    status_code: Optional[int] = None
    if exc.response is not None:
        status_code = exc.response.status_code

    if status_code == 429:
        return OperationResult.transient_error(
            "Resource server rate limited",
            error_code="RATE_LIMITED",
        )

    if status_code == 404:
        return OperationResult.not_found("Resource not found")

    if status_code and 500 <= status_code < 600:
        return OperationResult.transient_error(
            f"Resource server error ({status_code})",
            error_code="SERVER_ERROR",
        )

    if status_code and 400 <= status_code < 500:
        return OperationResult.permanent_error(
            f"Resource request rejected ({status_code}): {str(exc)}",
            error_code="HTTP_ERROR",
        )

    return OperationResult.permanent_error(
        f"HTTP error: {str(exc)}",
        error_code="UNKNOWN_ERROR",
    )


def classify_file_error(exc: Exception) -> OperationResult:
    """Classify file system errors into OperationResult.

    Args:
        exc: Exception raised while opening or reading a resource file

    Returns:
        NOT_FOUND for missing files, PERMANENT_ERROR otherwise
    """
    if isinstance(exc, FileNotFoundError):
        return OperationResult.not_found(f"Resource file not found: {exc.filename}")

    if isinstance(exc, PermissionError):
        return OperationResult.permanent_error(
            f"Resource file not readable: {exc.filename}",
            error_code="FORBIDDEN",
        )

    return OperationResult.permanent_error(
        f"Could not read resource file: {type(exc).__name__}: {str(exc)}",
        error_code="IO_ERROR",
    )


def classify_payload_error(exc: Exception) -> OperationResult:
    """Classify decoding and shape errors into OperationResult.

    A payload that cannot be parsed or is not shaped as a resource tree will
    fail again on retry, so these are always permanent.

    Args:
        exc: Exception raised while decoding or normalizing a payload

    Returns:
        OperationResult with PERMANENT_ERROR status
    """
    return OperationResult.error(
        OperationStatus.PERMANENT_ERROR,
        f"Invalid resource payload: {str(exc)}",
        error_code="INVALID_PAYLOAD",
    )
