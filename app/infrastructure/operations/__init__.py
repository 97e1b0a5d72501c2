"""Operation result types and status enums.

This module contains standardized result types for operations that may fail
outside the translation core (loading resources from files or over HTTP),
including status enums, result dataclasses, and error classifiers.
"""

from infrastructure.operations.classifiers import (
    classify_file_error,
    classify_http_error,
    classify_payload_error,
)
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_file_error",
    "classify_http_error",
    "classify_payload_error",
]
