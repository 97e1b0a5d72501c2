"""Operation result dataclass.

Uniform result type returned from resource loading operations, including
status, data, and error information.
"""

from typing import Any, Iterable, List, Optional
from dataclasses import dataclass

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Uniform result returned from operations.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs/troubleshooting
        data: Optional[Any] -- optional payload (can be dict, list, or object)
        error_code: Optional[str] -- optional machine error code
        subject: Optional[str] -- what the operation was about (e.g. a source URL)
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    subject: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """Helper property to check if operation was successful.

        Returns:
            True if status is SUCCESS, False otherwise
        """
        return self.status == OperationStatus.SUCCESS

    @property
    def is_retryable(self) -> bool:
        return self.status == OperationStatus.TRANSIENT_ERROR

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        """Create a SUCCESS OperationResult with optional data.

        Args:
            data: Optional payload to include with the result
            message: Human-friendly success message

        Returns:
            OperationResult with SUCCESS status
        """
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create an error OperationResult.

        Args:
            status: OperationStatus indicating error type
            message: Human-friendly error message
            error_code: Optional machine error code
            data: Optional payload to include with the error

        Returns:
            OperationResult with specified error status
        """
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            data=data,
        )

    @classmethod
    def transient_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create a transient (retryable) error result.

        Use for errors that may succeed on retry, such as:
        - Network timeouts
        - Rate limiting
        - Temporary server errors

        Args:
            message: Human-friendly error message
            error_code: Optional machine error code

        Returns:
            OperationResult with TRANSIENT_ERROR status
        """
        return cls.error(OperationStatus.TRANSIENT_ERROR, message, error_code)

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create a permanent (non-retryable) error result.

        Use for errors that will not succeed on retry, such as:
        - Malformed JSON or YAML payloads
        - Payloads that are not shaped as a resource tree
        - Invalid sources

        Args:
            message: Human-friendly error message
            error_code: Optional machine error code

        Returns:
            OperationResult with PERMANENT_ERROR status
        """
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code)

    @classmethod
    def not_found(
        cls, message: str, error_code: Optional[str] = "NOT_FOUND"
    ) -> "OperationResult":
        return cls.error(OperationStatus.NOT_FOUND, message, error_code)

    @classmethod
    def combine(
        cls, results: Iterable["OperationResult"], message: str
    ) -> "OperationResult":
        """Aggregate several results into a single one.

        The combined result succeeds only when every child succeeded. Children
        are kept, in order, in ``data`` so callers can inspect each outcome.

        Args:
            results: Child results, one per unit of work
            message: Human-friendly message for the combined result

        Returns:
            OperationResult with SUCCESS status, or PERMANENT_ERROR (error code
            PARTIAL_FAILURE) when at least one child failed
        """
        children: List[OperationResult] = list(results)
        failed = [child for child in children if not child.is_success]
        if not failed:
            return cls.success(data=children, message=message)

        return cls.error(
            OperationStatus.PERMANENT_ERROR,
            f"{message}: {len(failed)} of {len(children)} failed",
            error_code="PARTIAL_FAILURE",
            data=children,
        )

    def with_subject(self, subject: str) -> "OperationResult":
        """Attach a subject and return self, for chaining."""
        self.subject = subject
        return self
