"""Base exception classes for the quality lifecycle domain layer."""


class QualityLifecycleError(Exception):
    """Base exception for all lifecycle errors.

    Every lifecycle error carries a stable ``error_code`` for presentation
    layers and a ``retryable`` flag telling callers whether re-running the
    whole operation against fresh data can succeed.
    """

    error_code: str = "LIFECYCLE_ERROR"
    retryable: bool = False

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for error responses."""
        return {
            "error_code": self.error_code,
            "message": str(self),
            "retryable": self.retryable,
        }
