"""Errors raised while building or consulting the status vocabularies."""

from __future__ import annotations

from quality_lifecycle.domain.exceptions import QualityLifecycleError


class LifecycleDefinitionError(QualityLifecycleError):
    """Raised when a transition rule table is not well formed.

    Rule tables are fixed per record kind and built at import time, so this
    error surfaces at process start rather than on a user request.
    """

    error_code = "LIFECYCLE_DEFINITION_INVALID"


class UnknownStatusError(QualityLifecycleError, ValueError):
    """Raised when a value is not a member of a kind's status vocabulary.

    Attributes:
        kind: Record kind value whose vocabulary was consulted.
        value: The rejected status value.
    """

    error_code = "UNKNOWN_STATUS"

    def __init__(self, kind: str, value: object) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"'{value}' is not a valid {kind.upper()} status")
