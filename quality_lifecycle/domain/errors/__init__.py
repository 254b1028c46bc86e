"""Domain errors for the quality lifecycle engine.

All errors inherit from QualityLifecycleError. They are raised by
collaborators and by table construction, and are carried as values inside
``TransitionValidation`` and ``StatusUpdateResult`` by the core.
"""

from quality_lifecycle.domain.errors.concurrent_modification import (
    ConcurrentModificationError,
)
from quality_lifecycle.domain.errors.lifecycle_definition import (
    LifecycleDefinitionError,
    UnknownStatusError,
)
from quality_lifecycle.domain.errors.persistence import (
    PersistenceError,
    RecordNotFoundError,
)
from quality_lifecycle.domain.errors.transition import (
    CommentTooLongError,
    InvalidTransitionError,
    MissingRequiredCommentError,
    TransitionValidationError,
    UnauthorizedTransitionError,
)

__all__: list[str] = [
    "CommentTooLongError",
    "ConcurrentModificationError",
    "InvalidTransitionError",
    "LifecycleDefinitionError",
    "MissingRequiredCommentError",
    "PersistenceError",
    "RecordNotFoundError",
    "TransitionValidationError",
    "UnauthorizedTransitionError",
    "UnknownStatusError",
]
