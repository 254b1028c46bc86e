"""Domain services for the quality lifecycle engine.

Domain services are pure: they read the fixed rule tables and a record
snapshot, and never touch infrastructure.

Available services:
- project / current_stage: milestone projection
- build: display timeline
- validate / available_transitions: transition validation
"""

from quality_lifecycle.domain.services.milestone_projector import (
    current_stage,
    project,
    stage_state,
)
from quality_lifecycle.domain.services.timeline_builder import (
    DEFAULT_DATE_FORMAT,
    build,
    tooltip_for,
)
from quality_lifecycle.domain.services.transition_validator import (
    TransitionValidation,
    available_transitions,
    validate,
)

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "TransitionValidation",
    "available_transitions",
    "build",
    "current_stage",
    "project",
    "stage_state",
    "tooltip_for",
    "validate",
]
