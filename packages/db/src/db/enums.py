# This project was developed with assistance from AI tools.
"""
Domain enums for the application lifecycle.

Shared domain types used by both SQLAlchemy models (db package)
and Pydantic view-models (appdocs package).
"""

import enum


class ApplicationState(str, enum.Enum):
    PENDING = "pending"
    ACTIVATED = "activated"
    IN_REVIEW = "in_review"
    CLOSED = "closed"
    DECLINED = "declined"

    @property
    def description(self) -> str:
        """Human-readable label shown on generated documents."""
        return _STATE_DESCRIPTIONS[self]

    @classmethod
    def documented_states(cls) -> frozenset["ApplicationState"]:
        """States for which a summary document can be generated."""
        return frozenset({cls.PENDING, cls.ACTIVATED, cls.IN_REVIEW})


_STATE_DESCRIPTIONS: dict[ApplicationState, str] = {
    ApplicationState.PENDING: "Pending",
    ApplicationState.ACTIVATED: "Activated",
    ApplicationState.IN_REVIEW: "In Review",
    ApplicationState.CLOSED: "Closed",
    ApplicationState.DECLINED: "Declined",
}
