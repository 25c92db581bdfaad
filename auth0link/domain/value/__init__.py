"""Domain value objects."""

from auth0link.domain.value.identifiers import UserId
from auth0link.domain.value.types import LoginEventType, ReconcileOutcome, Sub

__all__ = [
    "UserId",
    "LoginEventType",
    "ReconcileOutcome",
    "Sub",
]
