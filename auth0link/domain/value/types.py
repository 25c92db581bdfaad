"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import ValidationError, field_validator

from auth0link.domain.error import PreconditionError
from auth0link.domain.value.common import RootValueObject


class LoginEventType(str, Enum):
    """Auth0 log event codes counted as login activity."""

    SUCCESS = "s"
    FAILED_LOGIN = "fu"
    FAILED_PASSWORD = "fp"


class ReconcileOutcome(str, Enum):
    """How a local user ended up linked to its remote account."""

    CREATED = "created"  # remote account was created for this user
    LINKED = "linked"  # an existing remote account was resolved


class Sub(RootValueObject[str]):
    """Auth0 subject identifier.

    Format: "<provider>|<id>", e.g. "auth0|5f7c8ec7c33c6c004bbafe82" or
    "google-oauth2|1234". Only the first "|" separates provider from id.
    """

    @field_validator("root")
    @classmethod
    def validate_sub_format(cls, v: str) -> str:
        """Validate the provider|id shape."""
        provider, sep, user_id = v.partition("|")
        if not sep or not provider or not user_id:
            raise ValueError(f"Sub must look like 'provider|id', got {v!r}")
        return v

    @classmethod
    def parse(cls, value: str) -> "Sub":
        """Parse a raw sub, raising PreconditionError when malformed.

        Args:
            value: Raw identifier string

        Returns:
            Validated Sub

        Raises:
            PreconditionError: If the value is not "provider|id"
        """
        try:
            return cls(value)
        except ValidationError as e:
            raise PreconditionError(f"Malformed sub {value!r}") from e

    @property
    def provider(self) -> str:
        return self.root.partition("|")[0]

    @property
    def user_id(self) -> str:
        return self.root.partition("|")[2]
