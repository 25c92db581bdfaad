"""Local user aggregate root.

Email is the natural key shared with the identity provider; sub is the
provider's id for the linked remote account.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from auth0link.domain.model.common import DomainModel
from auth0link.domain.value import UserId


def _now() -> datetime:
    return datetime.now(timezone.utc)


class User(DomainModel):
    """A user of the local application.

    The password is never stored here: it only travels to the identity
    provider.
    """

    id: UserId
    name: str
    email: str
    sub: Optional[str] = None  # Set once the remote account is resolved
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)
