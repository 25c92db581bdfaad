"""Cached machine-to-machine access token."""

from datetime import datetime

from auth0link.domain.model.common import DomainModel


class AccessToken(DomainModel):
    """A machine token persisted under a well-known name.

    There is at most one AccessToken per name.
    """

    name: str
    token: str
    refreshed_at: datetime
