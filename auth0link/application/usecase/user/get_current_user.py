"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from auth0link.application.usecase.base import BaseUseCase
from auth0link.domain.service import UserService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    sub: str  # From the verified bearer token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    name: str
    email: str
    sub: str
    created_at: datetime


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for loading the local user behind a bearer token."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Look up the local user linked to the token's subject.

        Raises:
            NotFoundError: If no local user is linked to this sub
        """
        user = await self.user_service.get_by_sub(request.sub)
        return GetCurrentUserResponse(
            user_id=str(user.id),
            name=user.name,
            email=user.email,
            sub=request.sub,
            created_at=user.created_at,
        )
