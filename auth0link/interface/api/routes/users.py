"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status

from auth0link.application.usecase.user import GetCurrentUserUseCase
from auth0link.application.usecase.user.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
)
from auth0link.domain.service import VerificationResult
from auth0link.interface.api.dependencies import require_bearer_token

router = APIRouter(tags=["users"], route_class=DishkaRoute)


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: VerificationResult = Depends(require_bearer_token),
) -> GetCurrentUserResponse:
    """Get the local user linked to the bearer token's subject.

    Raises:
        HTTPException: 401 without a valid token, 404 if no user is linked
    """
    if not token.sub:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Token has no subject"
        )
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(sub=token.sub)
    )
