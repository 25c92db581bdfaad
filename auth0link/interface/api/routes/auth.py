"""Authentication routes.

Browser flows only: every endpoint answers with a 302.
"""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from auth0link.application.usecase.auth import (
    CompleteLoginUseCase,
    LoginUseCase,
    LogoutUseCase,
)
from auth0link.application.usecase.auth.complete_login import CompleteLoginRequest
from auth0link.config import SessionSettings
from auth0link.interface.api.session import CookieSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


@router.get("/login")
async def login(
    request: Request,
    login_use_case: FromDishka[LoginUseCase],
    session_settings: FromDishka[SessionSettings],
    next: str | None = None,
):
    """Send the browser to Auth0, or straight on if already logged in.

    Only local paths are accepted for next; anything else goes to /.

    Example:
        GET /auth/login?next=/dashboard
    """
    session = CookieSession(request, session_settings)
    return await login_use_case.execute(session, next)


@router.get("/callback")
async def callback(
    request: Request,
    code: str,
    state: str,
    complete_login_use_case: FromDishka[CompleteLoginUseCase],
    session_settings: FromDishka[SessionSettings],
):
    """Handle the Auth0 redirect, reconcile the user and set the session cookie.

    Example:
        GET /auth/callback?code=abc123&state=xyz789

        Redirects to: the path passed to /auth/login as next, or /
        Sets cookie: session (and clears login_state)
    """
    logger.info("Auth0 callback received")
    session = CookieSession(request, session_settings)
    return await complete_login_use_case.execute(
        CompleteLoginRequest(code=code, state=state), session
    )


@router.get("/logout")
async def logout(
    request: Request,
    logout_use_case: FromDishka[LogoutUseCase],
    session_settings: FromDishka[SessionSettings],
):
    """Clear the session cookie and log out of Auth0."""
    session = CookieSession(request, session_settings)
    return await logout_use_case.execute(session)
