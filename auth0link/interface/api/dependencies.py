"""Shared FastAPI dependencies."""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from auth0link.domain.service import TokenVerifier, VerificationResult

bearer_scheme = HTTPBearer(auto_error=False)


async def require_bearer_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> VerificationResult:
    """Verify the Authorization bearer token.

    Raises:
        HTTPException: 401 if the header is missing or the token is rejected
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    verifier = await request.state.dishka_container.get(TokenVerifier)
    result = verifier.verify(credentials.credentials)
    if not result.valid:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=result.error,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return result
