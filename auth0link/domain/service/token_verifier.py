"""Bearer token verification port."""

from typing import Any

from pydantic import BaseModel


class VerificationResult(BaseModel):
    """Outcome of verifying a bearer token.

    Either valid with claims, or invalid with an error description.
    """

    valid: bool
    claims: dict[str, Any] = {}
    error: str | None = None

    @classmethod
    def ok(cls, claims: dict[str, Any]) -> "VerificationResult":
        return cls(valid=True, claims=claims)

    @classmethod
    def failed(cls, error: str) -> "VerificationResult":
        return cls(valid=False, error=error)

    @property
    def sub(self) -> str | None:
        return self.claims.get("sub")


class TokenVerifier:
    """Verifies JWTs issued for this API."""

    def verify(self, token: str) -> VerificationResult:
        """Verify signature, issuer, audience and expiry.

        Args:
            token: Raw JWT from the Authorization header

        Returns:
            Verification result; never raises for a bad token
        """
        raise NotImplementedError
