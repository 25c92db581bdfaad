"""Bearer token verification against the tenant's JWKS."""

from typing import Any

import jwt
import logfire

from auth0link.config import ClientConfig
from auth0link.domain.service.token_verifier import TokenVerifier, VerificationResult

ALGORITHMS = ["RS256"]


class JWKSTokenVerifier(TokenVerifier):
    """Verifies RS256 access tokens with keys published at /.well-known/jwks.json.

    Signature checks are delegated to PyJWT; signing keys are cached by
    PyJWKClient between calls.
    """

    def __init__(self, config: ClientConfig) -> None:
        """Initialize verifier.

        Args:
            config: Auth0 client configuration (domain and audience)
        """
        self.issuer = f"{config.base_url}/"
        self.audience = config.audience
        self.jwks_client = jwt.PyJWKClient(f"{self.issuer}.well-known/jwks.json")

    def verify(self, token: str) -> VerificationResult:
        try:
            signing_key = self.jwks_client.get_signing_key_from_jwt(token)
            claims = jwt.decode(
                token,
                signing_key.key,
                algorithms=ALGORITHMS,
                audience=self.audience,
                issuer=self.issuer,
            )
        except jwt.ExpiredSignatureError:
            logfire.info("Bearer token expired")
            return VerificationResult.failed("Token has expired")
        except jwt.PyJWTError as e:
            logfire.warn("Bearer token rejected", error=str(e))
            return VerificationResult.failed("Invalid token")

        return VerificationResult.ok(claims)


class StaticTokenVerifier(TokenVerifier):
    """Accepts only the tokens it was given, with fixed claims."""

    def __init__(self, tokens: dict[str, dict[str, Any]] | None = None) -> None:
        self.tokens = tokens or {}

    def verify(self, token: str) -> VerificationResult:
        claims = self.tokens.get(token)
        if claims is None:
            return VerificationResult.failed("Invalid token")
        return VerificationResult.ok(claims)
