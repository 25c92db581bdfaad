"""Unit tests for bearer token verifiers."""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import jwt
import pytest
from cryptography.hazmat.primitives.asymmetric import rsa

from auth0link.adapter.auth0 import JWKSTokenVerifier, StaticTokenVerifier

ISSUER = "https://tenant.example.auth0.com/"
AUDIENCE = "https://tenant.example.auth0.com/api/v2/"


@pytest.fixture(scope="module")
def private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def verifier(client_config, private_key):
    """JWKS verifier whose key lookup returns the test public key."""
    verifier = JWKSTokenVerifier(client_config)
    signing_key = MagicMock()
    signing_key.key = private_key.public_key()
    verifier.jwks_client = MagicMock()
    verifier.jwks_client.get_signing_key_from_jwt.return_value = signing_key
    return verifier


def make_token(private_key, **overrides) -> str:
    claims = {
        "sub": "auth0|123",
        "iss": ISSUER,
        "aud": AUDIENCE,
        "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
    }
    claims.update(overrides)
    return jwt.encode(claims, private_key, algorithm="RS256")


class TestJWKSTokenVerifier:
    """Tests for JWKSTokenVerifier."""

    def test_builds_jwks_url_from_domain(self, client_config):
        verifier = JWKSTokenVerifier(client_config)

        assert verifier.issuer == ISSUER
        assert verifier.jwks_client.uri == f"{ISSUER}.well-known/jwks.json"

    def test_valid_token_returns_claims(self, verifier, private_key):
        result = verifier.verify(make_token(private_key))

        assert result.valid
        assert result.sub == "auth0|123"
        assert result.error is None

    def test_expired_token_is_rejected(self, verifier, private_key):
        token = make_token(
            private_key, exp=datetime.now(timezone.utc) - timedelta(minutes=1)
        )

        result = verifier.verify(token)

        assert not result.valid
        assert result.error == "Token has expired"

    @pytest.mark.parametrize(
        "overrides",
        [{"aud": "https://elsewhere/"}, {"iss": "https://attacker.example.com/"}],
    )
    def test_wrong_audience_or_issuer_is_rejected(
        self, verifier, private_key, overrides
    ):
        result = verifier.verify(make_token(private_key, **overrides))

        assert not result.valid
        assert result.error == "Invalid token"

    def test_token_signed_with_other_key_is_rejected(self, verifier):
        other_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)

        result = verifier.verify(make_token(other_key))

        assert not result.valid

    def test_jwks_lookup_failure_is_a_failed_result(self, verifier):
        verifier.jwks_client.get_signing_key_from_jwt.side_effect = (
            jwt.PyJWKClientError("Unable to find a signing key")
        )

        result = verifier.verify("not-a-jwt")

        assert not result.valid
        assert result.error == "Invalid token"


class TestStaticTokenVerifier:
    """Tests for StaticTokenVerifier."""

    def test_known_token(self):
        verifier = StaticTokenVerifier({"t": {"sub": "auth0|1"}})

        assert verifier.verify("t").sub == "auth0|1"

    def test_unknown_token(self):
        assert not StaticTokenVerifier().verify("t").valid
