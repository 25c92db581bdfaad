"""Mappers for converting between database rows and domain models."""

from typing import Any, Dict
from uuid import UUID

from auth0link.domain.model import AccessToken, User
from auth0link.domain.value import UserId


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        name=row["name"],
        email=row["email"],
        sub=row.get("sub"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_access_token(row: Dict[str, Any]) -> AccessToken:
    """Convert database row to AccessToken domain model."""
    return AccessToken(
        name=row["name"],
        token=row["token"],
        refreshed_at=row["refreshed_at"],
    )


def access_token_to_dict(token: AccessToken) -> Dict[str, Any]:
    """Convert AccessToken domain model to database dict."""
    return token.model_dump()
