"""User use cases."""

from .get_current_user import GetCurrentUserUseCase
from .upsert_user import UpsertUserUseCase

__all__ = ["GetCurrentUserUseCase", "UpsertUserUseCase"]
