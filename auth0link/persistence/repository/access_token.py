"""PostgreSQL implementation of AccessToken repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from auth0link.domain.model import AccessToken
from auth0link.domain.repository import AccessTokenRepository
from auth0link.persistence.mappers import access_token_to_dict, row_to_access_token
from auth0link.persistence.tables import access_tokens_table


class PostgresAccessTokenRepository(AccessTokenRepository):
    """PostgreSQL implementation of AccessTokenRepository.

    The name column is the primary key and save() is a single
    INSERT ... ON CONFLICT DO UPDATE, so concurrent refreshes of one name
    leave one row holding the last write.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_name(self, name: str) -> Optional[AccessToken]:
        stmt = select(access_tokens_table).where(access_tokens_table.c.name == name)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_access_token(dict(row)) if row else None

    async def save(self, token: AccessToken) -> AccessToken:
        values = access_token_to_dict(token)
        stmt = insert(access_tokens_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[access_tokens_table.c.name],
            set_={
                "token": stmt.excluded.token,
                "refreshed_at": stmt.excluded.refreshed_at,
            },
        )
        await self.session.execute(stmt)

        await self.session.flush()
        return token
