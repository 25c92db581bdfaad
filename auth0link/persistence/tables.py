"""SQLAlchemy table definitions.

Used with manual row mapping into the immutable domain models.
"""

from sqlalchemy import Column, Index, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),  # Natural key
    Column("sub", String(255), nullable=True),  # Remote user id once linked
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_sub", users_table.c.sub)

# ============================================================================
# ACCESS TOKENS TABLE (one row per token name)
# ============================================================================
access_tokens_table = Table(
    "access_tokens",
    metadata,
    Column("name", String(100), primary_key=True),
    Column("token", Text, nullable=False),
    Column("refreshed_at", TIMESTAMP(timezone=True), nullable=False),
)
