"""Users Table.

타입 규칙: 문자열은 TEXT, 프로필은 프로바이더마다 구조가 달라 JSONB로 저장합니다.
"""

from sqlalchemy import Column, DateTime, MetaData, Table, Text
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.sql import func

metadata = MetaData(schema="sso")

users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("email", Text, nullable=False, unique=True),
    Column("link", Text, nullable=False, unique=True),
    Column("profile", JSONB, nullable=False, server_default="{}"),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)
