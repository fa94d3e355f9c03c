from __future__ import annotations

from sqlalchemy import Boolean, Column, Integer, MetaData, String, Table, false

metadata = MetaData()

registrations = Table(
    "registrations",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("roll", String(100), nullable=False, unique=True),
    Column("attended", Boolean, nullable=False, default=False, server_default=false()),
)
