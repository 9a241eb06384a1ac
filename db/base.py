"""
db/base.py

Declarative base and shared mixins for all SQLAlchemy models.
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from sqlalchemy import DateTime, Numeric, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    Project-wide declarative base.

    A bare ``Mapped[Decimal]`` column is a money amount, ``Numeric(18, 2)``.
    Columns holding anything else (dimensions, index levels) declare their
    own precision.
    """

    type_annotation_map: dict[type, Any] = {
        Decimal: Numeric(18, 2),
        uuid.UUID: UUID(as_uuid=True),
    }


class TimestampMixin:
    """
    Adds created_at and updated_at.  updated_at is refreshed on every ORM
    UPDATE; bulk upserts must set it explicitly.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=lambda: datetime.now(timezone.utc),
    )
