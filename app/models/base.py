"""
Base Model Module

This module provides a base class for all SQLAlchemy models with common fields:
- id: Primary key (UUID)
- created_at: Timestamp when record was created
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Uuid, func

# Import the Base from your database module
from app.db.database import Base


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(Base):
    """
    Abstract base model class that provides common fields for all models.

    Attributes:
        id (UUID): Primary key, auto-generated UUID
        created_at (DateTime): Timestamp set automatically when record is created
    """

    # This makes the class abstract - no table will be created for BaseModel itself
    __abstract__ = True

    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        nullable=False,
        index=True
    )

    # Set in Python so rows inserted in the same second still order correctly
    created_at = Column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=func.now(),
        nullable=False
    )

    def __repr__(self):
        """String representation for debugging."""
        return f"<{self.__class__.__name__}(id={self.id})>"
