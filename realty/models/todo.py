"""Todo model."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Uuid

from realty.database import Base
from realty.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Todo(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Personal task. ``completed_at`` is set iff ``completed`` is true."""

    __tablename__ = "todos"

    text = Column(String(1000), nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    owner_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
