"""SQLAlchemy ORM model for the attendees table."""

from sqlalchemy import Index, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column

from tripboard.db.schemas.base import Base


class AttendeeRow(Base):
    __tablename__ = "attendees"

    id: Mapped[str] = mapped_column(UUID, primary_key=True, server_default=text("gen_random_uuid()"))
    name: Mapped[str] = mapped_column(Text, nullable=False)
    created_at = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()"))

    __table_args__ = (Index("idx_attendees_created_at", "created_at"),)
