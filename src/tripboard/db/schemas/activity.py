"""SQLAlchemy ORM model for the activities table."""

from sqlalchemy import Boolean, ForeignKey, Index, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column

from tripboard.db.schemas.base import Base


class ActivityRow(Base):
    __tablename__ = "activities"

    id: Mapped[str] = mapped_column(UUID, primary_key=True, server_default=text("gen_random_uuid()"))
    title: Mapped[str | None] = mapped_column(Text)
    description: Mapped[str | None] = mapped_column(Text)
    link: Mapped[str | None] = mapped_column(Text)
    image_url: Mapped[str | None] = mapped_column(Text)
    trip_id: Mapped[str | None] = mapped_column(UUID, ForeignKey("trip.id", ondelete="SET NULL"))
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))
    created_at = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()"))

    __table_args__ = (
        Index("idx_activities_created_at", "created_at"),
        Index("idx_activities_trip_id", "trip_id"),
    )
