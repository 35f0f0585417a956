"""SQLAlchemy ORM model for the selections table."""

from sqlalchemy import Boolean, ForeignKey, Index, UniqueConstraint, text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column

from tripboard.db.schemas.base import Base


class SelectionRow(Base):
    __tablename__ = "selections"

    id: Mapped[str] = mapped_column(UUID, primary_key=True, server_default=text("gen_random_uuid()"))
    attendee_id: Mapped[str] = mapped_column(UUID, ForeignKey("attendees.id", ondelete="CASCADE"), nullable=False)
    activity_id: Mapped[str] = mapped_column(UUID, ForeignKey("activities.id", ondelete="CASCADE"), nullable=False)
    selected: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))
    created_at = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()"))

    __table_args__ = (
        # Upserts rely on this constraint as their conflict target
        UniqueConstraint("attendee_id", "activity_id", name="uq_selections_attendee_activity"),
        Index("idx_selections_activity_id", "activity_id"),
    )
