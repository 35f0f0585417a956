"""SQLAlchemy ORM model for the trip table."""

from sqlalchemy import Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column

from tripboard.db.schemas.base import Base


class TripRow(Base):
    __tablename__ = "trip"

    id: Mapped[str] = mapped_column(UUID, primary_key=True)
    title: Mapped[str | None] = mapped_column(Text)
    description: Mapped[str | None] = mapped_column(Text)
    created_at = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()"))
