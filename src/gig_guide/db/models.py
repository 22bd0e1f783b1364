# ABOUTME: SQLAlchemy ORM models for subscribers and generated content logs.
# ABOUTME: Defines Subscriber and ContentLog tables.

from datetime import UTC, date, datetime
from uuid import uuid4

from sqlalchemy import JSON, Boolean, Date, DateTime, Float, ForeignKey, Index, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def _new_id() -> str:
    return str(uuid4())


def _now() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class Subscriber(Base):
    """A mailing-list member with location, languages, and send schedule."""

    __tablename__ = "subscribers"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    languages: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=lambda: ["en"])
    send_days: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, onupdate=_now, nullable=False
    )

    content_logs: Mapped[list["ContentLog"]] = relationship(
        "ContentLog", back_populates="subscriber", cascade="all, delete-orphan", passive_deletes=True
    )

    __table_args__ = (Index("ix_subscribers_email", email),)

    def __repr__(self) -> str:
        status = "active" if self.active else "inactive"
        return f"<Subscriber {self.email} ({status})>"


class ContentLog(Base):
    """One generated bulletin for one subscriber."""

    __tablename__ = "content_logs"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    subscriber_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("subscribers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    generated_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    event_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    source_kind: Mapped[str] = mapped_column(String(20), nullable=False)
    used_mock_events: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, nullable=False
    )

    subscriber: Mapped[Subscriber] = relationship("Subscriber", back_populates="content_logs")

    __table_args__ = (Index("ix_content_logs_generated_date_desc", generated_date.desc()),)

    def __repr__(self) -> str:
        return f"<ContentLog {self.generated_date} {self.subscriber_id} ({self.source_kind})>"
