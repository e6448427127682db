from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, select, func
from sqlalchemy.orm import relationship, column_property
from datetime import datetime, timezone

from ecoevents.models import Base
from ecoevents.models.event import Event


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    author = Column(String(255), nullable=False)
    edited = Column(Boolean, nullable=False, default=False)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    event = relationship("Event", foreign_keys=[event_id], back_populates="comments")


# Counted on read from the comments table, so there is no stored total to drift.
Event.comment_count = column_property(
    select(func.count(Comment.id))
    .where(Comment.event_id == Event.id, Comment.active.is_(True))
    .correlate_except(Comment)
    .scalar_subquery()
)
