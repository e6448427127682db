from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Enum
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
import enum

from ecoevents.models import Base


class EventStatus(str, enum.Enum):
    active = "active"
    inactive = "inactive"


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    date = Column(Date, nullable=False)
    time = Column(String(20), nullable=True)
    venue = Column(String(255), nullable=False)
    activity_type = Column(String(255), nullable=True)
    organizer = Column(String(255), nullable=True)
    max_capacity = Column(Integer, nullable=True)
    status = Column(Enum(EventStatus), nullable=False, default=EventStatus.active)
    image = Column(String(2048), nullable=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # comment_count is attached in ecoevents.models.comment once Comment exists
    comments = relationship("Comment", back_populates="event", order_by="Comment.created_at.desc()")
