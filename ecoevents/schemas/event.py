from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional
import datetime as dt

from ecoevents.config import settings
from ecoevents.models.event import EventStatus


class EventBaseSchema(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    date: dt.date
    time: Optional[str] = Field(default=None, max_length=20)
    venue: str = Field(..., min_length=1, max_length=255)
    activity_type: Optional[str] = Field(default=None, max_length=255)
    organizer: Optional[str] = Field(default=None, max_length=255)
    max_capacity: Optional[int] = Field(default=None, ge=0, le=settings.MAX_DB_INTEGER)
    status: EventStatus = EventStatus.active
    image: Optional[str] = Field(default=None, max_length=2048)

class EventCreateSchema(EventBaseSchema):
    pass

class EventUpdateSchema(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, min_length=1)
    date: Optional[dt.date] = None
    time: Optional[str] = Field(default=None, max_length=20)
    venue: Optional[str] = Field(default=None, min_length=1, max_length=255)
    activity_type: Optional[str] = Field(default=None, max_length=255)
    organizer: Optional[str] = Field(default=None, max_length=255)
    max_capacity: Optional[int] = Field(default=None, ge=0, le=settings.MAX_DB_INTEGER)
    status: Optional[EventStatus] = None
    image: Optional[str] = Field(default=None, max_length=2048)

    @field_validator("name", "description", "date", "venue", "status")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("Field may be omitted but not set to null.")
        return value

    @model_validator(mode="after")
    def require_some_field(self):
        if not self.model_fields_set:
            raise ValueError("No fields provided for update.")
        return self

class EventResponseSchema(EventBaseSchema):
    id: int
    comment_count: int = 0
    created_at: dt.datetime
    updated_at: Optional[dt.datetime] = None

    class Config:
        from_attributes = True
