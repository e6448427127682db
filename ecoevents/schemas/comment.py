from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional

from ecoevents.config import settings

COMMENT_MAX_LENGTH = 1000


class CommentBaseSchema(BaseModel):
    content: str = Field(..., min_length=1, max_length=COMMENT_MAX_LENGTH)

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Comment content cannot be blank.")
        return value

class CommentCreateSchema(CommentBaseSchema):
    event_id: int = Field(..., ge=1, le=settings.MAX_DB_INTEGER)
    # blank or missing falls back to the configured placeholder author
    author: Optional[str] = Field(default=None, max_length=255)

class CommentUpdateSchema(CommentBaseSchema):
    pass

class CommentResponseSchema(CommentBaseSchema):
    id: int
    event_id: int
    author: str
    edited: bool
    active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
