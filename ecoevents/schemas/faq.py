from pydantic import BaseModel, Field, field_validator, model_validator
from datetime import datetime
from typing import List, Optional

from ecoevents.config import settings

QUESTION_MAX_LENGTH = 255
ANSWER_MAX_LENGTH = 1000
CATEGORY_MAX_LENGTH = 100


class FaqBaseSchema(BaseModel):
    question: str = Field(..., min_length=1, max_length=QUESTION_MAX_LENGTH)
    answer: str = Field(..., min_length=1, max_length=ANSWER_MAX_LENGTH)
    category: Optional[str] = Field(default=None, max_length=CATEGORY_MAX_LENGTH)
    order: int = Field(default=0, ge=0, le=settings.MAX_DB_INTEGER)
    active: bool = True

class FaqCreateSchema(FaqBaseSchema):
    pass

class FaqUpdateSchema(BaseModel):
    question: Optional[str] = Field(default=None, min_length=1, max_length=QUESTION_MAX_LENGTH)
    answer: Optional[str] = Field(default=None, min_length=1, max_length=ANSWER_MAX_LENGTH)
    category: Optional[str] = Field(default=None, max_length=CATEGORY_MAX_LENGTH)
    order: Optional[int] = Field(default=None, ge=0, le=settings.MAX_DB_INTEGER)
    active: Optional[bool] = None

    @field_validator("question", "answer", "order", "active")
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

class FaqResponseSchema(FaqBaseSchema):
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class FaqPageSchema(BaseModel):
    items: List[FaqResponseSchema]
    page: int
    last_page: int
    page_size: int
    total: int

class FaqReorderItemSchema(BaseModel):
    id: int = Field(..., ge=1, le=settings.MAX_DB_INTEGER)
    order: int = Field(..., ge=0, le=settings.MAX_DB_INTEGER)

class FaqReorderSchema(BaseModel):
    items: List[FaqReorderItemSchema] = Field(..., min_length=1)

class FaqReorderResultSchema(BaseModel):
    success: bool
    updated: int

class MessageResponseSchema(BaseModel):
    success: bool
    message: str
