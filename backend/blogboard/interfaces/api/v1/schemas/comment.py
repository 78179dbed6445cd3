import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from blogboard.interfaces.api.v1.schemas.pagination import PaginationMeta


class CommentContent(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    content: str = Field(min_length=1, max_length=255)


class CommentCreate(CommentContent):
    post_id: uuid.UUID


class CommentUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    content: str | None = Field(default=None, min_length=1, max_length=255)


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    content: str
    post_id: uuid.UUID
    author_id: uuid.UUID
    created_at: datetime
    updated_at: datetime


class CommentListResponse(BaseModel):
    items: list[CommentResponse]
    pagination: PaginationMeta
