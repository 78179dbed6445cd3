import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from blogboard.domain.post_category import PostCategory
from blogboard.interfaces.api.v1.schemas.pagination import PaginationMeta


class PostCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1, max_length=255)
    category: PostCategory


class PostUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = Field(default=None, min_length=1, max_length=255)
    category: PostCategory | None = None


class PostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    content: str
    category: PostCategory
    author_id: uuid.UUID
    created_at: datetime
    updated_at: datetime


class PostListResponse(BaseModel):
    items: list[PostResponse]
    pagination: PaginationMeta
