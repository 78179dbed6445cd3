from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from blogboard.domain.query_operators import VALUELESS_OPERATORS, FilterOperator, SortOrder

ItemT = TypeVar("ItemT")


class PageRequest(BaseModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    sort_by: str | None = None
    sort_order: SortOrder = SortOrder.desc
    search: str | None = Field(default=None, max_length=100)


class PaginationMeta(BaseModel):
    total: int
    page: int
    limit: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool


class PaginatedResult(BaseModel, Generic[ItemT]):
    items: list[ItemT]
    pagination: PaginationMeta


class FilterCondition(BaseModel):
    field: str
    operator: FilterOperator
    value: Any = None

    @model_validator(mode="after")
    def check_value_matches_operator(self) -> "FilterCondition":
        if self.operator in VALUELESS_OPERATORS:
            return self
        if self.value is None:
            raise ValueError(f"Filter operator '{self.operator.value}' requires a value")
        if self.operator in (FilterOperator.in_, FilterOperator.nin) and not isinstance(self.value, (list, tuple, set)):
            raise ValueError(f"Filter operator '{self.operator.value}' requires a list of values")
        return self


class DateRangeFilter(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    field: str
    from_: datetime | None = Field(default=None, alias="from")
    to: datetime | None = None


class PaginationOptions(BaseModel):
    search_fields: list[str] = Field(default_factory=list)
    search_relations: list[str] = Field(default_factory=list)
    default_sort_field: str | None = None
    filters: list[FilterCondition] = Field(default_factory=list)
    date_range_filters: list[DateRangeFilter] = Field(default_factory=list)
