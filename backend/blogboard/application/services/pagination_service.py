from collections.abc import Callable
from datetime import datetime, timezone
from math import ceil
from operator import eq, ge, gt, le, lt, ne
from typing import Any, TypeVar

from sqlalchemy import bindparam
from sqlalchemy.orm import Session

from blogboard.domain.query_operators import FilterOperator, SortOrder
from blogboard.infrastructure.db.query_builder import SelectQueryBuilder
from blogboard.infrastructure.logging import get_logger
from blogboard.interfaces.api.v1.schemas.pagination import (
    DateRangeFilter,
    FilterCondition,
    PageRequest,
    PaginatedResult,
    PaginationMeta,
    PaginationOptions,
)

ModelT = TypeVar("ModelT")
ItemT = TypeVar("ItemT")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
DEFAULT_SORT_FIELD = "created_at"

_SORT_ORDER_VALUES = {order.value for order in SortOrder}

_COMPARISONS = {
    FilterOperator.eq: eq,
    FilterOperator.neq: ne,
    FilterOperator.gt: gt,
    FilterOperator.gte: ge,
    FilterOperator.lt: lt,
    FilterOperator.lte: le,
}

logger = get_logger(__name__)


def _column_type(column: Any) -> Any:
    return column.property.columns[0].type


def _as_utc(value: Any) -> Any:
    """Naive datetimes are read as UTC; aware ones are converted to it."""
    if not isinstance(value, datetime):
        return value
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _filter_predicate(column: Any, condition: FilterCondition, param_name: str) -> Any:
    operator = condition.operator
    if operator in _COMPARISONS:
        value = _as_utc(condition.value)
        return _COMPARISONS[operator](column, bindparam(param_name, value, type_=_column_type(column)))
    if operator is FilterOperator.like:
        return column.like(bindparam(param_name, f"%{condition.value}%"))
    if operator is FilterOperator.ilike:
        return column.ilike(bindparam(param_name, f"%{condition.value}%"))
    if operator is FilterOperator.in_:
        return column.in_(bindparam(param_name, list(condition.value), type_=_column_type(column), expanding=True))
    if operator is FilterOperator.nin:
        return column.not_in(bindparam(param_name, list(condition.value), type_=_column_type(column), expanding=True))
    if operator is FilterOperator.null:
        return column.is_(None)
    return column.is_not(None)


def apply_filters(builder: SelectQueryBuilder, filters: list[FilterCondition]) -> SelectQueryBuilder:
    for index, condition in enumerate(filters):
        column = builder.column(condition.field)
        builder.and_where(_filter_predicate(column, condition, f"filter{index}"))
    return builder


def apply_date_range_filters(builder: SelectQueryBuilder, date_range_filters: list[DateRangeFilter]) -> SelectQueryBuilder:
    for index, date_range in enumerate(date_range_filters):
        column = builder.column(date_range.field)
        if date_range.from_ is not None:
            builder.and_where(column >= bindparam(f"date_from{index}", _as_utc(date_range.from_), type_=_column_type(column)))
        if date_range.to is not None:
            builder.and_where(column <= bindparam(f"date_to{index}", _as_utc(date_range.to), type_=_column_type(column)))
    return builder


def apply_search_filter(
    builder: SelectQueryBuilder,
    search: str | None,
    search_fields: list[str],
    search_relations: list[str],
) -> SelectQueryBuilder:
    if not search or not search_fields:
        return builder
    pattern = f"%{search}%"
    paths = [*search_fields, *search_relations]
    conditions = [
        builder.column(path).ilike(bindparam(f"search{index}", pattern))
        for index, path in enumerate(paths)
    ]
    return builder.or_where_group(conditions)


def resolve_sort_field(
    sort_by: str | None,
    sortable_fields: list[str] | None,
    default_sort_field: str | None = None,
) -> str:
    if sortable_fields:
        if sort_by is not None and sort_by in sortable_fields:
            return sort_by
        return sortable_fields[0]
    return default_sort_field or DEFAULT_SORT_FIELD


def build_pagination_meta(total: int, page: int, limit: int) -> PaginationMeta:
    total_pages = ceil(total / limit) if total > 0 else 0
    return PaginationMeta(
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_prev_page=page > 1,
    )


def build_page_request(
    page: int | None = None,
    limit: int | None = None,
    sort_by: str | None = None,
    sort_order: str | None = None,
    search: str | None = None,
) -> PageRequest:
    """
    Build a page request from loosely typed input, coercing values into range.

    Out-of-range ``page`` and ``limit`` are clamped, unknown sort orders become
    ``desc`` and blank searches are dropped. ``sort_by`` is kept as given and is
    checked against the caller's sortable fields when the page is composed.
    """
    normalized_order = (sort_order or "").lower()
    normalized_search = search.strip()[:100] if search is not None else None
    return PageRequest(
        page=max(DEFAULT_PAGE, page or DEFAULT_PAGE),
        limit=min(MAX_LIMIT, max(1, limit or DEFAULT_LIMIT)),
        sort_by=sort_by or None,
        sort_order=SortOrder(normalized_order) if normalized_order in _SORT_ORDER_VALUES else SortOrder.desc,
        search=normalized_search or None,
    )


def paginate(
    builder: SelectQueryBuilder[ModelT],
    page_request: PageRequest,
    map_fn: Callable[[ModelT], ItemT],
    options: PaginationOptions | None = None,
    sortable_fields: list[str] | None = None,
) -> PaginatedResult[ItemT]:
    """
    Compose filters, search, sort and paging on ``builder`` and run it.

    The builder is consumed: predicates are appended in place and the query
    is executed once for rows and once for the total. Errors raised while
    executing are not caught here.
    """
    options = options or PaginationOptions()

    apply_filters(builder, options.filters)
    apply_date_range_filters(builder, options.date_range_filters)
    apply_search_filter(builder, page_request.search, options.search_fields, options.search_relations)

    sort_field = resolve_sort_field(page_request.sort_by, sortable_fields, options.default_sort_field)
    builder.order_by(sort_field, page_request.sort_order)

    offset = (page_request.page - 1) * page_request.limit
    builder.skip(offset).take(page_request.limit)

    rows, total = builder.get_many_and_count()
    meta = build_pagination_meta(total=total, page=page_request.page, limit=page_request.limit)
    logger.debug(
        "page_composed",
        alias=builder.alias,
        sort_field=sort_field,
        offset=offset,
        total=total,
        returned=len(rows),
    )
    return PaginatedResult[Any](items=[map_fn(row) for row in rows], pagination=meta)


def paginate_by_repository(
    db: Session,
    model: type[ModelT],
    page_request: PageRequest,
    map_fn: Callable[[ModelT], ItemT],
    options: PaginationOptions | None = None,
    sortable_fields: list[str] | None = None,
) -> PaginatedResult[ItemT]:
    builder = SelectQueryBuilder(db, model, alias=model.__name__.lower())
    return paginate(builder, page_request, map_fn, options=options, sortable_fields=sortable_fields)
