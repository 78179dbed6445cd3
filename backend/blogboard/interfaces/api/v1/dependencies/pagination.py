from fastapi import Query

from blogboard.domain.query_operators import SortOrder
from blogboard.interfaces.api.v1.schemas.pagination import PageRequest


def get_page_request(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    sort_by: str | None = Query(default=None),
    sort_order: SortOrder = Query(default=SortOrder.desc),
    search: str | None = Query(default=None, max_length=100),
) -> PageRequest:
    normalized_search = search.strip() if search is not None else None
    if normalized_search == "":
        normalized_search = None
    return PageRequest(page=page, limit=limit, sort_by=sort_by, sort_order=sort_order, search=normalized_search)
