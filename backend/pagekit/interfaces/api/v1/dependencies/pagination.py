from fastapi import Query, Request

from pagekit.domain.sort_order import SortOrder
from pagekit.interfaces.api.v1.schemas.pagination import PagingRequest


def _parse_positive_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if value > 0 else None


def request_path(request: Request) -> str:
    return str(request.url.replace(query="", fragment=""))


def get_paging_request(
    request: Request,
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    sort_by: str | None = Query(default=None, alias="sortBy"),
    order_by: str | None = Query(default=None, alias="orderBy"),
) -> PagingRequest:
    """Read paging fields leniently: malformed values are dropped rather than rejected."""
    return PagingRequest(
        page=_parse_positive_int(page),
        limit=_parse_positive_int(limit),
        sort_by=sort_by or None,
        order_by=order_by if order_by in (SortOrder.ASC.value, SortOrder.DESC.value) else None,
        path=request_path(request),
    )
