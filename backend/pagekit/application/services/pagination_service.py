from math import ceil
from typing import Any
from urllib.parse import urlencode

from pagekit.application.errors import ConfigurationError
from pagekit.application.paginator_config import PaginatorConfig
from pagekit.application.services.data_source import DataPage, DataSource
from pagekit.domain.sort_order import SortOrder
from pagekit.infrastructure.logging import get_logger
from pagekit.interfaces.api.v1.schemas.pagination import (
    NavigationLinks,
    PaginatedResult,
    PaginationMeta,
    PagingParams,
    PagingRequest,
)

logger = get_logger(__name__)

# Offsets are bound as signed 64-bit SQL integers.
MAX_OFFSET = 2**63 - 1


def resolve_page(page: int | None, limit: int = 1) -> int:
    if page is None or page < 1:
        return 1
    return min(page, MAX_OFFSET // limit + 1)


def resolve_limit(limit: int | None, config: PaginatorConfig) -> int:
    resolved = limit if limit is not None and limit > 0 else config.default_limit or 20
    if config.max_limit is not None:
        resolved = min(resolved, config.max_limit)
    return resolved


def resolve_order_by(order_by: str | None, config: PaginatorConfig) -> SortOrder:
    if order_by in (SortOrder.ASC.value, SortOrder.DESC.value):
        return SortOrder(order_by)
    return config.default_order_by or SortOrder.ASC


def resolve_sort_by(sort_by: str | None, config: PaginatorConfig) -> str:
    """
    Pick the one column the page is ordered by.

    Precedence: a whitelisted client key, then a whitelisted configured
    default, then the first sortable column.
    """
    sortable_columns = config.sortable_columns
    if not sortable_columns:
        logger.error("paginator_misconfigured", reason="empty_sortable_columns")
        raise ConfigurationError("Paginator requires at least one sortable column")
    if sort_by is not None and sort_by in sortable_columns:
        return sort_by
    if config.default_sort_by is not None and config.default_sort_by in sortable_columns:
        return config.default_sort_by
    return sortable_columns[0]


def normalize_request(request: PagingRequest, config: PaginatorConfig) -> PagingParams:
    limit = resolve_limit(request.limit, config)
    return PagingParams(
        page=resolve_page(request.page, limit),
        limit=limit,
        sort_by=resolve_sort_by(request.sort_by, config),
        order_by=resolve_order_by(request.order_by, config),
    )


def calculate_total_pages(total_items: int, limit: int) -> int:
    if total_items <= 0:
        return 0
    return ceil(total_items / limit)


def clamp_page(page: int, total_pages: int) -> int:
    if page > total_pages:
        page = total_pages
    if page < 1:
        page = 1
    return page


def build_link(path: str, page: int, params: PagingParams) -> str:
    query = urlencode(
        {
            "page": page,
            "limit": params.limit,
            "sortBy": params.sort_by,
            "orderBy": params.order_by.value,
        }
    )
    return f"{path}?{query}"


def build_links(path: str, params: PagingParams, total_pages: int) -> NavigationLinks:
    # An empty result set still has one (empty) page to point at.
    last_page = max(total_pages, 1)
    page = params.page
    return NavigationLinks(
        first_page=None if page == 1 else build_link(path, 1, params),
        previous_page=None if page - 1 < 1 else build_link(path, page - 1, params),
        current_page=build_link(path, page, params),
        next_page=None if page + 1 > last_page else build_link(path, page + 1, params),
        last_page=None if page == last_page else build_link(path, last_page, params),
    )


def assemble_result(
    data_page: DataPage, params: PagingParams, total_pages: int, links: NavigationLinks
) -> PaginatedResult[Any]:
    meta = PaginationMeta(
        items_per_page=params.limit,
        total_items=data_page.total_items,
        current_page=params.page,
        total_pages=total_pages,
        sort_by=params.sort_by,
        order_by=params.order_by,
    )
    return PaginatedResult[Any](data=list(data_page.items), meta=meta, links=links)


def paginate(request: PagingRequest, source: DataSource, config: PaginatorConfig) -> PaginatedResult[Any]:
    params = normalize_request(request, config)
    if config.where is not None and not source.accepts_filter:
        logger.error("paginator_misconfigured", reason="filter_with_prebuilt_query")
        raise ConfigurationError("A where filter cannot be combined with a pre-built query")

    sort_column = source.sort_expression(params.sort_by, config.column_aliases)
    data_page = source.fetch(
        sort_column,
        params.order_by,
        params.limit,
        params.offset,
        filter=config.where,
    )
    logger.debug(
        "page_fetched",
        sort_by=params.sort_by,
        order_by=params.order_by.value,
        limit=params.limit,
        offset=params.offset,
        item_count=len(data_page.items),
        total_items=data_page.total_items,
    )

    total_pages = calculate_total_pages(data_page.total_items, params.limit)
    current_page = clamp_page(params.page, total_pages)
    if current_page != params.page:
        logger.debug("page_clamped", requested_page=params.page, current_page=current_page, total_pages=total_pages)
        params = params.model_copy(update={"page": current_page})

    links = build_links(request.path, params, total_pages)
    return assemble_result(data_page, params, total_pages, links)
