from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer
from pydantic.alias_generators import to_camel

from pagekit.domain.sort_order import SortOrder

T = TypeVar("T")


class PagingRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int | None = None
    limit: int | None = None
    sort_by: str | None = None
    order_by: str | None = None
    path: str = ""


class PagingParams(BaseModel):
    """Effective paging values once defaults, whitelisting and the limit cap are applied."""

    model_config = ConfigDict(frozen=True)

    page: int
    limit: int
    sort_by: str
    order_by: SortOrder

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class CamelModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class PaginationMeta(CamelModel):
    items_per_page: int
    total_items: int
    current_page: int
    total_pages: int
    sort_by: str
    order_by: SortOrder


class NavigationLinks(CamelModel):
    first_page: str | None = None
    previous_page: str | None = None
    current_page: str
    next_page: str | None = None
    last_page: str | None = None

    @model_serializer(mode="wrap")
    def _omit_absent_links(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return {key: value for key, value in handler(self).items() if value is not None}


class PaginatedResult(CamelModel, Generic[T]):
    data: list[T]
    meta: PaginationMeta
    links: NavigationLinks
