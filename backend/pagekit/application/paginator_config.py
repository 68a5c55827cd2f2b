from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pagekit.config import settings
from pagekit.domain.sort_order import SortOrder


class PaginatorConfig(BaseModel):
    """
    Static paging rules for one endpoint.

    ``sortable_columns`` is the whitelist of client-selectable sort keys; its
    first entry is the last-resort default. ``column_aliases`` maps a logical
    key to a physical sort expression and only applies to pre-built queries.
    ``where`` is a filter for the plain repository strategy: either a mapping
    of attribute equality conditions or a sequence of SQLAlchemy clauses.
    Setting ``max_limit`` to ``None`` lets clients request any page size.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    sortable_columns: list[str]
    column_aliases: dict[str, str] = Field(default_factory=dict)
    max_limit: int | None = Field(default_factory=lambda: settings.max_limit, gt=0)
    default_sort_by: str | None = None
    default_order_by: SortOrder = SortOrder.ASC
    default_limit: int = Field(default_factory=lambda: settings.default_limit, gt=0)
    where: Any = None
