from typing import Any, NamedTuple, Protocol, runtime_checkable

from pagekit.domain.sort_order import SortOrder


class DataPage(NamedTuple):
    items: list[Any]
    total_items: int


@runtime_checkable
class DataSource(Protocol):
    """Capability that yields one sorted, bounded slice plus the filtered total count."""

    accepts_filter: bool

    def sort_expression(self, sort_by: str, column_aliases: dict[str, str]) -> Any:
        """Translate a whitelisted logical sort key into what ``fetch`` orders by."""
        ...

    def fetch(
        self,
        sort_column: Any,
        direction: SortOrder,
        limit: int,
        offset: int,
        filter: Any = None,
    ) -> DataPage:
        """Return the requested slice and the count of every row matching ``filter``."""
        ...
