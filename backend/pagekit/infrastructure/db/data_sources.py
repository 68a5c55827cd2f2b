from collections.abc import Mapping
from typing import Any

from sqlalchemy import func, inspect, literal_column, select
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from pagekit.application.errors import ConfigurationError
from pagekit.application.services.data_source import DataPage
from pagekit.domain.sort_order import SortOrder
from pagekit.infrastructure.logging import get_logger

logger = get_logger(__name__)


def apply_filter(query: Select, filter: Any) -> Select:
    if filter is None:
        return query
    if isinstance(filter, Mapping):
        return query.filter_by(**filter)
    if isinstance(filter, (list, tuple)):
        return query.where(*filter)
    return query.where(filter)


def _ordered(query: Select, sort_column: Any, direction: SortOrder) -> Select:
    return query.order_by(None).order_by(sort_column.desc() if direction == SortOrder.DESC else sort_column.asc())


def _fetch_slice(db: Session, query: Select, sort_column: Any, direction: SortOrder, limit: int, offset: int) -> DataPage:
    total_items = db.execute(select(func.count()).select_from(query.order_by(None).subquery())).scalar_one()
    paged_query = _ordered(query, sort_column, direction).offset(offset).limit(limit)
    items = list(db.execute(paged_query).scalars().all())
    return DataPage(items=items, total_items=total_items)


class RepositoryDataSource:
    """Pages over every row of a mapped model, filtered by the endpoint's ``where``."""

    accepts_filter = True

    def __init__(self, db: Session, model: type) -> None:
        self.db = db
        self.model = model

    def sort_expression(self, sort_by: str, column_aliases: dict[str, str]) -> Any:
        if sort_by not in inspect(self.model).column_attrs:
            logger.error("paginator_misconfigured", reason="unknown_sort_column", model=self.model.__name__, sort_by=sort_by)
            raise ConfigurationError(f"{self.model.__name__} has no sortable column '{sort_by}'")
        return getattr(self.model, sort_by)

    def fetch(
        self,
        sort_column: Any,
        direction: SortOrder,
        limit: int,
        offset: int,
        filter: Any = None,
    ) -> DataPage:
        query = apply_filter(select(self.model), filter)
        return _fetch_slice(self.db, query, sort_column, direction, limit, offset)


class QueryDataSource:
    """
    Pages over a caller-built ``Select`` that already carries its joins and filters.

    Sort keys become raw ``<alias>.<column>`` expressions unless the endpoint
    maps them through ``column_aliases``. The alias defaults to the name of the
    query's first entity (its table name, or the name given to ``aliased``).
    """

    accepts_filter = False

    def __init__(self, db: Session, query: Select, alias: str | None = None) -> None:
        self.db = db
        self.query = query
        self.alias = alias or query_alias(query)

    def sort_expression(self, sort_by: str, column_aliases: dict[str, str]) -> Any:
        return literal_column(column_aliases.get(sort_by) or f"{self.alias}.{sort_by}")

    def fetch(
        self,
        sort_column: Any,
        direction: SortOrder,
        limit: int,
        offset: int,
        filter: Any = None,
    ) -> DataPage:
        return _fetch_slice(self.db, self.query, sort_column, direction, limit, offset)


def query_alias(query: Select) -> str:
    descriptions = query.column_descriptions
    entity = descriptions[0]["entity"] if descriptions else None
    if entity is None:
        raise ConfigurationError("Cannot derive a table alias from the query; pass one explicitly")
    info = inspect(entity)
    if info.is_aliased_class:
        return info.name
    return info.local_table.name
