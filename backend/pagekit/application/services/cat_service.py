from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from pagekit.application.paginator_config import PaginatorConfig
from pagekit.application.services.pagination_service import paginate
from pagekit.infrastructure.db.data_sources import QueryDataSource, RepositoryDataSource
from pagekit.infrastructure.db.models import Cat, Owner
from pagekit.interfaces.api.v1.schemas.pagination import PaginatedResult, PagingRequest

CAT_PAGINATOR_CONFIG = PaginatorConfig(
    sortable_columns=["id", "name", "age", "date_created"],
    default_sort_by="id",
)

ADOPTABLE_CAT_PAGINATOR_CONFIG = PaginatorConfig(
    sortable_columns=["id", "name", "age"],
    default_limit=10,
    where={"adoptable": True},
)

CAT_WITH_OWNER_PAGINATOR_CONFIG = PaginatorConfig(
    sortable_columns=["id", "name", "owner_name"],
    column_aliases={"owner_name": "owners.name"},
)


def serialize_cat_response(cat: Cat) -> dict:
    return {
        "id": cat.id,
        "name": cat.name,
        "color": cat.color,
        "age": cat.age,
        "adoptable": cat.adoptable,
        "date_created": cat.date_created,
        "owner_name": cat.owner.name if cat.owner is not None else None,
    }


def serialize_cat_page(result: PaginatedResult[Any]) -> dict:
    return {
        "data": [serialize_cat_response(cat) for cat in result.data],
        "meta": result.meta,
        "links": result.links,
    }


def list_cats(db: Session, request: PagingRequest) -> PaginatedResult[Any]:
    return paginate(request, RepositoryDataSource(db, Cat), CAT_PAGINATOR_CONFIG)


def list_adoptable_cats(db: Session, request: PagingRequest) -> PaginatedResult[Any]:
    return paginate(request, RepositoryDataSource(db, Cat), ADOPTABLE_CAT_PAGINATOR_CONFIG)


def list_cats_with_owners(db: Session, request: PagingRequest) -> PaginatedResult[Any]:
    query = select(Cat).join(Owner, Cat.owner_id == Owner.id)
    return paginate(request, QueryDataSource(db, query), CAT_WITH_OWNER_PAGINATOR_CONFIG)
