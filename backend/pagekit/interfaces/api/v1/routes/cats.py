from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from pagekit.application.services.cat_service import (
    list_adoptable_cats,
    list_cats,
    list_cats_with_owners,
    serialize_cat_page,
)
from pagekit.infrastructure.db.session import get_db
from pagekit.interfaces.api.v1.dependencies.pagination import get_paging_request
from pagekit.interfaces.api.v1.schemas.cat import CatPage
from pagekit.interfaces.api.v1.schemas.pagination import PagingRequest

router = APIRouter(prefix="/cats", tags=["cats"])

PAGINATION_RESPONSES = {503: {"description": "Endpoint pagination is misconfigured"}}


@router.get(
    "",
    response_model=CatPage,
    summary="List cats",
    description="Page through every cat. Sortable by `id`, `name`, `age` and `date_created`.",
    responses=PAGINATION_RESPONSES,
)
def get_cats(
    paging: PagingRequest = Depends(get_paging_request),
    db: Session = Depends(get_db),
):
    return serialize_cat_page(list_cats(db=db, request=paging))


@router.get(
    "/adoptable",
    response_model=CatPage,
    summary="List adoptable cats",
    description="Page through cats still up for adoption, ten per page unless `limit` is given.",
    responses=PAGINATION_RESPONSES,
)
def get_adoptable_cats(
    paging: PagingRequest = Depends(get_paging_request),
    db: Session = Depends(get_db),
):
    return serialize_cat_page(list_adoptable_cats(db=db, request=paging))


@router.get(
    "/with-owners",
    response_model=CatPage,
    summary="List owned cats",
    description="Page through cats that have an owner. `owner_name` sorts by the owner's name.",
    responses=PAGINATION_RESPONSES,
)
def get_cats_with_owners(
    paging: PagingRequest = Depends(get_paging_request),
    db: Session = Depends(get_db),
):
    return serialize_cat_page(list_cats_with_owners(db=db, request=paging))
