from datetime import datetime

from pydantic import BaseModel, ConfigDict

from pagekit.interfaces.api.v1.schemas.pagination import PaginatedResult


class CatResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    color: str
    age: int
    adoptable: bool
    date_created: datetime
    owner_name: str | None = None


class CatPage(PaginatedResult[CatResponse]):
    pass
