from pydantic import BaseModel, constr
from typing import List


class SampleItemCreate(BaseModel):
    name: constr(strip_whitespace=True, min_length=1, max_length=255)


class SampleItemResponse(BaseModel):
    id: str
    name: str
    tenant_id: str


class SampleItemListResponse(BaseModel):
    data: List[SampleItemResponse]
