from pydantic import Field
from typing import Optional
from datetime import datetime
from .base import CamelModel
from .billboard import BillboardRead

class CategoryPayload(CamelModel):
    name: Optional[str] = Field(None, description="Name of the category")
    billboard_id: Optional[str] = Field(None, description="Billboard of the same store shown for this category")

class CategoryRead(CamelModel):
    id: str
    store_id: str
    billboard_id: str
    name: str
    created_at: datetime
    updated_at: datetime

class CategoryDetail(CategoryRead):
    billboard: Optional[BillboardRead] = None
