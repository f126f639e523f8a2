from pydantic import Field, field_validator
from decimal import Decimal
from typing import Optional, List
from datetime import datetime
from .base import CamelModel
from .category import CategoryRead
from .size import SizeRead
from .color import ColorRead

class ImagePayload(CamelModel):
    url: str

class ProductPayload(CamelModel):
    name: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)
    category_id: Optional[str] = None
    size_id: Optional[str] = None
    color_id: Optional[str] = None
    images: Optional[List[ImagePayload]] = None
    is_featured: bool = False
    is_archived: bool = False

class ImageRead(CamelModel):
    id: str
    url: str

class ProductRead(CamelModel):
    id: str
    store_id: str
    category_id: str
    size_id: str
    color_id: str
    name: str
    price: float
    is_featured: bool
    is_archived: bool
    images: List[ImageRead] = []
    created_at: datetime
    updated_at: datetime

    @field_validator("price", mode="before")
    @classmethod
    def _price_as_float(cls, value):
        return float(value) if isinstance(value, Decimal) else value

class ProductDetail(ProductRead):
    category: Optional[CategoryRead] = None
    size: Optional[SizeRead] = None
    color: Optional[ColorRead] = None
