from typing import Optional
from datetime import datetime
from .base import CamelModel

class SizePayload(CamelModel):
    name: Optional[str] = None
    value: Optional[str] = None

class SizeRead(CamelModel):
    id: str
    store_id: str
    name: str
    value: str
    created_at: datetime
    updated_at: datetime
