from pydantic import Field
from typing import Optional
from datetime import datetime
from .base import CamelModel

class StorePayload(CamelModel):
    name: Optional[str] = Field(None, description="Display name of the store")

class StoreRead(CamelModel):
    id: str
    user_id: str
    name: str
    created_at: datetime
    updated_at: datetime
