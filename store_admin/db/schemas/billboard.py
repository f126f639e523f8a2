from pydantic import Field
from typing import Optional
from datetime import datetime
from .base import CamelModel

class BillboardPayload(CamelModel):
    label: Optional[str] = Field(None, description="Text shown over the billboard image")
    image_url: Optional[str] = Field(None, description="URL of the background image")

class BillboardRead(CamelModel):
    id: str
    store_id: str
    label: str
    image_url: str
    created_at: datetime
    updated_at: datetime
