from typing import List
from datetime import datetime
from .base import CamelModel

class OrderItemRead(CamelModel):
    id: str
    product_id: str
    product_name: str
    price: float

class OrderRead(CamelModel):
    id: str
    store_id: str
    is_paid: bool
    phone: str
    address: str
    order_items: List[OrderItemRead] = []
    total_price: float
    created_at: datetime
