from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.core.auth import get_current_user_id
from store_admin.core.errors import endpoint
from store_admin.core.guard import require_owner
from store_admin.database import get_db
from store_admin.db.crud import order as order_crud
from store_admin.db.schemas.order import OrderRead

router = APIRouter(tags=["orders"])

@router.get("/{store_id}/orders", response_model=List[OrderRead])
def list_orders(
    store_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Orders of a store, visible to its owner only"""
    with endpoint("ORDERS_GET", db):
        require_owner(db, user_id, store_id)
        orders = order_crud.get_orders_by_store(db, store_id)
        return [order_crud.serialize_order(order) for order in orders]
