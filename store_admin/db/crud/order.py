from sqlalchemy.orm import Session, selectinload
from typing import List
from store_admin.db.models.order import Order, OrderItem

def get_orders_by_store(db: Session, store_id: str) -> List[Order]:
    return (
        db.query(Order)
        .options(selectinload(Order.order_items).selectinload(OrderItem.product))
        .filter(Order.store_id == store_id)
        .order_by(Order.created_at.desc())
        .all()
    )

def create_order(
    db: Session,
    store_id: str,
    product_ids: List[str],
    phone: str = "",
    address: str = "",
    is_paid: bool = False,
) -> Order:
    """Persist an order placed through checkout."""
    db_order = Order(store_id=store_id, phone=phone, address=address, is_paid=is_paid)
    db_order.order_items = [OrderItem(product_id=product_id) for product_id in product_ids]
    db.add(db_order)
    db.commit()
    db.refresh(db_order)
    return db_order

def order_total(db_order: Order) -> float:
    return float(sum(item.product.price for item in db_order.order_items if item.product is not None))

def serialize_order(db_order: Order) -> dict:
    return {
        "id": db_order.id,
        "store_id": db_order.store_id,
        "is_paid": db_order.is_paid,
        "phone": db_order.phone,
        "address": db_order.address,
        "order_items": [
            {
                "id": item.id,
                "product_id": item.product_id,
                "product_name": item.product.name,
                "price": float(item.product.price),
            }
            for item in db_order.order_items
        ],
        "total_price": order_total(db_order),
        "created_at": db_order.created_at,
    }
