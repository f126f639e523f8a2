from sqlalchemy import Column, String, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from store_admin.database import Base
from .mixins import TimestampMixin, new_id

class Order(TimestampMixin, Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=new_id)
    store_id = Column(String(36), ForeignKey("stores.id", ondelete="RESTRICT"), nullable=False, index=True)
    is_paid = Column(Boolean, default=False, nullable=False)
    phone = Column(String, default="", nullable=False)
    address = Column(String, default="", nullable=False)

    order_items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(String(36), primary_key=True, default=new_id)
    order_id = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(String(36), ForeignKey("products.id", ondelete="RESTRICT"), nullable=False, index=True)

    order = relationship("Order", back_populates="order_items")
    product = relationship("Product")
