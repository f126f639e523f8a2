from sqlalchemy import Column, String, Boolean, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from store_admin.database import Base
from .mixins import TimestampMixin, new_id

class Product(TimestampMixin, Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=new_id)
    store_id = Column(String(36), ForeignKey("stores.id", ondelete="RESTRICT"), nullable=False, index=True)
    category_id = Column(String(36), ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False, index=True)
    size_id = Column(String(36), ForeignKey("sizes.id", ondelete="RESTRICT"), nullable=False, index=True)
    color_id = Column(String(36), ForeignKey("colors.id", ondelete="RESTRICT"), nullable=False, index=True)
    name = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)
    is_archived = Column(Boolean, default=False, nullable=False)

    category = relationship("Category")
    size = relationship("Size")
    color = relationship("Color")
    # Images belong to the product and go away with it
    images = relationship(
        "ProductImage",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductImage.created_at",
    )

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}')>"


class ProductImage(TimestampMixin, Base):
    __tablename__ = "product_images"

    id = Column(String(36), primary_key=True, default=new_id)
    product_id = Column(String(36), ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    url = Column(String, nullable=False)

    product = relationship("Product", back_populates="images")
