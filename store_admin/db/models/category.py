from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship
from store_admin.database import Base
from .mixins import TimestampMixin, new_id

class Category(TimestampMixin, Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=new_id)
    store_id = Column(String(36), ForeignKey("stores.id", ondelete="RESTRICT"), nullable=False, index=True)
    billboard_id = Column(String(36), ForeignKey("billboards.id", ondelete="RESTRICT"), nullable=False, index=True)
    name = Column(String, nullable=False)

    # Child -> parent only; deleting a billboard must never touch its categories
    billboard = relationship("Billboard")

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
