from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship
from store_admin.database import Base
from .mixins import TimestampMixin, new_id

class Billboard(TimestampMixin, Base):
    __tablename__ = "billboards"

    id = Column(String(36), primary_key=True, default=new_id)
    store_id = Column(String(36), ForeignKey("stores.id", ondelete="RESTRICT"), nullable=False, index=True)
    label = Column(String, nullable=False)
    image_url = Column(String, nullable=False)

    store = relationship("Store")

    def __repr__(self):
        return f"<Billboard(id={self.id}, label='{self.label}')>"
