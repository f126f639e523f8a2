from sqlalchemy import Column, String, ForeignKey
from store_admin.database import Base
from .mixins import TimestampMixin, new_id

class Size(TimestampMixin, Base):
    __tablename__ = "sizes"

    id = Column(String(36), primary_key=True, default=new_id)
    store_id = Column(String(36), ForeignKey("stores.id", ondelete="RESTRICT"), nullable=False, index=True)
    name = Column(String, nullable=False)
    value = Column(String, nullable=False)
