# models/store.py
from sqlalchemy import Column, String
from store_admin.database import Base
from .mixins import TimestampMixin, new_id

class Store(TimestampMixin, Base):
    __tablename__ = "stores"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    user_id = Column(String, nullable=False, index=True)

    def __repr__(self):
        return f"<Store(id={self.id}, name='{self.name}', user_id='{self.user_id}')>"
