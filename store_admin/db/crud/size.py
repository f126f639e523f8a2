from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.db.models.size import Size
from store_admin.db.schemas.size import SizePayload

def get_size(db: Session, store_id: str, size_id: str) -> Optional[Size]:
    return db.query(Size).filter(Size.id == size_id, Size.store_id == store_id).first()

def get_sizes_by_store(db: Session, store_id: str) -> List[Size]:
    return (
        db.query(Size)
        .filter(Size.store_id == store_id)
        .order_by(Size.created_at.desc())
        .all()
    )

def create_size(db: Session, store_id: str, size: SizePayload) -> Size:
    db_size = Size(store_id=store_id, name=size.name, value=size.value)
    db.add(db_size)
    db.commit()
    db.refresh(db_size)
    return db_size

def update_size(db: Session, db_size: Size, size: SizePayload) -> Size:
    db_size.name = size.name
    db_size.value = size.value
    db.commit()
    db.refresh(db_size)
    return db_size

def delete_size(db: Session, db_size: Size) -> None:
    db.delete(db_size)
    db.commit()
