from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.db.models.store import Store
from store_admin.db.schemas.store import StorePayload

def get_store_for_user(db: Session, store_id: str, user_id: str) -> Optional[Store]:
    return db.query(Store).filter(Store.id == store_id, Store.user_id == user_id).first()

def get_stores_for_user(db: Session, user_id: str) -> List[Store]:
    return (
        db.query(Store)
        .filter(Store.user_id == user_id)
        .order_by(Store.created_at.asc())
        .all()
    )

def create_store(db: Session, user_id: str, store: StorePayload) -> Store:
    db_store = Store(name=store.name, user_id=user_id)
    db.add(db_store)
    db.commit()
    db.refresh(db_store)
    return db_store

def update_store(db: Session, db_store: Store, store: StorePayload) -> Store:
    db_store.name = store.name
    db.commit()
    db.refresh(db_store)
    return db_store

def delete_store(db: Session, db_store: Store) -> None:
    db.delete(db_store)
    db.commit()
