from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.db.models.billboard import Billboard
from store_admin.db.schemas.billboard import BillboardPayload

def get_billboard(db: Session, store_id: str, billboard_id: str) -> Optional[Billboard]:
    return (
        db.query(Billboard)
        .filter(Billboard.id == billboard_id, Billboard.store_id == store_id)
        .first()
    )

def get_billboards_by_store(db: Session, store_id: str) -> List[Billboard]:
    return (
        db.query(Billboard)
        .filter(Billboard.store_id == store_id)
        .order_by(Billboard.created_at.desc())
        .all()
    )

def create_billboard(db: Session, store_id: str, billboard: BillboardPayload) -> Billboard:
    db_billboard = Billboard(
        store_id=store_id,
        label=billboard.label,
        image_url=billboard.image_url,
    )
    db.add(db_billboard)
    db.commit()
    db.refresh(db_billboard)
    return db_billboard

def update_billboard(db: Session, db_billboard: Billboard, billboard: BillboardPayload) -> Billboard:
    db_billboard.label = billboard.label
    db_billboard.image_url = billboard.image_url
    db.commit()
    db.refresh(db_billboard)
    return db_billboard

def delete_billboard(db: Session, db_billboard: Billboard) -> None:
    db.delete(db_billboard)
    db.commit()
