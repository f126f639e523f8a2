from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.db.models.color import Color
from store_admin.db.schemas.color import ColorPayload

def get_color(db: Session, store_id: str, color_id: str) -> Optional[Color]:
    return db.query(Color).filter(Color.id == color_id, Color.store_id == store_id).first()

def get_colors_by_store(db: Session, store_id: str) -> List[Color]:
    return (
        db.query(Color)
        .filter(Color.store_id == store_id)
        .order_by(Color.created_at.desc())
        .all()
    )

def create_color(db: Session, store_id: str, color: ColorPayload) -> Color:
    db_color = Color(store_id=store_id, name=color.name, value=color.value)
    db.add(db_color)
    db.commit()
    db.refresh(db_color)
    return db_color

def update_color(db: Session, db_color: Color, color: ColorPayload) -> Color:
    db_color.name = color.name
    db_color.value = color.value
    db.commit()
    db.refresh(db_color)
    return db_color

def delete_color(db: Session, db_color: Color) -> None:
    db.delete(db_color)
    db.commit()
