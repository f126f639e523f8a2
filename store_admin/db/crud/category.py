from sqlalchemy.orm import Session, joinedload
from typing import List, Optional
from store_admin.db.models.category import Category
from store_admin.db.schemas.category import CategoryPayload

def get_category(db: Session, store_id: str, category_id: str) -> Optional[Category]:
    return (
        db.query(Category)
        .options(joinedload(Category.billboard))
        .filter(Category.id == category_id, Category.store_id == store_id)
        .first()
    )

def get_categories_by_store(db: Session, store_id: str) -> List[Category]:
    return (
        db.query(Category)
        .options(joinedload(Category.billboard))
        .filter(Category.store_id == store_id)
        .order_by(Category.created_at.desc())
        .all()
    )

def create_category(db: Session, store_id: str, category: CategoryPayload) -> Category:
    db_category = Category(
        store_id=store_id,
        name=category.name,
        billboard_id=category.billboard_id,
    )
    db.add(db_category)
    db.commit()
    db.refresh(db_category)
    return db_category

def update_category(db: Session, db_category: Category, category: CategoryPayload) -> Category:
    db_category.name = category.name
    db_category.billboard_id = category.billboard_id
    db.commit()
    db.refresh(db_category)
    return db_category

def delete_category(db: Session, db_category: Category) -> None:
    db.delete(db_category)
    db.commit()
