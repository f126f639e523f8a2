from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.core.auth import get_current_user_id
from store_admin.core.errors import endpoint
from store_admin.core.guard import Action, guard_mutation, require_record_id
from store_admin.core.integrity import ensure_deletable, integrity_guard
from store_admin.core.resources import CATEGORY
from store_admin.database import get_db
from store_admin.db.crud import category as category_crud
from store_admin.db.schemas.category import CategoryDetail, CategoryPayload, CategoryRead

router = APIRouter(tags=["categories"])

@router.get("/{store_id}/categories", response_model=List[CategoryDetail])
def list_categories(store_id: str, db: Session = Depends(get_db)):
    with endpoint("CATEGORIES_GET", db):
        return category_crud.get_categories_by_store(db, store_id)

@router.get("/{store_id}/categories/{category_id}", response_model=Optional[CategoryDetail])
def get_category(store_id: str, category_id: str, db: Session = Depends(get_db)):
    """Fetch one category with its billboard"""
    with endpoint("CATEGORY_GET", db):
        category_id = require_record_id(CATEGORY, category_id)
        return category_crud.get_category(db, store_id, category_id)

@router.post("/{store_id}/categories", response_model=CategoryRead)
def create_category(
    store_id: str,
    payload: Optional[CategoryPayload] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    with endpoint("CATEGORIES_POST", db):
        guard_mutation(db, CATEGORY, user_id, store_id, Action.CREATE, payload=payload)
        return category_crud.create_category(db, store_id, payload)

@router.patch("/{store_id}/categories", response_model=CategoryRead)
@router.patch("/{store_id}/categories/{category_id}", response_model=CategoryRead)
def update_category(
    store_id: str,
    category_id: Optional[str] = None,
    payload: Optional[CategoryPayload] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    with endpoint("CATEGORY_PATCH", db):
        db_category = guard_mutation(
            db, CATEGORY, user_id, store_id, Action.UPDATE,
            payload=payload, record_id=category_id,
        )
        return category_crud.update_category(db, db_category, payload)

@router.delete("/{store_id}/categories", response_model=CategoryRead)
@router.delete("/{store_id}/categories/{category_id}", response_model=CategoryRead)
def delete_category(
    store_id: str,
    category_id: Optional[str] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Delete a category; refused while products still use it"""
    with endpoint("CATEGORY_DELETE", db):
        db_category = guard_mutation(
            db, CATEGORY, user_id, store_id, Action.DELETE, record_id=category_id,
        )
        deleted = CategoryRead.model_validate(db_category)
        ensure_deletable(db, CATEGORY, db_category.id)
        with integrity_guard(db, CATEGORY):
            category_crud.delete_category(db, db_category)
        return deleted
