# routers/store.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.core.auth import get_current_user_id
from store_admin.core.errors import endpoint
from store_admin.core.guard import Action, guard_mutation, require_identity, validate_required
from store_admin.core.integrity import ensure_deletable, integrity_guard
from store_admin.core.resources import STORE
from store_admin.database import get_db
from store_admin.db.crud import store as store_crud
from store_admin.db.schemas.store import StorePayload, StoreRead

router = APIRouter(prefix="/stores", tags=["stores"])

@router.get("", response_model=List[StoreRead])
def list_my_stores(
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Stores owned by the caller"""
    with endpoint("STORES_GET", db):
        user_id = require_identity(user_id)
        return store_crud.get_stores_for_user(db, user_id)

@router.get("/{store_id}", response_model=Optional[StoreRead])
def get_my_store(
    store_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """The caller's store, or null when it is not theirs or does not exist"""
    with endpoint("STORE_GET", db):
        user_id = require_identity(user_id)
        return store_crud.get_store_for_user(db, store_id, user_id)

@router.post("", response_model=StoreRead)
def create_store(
    payload: Optional[StorePayload] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Create a store owned by the caller"""
    with endpoint("STORES_POST", db):
        user_id = require_identity(user_id)
        validate_required(STORE, payload)
        return store_crud.create_store(db, user_id, payload)

@router.patch("/{store_id}", response_model=StoreRead)
def update_store(
    store_id: str,
    payload: Optional[StorePayload] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    with endpoint("STORE_PATCH", db):
        db_store = guard_mutation(
            db, STORE, user_id, store_id, Action.UPDATE,
            payload=payload, record_id=store_id,
        )
        return store_crud.update_store(db, db_store, payload)

@router.delete("/{store_id}", response_model=StoreRead)
def delete_store(
    store_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Delete a store; refused while it still has billboards, categories, products or orders"""
    with endpoint("STORE_DELETE", db):
        db_store = guard_mutation(
            db, STORE, user_id, store_id, Action.DELETE, record_id=store_id,
        )
        deleted = StoreRead.model_validate(db_store)
        ensure_deletable(db, STORE, db_store.id)
        with integrity_guard(db, STORE):
            store_crud.delete_store(db, db_store)
        return deleted
