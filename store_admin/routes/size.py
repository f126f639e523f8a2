from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.core.auth import get_current_user_id
from store_admin.core.errors import endpoint
from store_admin.core.guard import Action, guard_mutation, require_record_id
from store_admin.core.integrity import ensure_deletable, integrity_guard
from store_admin.core.resources import SIZE
from store_admin.database import get_db
from store_admin.db.crud import size as size_crud
from store_admin.db.schemas.size import SizePayload, SizeRead

router = APIRouter(tags=["sizes"])

@router.get("/{store_id}/sizes", response_model=List[SizeRead])
def list_sizes(store_id: str, db: Session = Depends(get_db)):
    with endpoint("SIZES_GET", db):
        return size_crud.get_sizes_by_store(db, store_id)

@router.get("/{store_id}/sizes/{size_id}", response_model=Optional[SizeRead])
def get_size(store_id: str, size_id: str, db: Session = Depends(get_db)):
    with endpoint("SIZE_GET", db):
        size_id = require_record_id(SIZE, size_id)
        return size_crud.get_size(db, store_id, size_id)

@router.post("/{store_id}/sizes", response_model=SizeRead)
def create_size(
    store_id: str,
    payload: Optional[SizePayload] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    with endpoint("SIZES_POST", db):
        guard_mutation(db, SIZE, user_id, store_id, Action.CREATE, payload=payload)
        return size_crud.create_size(db, store_id, payload)

@router.patch("/{store_id}/sizes", response_model=SizeRead)
@router.patch("/{store_id}/sizes/{size_id}", response_model=SizeRead)
def update_size(
    store_id: str,
    size_id: Optional[str] = None,
    payload: Optional[SizePayload] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    with endpoint("SIZE_PATCH", db):
        db_size = guard_mutation(
            db, SIZE, user_id, store_id, Action.UPDATE,
            payload=payload, record_id=size_id,
        )
        return size_crud.update_size(db, db_size, payload)

@router.delete("/{store_id}/sizes", response_model=SizeRead)
@router.delete("/{store_id}/sizes/{size_id}", response_model=SizeRead)
def delete_size(
    store_id: str,
    size_id: Optional[str] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    with endpoint("SIZE_DELETE", db):
        db_size = guard_mutation(
            db, SIZE, user_id, store_id, Action.DELETE, record_id=size_id,
        )
        deleted = SizeRead.model_validate(db_size)
        ensure_deletable(db, SIZE, db_size.id)
        with integrity_guard(db, SIZE):
            size_crud.delete_size(db, db_size)
        return deleted
