from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.core.auth import get_current_user_id
from store_admin.core.errors import endpoint
from store_admin.core.guard import Action, guard_mutation, require_record_id
from store_admin.core.integrity import ensure_deletable, integrity_guard
from store_admin.core.resources import BILLBOARD
from store_admin.database import get_db
from store_admin.db.crud import billboard as billboard_crud
from store_admin.db.schemas.billboard import BillboardPayload, BillboardRead

router = APIRouter(tags=["billboards"])

@router.get("/{store_id}/billboards", response_model=List[BillboardRead])
def list_billboards(store_id: str, db: Session = Depends(get_db)):
    """Public storefront listing"""
    with endpoint("BILLBOARDS_GET", db):
        return billboard_crud.get_billboards_by_store(db, store_id)

@router.get("/{store_id}/billboards/{billboard_id}", response_model=Optional[BillboardRead])
def get_billboard(store_id: str, billboard_id: str, db: Session = Depends(get_db)):
    """Fetch one billboard; null when it does not exist"""
    with endpoint("BILLBOARD_GET", db):
        billboard_id = require_record_id(BILLBOARD, billboard_id)
        return billboard_crud.get_billboard(db, store_id, billboard_id)

@router.post("/{store_id}/billboards", response_model=BillboardRead)
def create_billboard(
    store_id: str,
    payload: Optional[BillboardPayload] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    with endpoint("BILLBOARDS_POST", db):
        guard_mutation(db, BILLBOARD, user_id, store_id, Action.CREATE, payload=payload)
        return billboard_crud.create_billboard(db, store_id, payload)

@router.patch("/{store_id}/billboards", response_model=BillboardRead)
@router.patch("/{store_id}/billboards/{billboard_id}", response_model=BillboardRead)
def update_billboard(
    store_id: str,
    billboard_id: Optional[str] = None,
    payload: Optional[BillboardPayload] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    with endpoint("BILLBOARD_PATCH", db):
        db_billboard = guard_mutation(
            db, BILLBOARD, user_id, store_id, Action.UPDATE,
            payload=payload, record_id=billboard_id,
        )
        return billboard_crud.update_billboard(db, db_billboard, payload)

@router.delete("/{store_id}/billboards", response_model=BillboardRead)
@router.delete("/{store_id}/billboards/{billboard_id}", response_model=BillboardRead)
def delete_billboard(
    store_id: str,
    billboard_id: Optional[str] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Delete a billboard; refused while categories still use it"""
    with endpoint("BILLBOARD_DELETE", db):
        db_billboard = guard_mutation(
            db, BILLBOARD, user_id, store_id, Action.DELETE, record_id=billboard_id,
        )
        deleted = BillboardRead.model_validate(db_billboard)
        ensure_deletable(db, BILLBOARD, db_billboard.id)
        with integrity_guard(db, BILLBOARD):
            billboard_crud.delete_billboard(db, db_billboard)
        return deleted
