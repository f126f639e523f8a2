from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.core.auth import get_current_user_id
from store_admin.core.errors import endpoint
from store_admin.core.guard import Action, guard_mutation, require_record_id
from store_admin.core.integrity import ensure_deletable, integrity_guard
from store_admin.core.resources import COLOR
from store_admin.database import get_db
from store_admin.db.crud import color as color_crud
from store_admin.db.schemas.color import ColorPayload, ColorRead

router = APIRouter(tags=["colors"])

@router.get("/{store_id}/colors", response_model=List[ColorRead])
def list_colors(store_id: str, db: Session = Depends(get_db)):
    with endpoint("COLORS_GET", db):
        return color_crud.get_colors_by_store(db, store_id)

@router.get("/{store_id}/colors/{color_id}", response_model=Optional[ColorRead])
def get_color(store_id: str, color_id: str, db: Session = Depends(get_db)):
    with endpoint("COLOR_GET", db):
        color_id = require_record_id(COLOR, color_id)
        return color_crud.get_color(db, store_id, color_id)

@router.post("/{store_id}/colors", response_model=ColorRead)
def create_color(
    store_id: str,
    payload: Optional[ColorPayload] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    with endpoint("COLORS_POST", db):
        guard_mutation(db, COLOR, user_id, store_id, Action.CREATE, payload=payload)
        return color_crud.create_color(db, store_id, payload)

@router.patch("/{store_id}/colors", response_model=ColorRead)
@router.patch("/{store_id}/colors/{color_id}", response_model=ColorRead)
def update_color(
    store_id: str,
    color_id: Optional[str] = None,
    payload: Optional[ColorPayload] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    with endpoint("COLOR_PATCH", db):
        db_color = guard_mutation(
            db, COLOR, user_id, store_id, Action.UPDATE,
            payload=payload, record_id=color_id,
        )
        return color_crud.update_color(db, db_color, payload)

@router.delete("/{store_id}/colors", response_model=ColorRead)
@router.delete("/{store_id}/colors/{color_id}", response_model=ColorRead)
def delete_color(
    store_id: str,
    color_id: Optional[str] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    with endpoint("COLOR_DELETE", db):
        db_color = guard_mutation(
            db, COLOR, user_id, store_id, Action.DELETE, record_id=color_id,
        )
        deleted = ColorRead.model_validate(db_color)
        ensure_deletable(db, COLOR, db_color.id)
        with integrity_guard(db, COLOR):
            color_crud.delete_color(db, db_color)
        return deleted
