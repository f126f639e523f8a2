"""
Ownership guard and the mutation policy built on top of it.

Every mutating endpoint calls ``guard_mutation``, which applies the checks in
one fixed order:

1. identity present                      -> 401 Unauthenticated
2. required fields present               -> 400 "<Field> is required"
3. store owned by the identity           -> 403 Unauthorized
4. record id present (update/delete)     -> 400 "<Resource> ID is required"
5. record exists in the store            -> 404 "<Resource> not found"
6. references belong to the same store   -> 400 "<Ref> not found in this store"

Tests assert on this precedence, so do not reorder.
"""

import enum
from typing import Any, Optional

from sqlalchemy.orm import Session

from store_admin.core.errors import Forbidden, NotFound, Unauthenticated, ValidationError
from store_admin.core.resources import ResourceKind
from store_admin.database import Base
from store_admin.db.models import Store


class AuthResult(enum.Enum):
    AUTHORIZED = "authorized"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"


class Action(enum.Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


def authorize(db: Session, user_id: Optional[str], store_id: str) -> AuthResult:
    """Decide whether ``user_id`` owns ``store_id``. Read-only."""
    if not user_id:
        return AuthResult.UNAUTHENTICATED
    store = (
        db.query(Store.id)
        .filter(Store.id == store_id, Store.user_id == user_id)
        .first()
    )
    if store is None:
        return AuthResult.FORBIDDEN
    return AuthResult.AUTHORIZED


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def require_identity(user_id: Optional[str]) -> str:
    if not user_id:
        raise Unauthenticated()
    return user_id


def validate_required(kind: ResourceKind, payload: Any) -> None:
    for field in kind.required:
        if is_missing(getattr(payload, field.attr, None)):
            raise ValidationError(field.message)


def require_owner(db: Session, user_id: Optional[str], store_id: str) -> None:
    result = authorize(db, user_id, store_id)
    if result is AuthResult.UNAUTHENTICATED:
        raise Unauthenticated()
    if result is AuthResult.FORBIDDEN:
        raise Forbidden()


def require_record_id(kind: ResourceKind, record_id: Optional[str]) -> str:
    if is_missing(record_id):
        raise ValidationError(kind.id_message)
    return record_id


def get_scoped(db: Session, kind: ResourceKind, store_id: str, record_id: str) -> Optional[Base]:
    """Look up a record by id, restricted to the given store."""
    model = kind.model
    query = db.query(model).filter(model.id == record_id)
    if hasattr(model, "store_id"):
        query = query.filter(model.store_id == store_id)
    else:
        query = query.filter(model.id == store_id)
    return query.first()


def validate_references(db: Session, kind: ResourceKind, store_id: str, payload: Any) -> None:
    for ref in kind.references:
        ref_id = getattr(payload, ref.attr, None)
        found = (
            db.query(ref.model.id)
            .filter(ref.model.id == ref_id, ref.model.store_id == store_id)
            .first()
        )
        if found is None:
            raise ValidationError(f"{ref.label} not found in this store")


def guard_mutation(
    db: Session,
    kind: ResourceKind,
    user_id: Optional[str],
    store_id: str,
    action: Action,
    payload: Any = None,
    record_id: Optional[str] = None,
) -> Optional[Base]:
    """Apply the mutation checks; return the target record for update/delete."""
    require_identity(user_id)

    if action is not Action.DELETE:
        validate_required(kind, payload)

    require_owner(db, user_id, store_id)

    record = None
    if action is not Action.CREATE:
        record_id = require_record_id(kind, record_id)
        record = get_scoped(db, kind, store_id, record_id)
        if record is None:
            raise NotFound(kind.not_found_message)

    if action is not Action.DELETE:
        validate_references(db, kind, store_id, payload)

    return record
