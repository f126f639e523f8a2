"""
Referential integrity policy.

Deletes are never cascaded to dependents.  ``can_delete`` counts dependent
rows before the delete is attempted; ``integrity_guard`` covers the window
between that check and the commit, where a concurrent request may have added
a dependent or already removed the row.  Both report the resource's
"remove dependents first" message as a 409.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from store_admin.core.errors import ConstraintViolation
from store_admin.core.resources import ResourceKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteCheck:
    allowed: bool
    reason: Optional[str] = None

    @classmethod
    def ok(cls) -> "DeleteCheck":
        return cls(True)

    @classmethod
    def blocked(cls, reason: str) -> "DeleteCheck":
        return cls(False, reason)


def count_dependents(db: Session, kind: ResourceKind, resource_id: str) -> int:
    total = 0
    for dependent in kind.dependents:
        column = getattr(dependent.model, dependent.column)
        total += db.query(dependent.model).filter(column == resource_id).count()
    return total


def can_delete(db: Session, kind: ResourceKind, resource_id: str) -> DeleteCheck:
    if count_dependents(db, kind, resource_id) > 0:
        return DeleteCheck.blocked(kind.blocked_message)
    return DeleteCheck.ok()


def ensure_deletable(db: Session, kind: ResourceKind, resource_id: str) -> None:
    check = can_delete(db, kind, resource_id)
    if not check.allowed:
        raise ConstraintViolation(check.reason)


@contextmanager
def integrity_guard(db: Session, kind: ResourceKind) -> Iterator[None]:
    """Translate a constraint rejection at commit time into a 409."""
    try:
        yield
    except (IntegrityError, StaleDataError) as exc:
        db.rollback()
        logger.warning("Delete of %s rejected by the database: %s", kind.name, exc)
        raise ConstraintViolation(kind.blocked_message) from exc
