"""
Error taxonomy shared by every endpoint handler.

Handlers raise these exceptions; ``main`` registers exception handlers that
render them as plain-text responses with the carried status code.  The
``endpoint`` context manager wraps a handler body so that anything outside the
taxonomy is logged under a component tag and surfaced as an opaque 500.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import status
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

logger = logging.getLogger(__name__)


class StoreAdminError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(StoreAdminError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthenticated"


class Forbidden(StoreAdminError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Unauthorized"


class ValidationError(StoreAdminError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class NotFound(StoreAdminError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConstraintViolation(StoreAdminError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflicting change, please retry"


class InternalError(StoreAdminError):
    pass


def error_response(exc: StoreAdminError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@contextmanager
def endpoint(tag: str, db: Session) -> Iterator[None]:
    """Run a handler body, rolling back and classifying any failure.

    ``tag`` names the component in server logs, e.g. ``BILLBOARDS_POST``.
    """
    try:
        yield
    except StoreAdminError:
        db.rollback()
        raise
    except (IntegrityError, StaleDataError) as exc:
        db.rollback()
        logger.warning("[%s] constraint rejected change: %s", tag, exc)
        raise ConstraintViolation() from exc
    except Exception as exc:
        db.rollback()
        logger.exception("[%s] %s", tag, exc)
        raise InternalError() from exc
