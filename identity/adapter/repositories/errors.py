from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from identity.app.repositories.user_repository import (
    StoreError,
    UniqueConstraintViolation,
)

UNIQUE_FIELDS = ("username", "email")


def _markers(field: str) -> Tuple[str, ...]:
    # SQLite column, index name (PostgreSQL, MySQL), PostgreSQL key detail
    return (f"users.{field}", f"ix_users_{field}", f"({field})=")


def violated_unique_field(exc: IntegrityError) -> Optional[str]:
    """
    Name the unique column behind an IntegrityError.

    Only column-qualified markers count, so a duplicated value that happens
    to contain a column name cannot mislead the match. When several markers
    appear, the earliest one wins: drivers name the constraint before the
    offending value.
    """
    detail = str(exc.orig).lower()
    if "unique" not in detail and "duplicate" not in detail:
        return None

    best_field, best_pos = None, len(detail)
    for field in UNIQUE_FIELDS:
        for marker in _markers(field):
            pos = detail.find(marker)
            if pos != -1 and pos < best_pos:
                best_field, best_pos = field, pos
    return best_field


@contextmanager
def translate_store_errors() -> Iterator[None]:
    """Turn SQLAlchemy failures into the application layer's store errors"""
    try:
        yield
    except IntegrityError as exc:
        field = violated_unique_field(exc)
        if field is None:
            raise StoreError("Integrity constraint violated") from exc
        raise UniqueConstraintViolation(field) from exc
    except SQLAlchemyError as exc:
        raise StoreError(f"Store failure: {exc.__class__.__name__}") from exc
