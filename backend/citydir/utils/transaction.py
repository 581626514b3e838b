from contextlib import contextmanager
from flask import current_app
from sqlalchemy.exc import IntegrityError
from citydir.extensions import db
from citydir.errors import ConflictError, DirectoryError


def conflict_from_integrity(exc, unique_fields):
    """Name the conflicting field when the store reports a unique violation."""
    message = str(getattr(exc, "orig", exc)).lower()
    for field in unique_fields:
        # sqlite: "unique constraint failed: users.email"
        # postgres: 'constraint "users_email_key" ... key (email)=(...)'
        markers = (f".{field}", f"({field})", f"_{field}_key")
        if any(marker in message for marker in markers):
            return ConflictError(f"{field.replace('_', ' ').capitalize()} already exists")
    return ConflictError("Record conflicts with existing data")


@contextmanager
def transactional(*, unique_fields=("slug",)):
    """Context manager for database transactions."""
    try:
        yield
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        raise conflict_from_integrity(exc, unique_fields) from exc
    except DirectoryError:
        db.session.rollback()
        raise
    except Exception:
        db.session.rollback()
        current_app.logger.warning("Transaction rolled back", exc_info=True)
        raise
