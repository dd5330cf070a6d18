"""Owner-scoped record access.

Every by-id mutation is a single ``UPDATE``/``DELETE ... WHERE id = :id AND
owner_id = :owner RETURNING *`` statement, so there is no window between the
ownership check and the write. A record owned by someone else looks exactly
like a missing one.
"""

import uuid
from typing import Any, TypeVar

from sqlalchemy import delete, update
from sqlalchemy.orm import Session

from realty.exceptions import RecordNotFoundError
from realty.models.user import User

ModelT = TypeVar("ModelT")

_SYNC_FETCH = {"synchronize_session": "fetch"}


def parse_record_id(raw_id: str | uuid.UUID) -> uuid.UUID:
    """Parse a path id, raising RecordNotFoundError if it is not a valid identifier."""
    if isinstance(raw_id, uuid.UUID):
        return raw_id
    try:
        return uuid.UUID(raw_id)
    except (TypeError, ValueError, AttributeError) as e:
        raise RecordNotFoundError(raw_id) from e


def owned_by(model: type[ModelT], user: User):
    """Filter clause restricting a query to records owned by the user."""
    return model.owner_id == user.id


def list_owned(db: Session, model: type[ModelT], user: User, *order_by) -> list[ModelT]:
    """Return every record of ``model`` owned by the user."""
    return db.query(model).filter(owned_by(model, user)).order_by(*order_by).all()


def find_owned(db: Session, model: type[ModelT], record_id: uuid.UUID, user: User) -> ModelT:
    """Return the user's record with this id or raise RecordNotFoundError."""
    record = db.query(model).filter(model.id == record_id, owned_by(model, user)).first()
    if record is None:
        raise RecordNotFoundError(str(record_id))
    return record


def update_owned(
    db: Session,
    model: type[ModelT],
    record_id: uuid.UUID,
    user: User,
    values: dict[str, Any],
) -> ModelT:
    """Atomically apply ``values`` to the user's record and return it."""
    if not values:
        return find_owned(db, model, record_id, user)

    stmt = (
        update(model)
        .where(model.id == record_id, owned_by(model, user))
        .values(**values)
        .returning(model)
    )
    record = db.scalars(stmt, execution_options=_SYNC_FETCH).first()
    if record is None:
        db.rollback()
        raise RecordNotFoundError(str(record_id))

    db.commit()
    db.refresh(record)
    return record


def delete_owned(db: Session, model: type[ModelT], record_id: uuid.UUID, user: User) -> ModelT:
    """Atomically delete the user's record and return its final state."""
    stmt = delete(model).where(model.id == record_id, owned_by(model, user)).returning(model)
    record = db.scalars(stmt, execution_options=_SYNC_FETCH).first()
    if record is None:
        db.rollback()
        raise RecordNotFoundError(str(record_id))

    # Detach so the commit does not expire the attributes we return
    if record in db:
        db.expunge(record)
    db.commit()
    return record
