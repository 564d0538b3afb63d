"""Repository helpers for user-owned records.

Most tables in the FitTrack schema hang off a user; `UserScopedRepository`
wraps the common lookups so services never fetch another user's rows.
"""

from datetime import date
from sqlalchemy.orm import Session
from typing import TypeVar, Generic, Type, Optional, List, Any
from core.exceptions import NotFoundError
from database.models import Base

T = TypeVar('T', bound=Base)


class UserScopedRepository(Generic[T]):
    """Query helper for a model with `user_id` (and optionally `date`) columns.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
        label: Resource name used in not-found errors.
    """

    def __init__(self, model: Type[T], session: Session, label: Optional[str] = None):
        self.model = model
        self.session = session
        self.label = label or model.__name__

    def query(self, user_id: int):
        return self.session.query(self.model).filter(self.model.user_id == user_id)

    def get(self, user_id: int, id: Any) -> Optional[T]:
        """Return the user's record with primary key `id`, or None."""
        return self.query(user_id).filter(self.model.id == id).first()

    def get_or_404(self, user_id: int, id: Any) -> T:
        """Return the user's record with primary key `id`.

        Raises:
            NotFoundError: If no such record belongs to the user.
        """
        obj = self.get(user_id, id)
        if obj is None:
            raise NotFoundError(self.label, id)
        return obj

    def in_range(self, user_id: int, start: date, end: date) -> List[T]:
        """Records whose `date` falls in ``[start, end]``, newest first."""
        return (
            self.query(user_id)
            .filter(self.model.date >= start, self.model.date <= end)
            .order_by(self.model.date.desc(), self.model.id.asc())
            .all()
        )

    def on_date(self, user_id: int, day: date) -> List[T]:
        return self.query(user_id).filter(self.model.date == day).order_by(self.model.id.asc()).all()

    def delete(self, user_id: int, id: Any) -> None:
        """Delete the user's record with primary key `id` and commit.

        Raises:
            NotFoundError: If no such record belongs to the user.
        """
        obj = self.get_or_404(user_id, id)
        self.session.delete(obj)
        self.session.commit()


def save(session: Session, obj: Base) -> Base:
    """Add, commit and refresh an object.

    Args:
        session: Database session.
        obj: Model instance to persist.

    Returns:
        The persisted object with refreshed attributes.
    """
    session.add(obj)
    session.commit()
    session.refresh(obj)
    return obj


def get_or_404(session: Session, model: Type[T], id: Any, label: Optional[str] = None) -> T:
    """Fetch `model` by primary key or raise `NotFoundError`."""
    obj = session.get(model, id)
    if obj is None:
        raise NotFoundError(label or model.__name__, id)
    return obj
