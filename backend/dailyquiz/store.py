"""Record store backed by the Flask-SQLAlchemy session.

Every operation either commits or rolls back before returning, and any
SQLAlchemy failure is re-raised as ``CollaboratorError`` carrying the driver
message, so services never see database exceptions directly.
"""

from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterable, List, Optional

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError

from dailyquiz import db
from dailyquiz.errors import CollaboratorError
from dailyquiz.models import UserRecord


def _message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, 'orig', None)
    return str(orig) if orig is not None else str(exc)


@contextmanager
def _collaborator(session):
    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        raise CollaboratorError(_message(exc)) from exc


class RecordStore:

    def __init__(self, session=None):
        self.session = session if session is not None else db.session

    def select_all(self, model, *order_by) -> List[Any]:
        with _collaborator(self.session):
            return self.session.query(model).order_by(*order_by).all()

    def select_one(self, model, field: str, value, for_update: bool = False) -> Optional[Any]:
        query = self.session.query(model).filter(getattr(model, field) == value)
        if for_update:
            query = query.with_for_update()
        with _collaborator(self.session):
            return query.first()

    def insert(self, model, values: Dict[str, Any]):
        with _collaborator(self.session):
            obj = model(**values)
            self.session.add(obj)
            self.session.commit()
            return obj

    def update_where(self, model, values: Dict[str, Any], *criteria) -> int:
        stmt = update(model).values(**values)
        if criteria:
            stmt = stmt.where(*criteria)
        with _collaborator(self.session):
            result = self.session.execute(stmt)
            self.session.commit()
            return result.rowcount

    def bulk_update_ranks(self, ranked: Iterable[Dict[str, Any]]) -> None:
        """Write every user's rank in a single transaction (update by primary key)."""
        rows = [{'id': r['id'], 'rank': r['rank']} for r in ranked]
        if not rows:
            return
        with _collaborator(self.session):
            self.session.execute(update(UserRecord), rows)
            self.session.commit()

    def merge_user(self, email: str, merge: Callable[[Optional[Dict[str, Any]]], Any]):
        """Row-locked read-modify-write of one user.

        ``merge`` receives the current record as a dict (or None) and returns a
        result whose ``record`` attribute holds the fields to persist. Concurrent
        merges for an existing email serialize on the row lock; a concurrent
        first insert loses on the unique email constraint.
        """
        with _collaborator(self.session):
            user = self.select_one(UserRecord, 'email', email, for_update=True)
            result = merge(user.to_dict() if user else None)
            record = result.record
            if user:
                user.correct_count = record['number_of_correct_ans']
                user.elapsed = record['time']
                self.session.commit()
            else:
                self.insert(UserRecord, {
                    'email': email,
                    'correct_count': record['number_of_correct_ans'],
                    'elapsed': record['time'],
                    'rank': record.get('rank', 0),
                })
            return result
