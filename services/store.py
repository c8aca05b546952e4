# FILE: services/store.py
from sqlalchemy import inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload


class StoreError(Exception):
    """Raised when the database rejects a read or write."""


class InterviewStore:
    """Thin insert/select layer over one SQLAlchemy session.

    Every SQLAlchemy failure is re-raised as ``StoreError`` so callers only
    deal with ORM rows or that one error type.
    """

    def __init__(self, session, autocommit: bool = False):
        self.session = session
        self.autocommit = autocommit

    def insert(self, row):
        # Flush to obtain the server-assigned identity.
        try:
            self.session.add(row)
            self.session.flush()
            if self.autocommit:
                self.session.commit()
        except SQLAlchemyError as exc:
            raise StoreError(f"insert into {row.__tablename__} failed: {exc}") from exc

        identity = inspect(row).identity
        if not identity or identity[0] is None:
            raise StoreError(f"no identity returned for {row.__tablename__}")
        return identity[0]

    def select(self, model, columns=None, eq=None, order_by=None, nested=None):
        if columns:
            stmt = select(*[getattr(model, name) for name in columns])
        else:
            stmt = select(model)

        if eq is not None:
            column, value = eq
            stmt = stmt.where(getattr(model, column) == value)
        if order_by is not None:
            column, descending = order_by
            attr = getattr(model, column)
            stmt = stmt.order_by(attr.desc() if descending else attr.asc())
        if nested is not None:
            # One-hop join to the parent row, loaded alongside the result.
            stmt = stmt.options(selectinload(getattr(model, nested)))

        try:
            result = self.session.execute(stmt)
            return list(result.all()) if columns else list(result.scalars().all())
        except SQLAlchemyError as exc:
            # A failed statement aborts the transaction on some backends.
            self.session.rollback()
            raise StoreError(f"select from {model.__tablename__} failed: {exc}") from exc

    def commit(self):
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError(f"commit failed: {exc}") from exc

    def rollback(self):
        self.session.rollback()
