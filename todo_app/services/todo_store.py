"""
Todo Record Store

FLOW OVERVIEW
- TodoStore(session)
  • Wraps an explicitly supplied SQLAlchemy session; holds no global handle.
- create(title) -> Todo
  • Insert one row with a fresh id and timestamp, commit, return the row
    detached with its columns loaded.
- list_all() -> list[Todo]
  • All rows ordered by created_at ascending (id breaks ties).
- delete_by_id(todo_id) -> None
  • Delete the row if present; absent ids are a no-op.
- count() -> int
  • Number of stored rows (health checks).

Every SQLAlchemyError rolls the session back and is re-raised as StorageError.
There are no retries.
"""

import logging
from contextlib import contextmanager
from typing import List

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError

from ..errors import StorageError
from ..models import Todo


class TodoStore:
    """Persistence for Todo rows."""

    def __init__(self, session):
        self.session = session
        self.logger = logging.getLogger(__name__)

    @contextmanager
    def _operation(self, name):
        try:
            yield
        except SQLAlchemyError as e:
            self.session.rollback()
            self.logger.error(f"Storage operation '{name}' failed: {str(e)}")
            raise StorageError(name) from e

    def create(self, title: str) -> Todo:
        """
        Persist a new Todo.

        Args:
            title: Already validated title. ``None`` is rejected by the
                NOT NULL constraint and surfaces as StorageError.

        Returns:
            The stored Todo, detached, with id and created_at loaded.
            Reading it never goes back to the database.
        """
        with self._operation('create'):
            todo = Todo(title=title)
            self.session.add(todo)
            self.session.flush()
            # Detached before commit so the commit cannot expire it
            self.session.expunge(todo)
            self.session.commit()
            return todo

    def list_all(self) -> List[Todo]:
        """Return every Todo ordered by creation time."""
        with self._operation('list_all'):
            query = select(Todo).order_by(Todo.created_at, Todo.id)
            return list(self.session.scalars(query))

    def delete_by_id(self, todo_id: str) -> None:
        """Delete a Todo by id. Missing ids are not an error."""
        with self._operation('delete_by_id'):
            result = self.session.execute(delete(Todo).where(Todo.id == todo_id))
            self.session.commit()
            if result.rowcount == 0:
                self.logger.debug(f"Delete of missing todo {todo_id} ignored")

    def count(self) -> int:
        with self._operation('count'):
            return self.session.scalar(select(func.count()).select_from(Todo))
