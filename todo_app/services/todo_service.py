"""
Todo Application Service

FLOW OVERVIEW
- TodoService(store)
  • Receives the record store at construction; created once by the app factory.
- add_todo(raw_title)
  • Validate; invalid titles are dropped silently (no store call, no event).
  • Otherwise create the record and emit ("added", todo).
- remove_todo(todo_id)
  • Delete by id (idempotent) and emit ("removed", todo_id).
- list_todos()
  • All records in creation order.
- subscribe(listener)
  • Register listener(event, payload), called after each successful mutation.
    Views use these events to know their data is stale.

StorageError from the store propagates unchanged and suppresses the event.
"""

import logging
from typing import Callable, List, Optional

from ..errors import ValidationError
from ..models import Todo
from ..utils.validators import require_title

TODO_ADDED = 'added'
TODO_REMOVED = 'removed'


class TodoService:
    """Validation and orchestration between the web layer and the store."""

    def __init__(self, store):
        self.store = store
        self.logger = logging.getLogger(__name__)
        self._listeners: List[Callable] = []

    def subscribe(self, listener: Callable) -> Callable:
        """Register a change listener. Returns it so this can be used as a decorator."""
        self._listeners.append(listener)
        return listener

    def _notify(self, event: str, payload) -> None:
        for listener in self._listeners:
            try:
                listener(event, payload)
            except Exception:
                # The mutation is already committed; a broken listener must not hide that.
                self.logger.exception(f"Listener {listener!r} failed for '{event}' event")

    def add_todo(self, raw_title) -> Optional[Todo]:
        """
        Add a Todo from raw user input.

        Args:
            raw_title: Title as submitted; trimmed before storing

        Returns:
            The created Todo, or None when the title was empty
        """
        try:
            title = require_title(raw_title)
        except ValidationError as e:
            self.logger.debug(f"Ignoring add request: {str(e)}")
            return None

        todo = self.store.create(title)
        self.logger.info(f"Added todo {todo.id}")
        self._notify(TODO_ADDED, todo)
        return todo

    def remove_todo(self, todo_id) -> None:
        """Remove a Todo by id; unknown ids are ignored."""
        self.store.delete_by_id(todo_id)
        self.logger.info(f"Removed todo {todo_id}")
        self._notify(TODO_REMOVED, todo_id)

    def list_todos(self) -> List[Todo]:
        return self.store.list_all()
