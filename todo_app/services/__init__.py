"""
Services Package

Record store and application service for to-do items.
"""

from .todo_store import TodoStore
from .todo_service import TodoService, TODO_ADDED, TODO_REMOVED

__all__ = [
    'TodoStore',
    'TodoService',
    'TODO_ADDED',
    'TODO_REMOVED',
]
