"""
Database Models Package

FLOW OVERVIEW
- Centralizes SQLAlchemy DB instance and model imports for convenient usage.
- Exposes: db, Todo.
"""

from .database import db
from .todo import Todo

__all__ = [
    'db',
    'Todo',
]
