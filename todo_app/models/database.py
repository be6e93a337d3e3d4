"""
Database Configuration

FLOW OVERVIEW
- Provides the SQLAlchemy instance `db` that owns the engine and the
  request-scoped session.
- Initialized in the app factory (todo_app/__init__.py); the session is handed
  to TodoStore explicitly rather than imported by it.
"""

from flask_sqlalchemy import SQLAlchemy

# Create SQLAlchemy instance
db = SQLAlchemy()
