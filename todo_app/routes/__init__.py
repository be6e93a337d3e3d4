"""
Routes Package

This package contains all Flask route blueprints.
"""

from .main import main_bp
from .todos import todos_bp

__all__ = [
    'main_bp',
    'todos_bp',
]
