"""
Configuration Package
"""

from .config import Config, normalize_database_url

__all__ = ['Config', 'normalize_database_url']
