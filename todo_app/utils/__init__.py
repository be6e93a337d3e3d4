"""
Utilities Package

This package contains utility functions and helper modules.
"""

from . import validators
from . import error_handlers
from . import prom_metrics
from . import deployment

__all__ = [
    'validators',
    'error_handlers',
    'prom_metrics',
    'deployment',
]
