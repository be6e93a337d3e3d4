"""
Error Handlers

FLOW OVERVIEW
- render_error_page(title, message, status_code): shared error template.
- register_error_handlers(app)
  • 404 / 500 pages.
  • StorageError -> rollback and a generic 503 page; details stay in the log.
"""

import logging

from flask import render_template

from ..errors import StorageError

logger = logging.getLogger(__name__)


def render_error_page(title, message, status_code):
    """Render a user-friendly error page"""
    return render_template('error.html', title=title, message=message), status_code


def register_error_handlers(app):
    """Register error handlers with the Flask app"""

    @app.errorhandler(404)
    def not_found(error):
        return render_error_page('Page Not Found',
            'The page you are looking for does not exist.', 404)

    @app.errorhandler(StorageError)
    def storage_error(error):
        from ..models import db
        db.session.rollback()
        logger.error(f"Request failed: {str(error)}")
        return render_error_page('Something Went Wrong',
            'The to-do list could not be reached. Please try again later.', 503)

    @app.errorhandler(500)
    def internal_error(error):
        from ..models import db
        db.session.rollback()
        return render_error_page('Internal Server Error',
            'Something went wrong on our end. Please try again later.', 500)
