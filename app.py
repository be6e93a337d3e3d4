#!/usr/bin/env python3
"""
Neon Todos application entry point.

This module configures logging, creates the Flask application via
`create_app`, and eagerly creates the schema for in-memory testing modes.
When executed directly, it runs the development server. In production, a WSGI
server should import `app` from this module.

Environment variables of interest:
- FLASK_ENV: if set to 'testing', enables an in-memory DB and testing flags.
- DATABASE_URL: required outside testing; the app refuses to start without it.
- LOG_LEVEL: root log level (default INFO).
- PAGE_TITLE, GITHUB_*, NEON_*: display-only values for the page banner.
"""

import logging
import os
from todo_app import create_app
from todo_app.models import db

# Create app instance
if os.getenv('FLASK_ENV') == 'testing':
    # Use test configuration for testing environment
    test_config = {
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': os.getenv('DATABASE_URL', 'sqlite:///:memory:'),
        'SECRET_KEY': os.getenv('SECRET_KEY', 'test-secret-key'),
        'PAGE_TITLE': os.getenv('PAGE_TITLE', 'Neon Todos'),
        'LOG_LEVEL': os.getenv('LOG_LEVEL', 'INFO').upper(),
    }
    app = create_app(test_config)
else:
    app = create_app()

logging.basicConfig(format='%(asctime)s %(levelname)s %(name)s: %(message)s')
logging.getLogger().setLevel(app.config['LOG_LEVEL'])

print("🚀 Starting Neon Todos server...")
if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///:memory:'):
    print("💾 Running with in-memory database")
    with app.app_context():
        db.create_all()
        print("📊 In-memory database initialized")
else:
    print("📊 Run `flask --app app init-db` to create the schema")

if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000)
