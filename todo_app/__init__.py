"""
Neon Todos Application Package

FLOW OVERVIEW
- create_app(test_config=None)
  • Build Flask app, apply config (test or env-based). Env-based config raises
    ConfigurationError when DATABASE_URL is missing.
  • Init the database extension and build the record store and the todo
    service once; the service is reachable as `app.todo_service`.
  • Register blueprints: main (/health, /metrics), todos (/).
  • Register request metrics, error handlers and the `init-db` CLI command.
"""

import time

import click
from flask import Flask, g, request
from .models import db
from .routes import main_bp, todos_bp
from .config import Config
from .services import TodoStore, TodoService
from .utils.prom_metrics import observe_mutation, observe_request

def create_app(test_config=None):
    """Application factory pattern for production deployment"""
    app = Flask(__name__)

    # Configuration
    if test_config:
        # Use test configuration if provided
        app.config.update(test_config)
    else:
        # Use environment-based configuration
        app.config.from_object(Config())

    # Initialize extensions
    db.init_app(app)

    # Store and service are built once and shared by every request
    store = TodoStore(db.session)
    app.todo_service = TodoService(store)
    app.todo_service.subscribe(observe_mutation)

    # Register blueprints
    app.register_blueprint(main_bp)
    app.register_blueprint(todos_bp)

    _register_request_metrics(app)

    # Register error handlers
    from .utils.error_handlers import register_error_handlers
    register_error_handlers(app)

    _register_cli(app)

    return app


def _register_request_metrics(app):
    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def record_request(response):
        started = g.pop('request_started', None)
        if started is not None:
            endpoint = request.endpoint or 'unknown'
            observe_request(endpoint, response.status_code, time.perf_counter() - started)
        return response


def _register_cli(app):
    @app.cli.command('init-db')
    def init_db():
        """Create the todos table if it does not exist."""
        db.create_all()
        click.echo('Database initialized')
