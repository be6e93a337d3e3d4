"""
To-do list routes.

FLOW OVERVIEW
- / [GET]
  • Render the deployment banner, the current list and the add form.
- /todos [POST]
  • Add a to-do from the `title` field. Empty titles are ignored.
- /todos/<todo_id>/remove [POST]
  • Remove a to-do. Unknown ids are ignored.

Both mutations answer with a 303 redirect to the list so the browser
re-fetches it; nothing is updated client-side.
"""

from flask import Blueprint, current_app, redirect, render_template, request, url_for
from ..utils.deployment import DeploymentInfo

todos_bp = Blueprint('todos', __name__)


def _service():
    return current_app.todo_service


def _refresh():
    """Send the browser back to the list so it is read again"""
    return redirect(url_for('todos.index'), code=303)


@todos_bp.route('/')
def index():
    """List page"""
    todos = _service().list_todos()
    deployment = DeploymentInfo.from_config(current_app.config)
    return render_template('index.html', todos=todos, deployment=deployment)


@todos_bp.route('/todos', methods=['POST'])
def add_todo():
    """Add form target"""
    _service().add_todo(request.form.get('title'))
    return _refresh()


@todos_bp.route('/todos/<todo_id>/remove', methods=['POST'])
def remove_todo(todo_id):
    """Per-row remove button target"""
    _service().remove_todo(todo_id)
    return _refresh()
