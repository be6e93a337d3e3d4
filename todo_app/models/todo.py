"""
Todo Model

FLOW OVERVIEW
- Todo: one row of the `todos` table (id, title, created_at).
- Rows are only ever inserted or deleted; there is no update path.
- created_at is text holding a sortable UTC timestamp and is the display
  ordering key.
"""

from .database import db
from .utils import generate_todo_id, generate_created_at


class Todo(db.Model):
    """A single to-do list item"""

    __tablename__ = 'todos'

    id = db.Column(db.String(36), primary_key=True, default=generate_todo_id)
    title = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.Text, nullable=False, default=generate_created_at)

    def __repr__(self):
        return f'<Todo {self.id} {self.title!r}>'
