"""
Unit tests for the Todo record store.

Covers create/list/delete against SQLite and the StorageError wrapping of
database failures.
"""

import pytest
from unittest.mock import Mock, patch
from sqlalchemy import delete, event
from sqlalchemy.exc import OperationalError

from todo_app.errors import StorageError
from todo_app.models import Todo, db
from todo_app.services import TodoStore


def _db_down():
    return OperationalError('SELECT 1', {}, Exception('connection refused'))


class TestTodoStore:
    """TodoStore against a real session."""

    def test_create_returns_stored_record(self, store, db_session):
        todo = store.create('Buy milk')

        assert todo.id is not None
        assert todo.title == 'Buy milk'
        assert todo.created_at
        assert db_session.get(Todo, todo.id) is not None

    def test_create_generates_unique_ids(self, store):
        ids = {store.create(f'item {i}').id for i in range(20)}
        assert len(ids) == 20

    def test_list_all_empty(self, store):
        assert store.list_all() == []

    def test_list_all_orders_by_created_at(self, store):
        for title in ['first', 'second', 'third']:
            store.create(title)

        todos = store.list_all()

        assert [t.title for t in todos] == ['first', 'second', 'third']
        timestamps = [t.created_at for t in todos]
        assert timestamps == sorted(timestamps)
        assert len(set(timestamps)) == 3

    def test_delete_by_id_removes_row(self, store):
        keep = store.create('keep')
        drop = store.create('drop')

        store.delete_by_id(drop.id)

        assert [t.id for t in store.list_all()] == [keep.id]

    def test_delete_missing_id_is_noop(self, store):
        store.create('only')

        store.delete_by_id('00000000-0000-0000-0000-000000000000')

        assert len(store.list_all()) == 1

    def test_count(self, store):
        assert store.count() == 0
        store.create('one')
        store.create('two')
        assert store.count() == 2

    def test_null_title_rejected(self, store):
        with pytest.raises(StorageError) as exc_info:
            store.create(None)

        assert exc_info.value.operation == 'create'
        # Session was rolled back and is usable again
        assert store.list_all() == []


class TestTodoStoreFailures:
    """Database failures surface as StorageError after a rollback."""

    def test_create_failure(self):
        session = Mock()
        session.commit.side_effect = _db_down()
        store = TodoStore(session)

        with pytest.raises(StorageError) as exc_info:
            store.create('Buy milk')

        assert isinstance(exc_info.value.__cause__, OperationalError)
        session.rollback.assert_called_once()

    def test_list_failure(self):
        session = Mock()
        session.scalars.side_effect = _db_down()
        store = TodoStore(session)

        with pytest.raises(StorageError):
            store.list_all()

        session.rollback.assert_called_once()

    def test_delete_failure_is_not_retried(self):
        session = Mock()
        session.execute.side_effect = _db_down()
        store = TodoStore(session)

        with pytest.raises(StorageError):
            store.delete_by_id('abc')

        assert session.execute.call_count == 1
        session.commit.assert_not_called()


class TestCreateAfterCommit:
    """The record returned by create must not need the database again."""

    def test_connection_lost_after_commit(self, service, db_session):
        connection_lost = []

        def fail_cursor(conn, cursor, statement, parameters, context, executemany):
            if connection_lost:
                raise _db_down()

        real_commit = db_session.commit

        def commit_then_disconnect():
            real_commit()
            connection_lost.append(True)

        event.listen(db.engine, 'before_cursor_execute', fail_cursor)
        try:
            with patch.object(db_session, 'commit', commit_then_disconnect):
                todo = service.add_todo('Buy milk')

            assert connection_lost
            assert todo.title == 'Buy milk'
            assert todo.id
            assert todo.created_at
        finally:
            event.remove(db.engine, 'before_cursor_execute', fail_cursor)

        assert [t.title for t in service.list_todos()] == ['Buy milk']

    def test_row_removed_concurrently_after_commit(self, store, db_session):
        real_commit = db_session.commit

        def commit_then_remove_elsewhere():
            real_commit()
            with db.engine.begin() as connection:
                connection.execute(delete(Todo))

        with patch.object(db_session, 'commit', commit_then_remove_elsewhere):
            todo = store.create('Buy milk')

        assert todo.title == 'Buy milk'
        assert todo.id
        assert store.list_all() == []

    def test_commit_failure_on_real_session(self, store, db_session):
        with patch.object(db_session, 'commit', side_effect=_db_down()):
            with pytest.raises(StorageError) as exc_info:
                store.create('Buy milk')

        assert exc_info.value.operation == 'create'
        assert store.list_all() == []
