import uuid

import psycopg
import pytest

from showcase.core.store import (
    InvalidProjectData,
    ProjectNotFound,
    ProjectStore,
    StoreError,
)

PROJECT_ID = "7d9f3c1e-2b4a-4c5d-9e8f-0a1b2c3d4e5f"

ROW = {
    "id": uuid.UUID(PROJECT_ID),
    "title": "Robot Arm",
    "slug": "robot-arm",
    "short_description": "A six-axis arm",
    "long_description": "## Intro",
    "featured_image": None,
    "featured": True,
    "created_at": None,
    "updated_at": None,
}


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self.rowcount = conn.rowcount

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, query, params=()):
        if self.conn.error is not None:
            raise self.conn.error
        self.conn.executed.append((query, params))

    def fetchone(self):
        return self.conn.rows[0] if self.conn.rows else None

    def fetchall(self):
        return list(self.conn.rows)


class FakeConnection:
    def __init__(self, rows=(), rowcount=0, error=None):
        self.rows = list(rows)
        self.rowcount = rowcount
        self.error = error
        self.executed = []
        self.cursor_kwargs = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def cursor(self, **kwargs):
        self.cursor_kwargs.append(kwargs)
        return FakeCursor(self)


def make_store(conn):
    return ProjectStore("postgresql://test", connect=lambda dsn: conn)


def test_fetch_by_slug_returns_record():
    conn = FakeConnection(rows=[ROW])
    project = make_store(conn).fetch_by_slug("robot-arm")

    assert project.id == PROJECT_ID
    assert project.title == "Robot Arm"
    assert conn.executed[0][1] == ("robot-arm",)


def test_fetch_by_slug_missing_returns_none():
    assert make_store(FakeConnection()).fetch_by_slug("nope") is None


def test_get_with_malformed_id_is_not_found_without_query():
    conn = FakeConnection(rows=[ROW])

    with pytest.raises(ProjectNotFound):
        make_store(conn).get("not-a-uuid")
    assert conn.executed == []


def test_get_missing_raises_not_found():
    with pytest.raises(ProjectNotFound):
        make_store(FakeConnection()).get(PROJECT_ID)


def test_update_rejects_unknown_fields():
    conn = FakeConnection(rows=[ROW])

    with pytest.raises(InvalidProjectData):
        make_store(conn).update(PROJECT_ID, {"title": "x", "owner": "me"})
    with pytest.raises(InvalidProjectData):
        make_store(conn).update(PROJECT_ID, {})
    assert conn.executed == []


def test_update_passes_values_then_id():
    conn = FakeConnection(rows=[dict(ROW, title="New")])
    updated = make_store(conn).update(PROJECT_ID, {"title": "New", "featured": False})

    assert [p.title for p in updated] == ["New"]
    _, params = conn.executed[0]
    assert params == ("New", False, uuid.UUID(PROJECT_ID))


def test_update_of_missing_project_returns_empty_list():
    assert make_store(FakeConnection()).update(PROJECT_ID, {"title": "x"}) == []


def test_create_requires_title_and_slug():
    with pytest.raises(InvalidProjectData):
        make_store(FakeConnection()).create({"title": "Only title"})


def test_delete_reports_whether_a_row_was_removed():
    assert make_store(FakeConnection(rowcount=1)).delete(PROJECT_ID) is True
    assert make_store(FakeConnection(rowcount=0)).delete(PROJECT_ID) is False
    assert make_store(FakeConnection(rowcount=1)).delete("bad-id") is False


def test_related_with_zero_limit_skips_query():
    conn = FakeConnection(rows=[ROW])

    assert make_store(conn).related(PROJECT_ID, limit=0) == []
    assert conn.executed == []


def test_driver_errors_are_wrapped():
    conn = FakeConnection(error=psycopg.OperationalError("connection refused"))

    with pytest.raises(StoreError) as excinfo:
        make_store(conn).fetch_by_slug("robot-arm")
    assert isinstance(excinfo.value.__cause__, psycopg.OperationalError)


def test_seed_executes_one_upsert_per_record():
    conn = FakeConnection()
    records = [
        {"title": "A", "slug": "a"},
        {"title": "B", "slug": "b", "featured": True},
    ]

    assert make_store(conn).seed(records) == 2
    assert [params for _, params in conn.executed] == [("A", "a"), ("B", "b", True)]


def test_seed_validates_before_writing():
    conn = FakeConnection()

    with pytest.raises(InvalidProjectData):
        make_store(conn).seed([{"title": "A", "slug": "a"}, {"slug": "b"}])
    assert conn.executed == []
