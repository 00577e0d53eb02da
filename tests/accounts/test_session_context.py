"""Tests for the explicit session marker."""

from modules.accounts.session import SessionContext


def test_writes_are_staged_until_commit() -> None:
    backing = {}
    ctx = SessionContext(backing)
    ctx.start_session()
    ctx.set("loggedin", True)
    ctx.set("id", 7)
    ctx.set("username", "ana_01")

    assert backing == {}
    assert not ctx.is_authenticated()

    ctx.commit()
    assert backing == {"loggedin": True, "id": 7, "username": "ana_01"}
    assert ctx.is_authenticated()


def test_start_session_drops_stale_marker() -> None:
    backing = {"loggedin": False, "id": 1, "username": "old", "theme": "dark"}
    ctx = SessionContext(backing)
    ctx.start_session()
    ctx.set("loggedin", True)
    ctx.set("id", 2)
    ctx.commit()

    assert backing == {"loggedin": True, "id": 2, "theme": "dark"}


def test_marker_requires_boolean_flag_and_id() -> None:
    assert not SessionContext({"loggedin": "yes", "id": 1}).is_authenticated()
    assert not SessionContext({"loggedin": True}).is_authenticated()
    assert SessionContext({"loggedin": True, "id": 1}).is_authenticated()


def test_end_forgets_marker() -> None:
    backing = {"loggedin": True, "id": 1, "username": "ana_01", "theme": "dark"}
    ctx = SessionContext(backing)
    ctx.set("username", "pending")
    ctx.end()
    ctx.commit()

    assert backing == {"theme": "dark"}
    assert not ctx.is_authenticated()


def test_get_reads_committed_values_only() -> None:
    ctx = SessionContext({"username": "ana_01"})
    ctx.set("username", "pending")

    assert ctx.get("username") == "ana_01"
    assert ctx.get("id") is None
    assert ctx.get("id", 0) == 0
