"""Tests for the bounded conversation memory."""

from zen_sanctuary.services import SessionService


def test_history_never_exceeds_limit() -> None:
    """Test the cap holds after many exchanges."""
    sessions = SessionService(history_limit=6)
    for i in range(20):
        sessions.append_exchange(None, f"question {i}", f"answer {i}")
        assert len(sessions.get_history()) <= 6


def test_keeps_most_recent_turns_in_order() -> None:
    """Test the window slides and preserves order."""
    sessions = SessionService(history_limit=4)
    for i in range(5):
        sessions.append_exchange("s1", f"q{i}", f"a{i}")

    assert sessions.get_history("s1") == [
        {"role": "user", "content": "q3"},
        {"role": "assistant", "content": "a3"},
        {"role": "user", "content": "q4"},
        {"role": "assistant", "content": "a4"},
    ]


def test_sessions_are_isolated() -> None:
    """Test one client's history does not leak into another's."""
    sessions = SessionService()
    sessions.append_exchange("alice", "hi", "hello")

    assert sessions.get_history("bob") == []
    assert len(sessions.get_history("alice")) == 2
    assert len(sessions) == 1


def test_default_session_used_without_id() -> None:
    """Test None and the default id refer to the same history."""
    sessions = SessionService()
    sessions.append_exchange(None, "hi", "hello")
    assert sessions.get_history("default") == sessions.get_history(None)


def test_get_history_returns_copy() -> None:
    """Test callers cannot mutate stored history."""
    sessions = SessionService()
    sessions.append_exchange(None, "hi", "hello")
    sessions.get_history().append({"role": "user", "content": "injected"})
    assert len(sessions.get_history()) == 2


def test_clear() -> None:
    """Test clearing a session forgets its turns."""
    sessions = SessionService()
    sessions.append_exchange("s1", "hi", "hello")
    sessions.clear("s1")
    assert sessions.get_history("s1") == []
    # Clearing an unknown session is a no-op
    sessions.clear("missing")


def test_zero_limit_keeps_nothing() -> None:
    """Test a zero cap disables memory."""
    sessions = SessionService(history_limit=0)
    sessions.append_exchange(None, "hi", "hello")
    assert sessions.get_history() == []


def test_session_count_is_capped() -> None:
    """Test many distinct ids never hold more than max_sessions."""
    sessions = SessionService(history_limit=4, max_sessions=50)
    for i in range(10000):
        sessions.append_exchange(f"client-{i}", "hi", "hello")

    assert len(sessions) == 50
    assert sessions.get_history("client-0") == []
    assert len(sessions.get_history("client-9999")) == 2


def test_least_recently_used_session_is_evicted() -> None:
    """Test reading a session keeps it alive over idle ones."""
    sessions = SessionService(max_sessions=2)
    sessions.append_exchange("a", "hi", "hello")
    sessions.append_exchange("b", "hi", "hello")
    sessions.get_history("a")
    sessions.append_exchange("c", "hi", "hello")

    assert len(sessions.get_history("a")) == 2
    assert sessions.get_history("b") == []
    assert len(sessions.get_history("c")) == 2
