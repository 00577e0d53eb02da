"""Explicit session marker for authenticated visitors."""

from typing import Any, MutableMapping

MARKER_KEYS = ("loggedin", "id", "username")


class SessionContext:
    """Stages session-marker writes and applies them on ``commit()``.

    ``backing`` is the Flask session during a request; any mutable mapping
    works, which keeps the handlers testable without a request.
    """

    def __init__(self, backing: MutableMapping[str, Any]) -> None:
        self._backing = backing
        self._pending: dict[str, Any] = {}
        self._reset = False

    def start_session(self) -> None:
        """Begin a fresh marker; stale keys are dropped on commit."""
        self._pending.clear()
        self._reset = True

    def set(self, key: str, value: Any) -> None:
        self._pending[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._backing.get(key, default)

    def is_authenticated(self) -> bool:
        return self._backing.get("loggedin") is True and self._backing.get("id") is not None

    def commit(self) -> None:
        if self._reset:
            for key in MARKER_KEYS:
                self._backing.pop(key, None)
            self._reset = False
        self._backing.update(self._pending)
        self._pending.clear()

    def end(self) -> None:
        """Forget the marker, committed or not."""
        self._pending.clear()
        self._reset = False
        for key in MARKER_KEYS:
            self._backing.pop(key, None)
