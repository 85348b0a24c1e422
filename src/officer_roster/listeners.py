"""
Listener Registry for the "data ready" event.

A listener is any object plus the name of a zero-argument method to call
on it. Each registration fires at most once: fire_all() drains and clears
the registry, so a later re-initialization never re-fires stale entries.
"""

import logging
from typing import Any, Dict, List, Tuple

logger = logging.getLogger(__name__)


def _describe(listener: Any) -> str:
    return getattr(listener, "name", None) or type(listener).__name__


def invoke(listener: Any, callback_name: str) -> None:
    """Call ``listener.<callback_name>()``, logging any failure."""
    callback = getattr(listener, callback_name, None)
    if not callable(callback):
        logger.warning("%s has no callable '%s', skipping", _describe(listener), callback_name)
        return
    try:
        callback()
    except Exception:
        logger.exception("Listener %s.%s raised", _describe(listener), callback_name)


class ListenerRegistry:
    """Ordered one-shot registrations keyed by listener object."""

    def __init__(self):
        self._listeners: Dict[Any, str] = {}

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, listener: Any) -> bool:
        return listener in self._listeners

    def subscribe(self, listener: Any, callback_name: str) -> bool:
        """
        Register a listener.

        Returns:
            True if registered, False if it was already registered
        """
        if listener in self._listeners:
            logger.warning(
                "%s attempted to subscribe to the initialized event, but it was already subscribed",
                _describe(listener),
            )
            return False
        self._listeners[listener] = callback_name
        return True

    def unsubscribe(self, listener: Any) -> bool:
        """
        Remove a listener.

        Returns:
            True if removed, False if it was not registered
        """
        if listener not in self._listeners:
            logger.warning(
                "Attempted to remove %s from the listener list, but it was not in the list",
                _describe(listener),
            )
            return False
        del self._listeners[listener]
        return True

    def clear(self) -> None:
        self._listeners.clear()

    def fire_all(self) -> int:
        """
        Invoke every registered callback once, in registration order.

        The registry is emptied before any callback runs.

        Returns:
            Number of listeners fired
        """
        pending: List[Tuple[Any, str]] = list(self._listeners.items())
        self.clear()
        for listener, callback_name in pending:
            invoke(listener, callback_name)
        return len(pending)


__all__ = ["ListenerRegistry", "invoke"]
