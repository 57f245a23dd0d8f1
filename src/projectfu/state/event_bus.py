"""
Hook dispatch for projectfu.

The host fires lifecycle hooks; the system subscribes handlers to them.
Two dispatch modes mirror the host's hook API:

- emit(): every handler runs, return values are ignored
- call(): handlers run in order until one returns exactly False (veto)

Usage:
    from .event_bus import get_event_bus, EventType

    bus = get_event_bus()
    bus.on(EventType.PRE_CREATE_COMBATANT, my_guard)

    # Host side, before creating a combatant
    if bus.call(EventType.PRE_CREATE_COMBATANT, document=combatant):
        ...  # creation allowed
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Hooks the system listens to or publishes."""

    # Host hooks
    PRE_CREATE_COMBATANT = "preCreateCombatant"
    RENDER_CHAT_MESSAGE = "renderChatMessage"

    # System hooks
    DAMAGE_APPLIED = "projectfu.damageApplied"


@dataclass
class GameEvent:
    """
    Event payload passed to handlers.

    Attributes:
        type: The hook that fired
        data: Hook-specific keyword arguments
        timestamp: When the hook fired
    """

    type: EventType
    data: dict = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"[{self.type.value}] {self.data}"


# A handler may return False from a call() dispatch to veto the operation
EventHandler = Callable[[GameEvent], Any]


class EventBus:
    """
    Synchronous hook registry.

    Handlers run in registration order. A raising handler is logged and
    skipped so one broken subscriber cannot block the others.
    """

    def __init__(self):
        self._listeners: dict[EventType, list[EventHandler]] = {}
        self._history: list[GameEvent] = []
        self._history_limit = 100

    def on(self, event_type: EventType, handler: EventHandler) -> None:
        """
        Subscribe to a hook.

        Args:
            event_type: The hook to listen for
            handler: Callback receiving a GameEvent
        """
        if event_type not in self._listeners:
            self._listeners[event_type] = []
        if handler not in self._listeners[event_type]:
            self._listeners[event_type].append(handler)

    def off(self, event_type: EventType, handler: EventHandler) -> None:
        """Unsubscribe a handler from a hook."""
        if event_type in self._listeners and handler in self._listeners[event_type]:
            self._listeners[event_type].remove(handler)

    def emit(self, event_type: EventType, **data) -> GameEvent:
        """
        Notify every handler of a hook.

        Returns:
            The emitted GameEvent (for chaining/testing)
        """
        event = self._record(event_type, data)
        for handler in list(self._listeners.get(event_type, [])):
            self._invoke(handler, event)
        return event

    def call(self, event_type: EventType, **data) -> bool:
        """
        Run handlers in order, stopping at the first veto.

        Returns:
            False if a handler returned False, True otherwise
        """
        event = self._record(event_type, data)
        for handler in list(self._listeners.get(event_type, [])):
            if self._invoke(handler, event) is False:
                logger.debug(f"{event_type.value} vetoed by {getattr(handler, '__name__', handler)}")
                return False
        return True

    def clear(self) -> None:
        """Clear all listeners. Useful for testing."""
        self._listeners.clear()

    def get_history(self, event_type: EventType | None = None) -> list[GameEvent]:
        """
        Get recent hook history.

        Args:
            event_type: Filter by type, or None for all events
        """
        if event_type is None:
            return list(self._history)
        return [e for e in self._history if e.type == event_type]

    def listener_count(self, event_type: EventType) -> int:
        """Get number of listeners for a hook."""
        return len(self._listeners.get(event_type, []))

    def _record(self, event_type: EventType, data: dict) -> GameEvent:
        event = GameEvent(type=event_type, data=data)
        self._history.append(event)
        if len(self._history) > self._history_limit:
            self._history = self._history[-self._history_limit :]
        return event

    @staticmethod
    def _invoke(handler: EventHandler, event: GameEvent) -> Any:
        try:
            return handler(event)
        except Exception:
            logger.exception(f"Error in handler for {event.type.value}")
            return None


# Global singleton instance
_event_bus: EventBus | None = None


def get_event_bus() -> EventBus:
    """Get the process-wide hook registry."""
    global _event_bus
    if _event_bus is None:
        _event_bus = EventBus()
    return _event_bus


def reset_event_bus() -> None:
    """Reset the process-wide hook registry. Useful for testing."""
    global _event_bus
    _event_bus = None
