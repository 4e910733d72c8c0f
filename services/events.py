import logging
from datetime import datetime
from typing import Callable, NamedTuple

logger = logging.getLogger(__name__)

__all__ = [
    "ChangeEvent", "EventBus",
    "REMINDERS_CHANGED", "EXPENSES_CHANGED", "BUDGETS_CHANGED",
    "INTEREST_CHANGED", "TOTAL_AMOUNT_CHANGED",
]

REMINDERS_CHANGED = "reminders"
EXPENSES_CHANGED = "expenses"
BUDGETS_CHANGED = "budgets"
INTEREST_CHANGED = "interest_calculations"
TOTAL_AMOUNT_CHANGED = "total_amount"


class ChangeEvent(NamedTuple):
    collection: str
    ts: str
    payload: dict


Handler = Callable[[ChangeEvent], None]


class EventBus:
    """Synchronous publish/subscribe channel for cache changes.

    Handlers subscribed with name=None receive every event. A failing
    handler is logged and does not stop the others.
    """

    def __init__(self):
        self._subscribers: dict[str | None, list[Handler]] = {}

    def subscribe(self, handler: Handler, name: str | None = None) -> None:
        self._subscribers.setdefault(name, []).append(handler)

    def unsubscribe(self, handler: Handler, name: str | None = None) -> None:
        handlers = self._subscribers.get(name, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, name: str, payload: dict | None = None) -> ChangeEvent:
        event = ChangeEvent(
            collection=name,
            ts=datetime.now().isoformat(),
            payload=payload or {},
        )
        for handler in self._subscribers.get(name, []) + self._subscribers.get(None, []):
            try:
                handler(event)
            except Exception:
                logger.exception("Change handler %r failed for %s", handler, name)
        logger.debug("Published %s change", name)
        return event
