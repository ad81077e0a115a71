"""
Routing of Stripe events to handlers.

An ``EventRouter`` maps an event type (``"charge.succeeded"``) to a
callable taking the event payload.  The payments app builds one router in
``PaymentsConfig.ready()`` and freezes it; views reach it through the app
config instead of a module-level registry.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)

Handler = Callable[[Mapping[str, Any]], Any]


class RouterFrozen(RuntimeError):
    """Raised when a subscription is attempted after start-up."""


class EventRouter:
    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}
        self._frozen = False

    def subscribe(self, event_type: str, handler: Handler) -> None:
        if self._frozen:
            raise RouterFrozen(f"Cannot subscribe to {event_type!r}: router is frozen")
        if event_type in self._handlers:
            raise ValueError(f"A handler is already subscribed to {event_type!r}")
        self._handlers[event_type] = handler

    def freeze(self) -> "EventRouter":
        self._frozen = True
        return self

    @property
    def event_types(self) -> list[str]:
        return sorted(self._handlers)

    def handler_for(self, event_type: str) -> Handler | None:
        return self._handlers.get(event_type)

    def dispatch(self, event: Mapping[str, Any]) -> Any:
        """
        Run the handler subscribed to ``event["type"]``.

        Events nobody subscribed to are ignored and ``None`` is returned.
        Exceptions raised by the handler propagate to the caller.
        """
        event_type = event.get("type")
        handler = self._handlers.get(event_type)
        if handler is None:
            logger.debug("Ignoring Stripe event %s of type %s", event.get("id"), event_type)
            return None
        logger.info("Dispatching Stripe event %s of type %s", event.get("id"), event_type)
        return handler(event)
