# newrial/core/events.py
# -*- coding: utf-8 -*-
"""
Lightweight event system for NewRial.

- A minimal pub/sub EventBus with type-based subscriptions.
- Handlers are called synchronously on publish() in the caller's thread.
- Returns an unsubscribe() callable from subscribe() for easy cleanup.

Usage:
    from newrial.core.events import EventBus, AmountEdited

    bus = EventBus()

    def on_edit(evt: AmountEdited) -> None:
        print(evt.field, evt.text)

    unsubscribe = bus.subscribe(AmountEdited, on_edit)
    bus.publish(AmountEdited(field="old", text="550,000"))
    unsubscribe()  # stop observing
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Type, TypeVar, Generic, Protocol

logger = logging.getLogger(__name__)


# ---------- Base marker ----------

class Event:
    """Marker base class for all events."""
    ...


# ---------- Events ----------

@dataclass(frozen=True)
class AmountEdited(Event):
    """Raw text typed into one of the input fields."""
    field: str      # "old" | "new" | "qeran"
    text: str


@dataclass(frozen=True)
class DirectionSwapped(Event):
    """Swap button pressed: old → new/qeran flips to new/qeran → old and back."""
    pass


@dataclass(frozen=True)
class LanguageChanged(Event):
    """UI language changed ('fa' | 'en')."""
    lang: str


@dataclass(frozen=True)
class ConversionUpdated(Event):
    """
    A fresh conversion is ready for rendering.
    'view' is a ConversionView already shaped for UI consumption.
    """
    view: Any


# ---------- Typing helpers ----------

E = TypeVar("E", bound=Event)


class EventHandler(Protocol, Generic[E]):
    """Callable protocol for event handlers."""
    def __call__(self, evt: E) -> None: ...


# ---------- EventBus ----------

class EventBus:
    """
    Type-based pub/sub event bus.

    - subscribe(EventType, handler) -> unsubscribe()
    - publish(EventInstance)

    Notes:
        * Handlers are invoked synchronously in the caller's thread.
        * Handlers are isolated: an exception in one handler is logged and
          won't stop the others.
    """

    def __init__(self) -> None:
        self._subs: Dict[Type[Event], List[Callable[[Event], None]]] = {}

    # ---- subscription ----
    def subscribe(self, etype: Type[E], handler: EventHandler[E]) -> Callable[[], None]:
        """
        Subscribe to a specific event type.

        Returns:
            A zero-arg function that, when called, unsubscribes this handler.
        """
        self._subs.setdefault(etype, []).append(handler)  # type: ignore[arg-type]

        def _unsubscribe() -> None:
            lst = self._subs.get(etype, [])
            if handler in lst:
                lst.remove(handler)  # type: ignore[arg-type]

        return _unsubscribe

    # ---- publish ----
    def publish(self, evt: Event) -> None:
        """Publish an event instance to the subscribers of its exact type."""
        handlers = list(self._subs.get(type(evt), []))
        logger.debug("publish %s to %d handler(s)", type(evt).__name__, len(handlers))
        for h in handlers:
            try:
                h(evt)  # type: ignore[arg-type]
            except Exception:
                # Never let a single handler break the chain
                logger.exception("event handler %r failed on %s", h, type(evt).__name__)

