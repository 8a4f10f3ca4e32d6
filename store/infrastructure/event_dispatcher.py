# store/infrastructure/event_dispatcher.py
import logging
import threading

from store.domain.events import Event
from store.domain.interfaces import EventHandler

logger = logging.getLogger(__name__)


class EventDispatcher:
    """Synchronous in-process registry of event handlers keyed by event name.

    Handlers run on the caller's thread in registration order. An exception
    raised by a handler propagates out of ``notify`` and the handlers after
    it are not called for that event.
    """

    def __init__(self) -> None:
        self.handlers: dict[str, list[EventHandler]] = {}
        self._lock = threading.RLock()

    @property
    def event_handlers(self) -> dict[str, list[EventHandler]]:
        return self.handlers

    def register(self, event_name: str, handler: EventHandler) -> None:
        with self._lock:
            self.handlers.setdefault(event_name, []).append(handler)
        logger.debug("Registered %r for %s", handler, event_name)

    def unregister(self, event_name: str, handler: EventHandler) -> None:
        with self._lock:
            handlers = self.handlers.get(event_name)
            if handlers is None:
                return
            # the list object is kept so views returned earlier stay in sync
            handlers[:] = [h for h in handlers if h != handler]
        logger.debug("Unregistered %r from %s", handler, event_name)

    def unregister_all(self) -> None:
        with self._lock:
            self.handlers.clear()

    def notify(self, event: Event) -> None:
        event_name = event.name
        with self._lock:
            handlers = self.handlers.get(event_name)
            if not handlers:
                return
            handlers = list(handlers)
        logger.debug("Notifying %d handler(s) of %s", len(handlers), event_name)
        for handler in handlers:
            handler.handle(event)
