import logging
from typing import Any, Callable, Iterable

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]


class EventSource:
    """Listener registry restricted to a fixed set of event names.

    Listeners run synchronously, in registration order. Exceptions raised by a
    listener propagate to whoever emitted the event.
    """

    def __init__(self, events: Iterable[str]):
        self._listeners: dict[str, list[Listener]] = {name: [] for name in events}

    @property
    def event_names(self) -> tuple[str, ...]:
        return tuple(self._listeners)

    def _check(self, event: str) -> list[Listener]:
        try:
            return self._listeners[event]
        except KeyError:
            raise ValueError(
                f"Unknown event '{event}'. Expected one of: {', '.join(self._listeners)}"
            ) from None

    def on(self, event: str, listener: Listener) -> Listener:
        """Register ``listener`` for ``event``. Returns the listener so it can be used as a decorator."""
        self._check(event).append(listener)
        return listener

    def off(self, event: str, listener: Listener) -> None:
        listeners = self._check(event)
        if listener in listeners:
            listeners.remove(listener)

    def listener_count(self, event: str) -> int:
        return len(self._check(event))

    def emit(self, event: str, *args: Any) -> bool:
        """Call every listener of ``event``. Returns True if there was at least one."""
        listeners = list(self._check(event))
        logger.debug(f"emit {event} -> {len(listeners)} listener(s)")
        for listener in listeners:
            listener(*args)
        return bool(listeners)
