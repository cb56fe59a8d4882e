"""Queue-then-flush signal bus for presentation events."""
from __future__ import annotations

from collections import defaultdict
from itertools import chain
from typing import Any, Callable

_Handler = Callable[[str, dict[str, Any]], None]

ALL = "*"


class SignalBus:
    """Signals published during a tick are delivered together on ``flush``.

    Handlers subscribed under ``ALL`` receive every signal after the
    named handlers have run.
    """

    def __init__(self) -> None:
        self._handlers: defaultdict[str, list[_Handler]] = defaultdict(list)
        self._outbox: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._handlers[signal_name].append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        listeners = self._handlers.get(signal_name, [])
        if handler in listeners:
            listeners.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._outbox.append((signal_name, data))

    def pending(self) -> list[str]:
        return [name for name, _ in self._outbox]

    def flush(self) -> None:
        """Deliver everything queued so far.

        Signals published by a handler wait for the next flush.
        """
        delivering, self._outbox = self._outbox, []
        for signal_name, data in delivering:
            listeners = chain(
                tuple(self._handlers.get(signal_name, ())),
                tuple(self._handlers.get(ALL, ())),
            )
            for handler in listeners:
                handler(signal_name, data)

    def clear(self) -> None:
        self._outbox.clear()
