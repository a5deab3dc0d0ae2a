"""Queued pub/sub bus for cues and effect requests, flushed once per tick."""
from __future__ import annotations

from typing import Any, Callable, Iterable

from arcduel_signal import cues

_Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Collects signals raised during a tick or between ticks.

    Nothing reaches subscribers until ``flush()``; handlers registered for a
    name run in subscription order.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def subscribe_many(self, signal_names: Iterable[str], handler: _Handler) -> None:
        for name in signal_names:
            self.subscribe(name, handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def request_particles(self, x: float, y: float, count: int) -> None:
        """Queue a spark burst at (x, y) with the standard emission ranges."""
        self.publish(
            cues.PARTICLES,
            x=x,
            y=y,
            count=count,
            speed_min=cues.SPARK_SPEED[0],
            speed_max=cues.SPARK_SPEED[1],
            life_min=cues.SPARK_LIFE[0],
            life_max=cues.SPARK_LIFE[1],
        )

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, [])):
                handler(signal_name, data)

    def clear(self) -> None:
        self._queue.clear()
