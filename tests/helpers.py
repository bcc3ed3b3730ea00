from __future__ import annotations

from typing import Any

from swapview.events.bus import EVENT_TICK, EventBus


class RecordingBehavior:
    """Behavior that records every hook call as ``(name, args)``."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.engine = None

    def on_attach(self, engine) -> None:
        self.engine = engine
        self.calls.append(("attach", (engine,)))

    def on_reset(self, primary, secondary) -> None:
        self.calls.append(("reset", (primary, secondary)))

    def on_start(self, is_reversing, primary, secondary) -> None:
        self.calls.append(("start", (is_reversing, primary, secondary)))

    def on_update(self, progress, is_reversing, primary, secondary) -> None:
        self.calls.append(("update", (progress, is_reversing, primary, secondary)))

    def on_end(self, is_reversing, primary, secondary) -> None:
        self.calls.append(("end", (is_reversing, primary, secondary)))

    def on_cancel(self, primary, secondary) -> None:
        self.calls.append(("cancel", (primary, secondary)))

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def count(self, name: str) -> int:
        return sum(1 for n, _ in self.calls if n == name)

    def clear(self) -> None:
        self.calls.clear()


def drive(bus: EventBus, ticks: int, dt: float = 0.02) -> None:
    for _ in range(ticks):
        bus.emit(EVENT_TICK, dt=dt)
