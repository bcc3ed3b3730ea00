from __future__ import annotations

from swapview.components.transition import TimelineState, Transition
from swapview.constants import DEFAULT_DURATION, DEFAULT_TICK
from swapview.errors import TimelineRepeatError
from swapview.events.bus import (EVENT_TICK, EventBus, EVENT_TRANSITION_START, EVENT_TRANSITION_UPDATE,
                                 EVENT_TRANSITION_END, EVENT_TRANSITION_CANCEL)
from swapview.logging import get_logger

logger = get_logger(__name__)


class TransitionTimeline:
    """Drives a single 0..1 progress value from host ticks.

    Lifecycle events go out on the bus with ``timeline=self`` so several
    timelines can share one bus. For one run the order is always start,
    zero or more updates with increasing progress, then exactly one of end or
    cancel. Progress is the elapsed fraction in both directions; reversing only
    flips ``is_reversing``.
    """
    def __init__(self, event_bus: EventBus, duration: float = DEFAULT_DURATION):
        self.event_bus = event_bus
        self.transition = Transition(duration=duration)
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    @property
    def state(self) -> TimelineState:
        return self.transition.state

    @property
    def progress(self) -> float:
        return self.transition.progress

    @property
    def duration(self) -> float:
        return self.transition.duration

    @duration.setter
    def duration(self, value: float) -> None:
        self.transition.duration = float(value)

    @property
    def is_running(self) -> bool:
        return self.transition.running

    @property
    def is_reversing(self) -> bool:
        return self.transition.reversing

    def start(self) -> bool:
        return self._begin(TimelineState.FORWARD)

    def reverse(self) -> bool:
        return self._begin(TimelineState.REVERSE)

    def cancel(self) -> bool:
        if not self.transition.running:
            return False
        reversing = self.transition.reversing
        self.reset()
        logger.debug("timeline cancelled", reversing=reversing)
        self._emit(EVENT_TRANSITION_CANCEL, is_reversing=reversing)
        return True

    def reset(self) -> None:
        self.transition.state = TimelineState.IDLE
        self.transition.progress = 0.0

    def tick(self, dt: float) -> None:
        trans = self.transition
        if not trans.running:
            return
        if trans.duration > 0.0:
            trans.progress += max(0.0, dt) / trans.duration
        else:
            trans.progress = 1.0
        if trans.progress >= 1.0:
            trans.progress = 1.0
        reversing = trans.reversing
        self._emit(EVENT_TRANSITION_UPDATE, is_reversing=reversing)
        # A handler may have cancelled during the update.
        if trans.running and trans.progress >= 1.0:
            # Idle before END so handlers may start the next run straight away.
            trans.state = TimelineState.IDLE
            logger.debug("timeline ended", reversing=reversing)
            self._emit(EVENT_TRANSITION_END, is_reversing=reversing, progress=1.0)

    def detach(self) -> None:
        self.event_bus.unsubscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender, **kwargs):
        self.tick(kwargs.get('dt', DEFAULT_TICK))

    def on_repeat(self):
        raise TimelineRepeatError("transition timelines do not repeat")

    def _begin(self, state: TimelineState) -> bool:
        if self.transition.running:
            logger.debug("timeline already running", state=self.transition.state.name)
            return False
        self.transition.state = state
        self.transition.progress = 0.0
        logger.debug("timeline started", state=state.name, duration=self.transition.duration)
        self._emit(EVENT_TRANSITION_START, is_reversing=state is TimelineState.REVERSE)
        return True

    def _emit(self, name: str, *, is_reversing: bool, progress: float | None = None):
        self.event_bus.emit(
            name,
            timeline=self,
            progress=self.transition.progress if progress is None else progress,
            is_reversing=is_reversing,
        )
