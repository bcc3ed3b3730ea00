from __future__ import annotations

from typing import Any, Hashable, Iterable, Tuple

from swapview.behaviors.base import Behavior, SwappableImageBehavior
from swapview.components.drawable_list import DrawableList
from swapview.config import SwapViewConfig
from swapview.constants import DEFAULT_DURATION, NO_INDEX
from swapview.events.bus import (EventBus, EVENT_TRANSITION_START, EVENT_TRANSITION_UPDATE,
                                 EVENT_TRANSITION_END, EVENT_TRANSITION_CANCEL,
                                 EVENT_SURFACE_IMAGE, EVENT_SWAP_COMMITTED)
from swapview.events.swap import Attach, Cancel, End, Reset, Start, SwapEvent, Update, dispatch
from swapview.logging import get_logger
from swapview.systems.timeline import TransitionTimeline
from swapview.utils.index_ring import bound, next_index, previous_index

logger = get_logger(__name__)


class SwapEngine:
    """Index bookkeeping and animation lifecycle for swapping between images.

    The engine owns the drawable list, the current index and a
    :class:`TransitionTimeline`. It turns timeline events into behavior calls
    and commits the new index once a swap ends. Surfaces are opaque handles:
    the engine only announces which image belongs on which surface through
    ``surface_image`` bus events and passes the handles on to the behavior.

    Only one swap runs at a time. ``show_next``/``show_previous`` are ignored
    while swapping unless forced, in which case the running swap is cancelled
    (the behavior sees ``on_cancel`` and nothing is committed) before the new
    one starts from the still-current index. Replacing the list or moving the
    cursor mid-swap cancels the swap the same way.

    A finished swap delivers End, then Reset, then the ``swap_committed`` bus
    event. Show requests made from the End or Reset hooks are held and run
    after Reset, so a chained swap never interleaves with the one ending.
    """

    def __init__(
        self,
        primary: Any,
        secondary: Any,
        *,
        event_bus: EventBus | None = None,
        behavior: Behavior | None = None,
        loop: bool = False,
        duration: float = DEFAULT_DURATION,
    ):
        self.event_bus = event_bus or EventBus()
        self._primary = primary
        self._secondary = secondary
        self._drawables = DrawableList()
        self._current_index = NO_INDEX
        self._target_index = NO_INDEX
        self._reversing = False
        self._loop = loop
        # Set while End/Reset of a finished swap are dispatched; show requests wait.
        self._finishing = False
        self._pending_show: tuple[bool, bool] | None = None
        self._timeline = TransitionTimeline(self.event_bus, duration=duration)
        self.event_bus.subscribe(EVENT_TRANSITION_START, self.on_transition_start)
        self.event_bus.subscribe(EVENT_TRANSITION_UPDATE, self.on_transition_update)
        self.event_bus.subscribe(EVENT_TRANSITION_END, self.on_transition_end)
        self.event_bus.subscribe(EVENT_TRANSITION_CANCEL, self.on_transition_cancel)
        if behavior is None:
            behavior = SwappableImageBehavior()
        self._behavior: Behavior = behavior
        self.set_behavior(behavior)

    # ------------------------------------------------------------------ state

    @property
    def primary(self) -> Any:
        return self._primary

    @property
    def secondary(self) -> Any:
        return self._secondary

    @property
    def behavior(self) -> Behavior:
        return self._behavior

    @property
    def timeline(self) -> TransitionTimeline:
        return self._timeline

    @property
    def drawables(self) -> Tuple[Hashable, ...]:
        """Read-only snapshot of the image identifiers."""
        return self._drawables.as_tuple()

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_image(self) -> Hashable | None:
        if self._current_index == NO_INDEX:
            return None
        return self._drawables.get(self._current_index)

    @property
    def next_index(self) -> int:
        return next_index(self._current_index, len(self._drawables), self._loop)

    @property
    def previous_index(self) -> int:
        return previous_index(self._current_index, len(self._drawables), self._loop)

    @property
    def looping(self) -> bool:
        return self._loop

    @looping.setter
    def looping(self, loop: bool) -> None:
        self._loop = bool(loop)
        logger.debug("looping changed", looping=self._loop)

    @property
    def is_swapping(self) -> bool:
        return self._timeline.is_running

    # ---------------------------------------------------------- configuration

    def configure(self, config: SwapViewConfig) -> None:
        """Apply declarative settings: current, previous and next sources, looping, duration."""
        self.set_next(config.src)
        self.set_previous(config.prev_src)
        self.set_next(config.next_src)
        self.looping = config.loop
        self._timeline.duration = config.duration

    def set_behavior(self, behavior: Behavior) -> None:
        self._behavior = behavior
        logger.debug("behavior set", behavior=type(behavior).__name__)
        self._dispatch(Attach(self))

    def set_drawables(self, index: int, items: Iterable[Hashable]) -> None:
        self._drawables.replace_all(items)
        self.set_current_index(index)

    def set_current_index(self, index: int) -> None:
        # A running swap would land on a stale target.
        if self._timeline.is_running:
            self._timeline.cancel()
        # bound() lands on -1 for an empty list
        self._current_index = bound(index, 0, len(self._drawables) - 1)
        self._dispatch(Reset(self._primary, self._secondary))

    def set_next(self, image: Hashable | None) -> None:
        if image is None:
            return
        pos = self._drawables.insert_at(self._current_index + 1, image)
        self._shift_target(pos)
        self._current_index = max(0, self._current_index)
        logger.debug("next inserted", image=image, current_index=self._current_index, size=len(self._drawables))

    def set_previous(self, image: Hashable | None) -> None:
        if image is None:
            return
        pos = self._drawables.insert_at(max(0, self._current_index), image)
        self._shift_target(pos)
        self._current_index += 1
        logger.debug("previous inserted", image=image, current_index=self._current_index, size=len(self._drawables))

    def _shift_target(self, inserted_at: int) -> None:
        # Keep a running swap pointed at the image already bound to the secondary.
        if self._target_index != NO_INDEX and inserted_at <= self._target_index:
            self._target_index += 1

    def insert_next(self, image: Hashable | None, start: bool = False) -> bool:
        self.set_next(image)
        return self.show_next(False) if start else False

    def insert_previous(self, image: Hashable | None, start: bool = False) -> bool:
        self.set_previous(image)
        return self.show_previous(False) if start else False

    # ------------------------------------------------------------- swapping

    def show_next(self, force: bool = False) -> bool:
        logger.debug("show next", force=force, swapping=self.is_swapping)
        if self._finishing:
            return self._defer_show(reversing=False, force=force)
        if self.is_swapping and not force:
            return False
        return self._begin_swap(self.next_index, reversing=False)

    def show_previous(self, force: bool = False) -> bool:
        logger.debug("show previous", force=force, swapping=self.is_swapping)
        if self._finishing:
            return self._defer_show(reversing=True, force=force)
        if self.is_swapping and not force:
            return False
        return self._begin_swap(self.previous_index, reversing=True)

    def detach(self) -> None:
        """Stop listening on the bus; a running swap is cancelled first."""
        self._timeline.cancel()
        self._timeline.detach()
        self.event_bus.unsubscribe(EVENT_TRANSITION_START, self.on_transition_start)
        self.event_bus.unsubscribe(EVENT_TRANSITION_UPDATE, self.on_transition_update)
        self.event_bus.unsubscribe(EVENT_TRANSITION_END, self.on_transition_end)
        self.event_bus.unsubscribe(EVENT_TRANSITION_CANCEL, self.on_transition_cancel)

    def tick(self, dt: float) -> None:
        self._timeline.tick(dt)

    def on_layout(self) -> None:
        """Host hook: surfaces were measured or laid out again."""
        self._dispatch(Reset(self._primary, self._secondary))

    def _defer_show(self, *, reversing: bool, force: bool) -> bool:
        self._pending_show = (reversing, force)
        return True

    def _begin_swap(self, target: int, *, reversing: bool) -> bool:
        if target == self._current_index:
            logger.debug("no adjacent image", current_index=self._current_index, reversing=reversing)
            return False
        if self._timeline.is_running:
            self._timeline.cancel()
        self._target_index = target
        self._reversing = reversing
        self.event_bus.emit(EVENT_SURFACE_IMAGE, surface=self._primary,
                            image=self._drawables.get(self._current_index))
        self.event_bus.emit(EVENT_SURFACE_IMAGE, surface=self._secondary,
                            image=self._drawables.get(target))
        if reversing:
            return self._timeline.reverse()
        return self._timeline.start()

    # ------------------------------------------------------ timeline events

    def on_transition_start(self, sender, **kwargs):
        if kwargs.get('timeline') is not self._timeline:
            return
        self._dispatch(Start(self._reversing, self._primary, self._secondary))

    def on_transition_update(self, sender, **kwargs):
        if kwargs.get('timeline') is not self._timeline:
            return
        progress = kwargs.get('progress', self._timeline.progress)
        self._dispatch(Update(progress, self._reversing, self._primary, self._secondary))

    def on_transition_end(self, sender, **kwargs):
        if kwargs.get('timeline') is not self._timeline:
            return
        previous = self._current_index
        reversing = self._reversing
        self._current_index = self._target_index
        self._target_index = NO_INDEX
        logger.info("swap committed", previous_index=previous, current_index=self._current_index,
                    reversing=reversing)
        self._finishing = True
        try:
            self._dispatch(End(reversing, self._primary, self._secondary))
            self._dispatch(Reset(self._primary, self._secondary))
        finally:
            self._finishing = False
        pending, self._pending_show = self._pending_show, None
        self.event_bus.emit(EVENT_SWAP_COMMITTED, engine=self, previous_index=previous,
                            current_index=self._current_index, is_reversing=reversing)
        if pending is not None:
            pending_reversing, force = pending
            if pending_reversing:
                self.show_previous(force)
            else:
                self.show_next(force)

    def on_transition_cancel(self, sender, **kwargs):
        if kwargs.get('timeline') is not self._timeline:
            return
        self._target_index = NO_INDEX
        logger.info("swap cancelled", current_index=self._current_index, reversing=self._reversing)
        self._dispatch(Cancel(self._primary, self._secondary))

    def _dispatch(self, event: SwapEvent) -> None:
        dispatch(self._behavior, event)
