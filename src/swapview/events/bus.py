from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so engines not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# HOST CLOCK & LAYOUT
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float (seconds)
EVENT_LAYOUT_CHANGED = "layout_changed"    # payload: width=int, height=int


# ============================================================================
# TRANSITION TIMELINE
# ============================================================================
EVENT_TRANSITION_START = "transition_start"      # payload: timeline=TransitionTimeline, progress=float, is_reversing=bool
EVENT_TRANSITION_UPDATE = "transition_update"    # payload: timeline=TransitionTimeline, progress=float, is_reversing=bool
EVENT_TRANSITION_END = "transition_end"          # payload: timeline=TransitionTimeline, progress=float, is_reversing=bool
EVENT_TRANSITION_CANCEL = "transition_cancel"    # payload: timeline=TransitionTimeline, progress=float, is_reversing=bool


# ============================================================================
# SWAP ENGINE
# ============================================================================
EVENT_SURFACE_IMAGE = "surface_image"      # payload: surface=Any, image=Hashable
EVENT_SWAP_COMMITTED = "swap_committed"    # payload: engine=SwapEngine, previous_index=int, current_index=int, is_reversing=bool
