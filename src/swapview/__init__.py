"""Image swapping engine with pluggable transition behaviors."""

from swapview.behaviors.base import Behavior, SwappableImageBehavior
from swapview.behaviors.horizontal import HorizontalSwapBehavior
from swapview.components.drawable_list import DrawableList
from swapview.components.transition import TimelineState
from swapview.config import SwapViewConfig
from swapview.errors import ConfigError, DrawableIndexError, SwapViewError, TimelineRepeatError
from swapview.events.bus import EventBus
from swapview.systems.engine import SwapEngine
from swapview.systems.timeline import TransitionTimeline

__all__ = [
    "Behavior",
    "ConfigError",
    "DrawableIndexError",
    "DrawableList",
    "EventBus",
    "HorizontalSwapBehavior",
    "SwapEngine",
    "SwapViewConfig",
    "SwapViewError",
    "SwappableImageBehavior",
    "TimelineRepeatError",
    "TimelineState",
    "TransitionTimeline",
]
