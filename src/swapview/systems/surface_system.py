from __future__ import annotations

from typing import Any

from esper import World

from swapview.components.surface import Surface
from swapview.components.swap_view import SwapView
from swapview.events.bus import EventBus, EVENT_SURFACE_IMAGE, EVENT_LAYOUT_CHANGED
from swapview.logging import get_logger

logger = get_logger(__name__)


class SurfaceSystem:
    """Applies engine surface commands to ``Surface`` components."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_SURFACE_IMAGE, self.on_surface_image)

    def on_surface_image(self, sender: Any, **payload: Any) -> None:
        entity = payload.get("surface")
        if not isinstance(entity, int) or not self.world.entity_exists(entity):
            return
        if not self.world.has_component(entity, Surface):
            return
        self.world.component_for_entity(entity, Surface).image = payload.get("image")

    def notify_resize(self, width: int, height: int) -> None:
        for _, surface in self.world.get_component(Surface):
            surface.width = float(width)
            surface.height = float(height)
        logger.debug("surfaces resized", width=width, height=height)
        self.event_bus.emit(EVENT_LAYOUT_CHANGED, width=width, height=height)
        for _, view in self.world.get_component(SwapView):
            view.engine.on_layout()
