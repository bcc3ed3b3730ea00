from esper import World

from .events.bus import EventBus
from swapview.behaviors.base import Behavior
from swapview.behaviors.horizontal import HorizontalSwapBehavior
from swapview.components.surface import Surface
from swapview.components.swap_view import SwapView
from swapview.config import SwapViewConfig
from swapview.constants import PRIMARY_LAYER, SECONDARY_LAYER, WINDOW_WIDTH, WINDOW_HEIGHT
from swapview.systems.engine import SwapEngine


def create_world(
    event_bus: EventBus,
    config: SwapViewConfig | None = None,
    *,
    width: int = WINDOW_WIDTH,
    height: int = WINDOW_HEIGHT,
    behavior: Behavior | None = None,
) -> World:
    world = World()

    # Two full-size surfaces; the secondary starts parked out of view.
    primary = world.create_entity(Surface(width=width, height=height, layer=PRIMARY_LAYER))
    secondary = world.create_entity(
        Surface(width=width, height=height, offset_y=height, layer=SECONDARY_LAYER)
    )

    engine = SwapEngine(
        primary,
        secondary,
        event_bus=event_bus,
        behavior=behavior or HorizontalSwapBehavior(world),
    )
    if config is not None:
        engine.configure(config)
    world.create_entity(SwapView(engine=engine, primary=primary, secondary=secondary))
    return world


def get_swap_view(world: World) -> SwapView | None:
    for _, view in world.get_component(SwapView):
        return view
    return None
