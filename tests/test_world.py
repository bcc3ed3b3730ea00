from swapview.behaviors.horizontal import HorizontalSwapBehavior
from swapview.components.surface import Surface
from swapview.config import SwapViewConfig
from swapview.events.bus import EventBus, EVENT_LAYOUT_CHANGED
from swapview.systems.surface_system import SurfaceSystem
from swapview.world import create_world, get_swap_view
from tests.helpers import RecordingBehavior, drive


def test_create_world_builds_surfaces_and_engine():
    bus = EventBus()
    world = create_world(bus, SwapViewConfig(src="b", prev_src="a", next_src="c"), width=320, height=200)
    view = get_swap_view(world)
    assert view is not None
    assert isinstance(view.engine.behavior, HorizontalSwapBehavior)
    assert view.engine.event_bus is bus
    assert view.engine.drawables == ("a", "b", "c")
    assert view.engine.current_index == 1
    primary = world.component_for_entity(view.primary, Surface)
    secondary = world.component_for_entity(view.secondary, Surface)
    assert (primary.width, primary.height) == (320, 200)
    assert secondary.layer > primary.layer


def test_surface_system_applies_engine_image_commands():
    bus = EventBus()
    world = create_world(bus, SwapViewConfig(duration=0.1))
    SurfaceSystem(world, bus)
    view = get_swap_view(world)
    view.engine.set_drawables(0, ["x", "y"])
    view.engine.show_next()
    secondary = world.component_for_entity(view.secondary, Surface)
    assert secondary.image == "y"
    drive(bus, 10)
    assert world.component_for_entity(view.primary, Surface).image == "y"


def test_surface_system_ignores_foreign_surfaces():
    bus = EventBus()
    world = create_world(bus)
    SurfaceSystem(world, bus)
    bus.emit("surface_image", surface="not-an-entity", image="z")
    bus.emit("surface_image", surface=999, image="z")
    assert all(surface.image is None for _, surface in world.get_component(Surface))


def test_resize_updates_surfaces_and_resets_engine():
    bus = EventBus()
    behavior = RecordingBehavior()
    world = create_world(bus, behavior=behavior)
    system = SurfaceSystem(world, bus)
    layout = {}
    bus.subscribe(EVENT_LAYOUT_CHANGED, lambda s, **k: layout.update(k))
    behavior.clear()

    system.notify_resize(640, 480)

    assert layout == {"width": 640, "height": 480}
    assert all(s.width == 640 and s.height == 480 for _, s in world.get_component(Surface))
    assert behavior.names() == ["reset"]
