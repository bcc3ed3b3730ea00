"""Arcade demo host for the swap engine.

Sets up the event bus, the esper world holding the surfaces, and an Arcade
window that feeds ticks and key presses to the engine.

Keys: Right/Space show the next image, Left the previous one, holding Shift
forces the swap even mid-animation, L toggles looping.
"""
from __future__ import annotations

import argparse
from typing import Sequence

import arcade
from arcade import Window, run, set_background_color, color

from swapview.config import SwapViewConfig
from swapview.constants import (DEFAULT_DURATION, HUD_FONT_SIZE, WINDOW_HEIGHT, WINDOW_TITLE,
                                WINDOW_WIDTH)
from swapview.events.bus import EVENT_TICK, EventBus
from swapview.logging import configure_logging, get_logger
from swapview.rendering.surface_renderer import SurfaceRenderer
from swapview.systems.surface_system import SurfaceSystem
from swapview.world import create_world, get_swap_view

logger = get_logger(__name__)

DEFAULT_IMAGES = ("dawn", "noon", "dusk", "night")


class SwapViewWindow(Window):
    def __init__(self, images: Sequence[str], index: int = 0, loop: bool = False,
                 duration: float = DEFAULT_DURATION):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(
            self.event_bus,
            SwapViewConfig(loop=loop, duration=duration),
            width=self.width,
            height=self.height,
        )
        self.view = get_swap_view(self.world)
        self.view.engine.set_drawables(index, images)
        self.surface_system = SurfaceSystem(self.world, self.event_bus)
        self.surface_renderer = SurfaceRenderer(self.world, self)
        set_background_color(color.BLACK)

    def on_resize(self, width: int, height: int):
        # Arcade may resize before __init__ finished wiring systems.
        if hasattr(self, "surface_system"):
            self.surface_system.notify_resize(width, height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.surface_renderer.process()
        engine = self.view.engine
        arcade.draw_text(
            f"{engine.current_index + 1}/{len(engine.drawables)}  loop={'on' if engine.looping else 'off'}",
            10,
            10,
            arcade.color.LIGHT_GRAY,
            HUD_FONT_SIZE,
        )

    def on_close(self):
        self.view.engine.detach()
        super().on_close()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        engine = self.view.engine
        force = bool(modifiers & arcade.key.MOD_SHIFT)
        if symbol in (arcade.key.RIGHT, arcade.key.SPACE):
            engine.show_next(force)
        elif symbol == arcade.key.LEFT:
            engine.show_previous(force)
        elif symbol == arcade.key.L:
            engine.looping = not engine.looping
        elif symbol in (arcade.key.ESCAPE, arcade.key.Q):
            self.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Swap between images with a sliding transition.")
    parser.add_argument("--images", nargs="+", default=list(DEFAULT_IMAGES),
                        help="image identifiers in display order")
    parser.add_argument("--index", type=int, default=0, help="index shown first (clamped)")
    parser.add_argument("--loop", action="store_true", help="wrap around at either end")
    parser.add_argument("--duration", type=float, default=DEFAULT_DURATION,
                        help="transition length in seconds")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    return parser


def main(argv: Sequence[str] | None = None):
    args = build_parser().parse_args(argv)
    configure_logging(log_level=args.log_level)
    logger.info("starting demo", images=args.images, index=args.index, loop=args.loop)
    SwapViewWindow(args.images, index=args.index, loop=args.loop, duration=args.duration)
    run()

if __name__ == "__main__":
    main()
