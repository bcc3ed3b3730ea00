from __future__ import annotations

import arcade
from esper import World

from swapview.components.surface import Surface
from swapview.constants import LABEL_FONT_SIZE
from swapview.rendering.palette import image_color


class SurfaceRenderer:
    """Draws each surface as a swatch labelled with its image identifier."""

    def __init__(self, world: World, window):
        self.world = world
        self.window = window

    def process(self):
        surfaces = sorted(self.world.get_component(Surface), key=lambda pair: pair[1].layer)
        for _, surface in surfaces:
            if surface.image is None:
                continue
            left = surface.offset_x
            bottom = surface.offset_y
            # Skip surfaces parked entirely outside the window.
            if left >= self.window.width or left + surface.width <= 0:
                continue
            if bottom >= self.window.height or bottom + surface.height <= 0:
                continue
            arcade.draw_lbwh_rectangle_filled(left, bottom, surface.width, surface.height,
                                              image_color(surface.image))
            arcade.draw_text(
                str(surface.image),
                left + surface.width / 2,
                bottom + surface.height / 2,
                arcade.color.WHITE,
                LABEL_FONT_SIZE,
                anchor_x="center",
                anchor_y="center",
            )
