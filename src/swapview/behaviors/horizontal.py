from __future__ import annotations

from typing import TYPE_CHECKING

from esper import World

from swapview.components.surface import Surface
from swapview.logging import get_logger

if TYPE_CHECKING:
    from swapview.systems.engine import SwapEngine

logger = get_logger(__name__)


class HorizontalSwapBehavior:
    """Slides the current image out sideways while the next one slides in.

    Going forward the incoming image enters from the right and the current one
    leaves to the left; in reverse both directions flip. Surfaces are entity
    ids whose ``Surface`` component is written in place.
    """
    def __init__(self, world: World):
        self.world = world
        self.engine: SwapEngine | None = None

    def on_attach(self, engine: SwapEngine) -> None:
        self.engine = engine

    def on_reset(self, primary: int, secondary: int) -> None:
        logger.debug("horizontal reset")
        first = self._surface(primary)
        second = self._surface(secondary)
        # Park the secondary out of view below the primary.
        second.offset_x = 0.0
        second.offset_y = second.height
        if self.engine is not None and self.engine.current_image is not None:
            first.image = self.engine.current_image
        first.offset_x = 0.0
        first.offset_y = 0.0

    def on_start(self, is_reversing: bool, primary: int, secondary: int) -> None:
        logger.debug("horizontal start", reversing=is_reversing)
        self.on_reset(primary, secondary)
        second = self._surface(secondary)
        second.offset_x = self._entry_x(is_reversing, second)
        second.offset_y = 0.0

    def on_update(self, progress: float, is_reversing: bool, primary: int, secondary: int) -> None:
        first = self._surface(primary)
        second = self._surface(secondary)
        x0 = self._entry_x(is_reversing, second)
        x2 = first.width * (1 if is_reversing else -1)
        first.offset_x = progress * x2
        first.offset_y = 0.0
        second.offset_x = x0 + progress * (0.0 - x0)
        second.offset_y = 0.0

    def on_end(self, is_reversing: bool, primary: int, secondary: int) -> None:
        logger.debug("horizontal end", reversing=is_reversing)

    def on_cancel(self, primary: int, secondary: int) -> None:
        logger.debug("horizontal cancel")
        self.on_reset(primary, secondary)

    @staticmethod
    def _entry_x(is_reversing: bool, surface: Surface) -> float:
        return surface.width * (-1 if is_reversing else 1)

    def _surface(self, entity: int) -> Surface:
        return self.world.component_for_entity(entity, Surface)
