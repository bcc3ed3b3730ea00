from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from swapview.logging import get_logger

if TYPE_CHECKING:
    from swapview.systems.engine import SwapEngine

logger = get_logger(__name__)


@runtime_checkable
class Behavior(Protocol):
    """Visual swap strategy driven by a :class:`SwapEngine`.

    ``primary`` is the surface showing the current image and ``secondary`` the
    one swapping in. Both are opaque host handles. Behaviors may read engine
    state through the reference passed to ``on_attach`` but must change it only
    through the engine's public methods.
    """

    def on_attach(self, engine: SwapEngine) -> None:
        """Called once when the behavior is installed on an engine."""

    def on_reset(self, primary: Any, secondary: Any) -> None:
        """Re-anchor both surfaces on the current image (after layout or a swap)."""

    def on_start(self, is_reversing: bool, primary: Any, secondary: Any) -> None:
        """A swap is starting; ``is_reversing`` is True when showing the previous image."""

    def on_update(self, progress: float, is_reversing: bool, primary: Any, secondary: Any) -> None:
        """``progress`` runs 0..1 towards completion in either direction."""

    def on_end(self, is_reversing: bool, primary: Any, secondary: Any) -> None:
        """The swap completed and the engine has committed the new index."""

    def on_cancel(self, primary: Any, secondary: Any) -> None:
        """The swap was torn down before completing; nothing was committed."""


class SwappableImageBehavior:
    """Default behavior: tracks its engine and logs every lifecycle step."""

    def __init__(self):
        self.engine: SwapEngine | None = None

    def on_attach(self, engine: SwapEngine) -> None:
        self.engine = engine
        logger.debug("behavior attached", behavior=type(self).__name__)

    def on_reset(self, primary: Any, secondary: Any) -> None:
        index = self.engine.current_index if self.engine is not None else None
        logger.debug("behavior reset", current_index=index)

    def on_start(self, is_reversing: bool, primary: Any, secondary: Any) -> None:
        logger.debug("behavior start", reversing=is_reversing)

    def on_update(self, progress: float, is_reversing: bool, primary: Any, secondary: Any) -> None:
        logger.debug("behavior update", progress=progress, reversing=is_reversing)

    def on_end(self, is_reversing: bool, primary: Any, secondary: Any) -> None:
        logger.debug("behavior end", reversing=is_reversing)

    def on_cancel(self, primary: Any, secondary: Any) -> None:
        logger.debug("behavior cancel")
