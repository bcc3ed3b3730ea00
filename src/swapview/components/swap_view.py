from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from swapview.systems.engine import SwapEngine

@dataclass(slots=True)
class SwapView:
    """Ties an engine to the two surface entities it swaps between."""
    engine: SwapEngine
    primary: int
    secondary: int
