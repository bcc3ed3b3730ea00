from dataclasses import dataclass
from typing import Hashable, Optional

@dataclass(slots=True)
class Surface:
    """Host-side render target the engine only refers to by entity id."""
    image: Optional[Hashable] = None
    offset_x: float = 0.0
    offset_y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    layer: int = 0
