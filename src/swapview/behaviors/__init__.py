from swapview.behaviors.base import Behavior, SwappableImageBehavior
from swapview.behaviors.horizontal import HorizontalSwapBehavior

__all__ = [
    "Behavior",
    "SwappableImageBehavior",
    "HorizontalSwapBehavior",
]
