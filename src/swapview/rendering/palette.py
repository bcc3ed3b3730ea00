from __future__ import annotations

import zlib
from typing import Hashable, Optional, Tuple

# Muted palette so labels stay readable on every swatch.
PALETTE: Tuple[Tuple[int, int, int], ...] = (
    (63, 127, 59),
    (179, 18, 42),
    (216, 155, 38),
    (165, 139, 234),
    (123, 62, 133),
    (70, 110, 160),
    (226, 62, 160),
    (64, 160, 150),
)
EMPTY_COLOR = (40, 40, 40)


def image_color(image: Optional[Hashable]) -> Tuple[int, int, int]:
    """Stable swatch colour for an image identifier (independent of hash seeding)."""
    if image is None:
        return EMPTY_COLOR
    checksum = zlib.crc32(repr(image).encode("utf-8"))
    return PALETTE[checksum % len(PALETTE)]
