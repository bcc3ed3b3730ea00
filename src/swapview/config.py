"""Declarative settings for a swappable image view.

Hosts describing a view with attributes (``src="a" prevSrc="b" loop="true"``)
can hand the raw mapping to :meth:`SwapViewConfig.from_attributes`; Python
callers can build the dataclass directly.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Mapping, Optional

from swapview.constants import DEFAULT_DURATION
from swapview.errors import ConfigError

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}

# attribute name -> dataclass field
ATTRIBUTE_FIELDS = {
    "src": "src",
    "prevSrc": "prev_src",
    "nextSrc": "next_src",
    "loop": "loop",
    "duration": "duration",
}


@dataclass(slots=True)
class SwapViewConfig:
    src: Optional[Hashable] = None
    prev_src: Optional[Hashable] = None
    next_src: Optional[Hashable] = None
    loop: bool = False
    duration: float = DEFAULT_DURATION

    @classmethod
    def from_attributes(cls, attrs: Mapping[str, Any]) -> SwapViewConfig:
        """Build a config from attribute names; unknown keys are ignored."""
        values: dict[str, Any] = {}
        for key, field_name in ATTRIBUTE_FIELDS.items():
            if key not in attrs:
                continue
            raw = attrs[key]
            if field_name == "loop":
                values[field_name] = _parse_bool(key, raw)
            elif field_name == "duration":
                values[field_name] = _parse_duration(key, raw)
            else:
                # Empty resource ids mean "not set".
                values[field_name] = raw if raw not in ("", None) else None
        return cls(**values)


def _parse_bool(key: str, raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ConfigError(key, raw, "expected a boolean")


def _parse_duration(key: str, raw: Any) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError) as ex:
        raise ConfigError(key, raw, "expected a number of seconds") from ex
    if value < 0:
        raise ConfigError(key, raw, "must not be negative")
    return value
