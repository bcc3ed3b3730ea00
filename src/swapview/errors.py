"""Exception types raised by the swap engine and its collaborators."""


class SwapViewError(Exception):
    """Base class for swapview errors."""


class DrawableIndexError(SwapViewError, IndexError):
    """Raised when a drawable is requested outside the list bounds.

    Attributes:
        index: The offending index.
        length: The list length at the time of the lookup.
    """

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"drawable index {index} out of range for length {length}")
        self.index = index
        self.length = length


class TimelineRepeatError(SwapViewError, RuntimeError):
    """Raised when a host asks a transition timeline to repeat."""


class ConfigError(SwapViewError, ValueError):
    """Raised when a configuration attribute cannot be parsed."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        super().__init__(f"invalid value for {key!r}: {value!r} ({reason})")
        self.key = key
        self.value = value
