from dataclasses import dataclass
from enum import Enum, auto

from swapview.constants import DEFAULT_DURATION


class TimelineState(Enum):
    IDLE = auto()
    FORWARD = auto()
    REVERSE = auto()


@dataclass(slots=True)
class Transition:
    progress: float = 0.0  # elapsed fraction 0..1 in either direction
    state: TimelineState = TimelineState.IDLE
    duration: float = DEFAULT_DURATION  # seconds

    @property
    def running(self) -> bool:
        return self.state is not TimelineState.IDLE

    @property
    def reversing(self) -> bool:
        return self.state is TimelineState.REVERSE
