"""Behavior-facing lifecycle events.

The engine never calls behavior hooks directly; it builds one of the frozen
event records below and hands it to :func:`dispatch`, which routes it to the
matching ``on_*`` method.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from swapview.behaviors.base import Behavior
    from swapview.systems.engine import SwapEngine


@dataclass(frozen=True, slots=True)
class Attach:
    engine: SwapEngine


@dataclass(frozen=True, slots=True)
class Reset:
    primary: Any
    secondary: Any


@dataclass(frozen=True, slots=True)
class Start:
    is_reversing: bool
    primary: Any
    secondary: Any


@dataclass(frozen=True, slots=True)
class Update:
    progress: float
    is_reversing: bool
    primary: Any
    secondary: Any


@dataclass(frozen=True, slots=True)
class End:
    is_reversing: bool
    primary: Any
    secondary: Any


@dataclass(frozen=True, slots=True)
class Cancel:
    primary: Any
    secondary: Any


SwapEvent = Union[Attach, Reset, Start, Update, End, Cancel]


def dispatch(behavior: Behavior, event: SwapEvent) -> None:
    match event:
        case Attach(engine):
            behavior.on_attach(engine)
        case Reset(primary, secondary):
            behavior.on_reset(primary, secondary)
        case Start(is_reversing, primary, secondary):
            behavior.on_start(is_reversing, primary, secondary)
        case Update(progress, is_reversing, primary, secondary):
            behavior.on_update(progress, is_reversing, primary, secondary)
        case End(is_reversing, primary, secondary):
            behavior.on_end(is_reversing, primary, secondary)
        case Cancel(primary, secondary):
            behavior.on_cancel(primary, secondary)
        case _:
            raise TypeError(f"unknown swap event: {event!r}")
