import pytest

from swapview.components.transition import TimelineState
from swapview.errors import TimelineRepeatError
from swapview.events.bus import (EventBus, EVENT_TRANSITION_START, EVENT_TRANSITION_UPDATE,
                                 EVENT_TRANSITION_END, EVENT_TRANSITION_CANCEL)
from swapview.systems.timeline import TransitionTimeline
from tests.helpers import drive

LIFECYCLE = {
    EVENT_TRANSITION_START: "start",
    EVENT_TRANSITION_UPDATE: "update",
    EVENT_TRANSITION_END: "end",
    EVENT_TRANSITION_CANCEL: "cancel",
}


def _record(bus):
    events = []
    for name, short in LIFECYCLE.items():
        bus.subscribe(name, lambda s, _short=short, **k: events.append((_short, k)))
    return events


def test_start_runs_to_end_with_monotonic_updates():
    bus = EventBus()
    timeline = TransitionTimeline(bus, duration=0.1)
    events = _record(bus)

    assert timeline.start() is True
    assert timeline.state is TimelineState.FORWARD
    drive(bus, 10, dt=0.02)

    names = [name for name, _ in events]
    assert names[0] == "start"
    assert names[-1] == "end"
    assert names.count("end") == 1
    assert set(names[1:-1]) == {"update"}
    progress = [payload["progress"] for name, payload in events if name == "update"]
    assert progress == sorted(progress)
    assert progress[-1] == pytest.approx(1.0)
    assert all(payload["timeline"] is timeline for _, payload in events)
    assert all(payload["is_reversing"] is False for _, payload in events)
    assert timeline.state is TimelineState.IDLE
    assert not timeline.is_running


def test_reverse_flags_direction_and_keeps_progress_increasing():
    bus = EventBus()
    timeline = TransitionTimeline(bus, duration=0.1)
    events = _record(bus)

    assert timeline.reverse() is True
    assert timeline.is_reversing
    drive(bus, 3, dt=0.02)
    progress = [payload["progress"] for name, payload in events if name == "update"]
    assert progress == pytest.approx([0.2, 0.4, 0.6])
    assert all(payload["is_reversing"] for _, payload in events)


def test_start_while_running_is_noop():
    bus = EventBus()
    timeline = TransitionTimeline(bus, duration=0.1)
    events = _record(bus)

    timeline.start()
    drive(bus, 2, dt=0.02)
    assert timeline.start() is False
    assert timeline.reverse() is False
    assert [name for name, _ in events].count("start") == 1
    assert timeline.progress == pytest.approx(0.4)


def test_cancel_emits_cancel_without_end():
    bus = EventBus()
    timeline = TransitionTimeline(bus, duration=0.1)
    events = _record(bus)

    timeline.start()
    drive(bus, 2, dt=0.02)
    assert timeline.cancel() is True
    drive(bus, 10, dt=0.02)

    names = [name for name, _ in events]
    assert names == ["start", "update", "update", "cancel"]
    assert timeline.state is TimelineState.IDLE
    assert timeline.progress == 0.0


def test_cancel_when_idle_does_nothing():
    bus = EventBus()
    timeline = TransitionTimeline(bus)
    events = _record(bus)
    assert timeline.cancel() is False
    assert events == []


def test_ticks_while_idle_emit_nothing():
    bus = EventBus()
    timeline = TransitionTimeline(bus)
    events = _record(bus)
    drive(bus, 5)
    timeline.tick(0.5)
    assert events == []


def test_zero_duration_completes_on_first_tick():
    bus = EventBus()
    timeline = TransitionTimeline(bus, duration=0.0)
    events = _record(bus)
    timeline.start()
    timeline.tick(0.0)
    assert [name for name, _ in events] == ["start", "update", "end"]


def test_tick_without_dt_uses_default_frame():
    bus = EventBus()
    timeline = TransitionTimeline(bus, duration=1.0)
    timeline.start()
    bus.emit("tick")
    assert 0.0 < timeline.progress < 0.1


def test_timeline_can_restart_after_end():
    bus = EventBus()
    timeline = TransitionTimeline(bus, duration=0.04)
    events = _record(bus)
    timeline.start()
    drive(bus, 2, dt=0.02)
    assert timeline.reverse() is True
    drive(bus, 2, dt=0.02)
    assert [name for name, _ in events].count("end") == 2


def test_repeat_is_a_contract_violation():
    timeline = TransitionTimeline(EventBus())
    with pytest.raises(TimelineRepeatError):
        timeline.on_repeat()


def test_reset_returns_to_idle_silently():
    bus = EventBus()
    timeline = TransitionTimeline(bus, duration=0.1)
    timeline.start()
    drive(bus, 1)
    events = _record(bus)
    timeline.reset()
    assert timeline.state is TimelineState.IDLE
    assert timeline.progress == 0.0
    assert events == []


def test_detached_timeline_ignores_bus_ticks():
    bus = EventBus()
    timeline = TransitionTimeline(bus, duration=0.1)
    timeline.start()
    drive(bus, 1)
    progress = timeline.progress
    timeline.detach()
    drive(bus, 10)
    assert timeline.progress == progress
    timeline.tick(0.1)
    assert timeline.state is TimelineState.IDLE
