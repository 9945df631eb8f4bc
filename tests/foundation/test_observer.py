from __future__ import annotations

import pytest

from moneat.foundation.exceptions import InvalidProgressError
from moneat.foundation.observer import ProgressEvent, ProgressPublisher


class _Recorder:
    def __init__(self) -> None:
        self.events: list[ProgressEvent] = []

    def on_progress(self, event: ProgressEvent) -> None:
        self.events.append(event)


def test_publish_reaches_callables_and_observers() -> None:
    publisher = ProgressPublisher()
    seen: list[float] = []
    recorder = _Recorder()
    publisher.subscribe(lambda e: seen.append(e.progress))
    publisher.subscribe(recorder)

    event = publisher.publish(0.25, evaluations=250)

    assert seen == [0.25]
    assert recorder.events == [event]
    assert publisher.last_event == ProgressEvent(0.25, 250)


def test_unsubscribe_stops_delivery() -> None:
    publisher = ProgressPublisher()
    seen: list[float] = []
    handler = publisher.subscribe(lambda e: seen.append(e.progress))
    publisher.unsubscribe(handler)
    publisher.publish(0.5)
    assert seen == []
    assert len(publisher) == 0


@pytest.mark.parametrize("value", [-0.1, 1.5])
def test_publish_rejects_out_of_range_progress(value: float) -> None:
    with pytest.raises(InvalidProgressError):
        ProgressPublisher().publish(value)
