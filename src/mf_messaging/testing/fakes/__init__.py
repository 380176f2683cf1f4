"""Testing fakes – in-memory doubles for the broker's ports."""
from mf_messaging.testing.fakes.event_source import InMemoryEventSource, InMemorySubscription
from mf_messaging.testing.fakes.log_sink import RecordingLogSink

__all__ = ["InMemoryEventSource", "InMemorySubscription", "RecordingLogSink"]
