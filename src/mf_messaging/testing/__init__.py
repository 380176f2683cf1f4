"""Testing support – fakes and fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["mf_messaging.testing.fixtures"]
"""

from mf_messaging.testing.fakes import (
    InMemoryEventSource,
    InMemorySubscription,
    RecordingLogSink,
)

__all__ = ["InMemoryEventSource", "InMemorySubscription", "RecordingLogSink"]
