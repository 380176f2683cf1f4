"""Testing fixtures – pytest fixtures for broker tests.

Register in your ``conftest.py``::

    pytest_plugins = ["mf_messaging.testing.fixtures"]
"""
from mf_messaging.testing.fixtures.broker import fake_event_source, recording_log_sink
from mf_messaging.testing.fixtures.log_config import restore_logging

__all__ = ["fake_event_source", "recording_log_sink", "restore_logging"]
