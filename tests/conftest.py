from mf_messaging.testing.fixtures import (  # noqa: F401
    fake_event_source,
    recording_log_sink,
    restore_logging,
)
