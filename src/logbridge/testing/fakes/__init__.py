"""Testing fakes – in-memory doubles for logbridge ports."""
from logbridge.testing.fakes.sink import RecordingSink

__all__ = ["RecordingSink"]
