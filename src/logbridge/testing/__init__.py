"""Testing support – fakes for exercising code that logs through logbridge."""

from logbridge.testing.fakes import RecordingSink

__all__ = ["RecordingSink"]
