"""
Test Fakes Module

Provides fake hosts for testing the overlay without touching the disk.
"""

from tests.fakes.fake_hosts import FailingProbeHost, RecordingHost

__all__ = [
    "FailingProbeHost",
    "RecordingHost",
]
