"""Test fakes for subprocess-driven flows."""

from tests.fakes.fake_subprocess import FakeSubprocess, cargo_listing

__all__ = [
    "FakeSubprocess",
    "cargo_listing",
]
