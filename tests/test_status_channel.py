"""Tests for StatusChannel"""
from git_branch_explorer.models.status import Severity
from git_branch_explorer.services.status_channel import StatusChannel


class TestStatusChannel:
    """Test status replacement and lazy expiry."""

    def test_default_status(self, clock):
        channel = StatusChannel(clock=clock)
        assert channel.current_or_default() == ("Ready", Severity.INFO)

    def test_default_never_expires(self, clock):
        channel = StatusChannel(clock=clock)
        clock.advance(60)
        assert channel.is_expired() is False
        assert channel.current_or_default() == ("Ready", Severity.INFO)

    def test_set_is_visible_immediately(self, clock):
        channel = StatusChannel(clock=clock)
        channel.set("x", Severity.ERROR)
        assert channel.current_or_default() == ("x", Severity.ERROR)

    def test_expires_after_ttl(self, clock):
        channel = StatusChannel(clock=clock)
        channel.set("x", Severity.ERROR)

        clock.advance(3.01)

        assert channel.current_or_default() == ("Ready", Severity.INFO)
        assert channel.status.is_empty

    def test_exact_boundary_is_not_expired(self, clock):
        """Expiry needs the age to exceed the TTL."""
        channel = StatusChannel(ttl=3.0, clock=clock)
        channel.set("x", Severity.SUCCESS)

        clock.advance(3.0)

        assert channel.current_or_default() == ("x", Severity.SUCCESS)
        assert channel.current_or_default() == ("x", Severity.SUCCESS)

    def test_repeated_reads_are_stable(self, clock):
        channel = StatusChannel(clock=clock)
        channel.set("x", Severity.INFO)
        clock.advance(1)

        reads = [channel.current_or_default() for _ in range(3)]

        assert reads == [("x", Severity.INFO)] * 3

    def test_set_overwrites_and_restarts_age(self, clock):
        channel = StatusChannel(clock=clock)
        channel.set("first", Severity.INFO)
        clock.advance(2.5)
        channel.set("second", Severity.SUCCESS)
        clock.advance(2.5)

        assert channel.current_or_default() == ("second", Severity.SUCCESS)

    def test_custom_ttl(self, clock):
        channel = StatusChannel(ttl=0.5, clock=clock)
        channel.set("short", Severity.INFO)
        clock.advance(0.6)
        assert channel.current_or_default() == ("Ready", Severity.INFO)
