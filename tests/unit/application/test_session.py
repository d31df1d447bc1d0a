"""
Unit tests for the application session wiring.
"""

import asyncio

from gobench_client.application import ApplicationSession
from gobench_client.exceptions import ApiConnectionError, ErrorCodes


class TestApplicationSession:
    def test_handles_registered_at_construction(self, fake_gateway):
        session = ApplicationSession(fake_gateway, poll_interval=1)
        snapshot = session.store.snapshot

        assert snapshot.create == session.dispatchers.create
        assert snapshot.clone == session.dispatchers.clone
        assert snapshot.delete == session.dispatchers.delete
        assert snapshot.cancel == session.dispatchers.cancel
        assert snapshot.apps is None

    def test_open_loads_and_starts_polling(self, fake_gateway):
        async def scenario():
            async with ApplicationSession(fake_gateway, poll_interval=1) as session:
                assert session.store.loading is False
                assert session.scheduler.running
                return session

        session = asyncio.run(scenario())
        assert not session.scheduler.running
        assert fake_gateway.count("list") == 1

    def test_poll_disabled(self, fake_gateway):
        async def scenario():
            async with ApplicationSession(fake_gateway, poll=False) as session:
                return session.scheduler.running

        assert asyncio.run(scenario()) is False

    def test_failed_initial_load_is_reported(self, fake_gateway):
        fake_gateway.failures["list"] = ApiConnectionError("list", "http://localhost:6891")
        session = ApplicationSession(fake_gateway, poll=False)

        assert asyncio.run(session.load()) is False
        assert session.store.apps is None
        assert session.error_surface.last.error_code == ErrorCodes.API_CONNECTION_FAILED

    def test_unexpected_load_failure_is_reported(self, fake_gateway):
        fake_gateway.failures["list"] = AttributeError("'str' object has no attribute 'items'")
        session = ApplicationSession(fake_gateway, poll=False)

        assert asyncio.run(session.load()) is False
        assert session.store.loading is True
        assert session.error_surface.last.error_code == ErrorCodes.API_UNEXPECTED

    def test_creation_form_follows_navigation(self, fake_gateway):
        async def scenario():
            async with ApplicationSession(fake_gateway, poll=False) as session:
                session.dispatchers.clone("smoke")
                return session.creation_form()

        form = asyncio.run(scenario())
        assert form.clone_of == "smoke"
        assert form.prefill_applied is True
        assert form.scenario == "// smoke ✓ 負荷\n"
