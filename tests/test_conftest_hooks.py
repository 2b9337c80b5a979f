"""Tests for the async test runner hook in tests/conftest.py."""

from __future__ import annotations

import pytest

from conftest import pytest_pyfunc_call

_ran: list[str] = []


class TestPyfuncCallHook:
    """The hook must run async tests and leave sync tests to pytest."""

    def test_sync_item_is_left_to_pytest(self, request: pytest.FixtureRequest) -> None:
        """None from a firstresult hook means pytest still calls the test."""
        assert pytest_pyfunc_call(request.node) is None

    def test_sync_body_records_run(self) -> None:
        _ran.append("sync")

    async def test_async_body_records_run(self) -> None:
        _ran.append("async")

    def test_earlier_bodies_ran(self) -> None:
        """Bodies of the two tests above actually executed."""
        assert _ran == ["sync", "async"]
