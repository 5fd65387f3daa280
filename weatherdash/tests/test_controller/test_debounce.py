"""Tests for the single-slot debouncer."""

import asyncio

import pytest

from weatherdash.controller.debounce import Debouncer


class TestDebouncer:
    @pytest.mark.asyncio
    async def test_fires_after_quiet_period(self):
        fired = []

        async def cb():
            fired.append(True)

        d = Debouncer(0.02)
        d.schedule(cb)
        assert d.pending
        assert fired == []
        await d.wait()
        assert fired == [True]
        assert not d.pending

    @pytest.mark.asyncio
    async def test_only_latest_runs(self):
        fired = []

        def make(label):
            async def cb():
                fired.append(label)
            return cb

        d = Debouncer(0.03)
        for label in ["L", "Lo", "Lon"]:
            d.schedule(make(label))
            await asyncio.sleep(0.005)
        await d.wait()
        assert fired == ["Lon"]

    @pytest.mark.asyncio
    async def test_cancel(self):
        fired = []

        async def cb():
            fired.append(True)

        d = Debouncer(0.01)
        d.schedule(cb)
        d.cancel()
        await asyncio.sleep(0.03)
        assert fired == []
        assert not d.pending

    @pytest.mark.asyncio
    async def test_replacing_cancels_running_callback(self):
        finished = []

        async def slow():
            await asyncio.sleep(0.05)
            finished.append("slow")

        async def fast():
            finished.append("fast")

        d = Debouncer(0)
        first = d.schedule(slow)
        await asyncio.sleep(0.01)  # slow() is now mid-flight
        d.schedule(fast)
        await d.wait()
        await asyncio.sleep(0.06)
        assert first.cancelled()
        assert finished == ["fast"]

    @pytest.mark.asyncio
    async def test_wait_without_task(self):
        await Debouncer(0.01).wait()
