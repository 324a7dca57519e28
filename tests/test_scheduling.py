"""Tests for debounced analysis and the optimize gate."""

import asyncio

import pytest

from prompt_optimizer.exceptions import OptimizationInProgressError
from prompt_optimizer.features import fingerprint
from prompt_optimizer.scheduling import AnalysisDebouncer, OptimizeGate


class TestAnalysisDebouncer:
    @pytest.fixture
    def received(self):
        return []

    @pytest.fixture
    def debouncer(self, received, optimizer):
        async def on_result(record):
            received.append(record)

        return AnalysisDebouncer(on_result, optimizer=optimizer, delay_ms=30)

    @pytest.mark.asyncio
    async def test_only_latest_text_is_analyzed(self, debouncer, received):
        debouncer.submit("Write a", "creative")
        debouncer.submit("Write a story", "creative")
        debouncer.submit("Write a story about a dragon", "creative")
        await debouncer.flush()

        assert len(received) == 1
        assert received[0].fingerprint == fingerprint("Write a story about a dragon")

    @pytest.mark.asyncio
    async def test_nothing_delivered_before_delay(self, debouncer, received):
        debouncer.submit("Write a story", "creative")
        await asyncio.sleep(0)
        assert received == []
        assert debouncer.pending
        await debouncer.flush()
        assert len(received) == 1

    @pytest.mark.asyncio
    async def test_edit_during_delay_restarts_timer(self, received, optimizer):
        async def on_result(record):
            received.append(record)

        debouncer = AnalysisDebouncer(on_result, optimizer=optimizer, delay_ms=300)
        debouncer.submit("first draft", "general")
        await asyncio.sleep(0.15)
        debouncer.submit("second draft", "general")
        await asyncio.sleep(0.15)
        # 300ms after the first submit, but only 150ms after the second
        assert received == []
        await debouncer.flush()
        assert [r.fingerprint for r in received] == [fingerprint("second draft")]

    @pytest.mark.asyncio
    async def test_cancel_discards_pending_request(self, debouncer, received):
        debouncer.submit("Write a story", "creative")
        debouncer.cancel()
        await asyncio.sleep(0.05)
        assert received == []
        assert not debouncer.pending

    @pytest.mark.asyncio
    async def test_separate_pauses_deliver_separately(self, debouncer, received):
        debouncer.submit("one", "general")
        await debouncer.flush()
        debouncer.submit("two", "general")
        await debouncer.flush()
        assert len(received) == 2


class TestOptimizeGate:
    @pytest.mark.asyncio
    async def test_second_call_for_same_session_is_rejected(self):
        gate = OptimizeGate()
        async with gate.hold("s1"):
            assert gate.is_busy("s1")
            with pytest.raises(OptimizationInProgressError) as exc_info:
                async with gate.hold("s1"):
                    pass
            assert exc_info.value.status_code == 409
        assert not gate.is_busy("s1")

    @pytest.mark.asyncio
    async def test_sessions_are_independent(self):
        gate = OptimizeGate()
        async with gate.hold("s1"):
            async with gate.hold("s2"):
                assert gate.is_busy("s1") and gate.is_busy("s2")

    @pytest.mark.asyncio
    async def test_released_after_error(self):
        gate = OptimizeGate()
        with pytest.raises(RuntimeError):
            async with gate.hold("s1"):
                raise RuntimeError("boom")
        assert not gate.is_busy("s1")

    def test_claim_and_release(self):
        gate = OptimizeGate()
        gate.claim("s1")
        with pytest.raises(OptimizationInProgressError):
            gate.claim("s1")
        gate.release("s1")
        gate.claim("s1")
