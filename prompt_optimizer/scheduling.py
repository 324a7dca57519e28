"""
Caller-side scheduling helpers.

The engine is synchronous; these helpers give callers debounced live
analysis and a single in-flight optimize per session.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Awaitable, Callable, Optional

from prompt_optimizer import config, lexicon
from prompt_optimizer.analyzer import PromptOptimizer
from prompt_optimizer.exceptions import OptimizationInProgressError
from prompt_optimizer.models import AnalysisRecord

logger = logging.getLogger(__name__)

ResultCallback = Callable[[AnalysisRecord], Awaitable[None]]


class AnalysisDebouncer:
    """
    Runs analysis only after the text has settled.

    Each submit() restarts the settle timer. A result is delivered only if
    no newer submit() happened while it was being produced.
    """

    def __init__(
        self,
        on_result: ResultCallback,
        optimizer: Optional[PromptOptimizer] = None,
        delay_ms: int = config.ANALYSIS_DEBOUNCE_MS,
    ):
        self.on_result = on_result
        self.optimizer = optimizer or PromptOptimizer()
        self.delay = delay_ms / 1000
        self._generation = 0
        self._pending: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def submit(self, text: str, intent: str = lexicon.GENERAL_INTENT) -> None:
        """Schedule analysis of `text`, superseding any earlier request."""
        self.cancel()
        self._generation += 1
        self._pending = asyncio.get_running_loop().create_task(
            self._run(self._generation, text, intent)
        )

    def cancel(self) -> None:
        if self.pending:
            self._pending.cancel()
        self._pending = None

    async def flush(self) -> None:
        """Wait for the pending request, if any, to finish."""
        if self._pending is not None:
            try:
                await self._pending
            except asyncio.CancelledError:
                pass

    async def _run(self, generation: int, text: str, intent: str) -> None:
        await asyncio.sleep(self.delay)
        record = self.optimizer.analyze(text, intent)
        if generation != self._generation:
            logger.debug("Discarded superseded analysis (generation=%d)", generation)
            return
        # A later submit() must not interrupt delivery that already started
        await asyncio.shield(self.on_result(record))


class OptimizeGate:
    """Allows at most one optimize call in flight per session."""

    def __init__(self):
        self._in_flight: set[str] = set()

    def is_busy(self, session_id: str) -> bool:
        return session_id in self._in_flight

    def claim(self, session_id: str) -> None:
        """
        Mark the session busy.

        Raises:
            OptimizationInProgressError: the session is already busy
        """
        if session_id in self._in_flight:
            logger.warning("Rejected concurrent optimize for session=%s", session_id)
            raise OptimizationInProgressError(session_id)
        self._in_flight.add(session_id)

    def release(self, session_id: str) -> None:
        self._in_flight.discard(session_id)

    @asynccontextmanager
    async def hold(self, session_id: str):
        """Claim the session for the duration of the block."""
        self.claim(session_id)
        try:
            yield
        finally:
            self.release(session_id)
