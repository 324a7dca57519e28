"""
History Reporter

Receives optimization records from the Prompt Optimizer and keeps a
bounded, newest-first history plus a running usage counter in a
key-value store. The engine never touches the store itself.
"""

import asyncio
import json
import logging
from typing import Optional

from pydantic import ValidationError

from history_reporter.models import HistoryOverview, HistoryPage
from history_reporter.store import KeyValueStore, MemoryKeyValueStore
from prompt_optimizer.config import HISTORY_CAPACITY, HISTORY_KEY, USAGE_KEY
from prompt_optimizer.models import OptimizationRecord

logger = logging.getLogger(__name__)


class HistoryReporter:
    """
    Stores optimization records and serves them back for display.

    History is a JSON list under one key, the usage counter an integer
    string under another; records beyond `capacity` are dropped oldest
    first.
    """

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        capacity: int = HISTORY_CAPACITY,
        history_key: str = HISTORY_KEY,
        usage_key: str = USAGE_KEY,
    ):
        self.store = store if store is not None else MemoryKeyValueStore()
        self.capacity = capacity
        self.history_key = history_key
        self.usage_key = usage_key
        # Serializes report() so concurrent optimizations do not overwrite each other
        self._lock = asyncio.Lock()

    async def initialize(self) -> None:
        """Prepare the underlying store."""
        initialize = getattr(self.store, "initialize", None)
        if initialize is not None:
            await initialize()
        logger.info("HistoryReporter initialized (capacity=%d)", self.capacity)

    async def report(self, record: OptimizationRecord) -> int:
        """
        Prepend a record to the history and bump the usage counter.

        Returns:
            The usage count after this record
        """
        async with self._lock:
            history = await self.load_history()
            history = [record, *history][: self.capacity]
            usage = await self.get_usage_count() + 1

            await self.store.set(
                self.history_key,
                json.dumps([item.model_dump(mode="json") for item in history]),
            )
            await self.store.set(self.usage_key, str(usage))
        logger.info(
            "Reported optimization id=%s tier=%s usage=%d",
            record.id,
            record.tier.value,
            usage,
        )
        return usage

    async def load_history(self) -> list[OptimizationRecord]:
        """Stored records, newest first. Unreadable entries are skipped."""
        raw = await self.store.get(self.history_key)
        if not raw:
            return []
        try:
            items = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Discarding unreadable history: %s", e)
            return []
        if not isinstance(items, list):
            logger.warning("Discarding history that is not a list")
            return []

        records = []
        for item in items:
            try:
                records.append(OptimizationRecord.model_validate(item))
            except ValidationError:
                logger.warning("Skipping malformed history entry")
                continue
        return records[: self.capacity]

    async def get_usage_count(self) -> int:
        raw = await self.store.get(self.usage_key)
        if raw is None:
            return 0
        try:
            return int(raw)
        except ValueError:
            logger.warning("Usage counter is not an integer: %r", raw)
            return 0

    async def get_page(self) -> HistoryPage:
        return HistoryPage(
            results=await self.load_history(),
            usage_count=await self.get_usage_count(),
            capacity=self.capacity,
        )

    async def get_record(self, record_id: str) -> Optional[OptimizationRecord]:
        """Load a single stored record by id, or None."""
        for record in await self.load_history():
            if record.id == record_id:
                return record
        return None

    async def get_overview(self) -> HistoryOverview:
        """Averages and tier counts over the stored history."""
        history = await self.load_history()
        usage = await self.get_usage_count()
        if not history:
            return HistoryOverview(usage_count=usage)

        n = len(history)
        tier_counts: dict[str, int] = {}
        for record in history:
            tier_counts[record.tier.value] = tier_counts.get(record.tier.value, 0) + 1

        growth = [
            (r.character_counts.optimized - r.character_counts.original)
            / r.character_counts.original
            * 100
            for r in history
            if r.character_counts.original > 0
        ]
        return HistoryOverview(
            usage_count=usage,
            history_size=n,
            avg_strength_score=round(sum(r.strength_score for r in history) / n, 1),
            avg_projected_score=round(sum(r.projected_score for r in history) / n, 1),
            avg_character_growth=round(sum(growth) / len(growth), 1) if growth else 0.0,
            tier_counts=tier_counts,
        )
