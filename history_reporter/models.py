"""Pydantic models for history data."""

from __future__ import annotations
from pydantic import BaseModel, Field

from prompt_optimizer.models import OptimizationRecord


class HistoryPage(BaseModel):
    """Stored optimization records, newest first, plus the usage counter."""
    results: list[OptimizationRecord] = Field(default_factory=list)
    usage_count: int = 0
    capacity: int = 0


class HistoryOverview(BaseModel):
    """Aggregate figures over the stored history."""
    usage_count: int = 0
    history_size: int = 0
    avg_strength_score: float = 0.0
    avg_projected_score: float = 0.0
    avg_character_growth: float = 0.0
    tier_counts: dict[str, int] = Field(default_factory=dict)
