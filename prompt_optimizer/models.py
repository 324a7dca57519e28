"""Pydantic models for prompt analysis and optimization data structures."""

from __future__ import annotations
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from prompt_optimizer import config


class FeatureSet(BaseModel):
    """Lexical and structural signals extracted from a prompt."""
    model_config = ConfigDict(frozen=True)

    word_count: int = 0
    sentence_count: int = 0
    avg_sentence_length: float = 0.0
    vague_word_count: int = 0
    pronoun_ratio: float = 0.0
    has_numbers: bool = False
    technical_patterns: tuple[str, ...] = Field(
        default=(), description="Technical pattern categories present: all_caps, dotted_identifier, underscore_identifier"
    )
    quantifier_hits: int = 0
    vague_adjective_hits: int = 0
    precise_descriptor_hits: int = 0
    connective_count: int = 0
    has_list_markers: bool = False
    has_sections: bool = False
    has_context: bool = False
    has_role: bool = False
    has_format: bool = False
    has_examples: bool = False
    has_constraints: bool = False
    has_output_spec: bool = False


class OptimizationTier(str, Enum):
    """Rewrite intensity, chosen from the composite score."""
    MINIMAL = "minimal"
    TARGETED = "targeted"
    FULL = "full"


class Classification(BaseModel):
    """Category label with the classifier's confidence."""
    model_config = ConfigDict(frozen=True)

    category: str
    confidence: int = Field(ge=0, le=100)
    keyword_hits: int = Field(default=0, ge=0)


class ElementReport(BaseModel):
    """Which canonical prompt elements are missing and which were detected."""
    model_config = ConfigDict(frozen=True)

    missing: tuple[str, ...] = ()
    detected: tuple[str, ...] = ()


class AnalysisRecord(BaseModel):
    """Snapshot of one analysis pass over a prompt."""
    model_config = ConfigDict(frozen=True)

    fingerprint: str = Field(description="SHA-256 of the analyzed text")
    intent: str
    clarity_score: int = Field(ge=1, le=10)
    specificity_score: int = Field(ge=1, le=10)
    structure_score: int = Field(ge=1, le=10)
    strength_score: int = Field(ge=1, le=10)
    category: str
    confidence: int = Field(ge=0, le=100)
    token_estimate: int = Field(ge=0)
    readability_score: int = Field(ge=0, le=100)
    missing_elements: tuple[str, ...] = ()
    detected_elements: tuple[str, ...] = ()
    weaknesses: tuple[str, ...] = Field(default=(), max_length=3)
    improvement_candidates: tuple[str, ...] = Field(default=(), max_length=5)


class SynthesisResult(BaseModel):
    """Rewritten prompt plus one improvement description per applied edit."""
    model_config = ConfigDict(frozen=True)

    optimized_text: str
    improvements: tuple[str, ...] = ()
    edits: tuple[str, ...] = Field(default=(), description="Element names applied, in order")
    tier: OptimizationTier
    projected_score: int = Field(ge=1, le=10)


class CharacterCounts(BaseModel):
    original: int = Field(ge=0)
    optimized: int = Field(ge=0)


class OptimizationRecord(BaseModel):
    """Immutable result of a single optimize call."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    original_text: str
    optimized_text: str
    improvements: tuple[str, ...] = ()
    intent: str
    platform: str
    tone: int = Field(ge=0, le=100)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    character_counts: CharacterCounts
    token_estimates: CharacterCounts
    tier: OptimizationTier
    strength_score: int = Field(ge=1, le=10)
    projected_score: int = Field(ge=1, le=10)
    weaknesses: tuple[str, ...] = ()


class OptimizationOutcome(BaseModel):
    """Either an OptimizationRecord or the reason the request was rejected."""
    ok: bool
    record: Optional[OptimizationRecord] = None
    error: Optional[str] = Field(default=None, description="'invalid_input' when rejected")
    message: Optional[str] = None


class PromptTemplate(BaseModel):
    """A starter prompt the user can load and then optimize."""
    id: str
    name: str
    description: str
    template: str
    category: str
    intent: str


# ── Request payloads ───────────────────────────────────────────


class AnalyzeRequest(BaseModel):
    """Request payload for prompt analysis."""
    prompt: str = Field(default="", description="The prompt to analyze (may be empty)")
    intent: str = Field(default="general", description="Declared task intent")


class ClassifyRequest(BaseModel):
    """Request payload for category classification."""
    prompt: str = Field(default="", description="The prompt to classify")


class OptimizeRequest(BaseModel):
    """Request payload for prompt optimization."""
    prompt: str = Field(description="The prompt to optimize")
    intent: str = Field(default="general", description="Declared task intent")
    platform: str = Field(default=config.DEFAULT_PLATFORM, description="Target AI platform")
    tone: int = Field(default=config.DEFAULT_TONE, ge=0, le=100, description="0 = casual, 100 = technical")
    session_id: str = Field(default="default", description="Caller session; one optimize in flight per session")
