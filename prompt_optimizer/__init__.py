"""
Prompt Optimizer — heuristic prompt quality analysis and rewriting.

Usage:
    from prompt_optimizer import PromptOptimizer
    optimizer = PromptOptimizer()
    analysis = optimizer.analyze("Your prompt here", intent="general")
    outcome = optimizer.optimize("Your prompt here", intent="general", tone=50)
"""

from prompt_optimizer.analyzer import PromptOptimizer
from prompt_optimizer.exceptions import (
    InvalidInputError,
    OptimizationInProgressError,
    PromptOptimizerError,
    StaleAnalysisError,
)
from prompt_optimizer.models import (
    AnalysisRecord,
    AnalyzeRequest,
    CharacterCounts,
    Classification,
    ClassifyRequest,
    ElementReport,
    FeatureSet,
    OptimizationOutcome,
    OptimizationRecord,
    OptimizationTier,
    OptimizeRequest,
    PromptTemplate,
    SynthesisResult,
)

__version__ = "0.1.0"

__all__ = [
    "PromptOptimizer",
    "PromptOptimizerError",
    "InvalidInputError",
    "StaleAnalysisError",
    "OptimizationInProgressError",
    "AnalysisRecord",
    "AnalyzeRequest",
    "CharacterCounts",
    "Classification",
    "ClassifyRequest",
    "ElementReport",
    "FeatureSet",
    "OptimizationOutcome",
    "OptimizationRecord",
    "OptimizationTier",
    "OptimizeRequest",
    "PromptTemplate",
    "SynthesisResult",
]
