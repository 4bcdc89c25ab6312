"""Go/no-go rules: thresholds, the threshold evaluator and the TAF hazard classifier."""

from weather_gonogo.rules.engine import (
    EvaluationResult,
    InvalidSnapshot,
    InvalidSnapshotError,
    evaluate,
)
from weather_gonogo.rules.conditions import (
    FACTOR_SPECS,
    FactorRule,
    FactorSpec,
)
from weather_gonogo.rules.hazards import (
    CAUTION_TOKENS,
    SEVERE_TOKENS,
    HazardToken,
    MatchMode,
    classify,
)
from weather_gonogo.rules.thresholds import DEFAULT_THRESHOLDS, ThresholdSet

__all__ = [
    "EvaluationResult",
    "InvalidSnapshot",
    "InvalidSnapshotError",
    "evaluate",
    "FACTOR_SPECS",
    "FactorRule",
    "FactorSpec",
    "CAUTION_TOKENS",
    "SEVERE_TOKENS",
    "HazardToken",
    "MatchMode",
    "classify",
    "DEFAULT_THRESHOLDS",
    "ThresholdSet",
]
