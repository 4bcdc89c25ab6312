"""Weather go/no-go checks for a location.

Geocodes a location, fetches current weather and optional METAR/TAF, and
evaluates the readings against operational thresholds.
"""

from weather_gonogo.models import (
    AviationAssessment,
    AviationReport,
    ConditionAssessment,
    Level,
    Recommendation,
    WeatherSnapshot,
)
from weather_gonogo.rules import (
    DEFAULT_THRESHOLDS,
    EvaluationResult,
    MatchMode,
    ThresholdSet,
    classify,
    evaluate,
)

__version__ = "0.1.0"

__all__ = [
    "AviationAssessment",
    "AviationReport",
    "ConditionAssessment",
    "Level",
    "Recommendation",
    "WeatherSnapshot",
    "DEFAULT_THRESHOLDS",
    "EvaluationResult",
    "MatchMode",
    "ThresholdSet",
    "classify",
    "evaluate",
]
