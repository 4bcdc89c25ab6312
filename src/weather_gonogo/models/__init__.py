"""Domain models for go/no-go weather checks."""

from weather_gonogo.models.location import Coordinates, Place
from weather_gonogo.models.weather import WeatherSnapshot
from weather_gonogo.models.recommendation import (
    ConditionAssessment,
    Factor,
    Level,
    Recommendation,
)
from weather_gonogo.models.aviation import AviationAssessment, AviationReport

__all__ = [
    # Location
    "Coordinates",
    "Place",
    # Weather
    "WeatherSnapshot",
    # Recommendation
    "ConditionAssessment",
    "Factor",
    "Level",
    "Recommendation",
    # Aviation
    "AviationAssessment",
    "AviationReport",
]
