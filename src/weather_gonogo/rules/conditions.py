"""Per-factor rule definitions.

Each factor owns an ordered tuple of rules. Rules are checked in order and the
first one whose comparison holds decides the level; no-go rules come before
caution rules so that a value over both limits is never reported as caution.
A factor whose rules all fail to match is assessed as GO.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from weather_gonogo.models.recommendation import ConditionAssessment, Factor, Level
from weather_gonogo.rules.thresholds import ThresholdSet


class ComparisonOperator(str, Enum):
    """Strict comparisons used by the threshold rules."""

    GREATER_THAN = "gt"
    LESS_THAN = "lt"

    def compare(self, actual: float, limit: float) -> bool:
        if self is ComparisonOperator.GREATER_THAN:
            return actual > limit
        return actual < limit


@dataclass(frozen=True)
class FactorRule:
    """A single (predicate, level) rule against a named threshold."""

    threshold: str  # ThresholdSet field name
    operator: ComparisonOperator
    level: Level

    def matches(self, value: float, thresholds: ThresholdSet) -> bool:
        return self.operator.compare(value, getattr(thresholds, self.threshold))


def above(threshold: str, level: Level) -> FactorRule:
    return FactorRule(threshold, ComparisonOperator.GREATER_THAN, level)


def below(threshold: str, level: Level) -> FactorRule:
    return FactorRule(threshold, ComparisonOperator.LESS_THAN, level)


@dataclass(frozen=True)
class FactorSpec:
    """How one snapshot field is assessed and displayed."""

    factor: Factor
    label: str
    field: str  # WeatherSnapshot field name
    unit: str
    rules: tuple[FactorRule, ...]
    rounded: bool = False

    def assess(self, value: float, thresholds: ThresholdSet) -> ConditionAssessment:
        level = Level.GO
        for rule in self.rules:
            if rule.matches(value, thresholds):
                level = rule.level
                break

        return ConditionAssessment(
            factor=self.factor,
            label=self.label,
            value=f"{format_value(value, self.rounded)} {self.unit}",
            level=level,
        )


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def format_value(value: float, rounded: bool = False) -> str:
    """Format a reading for display.

    Integral values print without a decimal part (``12`` not ``12.0``);
    other values use the shortest representation that round-trips.
    """
    if rounded:
        return str(round_half_up(value))
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


# Display order is the order of this tuple.
FACTOR_SPECS: tuple[FactorSpec, ...] = (
    FactorSpec(
        factor=Factor.WIND_SPEED,
        label="Wind speed",
        field="wind_speed_ms",
        unit="m/s",
        rules=(
            above("wind_no_go", Level.NO_GO),
            above("wind_caution", Level.CAUTION),
        ),
    ),
    FactorSpec(
        factor=Factor.WIND_GUSTS,
        label="Wind gusts",
        field="wind_gust_ms",
        unit="m/s",
        rules=(above("gust_no_go", Level.NO_GO),),
    ),
    FactorSpec(
        factor=Factor.PRECIPITATION,
        label="Precipitation",
        field="precipitation_mm_h",
        unit="mm/h",
        rules=(
            above("rain_no_go", Level.NO_GO),
            above("rain_caution", Level.CAUTION),
        ),
    ),
    FactorSpec(
        factor=Factor.SNOWFALL,
        label="Snowfall",
        field="snowfall_mm_h",
        unit="mm/h",
        rules=(above("snow_no_go", Level.NO_GO),),
    ),
    FactorSpec(
        factor=Factor.VISIBILITY,
        label="Visibility",
        field="visibility_m",
        unit="m",
        rules=(below("min_visibility", Level.NO_GO),),
        rounded=True,
    ),
    FactorSpec(
        factor=Factor.CLOUD_BASE,
        label="Cloud base",
        field="cloud_base_m",
        unit="m",
        rules=(below("min_cloud_base", Level.NO_GO),),
        rounded=True,
    ),
)
