"""Threshold evaluator.

Maps a weather snapshot to per-factor assessments and an overall verdict. The
evaluator is pure: thresholds are passed in, nothing is read from or written
to process-wide state, and invalid input is reported in the result rather than
raised.

Example:
    ```python
    result = evaluate(snapshot)
    if result.ok:
        print(result.recommendation.overall)
    else:
        for error in result.errors:
            print(error.field, error.reason)
    ```
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from weather_gonogo.models.aviation import AviationAssessment
from weather_gonogo.models.recommendation import ConditionAssessment, Recommendation
from weather_gonogo.models.weather import WeatherSnapshot
from weather_gonogo.rules.conditions import FACTOR_SPECS
from weather_gonogo.rules.thresholds import DEFAULT_THRESHOLDS, ThresholdSet


class InvalidSnapshot(BaseModel):
    """A snapshot field that cannot be evaluated."""

    field: str
    reason: str
    value: Any = None


class InvalidSnapshotError(ValueError):
    """Raised by EvaluationResult.unwrap() when the snapshot was invalid."""

    def __init__(self, errors: list[InvalidSnapshot]):
        fields = ", ".join(f"{e.field} ({e.reason})" for e in errors)
        super().__init__(f"Invalid weather snapshot: {fields}")
        self.errors = errors


class EvaluationResult(BaseModel):
    """Result of evaluating a snapshot: a recommendation or the reasons why not."""

    recommendation: Recommendation | None = None
    errors: list[InvalidSnapshot] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.recommendation is not None and not self.errors

    def unwrap(self) -> Recommendation:
        """Return the recommendation or raise InvalidSnapshotError."""
        if self.recommendation is None or self.errors:
            raise InvalidSnapshotError(self.errors)
        return self.recommendation


def _coerce_snapshot(
    snapshot: WeatherSnapshot | Mapping[str, Any],
) -> tuple[WeatherSnapshot | None, list[InvalidSnapshot]]:
    if isinstance(snapshot, WeatherSnapshot):
        return snapshot, []
    if not isinstance(snapshot, Mapping):
        return None, [
            InvalidSnapshot(field="snapshot", reason="not a mapping", value=snapshot)
        ]

    # Strict: booleans and numeric strings are rejected, not coerced
    try:
        return WeatherSnapshot.model_validate(dict(snapshot), strict=True), []
    except ValidationError as e:
        errors = [
            InvalidSnapshot(
                field=".".join(str(part) for part in error["loc"]),
                reason=error["msg"],
                value=error.get("input"),
            )
            for error in e.errors()
        ]
        return None, errors


def validate_snapshot(snapshot: WeatherSnapshot) -> list[InvalidSnapshot]:
    """Check every assessed field is present and finite.

    A missing value is never treated as safe.
    """
    errors: list[InvalidSnapshot] = []
    for spec in FACTOR_SPECS:
        value = getattr(snapshot, spec.field)
        if value is None:
            errors.append(InvalidSnapshot(field=spec.field, reason="missing"))
        elif isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(
                InvalidSnapshot(field=spec.field, reason="not a number", value=value)
            )
        elif not math.isfinite(value):
            errors.append(
                InvalidSnapshot(field=spec.field, reason="not a finite number", value=value)
            )
    return errors


def evaluate(
    snapshot: WeatherSnapshot | Mapping[str, Any],
    thresholds: ThresholdSet = DEFAULT_THRESHOLDS,
    aviation: AviationAssessment | None = None,
) -> EvaluationResult:
    """Evaluate a snapshot against go/no-go thresholds.

    Args:
        snapshot: Weather snapshot, or a mapping of snapshot fields
        thresholds: Limits to evaluate against
        aviation: Optional forecast hazard assessment, appended last

    Returns:
        EvaluationResult holding either the recommendation or the invalid fields
    """
    parsed, errors = _coerce_snapshot(snapshot)
    if parsed is None:
        return EvaluationResult(errors=errors)

    errors = validate_snapshot(parsed)
    if errors:
        return EvaluationResult(errors=errors)

    assessments: list[ConditionAssessment] = [
        spec.assess(getattr(parsed, spec.field), thresholds) for spec in FACTOR_SPECS
    ]
    recommendation = Recommendation(assessments=assessments)
    if aviation is not None:
        recommendation = recommendation.with_assessment(aviation.to_condition())

    return EvaluationResult(recommendation=recommendation)
