"""Recommendation models for go/no-go decisions."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, Field, computed_field


class Level(str, Enum):
    """Severity level of an assessment, ordered go < caution < no-go."""

    GO = "go"
    CAUTION = "caution"
    NO_GO = "no-go"

    @property
    def rank(self) -> int:
        return _LEVEL_RANK[self]

    @property
    def label(self) -> str:
        """Display label used by renderers (GO, CAUTION, NO-GO)."""
        return self.value.upper()

    # Compare by severity, not by the underlying string value
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def most_severe(cls, levels: Iterable[Level]) -> Level:
        """Return the most severe level, or GO when there are none."""
        return max(levels, default=cls.GO)


_LEVEL_RANK = {Level.GO: 0, Level.CAUTION: 1, Level.NO_GO: 2}


class Factor(str, Enum):
    """Assessed factors, declared in display order."""

    WIND_SPEED = "wind_speed"
    WIND_GUSTS = "wind_gusts"
    PRECIPITATION = "precipitation"
    SNOWFALL = "snowfall"
    VISIBILITY = "visibility"
    CLOUD_BASE = "cloud_base"
    AVIATION_HAZARD = "aviation_hazard"


class ConditionAssessment(BaseModel):
    """Assessment of a single factor."""

    factor: Factor
    label: str = Field(..., description="Human-readable factor name")
    value: str = Field(..., description="Formatted display value")
    level: Level


class Recommendation(BaseModel):
    """Overall go/no-go recommendation with per-factor assessments."""

    assessments: list[ConditionAssessment] = Field(
        default_factory=list, description="Assessments in fixed factor order"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def overall(self) -> Level:
        """Most severe level among all assessments (GO when empty)."""
        return Level.most_severe(a.level for a in self.assessments)

    def with_assessment(self, assessment: ConditionAssessment) -> Recommendation:
        """Return a copy with one more assessment appended."""
        return Recommendation(assessments=[*self.assessments, assessment])

    def get(self, factor: Factor) -> ConditionAssessment | None:
        for assessment in self.assessments:
            if assessment.factor == factor:
                return assessment
        return None

    def is_go(self) -> bool:
        return self.overall == Level.GO

    def is_no_go(self) -> bool:
        return self.overall == Level.NO_GO
