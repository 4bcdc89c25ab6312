"""Aviation report models (METAR/TAF)."""

from __future__ import annotations

from pydantic import BaseModel, Field

from weather_gonogo.models.recommendation import ConditionAssessment, Factor, Level

TAF_HAZARD_LABEL = "TAF hazards"


class AviationAssessment(BaseModel):
    """Hazard classification derived from forecast text."""

    label: str = TAF_HAZARD_LABEL
    level: Level
    reason: str
    matched_tokens: list[str] = Field(
        default_factory=list, description="Codes of the tokens that decided the level"
    )

    def to_condition(self) -> ConditionAssessment:
        """Render as a condition line appended after the weather factors."""
        return ConditionAssessment(
            factor=Factor.AVIATION_HAZARD,
            label=self.label,
            value=self.reason,
            level=self.level,
        )


class AviationReport(BaseModel):
    """Raw aviation texts for the nearest station.

    Fetched fresh for every request; never cached.
    """

    station_id: str | None = None
    metar: str | None = None
    taf: str | None = None
    assessment: AviationAssessment | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.station_id or self.metar or self.taf)
