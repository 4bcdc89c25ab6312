"""Plain-text rendering of recommendations and briefings."""

from __future__ import annotations

from weather_gonogo.models.recommendation import Recommendation
from weather_gonogo.service import Briefing

METAR_UNAVAILABLE = "METAR unavailable from selected station."
TAF_UNAVAILABLE = "TAF unavailable for selected station."


def render_recommendation(recommendation: Recommendation) -> list[str]:
    lines = [f"Overall: {recommendation.overall.label}", ""]
    for assessment in recommendation.assessments:
        lines.append(
            f"  {assessment.label}: {assessment.value} - {assessment.level.label}"
        )
    return lines


def render_briefing(briefing: Briefing) -> str:
    """Render a briefing the way it is shown in the terminal."""
    lines = [
        f"Location: {briefing.place.display_name}",
        f"Observed at: {briefing.snapshot.observed_at or 'Unknown'}",
    ]

    report = briefing.aviation
    if report is not None:
        lines.append(f"Nearest weather.gov station: {report.station_id or 'Unavailable'}")

    lines.append("")
    lines.extend(render_recommendation(briefing.recommendation))

    if report is not None:
        lines.extend(
            [
                "",
                "Raw METAR/TAF below are the exact source texts used for aviation-context scoring.",
                "",
                "METAR:",
                f"  {report.metar or METAR_UNAVAILABLE}",
                "TAF:",
            ]
        )
        taf_lines = (report.taf or TAF_UNAVAILABLE).strip().splitlines()
        lines.extend(f"  {line}" for line in taf_lines)

    return "\n".join(lines)
