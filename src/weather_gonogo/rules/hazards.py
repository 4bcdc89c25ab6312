"""Hazard token classifier for aviation forecast text (TAF).

Forecast text is free-form coded shorthand. Rather than parsing it, the
classifier scans for a curated set of hazard tokens in two tiers. Severe tokens
are always checked first, so text carrying both a severe and a caution token
is classified NO-GO.

## Matching modes

SUBSTRING (default)
    Plain substring test on the upper-cased text. Tokens carry a leading space
    so that most of them only match at the start of a group, but the bare
    ``G`` caution token matches anywhere, for example inside ``BECMG`` or a
    station id such as ``KGEG``. Known false-positive source, kept for
    compatibility.

WORD
    Each token must start a whitespace-delimited group. The bare ``G`` token
    is replaced by a wind group with gusts (``25015G25KT``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from weather_gonogo.models.aviation import AviationAssessment
from weather_gonogo.models.recommendation import Level


class MatchMode(str, Enum):
    """How hazard tokens are matched against forecast text."""

    SUBSTRING = "substring"
    WORD = "word"


@dataclass(frozen=True)
class HazardToken:
    """A hazard marker in forecast text."""

    code: str  # matched verbatim in SUBSTRING mode, leading space included
    meaning: str
    level: Level
    word_pattern: re.Pattern[str] | None = field(default=None, compare=False)

    def pattern(self) -> re.Pattern[str]:
        if self.word_pattern is not None:
            return self.word_pattern
        return re.compile(r"(?<!\S)" + re.escape(self.code.strip()))

    def matches(self, text: str, mode: MatchMode = MatchMode.SUBSTRING) -> bool:
        """Test upper-cased text for this token."""
        if mode is MatchMode.SUBSTRING:
            return self.code in text
        return self.pattern().search(text) is not None


SEVERE_TOKENS: tuple[HazardToken, ...] = (
    HazardToken(" TS", "thunderstorm", Level.NO_GO),
    HazardToken(" +TS", "heavy thunderstorm", Level.NO_GO),
    HazardToken(" FZRA", "freezing rain", Level.NO_GO),
    HazardToken(" +RA", "heavy rain", Level.NO_GO),
    HazardToken(" SN", "snow", Level.NO_GO),
    HazardToken(" FG", "fog", Level.NO_GO),
    HazardToken(" SQ", "squall", Level.NO_GO),
)

CAUTION_TOKENS: tuple[HazardToken, ...] = (
    HazardToken(" RA", "rain", Level.CAUTION),
    HazardToken(" BR", "mist", Level.CAUTION),
    HazardToken(" HZ", "haze", Level.CAUTION),
    HazardToken(
        "G",
        "gusts",
        Level.CAUTION,
        word_pattern=re.compile(r"(?<!\S)(?:\d{3}|VRB)\d{2,3}G\d{2,3}(?:KT|MPS)\b"),
    ),
    HazardToken(" BKN", "broken cloud", Level.CAUTION),
    HazardToken(" OVC", "overcast cloud", Level.CAUTION),
)

SEVERE_REASON = "TAF includes significant hazard tokens (e.g. TS/SN/FG/FZRA)."
CAUTION_REASON = "TAF includes potential reduced-operations indicators."
CLEAR_REASON = "TAF does not include configured hazard tokens."

# Severity order: a tier is only consulted when every earlier tier found nothing.
TOKEN_TIERS: tuple[tuple[Level, tuple[HazardToken, ...], str], ...] = (
    (Level.NO_GO, SEVERE_TOKENS, SEVERE_REASON),
    (Level.CAUTION, CAUTION_TOKENS, CAUTION_REASON),
)


def classify(
    forecast_text: str | None,
    mode: MatchMode = MatchMode.SUBSTRING,
) -> AviationAssessment | None:
    """Classify forecast text into a hazard level.

    Args:
        forecast_text: Raw TAF text, or None when unavailable
        mode: Token matching mode

    Returns:
        AviationAssessment, or None when there is no text to classify
    """
    if not forecast_text or not forecast_text.strip():
        return None

    upper = forecast_text.upper()

    for level, tokens, reason in TOKEN_TIERS:
        matched = [token.code.strip() for token in tokens if token.matches(upper, mode)]
        if matched:
            return AviationAssessment(level=level, reason=reason, matched_tokens=matched)

    return AviationAssessment(level=Level.GO, reason=CLEAR_REASON)
