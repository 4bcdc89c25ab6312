"""Tests for the TAF hazard token classifier."""

import pytest

from weather_gonogo.models.recommendation import Level
from weather_gonogo.rules.hazards import (
    CAUTION_REASON,
    CAUTION_TOKENS,
    CLEAR_REASON,
    SEVERE_REASON,
    SEVERE_TOKENS,
    MatchMode,
    classify,
)

CLEAR_TAF = "TAF KBOI 151120Z 1512/1612 32008KT P6SM FEW250"


class TestClassify:
    """Tests for classify()."""

    def test_severe_precedence(self):
        """Thunderstorm outranks the broken-cloud caution token."""
        assessment = classify("TEMPO 1500 TSRA BKN008")

        assert assessment.level == Level.NO_GO
        assert assessment.reason == SEVERE_REASON
        assert "TS" in assessment.matched_tokens
        assert "BKN" not in assessment.matched_tokens

    def test_caution(self):
        assessment = classify("TAF KBOI 151120Z 1512/1612 32008KT P6SM BKN030")

        assert assessment.level == Level.CAUTION
        assert assessment.reason == CAUTION_REASON
        assert assessment.matched_tokens == ["BKN"]

    def test_clear(self):
        assessment = classify(CLEAR_TAF)

        assert assessment.level == Level.GO
        assert assessment.reason == CLEAR_REASON
        assert assessment.matched_tokens == []

    @pytest.mark.parametrize("text", [None, ""])
    def test_absent_text(self, text):
        """No text means no assessment, not a synthetic GO."""
        assert classify(text) is None

    def test_whitespace_only(self):
        assert classify("   \n ") is None

    def test_case_folded(self):
        assert classify("taf kboi 1512/1612 ts").level == Level.NO_GO

    def test_label(self):
        assert classify(CLEAR_TAF).label == "TAF hazards"


class TestTokensSubstring:
    """Each token on its own, substring mode."""

    @pytest.mark.parametrize("token", SEVERE_TOKENS, ids=lambda t: t.code.strip())
    def test_severe_token(self, token):
        text = f"TAF KXYZ 1512/1612{token.code}"
        assessment = classify(text)

        assert assessment.level == Level.NO_GO
        assert token.code.strip() in assessment.matched_tokens

    @pytest.mark.parametrize("token", CAUTION_TOKENS, ids=lambda t: t.code.strip())
    def test_caution_token(self, token):
        text = f"TAF KXYZ 1512/1612{token.code}"
        assessment = classify(text)

        assert assessment.level == Level.CAUTION
        assert token.code.strip() in assessment.matched_tokens

    def test_leading_space_required(self):
        """Tokens with a leading space do not match mid-group."""
        assert classify("TAF KXYZ 1512/1612 VCRA").level == Level.GO

    def test_bare_g_matches_inside_words(self):
        """Known false positive: 'G' matches inside BECMG."""
        assessment = classify("TAF KXYZ 1512/1612 BECMG 1600/1602 P6SM")

        assert assessment.level == Level.CAUTION
        assert assessment.matched_tokens == ["G"]

    def test_heavy_rain_is_severe(self):
        assert classify("TAF KXYZ 1512/1612 +RA").level == Level.NO_GO

    def test_light_rain_does_not_match_rain_token(self):
        """' -RA' carries a minus sign so ' RA' is not found."""
        assert classify("TAF KXYZ 1512/1612 -RA").level == Level.GO


class TestTokensWord:
    """Word-boundary mode."""

    def test_bare_g_ignored_inside_words(self):
        assessment = classify("TAF KXYZ 1512/1612 BECMG 1600/1602 P6SM", mode=MatchMode.WORD)
        assert assessment.level == Level.GO

    @pytest.mark.parametrize("wind", ["25015G25KT", "VRB05G15KT", "18010G20MPS"])
    def test_gust_group(self, wind):
        assessment = classify(f"TAF KXYZ 1512/1612 {wind} P6SM", mode=MatchMode.WORD)

        assert assessment.level == Level.CAUTION
        assert assessment.matched_tokens == ["G"]

    def test_token_at_start_of_group(self):
        assert classify("TAF KXYZ 1512/1612 TSRA", mode=MatchMode.WORD).level == Level.NO_GO
        assert classify("TAF KXYZ 1512/1612 VCTS", mode=MatchMode.WORD).level == Level.GO

    def test_token_after_newline(self):
        """Groups may start a new line in product text."""
        text = "TAF KXYZ 151120Z 1512/1612 32008KT\nFG"
        # Substring mode misses " FG" but the bare "G" still fires
        assert classify(text, mode=MatchMode.SUBSTRING).level == Level.CAUTION
        assert classify(text, mode=MatchMode.WORD).level == Level.NO_GO

    def test_severe_precedence(self):
        assessment = classify("TEMPO 1500 TSRA BKN008", mode=MatchMode.WORD)
        assert assessment.level == Level.NO_GO
