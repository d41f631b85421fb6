"""Tests for the tactical keyword store and its normalizer."""

from soccer_curriculum_mcp.models import KeywordEntry, PHASES, PERIODS, POSITIONS
from soccer_curriculum_mcp.tactical_keywords import (
    TACTICAL_KEYWORDS_DATA,
    add_positions_to_tactical,
)


class TestAddPositionsToTactical:
    """Test normalization of raw tactical tables."""

    def test_non_mapping_input_gives_empty_store(self):
        assert add_positions_to_tactical(None) == {}
        assert add_positions_to_tactical(["build-out"]) == {}

    def test_malformed_periods_and_phases_become_empty(self):
        result = add_positions_to_tactical({
            "build-out": "not a mapping",
            "middle-third": {"attacking": None},
        })
        assert result == {"build-out": {}, "middle-third": {"attacking": {}}}

    def test_items_without_keyword_are_dropped(self):
        result = add_positions_to_tactical({
            "build-out": {
                "attacking": {
                    "plus-1": {"keyword": "Plus 1", "synonyms": ["Add one"]},
                    "broken": {"synonyms": ["Nothing"]},
                    "junk": "text",
                }
            }
        })
        assert list(result["build-out"]["attacking"]) == ["plus-1"]

    def test_entry_fields(self):
        result = add_positions_to_tactical({
            "final-third": {
                "defending": {
                    "press": {
                        "keyword": "Press",
                        "synonyms": ["Close down"],
                        "positions": ["Forwards"],
                        "pressingTrigger": True,
                        "technicalCoachingPoint": "true",
                    }
                }
            }
        })
        entry = result["final-third"]["defending"]["press"]
        assert entry == KeywordEntry(
            keyword="Press",
            synonyms=("Close down",),
            positions=("Forwards",),
            technical_coaching_point=False,
            pressing_trigger=True,
        )

    def test_missing_lists_default_to_empty(self):
        result = add_positions_to_tactical({"wide-play": {"attacking": {"width": {"keyword": "Width"}}}})
        entry = result["wide-play"]["attacking"]["width"]
        assert entry.synonyms == ()
        assert entry.positions == ()


class TestTacticalStore:
    """Test the built-in tactical keyword store."""

    def test_every_period_present(self):
        assert set(TACTICAL_KEYWORDS_DATA) == set(PERIODS)

    def test_phases_are_known(self):
        for phases in TACTICAL_KEYWORDS_DATA.values():
            assert set(phases) <= set(PHASES)

    def test_keyword_count(self):
        total = sum(
            len(entries)
            for phases in TACTICAL_KEYWORDS_DATA.values()
            for entries in phases.values()
        )
        assert total == 210

    def test_wide_play_has_empty_transition_phase(self):
        assert TACTICAL_KEYWORDS_DATA["wide-play"]["transition-a-to-d"] == {}

    def test_restricted_and_unrestricted_positions(self):
        defending = TACTICAL_KEYWORDS_DATA["build-out"]["defending"]
        assert defending["low-block"].positions == ("GK", "Defenders", "Midfielders")
        assert defending["angled-approach"].positions == ()

    def test_pressing_trigger_flag(self):
        flagged = [
            entry
            for phases in TACTICAL_KEYWORDS_DATA.values()
            for entries in phases.values()
            for entry in entries.values()
            if entry.pressing_trigger
        ]
        assert any(entry.keyword == "Moment to press" for entry in flagged)

    def test_positions_are_known(self):
        for phases in TACTICAL_KEYWORDS_DATA.values():
            for entries in phases.values():
                for entry in entries.values():
                    assert set(entry.positions) <= set(POSITIONS)
