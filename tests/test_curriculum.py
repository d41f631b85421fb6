"""Tests for the curriculum backbone and its lookups."""

import pytest

from soccer_curriculum_mcp.curriculum import (
    CURRICULUM_BACKBONE,
    get_all_categories,
    get_all_periods,
    get_keyword_for_backbone_skill,
    get_keywords_for_category_from_backbone,
    get_periods_with_skill,
    get_phases_for_period,
    get_skills_for_period_and_category,
    get_sub_skills_for_skill,
    get_tactical_keyword_by_key,
    get_tactical_keywords_for_period_and_phase,
    map_keyword_to_curriculum,
    map_keyword_to_curriculum_for_period,
)
from soccer_curriculum_mcp.normalize import (
    format_backbone_key_as_label,
    match_form,
    normalize_period,
    terms_match,
)


class TestNormalize:
    """Test text and period normalization."""

    @pytest.mark.parametrize("key,label", [
        ("roll-cut", "Roll Cut"),
        ("first-touch", "First Touch"),
        ("deception", "Deception"),
        ("transition-d-to-a", "Transition D To A"),
    ])
    def test_format_label(self, key, label):
        assert format_backbone_key_as_label(key) == label

    def test_format_label_rejects_empty_and_non_strings(self):
        assert format_backbone_key_as_label("") == ""
        assert format_backbone_key_as_label(None) == ""
        assert format_backbone_key_as_label(42) == ""

    @pytest.mark.parametrize("value,period", [
        ("Build-Out", "build-out"),
        ("buildout", "build-out"),
        ("build out", "build-out"),
        ("middle", "middle-third"),
        ("Final Third", "final-third"),
        ("wide", "wide-play"),
        ("wide-play", "wide-play"),
    ])
    def test_normalize_period_aliases(self, value, period):
        assert normalize_period(value) == period

    def test_unknown_period_is_lowercased(self):
        assert normalize_period("  Penalty-Box ") == "penalty-box"
        assert normalize_period(None) == ""

    def test_match_form_treats_separators_as_spaces(self):
        assert match_form("  Escape-Moves ") == "escape moves"
        assert match_form("half_volley") == "half volley"

    def test_terms_match_is_bidirectional(self):
        assert terms_match("escape", "escape-moves")
        assert terms_match("escape moves drill", "escape-moves")
        assert terms_match("", "escape-moves")
        assert not terms_match("escape", None)


class TestBackboneStructure:
    """Test the shape of the curriculum backbone."""

    def test_periods_in_order(self):
        assert get_all_periods() == ["build-out", "middle-third", "final-third", "wide-play"]

    def test_categories(self):
        assert get_all_categories() == ["technical", "physical", "mental", "tactical"]

    def test_every_period_has_every_category(self):
        for categories in CURRICULUM_BACKBONE.values():
            assert list(categories) == ["technical", "physical", "mental", "tactical"]

    def test_technical_skill_order(self):
        assert get_skills_for_period_and_category("final-third", "technical") == [
            "first-touch", "escape-moves", "ball-mastery", "juggling", "turning", "finishing", "passing",
        ]

    def test_periods_do_not_share_nodes(self):
        build_out = CURRICULUM_BACKBONE["build-out"]["technical"]["first-touch"]
        middle = CURRICULUM_BACKBONE["middle-third"]["technical"]["first-touch"]
        assert build_out == middle
        assert build_out is not middle

    def test_tactical_category_holds_phases(self):
        assert get_skills_for_period_and_category("build-out", "tactical") == [
            "attacking", "defending", "transition-d-to-a", "transition-a-to-d",
        ]


class TestSkillLookups:
    """Test skill and sub-skill accessors."""

    def test_sub_skills(self):
        assert get_sub_skills_for_skill("middle-third", "technical", "first-touch") == [
            "on-ground", "half-volley", "full-volley", "weak-foot", "deception",
        ]

    def test_physical_sub_skills(self):
        assert get_sub_skills_for_skill("wide-play", "physical", "speed") == ["lateral", "linear"]

    def test_empty_skill_has_no_sub_skills(self):
        assert get_sub_skills_for_skill("middle-third", "technical", "turning") == []

    def test_unknown_inputs_return_empty(self):
        assert get_skills_for_period_and_category("penalty-box", "technical") == []
        assert get_skills_for_period_and_category("build-out", "spiritual") == []
        assert get_sub_skills_for_skill("build-out", "technical", "turning") == []
        assert get_sub_skills_for_skill(None, None, None) == []

    def test_periods_with_physical_skill(self):
        assert get_periods_with_skill("speed", "physical") == get_all_periods()

    def test_periods_with_unknown_skill(self):
        assert get_periods_with_skill("heading") == []


class TestKeywordMapping:
    """Test mapping free keywords to curriculum nodes."""

    def test_top_level_match(self):
        matches = map_keyword_to_curriculum("escape moves")
        technical = [m for m in matches if m.category == "technical" and m.sub_skill is None]
        assert [m.period for m in technical] == get_all_periods()
        assert all(m.skill == "escape-moves" for m in technical)

    def test_sub_skill_entry_match(self):
        match = map_keyword_to_curriculum_for_period("backspin", "build-out")
        assert match.path == ("passing", "on-ground", "backspin")
        assert match.skill == "passing"
        assert match.sub_skill == "on-ground"
        assert match.sub_sub_skill == "backspin"

    def test_nodes_below_sub_skill_entries_are_not_matched(self):
        matches = map_keyword_to_curriculum("backspin")
        assert matches
        assert {m.skill for m in matches} == {"passing"}
        assert all(len(m.path) <= 3 for m in matches)

    def test_short_juggling_leaves_do_not_capture_keywords(self):
        assert map_keyword_to_curriculum_for_period("forward pass", "build-out") is None
        assert map_keyword_to_curriculum_for_period("left foot", "middle-third") is None

    def test_juggling_sub_skill_keys_still_match(self):
        matches = map_keyword_to_curriculum("strong foot")
        assert any(m.path == ("juggling", "strong-foot") for m in matches)

    def test_tactical_phase_is_the_skill(self):
        matches = map_keyword_to_curriculum("low block")
        tactical = [m for m in matches if m.period == "build-out" and m.category == "tactical"]
        assert any(m.skill == "defending" and m.sub_skill == "low-block" for m in tactical)

    def test_blank_keyword_maps_to_every_node(self):
        every_node = map_keyword_to_curriculum("")
        assert map_keyword_to_curriculum("   ") == every_node
        assert map_keyword_to_curriculum(None) == every_node
        assert map_keyword_to_curriculum("zzzz") == []
        assert {m.period for m in every_node} == set(get_all_periods())
        assert {m.category for m in every_node} == set(get_all_categories())
        assert all(len(m.path) <= 3 for m in every_node)

    def test_period_mapping_returns_first_match(self):
        match = map_keyword_to_curriculum_for_period("first touch", "middle")
        assert match.period == "middle-third"
        assert match.category == "technical"
        assert match.path == ("first-touch",)

    def test_period_mapping_respects_exclusions(self):
        match = map_keyword_to_curriculum_for_period("ball mastery", "build-out")
        assert match is None or match.skill != "ball-mastery"

    def test_period_mapping_blank_keyword(self):
        match = map_keyword_to_curriculum_for_period("", "build-out")
        assert match.path == ("first-touch",)
        assert match.category == "technical"


class TestReverseLookups:
    """Test keyword records derived from backbone keys."""

    def test_every_skill_round_trips_to_its_label(self):
        for period in get_all_periods():
            for category in ("technical", "physical", "mental"):
                for skill in get_skills_for_period_and_category(period, category):
                    record = get_keyword_for_backbone_skill(category, skill)
                    assert record is not None, f"{period}/{category}/{skill}"
                    assert record.keyword == format_backbone_key_as_label(skill)

    def test_skill_keyword_with_synonyms(self):
        record = get_keyword_for_backbone_skill("technical", "first-touch")
        assert record.keyword == "First Touch"
        assert record.synonyms == ["Ball control", "Touch", "Reception", "First contact"]
        assert record.all_terms[0] == "First Touch"
        assert record.category == "technical"
        assert record.skill == "first-touch"

    def test_sub_skill_without_synonyms(self):
        record = get_keyword_for_backbone_skill("physical", "lateral")
        assert record.keyword == "Lateral"
        assert record.synonyms == []
        assert record.all_terms == ["Lateral"]

    def test_case_insensitive_key(self):
        assert get_keyword_for_backbone_skill("Technical", "Roll-Cut").keyword == "Roll Cut"

    def test_tactical_and_unknown_categories(self):
        assert get_keyword_for_backbone_skill("tactical", "plus-1") is None
        assert get_keyword_for_backbone_skill("spiritual", "prayer") is None
        assert get_keyword_for_backbone_skill("mental", "") is None
        assert get_keyword_for_backbone_skill("mental", "unknown-skill") is None

    def test_category_keywords_are_unique(self):
        records = get_keywords_for_category_from_backbone("technical")
        skills = [record.skill for record in records]
        assert len(skills) == len(set(skills))
        assert skills[0] == "first-touch"
        assert "cruyff" in skills

    def test_mental_keywords(self):
        records = get_keywords_for_category_from_backbone("mental")
        assert [record.keyword for record in records] == [
            "Meditation", "Prayer", "Breathing", "Stretching", "Sleep", "Objectives",
        ]

    def test_tactical_category_has_no_backbone_keywords(self):
        assert get_keywords_for_category_from_backbone("tactical") == []


class TestTacticalLookups:
    """Test tactical keyword lookups."""

    def test_keyword_by_key(self):
        record = get_tactical_keyword_by_key("plus-1")
        assert record.keyword == "Plus 1"
        assert record.period == "build-out"
        assert record.phase == "attacking"
        assert record.key == "plus-1"
        assert record.category == "tactical"
        assert record.positions == ["Defenders", "Midfielders"]

    def test_unknown_key(self):
        assert get_tactical_keyword_by_key("not-a-key") is None
        assert get_tactical_keyword_by_key("") is None

    def test_phases_for_period(self):
        assert get_phases_for_period("wide") == [
            "attacking", "defending", "transition-a-to-d", "transition-d-to-a",
        ]
        assert get_phases_for_period("penalty-box") == []

    def test_empty_phase(self):
        assert get_tactical_keywords_for_period_and_phase("wide-play", "transition-a-to-d") == []

    def test_unfiltered_phase_keeps_store_order(self):
        records = get_tactical_keywords_for_period_and_phase("build-out", "attacking")
        assert records[0].keyword == "Plus 1"
        assert records[1].keyword == "Support angles"

    def test_position_filter_is_literal(self):
        defenders = get_tactical_keywords_for_period_and_phase("build-out", "attacking", "Defenders")
        lowercase = get_tactical_keywords_for_period_and_phase("build-out", "attacking", "defenders")
        assert any(record.keyword == "Plus 1" for record in defenders)
        assert all(not record.positions for record in lowercase)
