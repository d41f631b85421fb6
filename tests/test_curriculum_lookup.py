"""BDD tests for curriculum lookup functionality."""

import pytest
from pytest_bdd import scenarios, given, when, then, parsers

from soccer_curriculum_mcp.curriculum import (
    CURRICULUM_BACKBONE,
    get_periods_with_skill,
    get_skills_for_period_and_category,
    map_keyword_to_curriculum_for_period,
)

# Load scenarios from feature file
scenarios("curriculum_lookup.feature")


@pytest.fixture
def context():
    """Shared context for test steps."""
    return {"skills": None, "periods": None, "match": None}


@given("the curriculum backbone is loaded")
def backbone_loaded(context):
    """Ensure the backbone has all four periods."""
    assert len(CURRICULUM_BACKBONE) == 4
    context["backbone"] = CURRICULUM_BACKBONE


@when(parsers.parse('I list the skills for period "{period}" and category "{category}"'))
def list_skills(context, period, category):
    """List the skills of a period and category."""
    context["skills"] = get_skills_for_period_and_category(period, category)


@when(parsers.parse('I look up the periods with skill "{skill}" in "{category}"'))
def periods_with_skill(context, skill, category):
    """Find the periods that define a skill."""
    context["periods"] = get_periods_with_skill(skill, category)


@when(parsers.parse('I map keyword "{keyword}" for period "{period}"'))
def map_keyword_for_period(context, keyword, period):
    """Map a keyword within one period."""
    context["match"] = map_keyword_to_curriculum_for_period(keyword, period)


@then(parsers.parse('the skills should include "{skill}"'))
def check_skill_included(context, skill):
    assert skill in context["skills"], \
        f"Skill '{skill}' not found in {context['skills']}"


@then(parsers.parse('the skills should not include "{skill}"'))
def check_skill_excluded(context, skill):
    assert skill not in context["skills"], \
        f"Skill '{skill}' should not be in {context['skills']}"


@then(parsers.parse("I should find {count:d} skills"))
def check_skill_count(context, count):
    assert len(context["skills"]) == count, \
        f"Expected {count} skills, found {len(context['skills'])}"


@then(parsers.parse('the periods should be "{periods}"'))
def check_periods(context, periods):
    expected = [period.strip() for period in periods.split(",")]
    assert context["periods"] == expected


@then(parsers.parse('the match should be in period "{period}" and category "{category}"'))
def check_match_location(context, period, category):
    match = context["match"]
    assert match is not None, "Expected a curriculum match"
    assert match.period == period
    assert match.category == category


@then(parsers.parse('the match skill should be "{skill}" with no sub-skill'))
def check_match_skill(context, skill):
    match = context["match"]
    assert match.skill == skill
    assert match.sub_skill is None
    assert match.sub_sub_skill is None


@then("there should be no match")
def check_no_match(context):
    assert context["match"] is None
