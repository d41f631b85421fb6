"""BDD tests for keyword search functionality."""

import pytest
from pytest_bdd import scenarios, given, when, then, parsers

from soccer_curriculum_mcp.keywords import (
    get_all_keywords,
    get_keywords_for_period_and_phase,
    get_keywords_for_selection,
    search_keywords,
)
from soccer_curriculum_mcp.tactical_keywords import TACTICAL_KEYWORDS_DATA

# Load scenarios from feature file
scenarios("keyword_search.feature")


@pytest.fixture
def context():
    """Shared context for test steps."""
    return {"results": None, "selection": None}


@given("the keyword facade is available")
def facade_available(context):
    """Ensure the tactical store was built."""
    assert TACTICAL_KEYWORDS_DATA


@when(parsers.re(r'I search keywords for "(?P<term>[^"]*)"$'))
def search_all(context, term):
    """Search every category."""
    context["results"] = search_keywords(term)


@when(parsers.re(r'I search keywords for "(?P<term>[^"]*)" in category "(?P<category>[^"]*)"$'))
def search_category(context, term, category):
    """Search one category."""
    context["results"] = search_keywords(term, category)


@when(parsers.parse('I get the selection keywords for category "{category}" and period "{period}"'))
def selection_keywords(context, category, period):
    """Get the flat selection list."""
    context["selection"] = get_keywords_for_selection(category, period)


@when(parsers.parse('I get tactical keywords for "{period}" phase "{phase}" and position "{position}"'))
def tactical_for_position(context, period, phase, position):
    """Get tactical keywords filtered by position."""
    context["results"] = get_keywords_for_period_and_phase(period, phase, position)


@then(parsers.parse('the results should include keyword "{keyword}"'))
def check_keyword_included(context, keyword):
    keywords = [record.keyword for record in context["results"]]
    assert keyword in keywords, f"Keyword '{keyword}' not found in {keywords}"


@then(parsers.parse('the results should not include keyword "{keyword}"'))
def check_keyword_excluded(context, keyword):
    keywords = [record.keyword for record in context["results"]]
    assert keyword not in keywords


@then("every result should list its keyword first in all terms")
def check_all_terms(context):
    for record in context["results"]:
        assert record.all_terms[0] == record.keyword


@then(parsers.parse('every result should be in category "{category}"'))
def check_result_category(context, category):
    for record in context["results"]:
        assert record.category == category


@then("I should find every keyword")
def check_every_keyword(context):
    assert len(context["results"]) == len(get_all_keywords())


@then(parsers.parse('the selection should contain "{term}" exactly once'))
def check_selection_once(context, term):
    assert context["selection"].count(term) == 1
