"""Drill keywords with synonyms, across every curriculum category.

Tactical keywords come from the tactical keyword store (period and phase).
Technical, physical and mental keywords are derived from the curriculum
backbone, with skill and sub-skill keys as keywords.
"""

from typing import Any, Iterator, Optional

from .curriculum import (
    get_keyword_for_backbone_skill,
    get_keywords_for_category_from_backbone,
    get_phases_for_period,
    get_tactical_keyword_by_key,
    get_tactical_keywords_for_period_and_phase,
)
from .models import KeywordEntry, KeywordRecord
from .normalize import match_form, normalize_period, normalize_text, terms_match
from .tactical_keywords import TACTICAL_KEYWORDS_DATA

BACKBONE_CATEGORIES = ("technical", "physical", "mental")
SEARCH_CATEGORIES = ("tactical",) + BACKBONE_CATEGORIES


def _iter_tactical_records(periods: Optional[list[str]] = None) -> Iterator[KeywordRecord]:
    for period in periods if periods is not None else list(TACTICAL_KEYWORDS_DATA):
        for phase, entries in TACTICAL_KEYWORDS_DATA.get(period, {}).items():
            for key, entry in entries.items():
                yield KeywordRecord.from_entry(entry, period, phase, key)


def _records_for_category(category: str) -> list[KeywordRecord]:
    if category == "tactical":
        return list(_iter_tactical_records())
    return get_keywords_for_category_from_backbone(category)


def get_keywords_for_category(category: Any) -> dict[str, Any]:
    """Get all keywords for a category.

    Tactical returns the Period -> Phase -> Key store of keyword entries;
    the other categories return ``{skill_key: KeywordRecord}``.
    """
    category = normalize_text(category)
    if category == "tactical":
        tactical: dict[str, dict[str, dict[str, KeywordEntry]]] = {
            period: {phase: dict(entries) for phase, entries in phases.items()}
            for period, phases in TACTICAL_KEYWORDS_DATA.items()
        }
        return tactical
    return {record.skill: record for record in get_keywords_for_category_from_backbone(category)}


def get_keywords_for_period(period: Any) -> list[KeywordRecord]:
    """Tactical keywords of a period across all of its phases."""
    period = normalize_period(period)
    records = []
    for phase in get_phases_for_period(period):
        records.extend(get_tactical_keywords_for_period_and_phase(period, phase))
    return records


def get_keywords_for_period_and_phase(
    period: Any, phase: Any, position_filter: Optional[str] = None
) -> list[KeywordRecord]:
    return get_tactical_keywords_for_period_and_phase(period, phase, position_filter)


def get_keyword_for_skill(category: Any, skill: Any) -> Optional[KeywordRecord]:
    """Get the keyword record of a skill (or tactical key) within a category.

    Args:
        category: tactical, technical, physical or mental
        skill: skill key such as 'first-touch', 'speed', or 'plus-1' for tactical
    """
    if normalize_text(category) == "tactical":
        return get_tactical_keyword_by_key(skill)
    return get_keyword_for_backbone_skill(category, skill)


def get_all_keywords() -> list[KeywordRecord]:
    """Every tactical keyword followed by every technical, physical and mental keyword."""
    keywords = list(_iter_tactical_records())
    for category in BACKBONE_CATEGORIES:
        keywords.extend(get_keywords_for_category_from_backbone(category))
    return keywords


def search_keywords(search_term: Any, category: Optional[str] = None) -> list[KeywordRecord]:
    """Search keywords and synonyms, optionally within one category.

    A keyword matches when any of its terms contains the search term or is
    contained in it, ignoring case. A blank search term matches everything.
    """
    needle = match_form(search_term)
    categories = [normalize_text(category)] if category else list(SEARCH_CATEGORIES)

    matches = []
    for cat in categories:
        if cat not in SEARCH_CATEGORIES:
            continue
        for record in _records_for_category(cat):
            if any(terms_match(needle, term) for term in record.all_terms):
                matches.append(record)
    return matches


def get_keywords_for_selection(category: Optional[str] = None, period: Optional[str] = None) -> list[str]:
    """Keywords and synonyms as one flat, de-duplicated list for selection UIs.

    ``period`` only narrows tactical keywords.
    """
    if category:
        category = normalize_text(category)
        if category == "tactical":
            periods = [normalize_period(period)] if period else None
            records = list(_iter_tactical_records(periods))
        elif category in BACKBONE_CATEGORIES:
            records = get_keywords_for_category_from_backbone(category)
        else:
            return []
    else:
        records = get_all_keywords()

    flat: list[str] = []
    for record in records:
        flat.append(record.keyword)
        flat.extend(record.synonyms)
    return list(dict.fromkeys(flat))
