"""Objective text and drill keyword helpers built on the curriculum lookups."""

from typing import Any, Iterable, Optional

from .curriculum import map_keyword_to_curriculum, map_keyword_to_curriculum_for_period
from .keywords import get_keyword_for_skill
from .models import CurriculumMatch

COMMON_OBJECTIVE_KEYWORDS = (
    "turning",
    "first touch",
    "passing",
    "finishing",
    "ball mastery",
    "escape moves",
    "on ground",
    "half volley",
    "full volley",
    "weak foot",
    "deception",
    "backspin",
    "curl",
    "trivela",
)


def extract_keywords_from_objectives(objectives: Any) -> list[str]:
    """Find the common curriculum keywords mentioned in free objective text."""
    if not isinstance(objectives, str) or not objectives:
        return []
    normalized = objectives.lower()
    return [keyword for keyword in COMMON_OBJECTIVE_KEYWORDS if keyword in normalized]


def map_objectives_to_curriculum(objectives: Any, period: Optional[str] = None) -> list[CurriculumMatch]:
    """Map the keywords of objective text to curriculum nodes.

    With a ``period`` each keyword contributes at most its first match in
    that period. Duplicate matches are dropped, keeping the first.
    """
    matches: list[CurriculumMatch] = []
    seen: set[tuple[str, str, tuple[str, ...]]] = set()
    for keyword in extract_keywords_from_objectives(objectives):
        if period:
            found = map_keyword_to_curriculum_for_period(keyword, period)
            candidates = [found] if found else []
        else:
            candidates = map_keyword_to_curriculum(keyword)
        for match in candidates:
            identity = (match.period, match.category, match.path)
            if identity in seen:
                continue
            seen.add(identity)
            matches.append(match)
    return matches


def merge_drill_keywords(existing: Iterable[str], category: Any, skill: Any) -> list[str]:
    """Add a skill's keyword and synonyms to a drill's keyword list.

    Returns a new list; keywords already present are not repeated.
    """
    keywords = list(existing or [])
    record = get_keyword_for_skill(category, skill)
    if record is None:
        return keywords
    for term in record.all_terms:
        if term not in keywords:
            keywords.append(term)
    return keywords
