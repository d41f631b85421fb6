"""Text normalization shared by the curriculum lookups and keyword search."""

import re
from typing import Any

_SEPARATORS = re.compile(r"[\s_-]+")

PERIOD_ALIASES = {
    "buildout": "build-out",
    "middle": "middle-third",
    "middlethird": "middle-third",
    "final": "final-third",
    "finalthird": "final-third",
    "wide": "wide-play",
    "wideplay": "wide-play",
}


def normalize_text(value: Any) -> str:
    """Coerce any value to a lower-cased, trimmed string (``None`` -> ``""``)."""
    if value is None:
        return ""
    return str(value).lower().strip()


def match_form(value: Any) -> str:
    """Normalize text for substring matching: hyphens and underscores count as spaces."""
    return _SEPARATORS.sub(" ", normalize_text(value)).strip()


def terms_match(needle: str, term: Any) -> bool:
    """Bidirectional substring test between an already normalized needle and a term.

    An empty needle matches every term.
    """
    candidate = match_form(term)
    if not candidate:
        return False
    return needle in candidate or candidate in needle


def normalize_period(period: Any) -> str:
    """Map a period name or alias (``Build-Out``, ``buildout``, ``wide``) to its key.

    Unknown values come back lower-cased and trimmed so lookups simply miss.
    """
    normalized = normalize_text(period)
    compact = _SEPARATORS.sub("", normalized)
    return PERIOD_ALIASES.get(compact, normalized)


def format_backbone_key_as_label(key: Any) -> str:
    """Turn a kebab-case key into a Title Case label: ``roll-cut`` -> ``Roll Cut``."""
    if not isinstance(key, str) or not key:
        return ""
    return " ".join(word.capitalize() for word in key.split("-"))
