"""Curriculum backbone: Period -> Category -> Skill -> Sub-Skill.

Used for:
- Filtering solo-session videos by curriculum structure
- Mapping objectives and keywords to curriculum topics
- Organizing drills, solo sessions and quiz questions
- Tracking player progress through the curriculum

A node is either a list of leaf keys or a mapping of child keys to nodes,
and the depth varies per skill. Each period's ``tactical`` category holds the
tactical keyword store (Phase -> Key -> KeywordEntry) instead.
"""

from copy import deepcopy
from typing import Any, Iterator, Optional, Union

from .models import CATEGORIES, PERIODS, CurriculumMatch, KeywordEntry, KeywordRecord
from .normalize import (
    format_backbone_key_as_label,
    match_form,
    normalize_period,
    normalize_text,
    terms_match,
)
from .tactical_keywords import TACTICAL_KEYWORDS_DATA

CurriculumNode = Union[list[str], dict[str, Any], KeywordEntry]

_FIRST_TOUCH_ON_GROUND = [
    "inside-open-up", "inside-across-the-body", "outside-foot", "chop", "sole-open-up", "sole-across",
]

_FOOT_JUGGLING = {
    "drop-the-ball-half-volley-up": [],
    "just-feet-half-volley-up": [],
    "in-place": [],
    "slow-walk": {
        "vertically": ["forward", "back"],
        "horizontally": ["left", "right"],
    },
    "run": [],
}

# Skill order is shared by every period; exclusions below remove skills per period.
_TECHNICAL_SKILLS: dict[str, Any] = {
    "first-touch": {
        "on-ground": _FIRST_TOUCH_ON_GROUND,
        "half-volley": _FIRST_TOUCH_ON_GROUND,
        "full-volley": ["inside-open-up", "inside-across-the-body", "outside-foot", "chop"],
        "weak-foot": [],
        "deception": [],
    },
    "escape-moves": {
        "fake-shots": ["fake-shot-inside-foot", "fake-shot-outside-foot", "cruyff"],
        "escaping-side-pressure": ["roll-cut", "roll-chop", "sole-of-foot-across", "sole-of-foot-open-up"],
        "fancy-escape": ["cruyff", "roll-cut", "roll-chop", "sole-of-foot-open-up"],
    },
    "ball-mastery": {
        "slow-1v1s": [
            "infinite-scissors",
            "scissor-exit",
            "tap-scissor-exit",
            "tap-scissor-exit-same-side",
            "fake-shot-forward-left-right-foot",
            "lunge-exit",
            "coutinho",
            "roll-scissor-exit",
            "fake-shot-backwards-left-right-foot",
            "progression-inside-inside",
            "outside-inside-left-right-foot",
            "la-croquetta",
            "lunge-la-croquetta",
            "elastico",
            "fast-dribbling-outside-inside",
            "stanley-matthews",
            "tap-lunge-exit",
            "tap-lunge-exit-same-side",
        ],
        "fast-dribbling": [
            "fast-dribbling-croquetta",
            "fast-dribbling-scissor-exit-same-side",
            "fast-dribbling-scissor-exit",
            "fast-dribbling-roll-croquetta",
        ],
    },
    "juggling": {
        "both-feet": ["half-volley-up", "in-place", "walking", "running", "rhythm"],
        "strong-foot": _FOOT_JUGGLING,
        "blind-foot": _FOOT_JUGGLING,
    },
    "turning": {},
    "finishing": {},
    "passing": {
        "on-ground": ["backspin", "curl", "trivela", "weak-foot", "deception"],
        "half-volley": ["backspin", "curl"],
        "full-volley": ["backspin"],
    },
}

_TECHNICAL_EXCLUSIONS = {
    "build-out": ("ball-mastery", "turning", "finishing"),
    "wide-play": ("turning",),
}

_PHYSICAL_SKILLS: dict[str, Any] = {
    "conditioning": {},
    "lower-body": {},
    "upper-body": {},
    "core": {},
    "speed": {
        "lateral": {},
        "linear": {},
    },
    "plyometrics": {},
    "whole-body": {},
}

_MENTAL_SKILLS: dict[str, Any] = {
    "meditation": {},
    "prayer": {},
    "breathing": {},
    "stretching": {},
    "sleep": {},
    "objectives": {},
}

# Synonyms for non-tactical keys; labels are derived from the keys themselves.
SKILL_SYNONYMS: dict[str, dict[str, list[str]]] = {
    "technical": {
        "first-touch": ["Ball control", "Touch", "Reception", "First contact"],
        "passing": ["Distribution", "Ball movement", "Playmaking", "Ball delivery"],
        "dribbling": ["Ball carrying", "Running with ball", "Ball control on move"],
        "shooting": ["Finishing", "Striking", "Goal scoring", "Shot technique"],
        "crossing": ["Delivery", "Service", "Wide service", "Cross field"],
        "juggling": ["Keepy uppy", "Ball mastery", "Touch control", "Aerial control"],
        "turning": ["Change direction", "Pivot", "Turn with ball", "Direction change"],
        "escape-moves": ["Moves", "Skills", "Tricks", "Feints", "Dribble moves"],
        "ball-mastery": ["Ball control", "Touch", "Close control", "Ball manipulation"],
        "weak-foot": ["Non-dominant foot", "Off foot", "Secondary foot", "Left foot", "Right foot"],
        "volley": ["Half volley", "Full volley", "Aerial strike", "Air ball"],
        "heading": ["Aerial challenge", "Header", "Head ball", "Aerial play"],
        "long-ball": ["Long pass", "Long range pass", "Switch", "Long distribution"],
        "short-pass": ["Quick pass", "Short distribution", "Close pass", "One-two"],
        "through-ball": ["Through pass", "Splitting pass", "Penetrating pass", "Line breaking pass"],
        "trivela": ["Outside foot", "Outside of boot", "Curved pass", "Bent pass"],
        "backspin": ["Spin", "Ball spin", "Back spin", "Ball control"],
        "curl": ["Bend", "Curve", "Swerve", "Bent ball"],
        "on-ground": ["Ground pass", "Rolling ball", "Low pass", "Ground technique"],
        "half-volley": ["Bounce", "Bouncing ball", "Half volley technique"],
        "full-volley": ["Air ball", "Volley strike", "Aerial technique"],
    },
    "physical": {
        "speed": ["Pace", "Quickness", "Velocity", "Sprint speed"],
        "acceleration": ["Explosiveness", "Quick burst", "Speed off mark", "Initial speed"],
        "agility": ["Change of direction", "Quick feet", "Mobility", "Nimbleness"],
        "strength": ["Power", "Force", "Physical power", "Muscle strength"],
        "endurance": ["Stamina", "Fitness", "Cardio", "Aerobic capacity"],
        "balance": ["Stability", "Body control", "Equilibrium", "Coordination"],
        "flexibility": ["Mobility", "Range of motion", "Suppleness", "Stretching"],
        "coordination": ["Motor skills", "Body control", "Movement control", "Motor coordination"],
        "jump": ["Vertical jump", "Jumping", "Leap", "Aerial ability"],
        "reaction-time": ["Quick reaction", "Response time", "Reflexes", "Reaction speed"],
        "explosiveness": ["Power", "Burst", "Explosive power", "Quick burst"],
        "core-strength": ["Core", "Abdominal strength", "Trunk strength", "Core stability"],
        "upper-body": ["Upper body strength", "Arms", "Shoulders", "Upper strength"],
        "lower-body": ["Leg strength", "Lower body power", "Legs", "Lower strength"],
    },
    "mental": {
        "decision-making": ["Choices", "Game IQ", "Awareness", "Tactical awareness"],
        "confidence": ["Self-belief", "Assurance", "Mental strength", "Self-confidence"],
        "focus": ["Concentration", "Attention", "Mental focus", "Mindfulness"],
        "resilience": ["Mental toughness", "Grit", "Perseverance", "Mental strength"],
        "composure": ["Calmness", "Poise", "Control", "Mental calm"],
        "vision": ["Awareness", "Field vision", "Peripheral vision", "Spatial awareness"],
        "anticipation": ["Reading play", "Predicting", "Game reading", "Tactical reading"],
        "leadership": ["Communication", "Team leadership", "On-field leadership", "Captaincy"],
        "pressure-handling": ["Dealing with pressure", "Pressure situations", "Clutch performance", "Stress management"],
        "game-awareness": ["Tactical awareness", "Situation awareness", "Game IQ", "Football intelligence"],
        "creativity": ["Innovation", "Imagination", "Creative play", "Flair"],
        "work-rate": ["Effort", "Hustle", "Work ethic", "Energy"],
        "communication": ["Talking", "Verbal communication", "On-field communication", "Team talk"],
    },
}


def _build_period(period: str) -> dict[str, Any]:
    excluded = _TECHNICAL_EXCLUSIONS.get(period, ())
    return {
        "technical": {
            skill: deepcopy(node) for skill, node in _TECHNICAL_SKILLS.items() if skill not in excluded
        },
        "physical": deepcopy(_PHYSICAL_SKILLS),
        "mental": deepcopy(_MENTAL_SKILLS),
        "tactical": TACTICAL_KEYWORDS_DATA.get(period, {}),
    }


CURRICULUM_BACKBONE: dict[str, dict[str, Any]] = {period: _build_period(period) for period in PERIODS}


def _category_tree(period: Any, category: Any) -> Optional[dict[str, Any]]:
    period_data = CURRICULUM_BACKBONE.get(normalize_period(period))
    if not period_data:
        return None
    tree = period_data.get(normalize_text(category))
    return tree if isinstance(tree, dict) else None


def _walk(node: CurriculumNode, path: tuple[str, ...] = ()) -> Iterator[tuple[str, ...]]:
    """Yield the key path of every node below ``node`` in pre-order."""
    if isinstance(node, dict):
        for key, child in node.items():
            yield path + (key,)
            yield from _walk(child, path + (key,))
    elif isinstance(node, list):
        for leaf in node:
            yield path + (leaf,)
    # KeywordEntry leaves have no children


def _backbone_record(key: str, category: str) -> KeywordRecord:
    return KeywordRecord(
        keyword=format_backbone_key_as_label(key),
        synonyms=list(SKILL_SYNONYMS.get(category, {}).get(key, [])),
        category=category,
        skill=key,
    )


def get_all_periods() -> list[str]:
    """Get all periods in curriculum order."""
    return list(CURRICULUM_BACKBONE)


def get_all_categories() -> list[str]:
    return list(CATEGORIES)


def get_skills_for_period_and_category(period: Any, category: Any) -> list[str]:
    """Get all skills for a given period and category."""
    tree = _category_tree(period, category)
    return list(tree) if tree is not None else []


def get_sub_skills_for_skill(period: Any, category: Any, skill: Any) -> list[str]:
    """Get the sub-skills of a skill; a skill holding a flat list has none."""
    tree = _category_tree(period, category)
    if tree is None:
        return []
    node = tree.get(normalize_text(skill))
    return list(node) if isinstance(node, dict) else []


def get_periods_with_skill(skill: Any, category: Any = "technical") -> list[str]:
    """Get all periods whose category defines ``skill`` at the top level."""
    key = normalize_text(skill)
    return [
        period
        for period in CURRICULUM_BACKBONE
        if key in (_category_tree(period, category) or {})
    ]


def _match_paths(tree: dict[str, Any]) -> Iterator[tuple[str, ...]]:
    """Yield skills, their sub-skills and the list entries directly under a sub-skill.

    Deeper nodes are not matched.
    """
    for skill, node in tree.items():
        yield (skill,)
        if not isinstance(node, dict):
            continue
        for sub_skill, leaves in node.items():
            yield (skill, sub_skill)
            if isinstance(leaves, list):
                for leaf in leaves:
                    yield (skill, sub_skill, leaf)


def _iter_matches(needle: str, periods: list[str]) -> Iterator[CurriculumMatch]:
    for period in periods:
        for category, tree in CURRICULUM_BACKBONE.get(period, {}).items():
            for path in _match_paths(tree):
                if terms_match(needle, path[-1]):
                    yield CurriculumMatch(
                        period=period,
                        category=category,
                        skill=path[0],
                        sub_skill=path[1] if len(path) > 1 else None,
                        sub_sub_skill=path[2] if len(path) > 2 else None,
                        path=path,
                    )


def map_keyword_to_curriculum(keyword: Any) -> list[CurriculumMatch]:
    """Map a keyword to every matching skill, sub-skill or sub-skill entry.

    Matching is case-insensitive and bidirectional: the keyword may contain
    the node key or the node key may contain the keyword. A blank keyword
    matches every node.
    """
    needle = match_form(keyword)
    return list(_iter_matches(needle, list(CURRICULUM_BACKBONE)))


def map_keyword_to_curriculum_for_period(keyword: Any, context_period: Any) -> Optional[CurriculumMatch]:
    """Map a keyword to the first matching node within one period.

    Traversal follows category order, then skill order, so the result is
    deterministic. Only the first match is returned.
    """
    needle = match_form(keyword)
    period = normalize_period(context_period)
    if period not in CURRICULUM_BACKBONE:
        return None
    return next(_iter_matches(needle, [period]), None)


def get_keyword_for_backbone_skill(category: Any, skill_key: Any) -> Optional[KeywordRecord]:
    """Reverse lookup of a skill, sub-skill or leaf key to its display keyword."""
    category = normalize_text(category)
    target = normalize_text(skill_key)
    if category == "tactical" or category not in CATEGORIES or not target:
        return None
    for period_data in CURRICULUM_BACKBONE.values():
        for path in _walk(period_data.get(category, {})):
            if path[-1].lower() == target:
                return _backbone_record(path[-1], category)
    return None


def get_keywords_for_category_from_backbone(category: Any) -> list[KeywordRecord]:
    """Every distinct key of a non-tactical category as a keyword record.

    Keys are deduplicated across periods; the first occurrence wins.
    """
    category = normalize_text(category)
    if category == "tactical" or category not in CATEGORIES:
        return []
    seen: set[str] = set()
    records = []
    for period_data in CURRICULUM_BACKBONE.values():
        for path in _walk(period_data.get(category, {})):
            key = path[-1]
            if key in seen:
                continue
            seen.add(key)
            records.append(_backbone_record(key, category))
    return records


def get_tactical_keyword_by_key(key: Any) -> Optional[KeywordRecord]:
    """Find a tactical keyword by its key across all periods and phases."""
    target = normalize_text(key)
    if not target:
        return None
    for period, phases in TACTICAL_KEYWORDS_DATA.items():
        for phase, entries in phases.items():
            for entry_key, entry in entries.items():
                if entry_key.lower() == target:
                    return KeywordRecord.from_entry(entry, period, phase, entry_key)
    return None


def get_phases_for_period(period: Any) -> list[str]:
    return list(TACTICAL_KEYWORDS_DATA.get(normalize_period(period), {}))


def get_tactical_keywords_for_period_and_phase(
    period: Any, phase: Any, position_filter: Optional[str] = None
) -> list[KeywordRecord]:
    """Tactical keywords of one period and phase, optionally for one position.

    Keywords without recorded positions apply to everyone and always pass the
    filter. Otherwise the filter value must appear in the recorded positions.
    """
    period = normalize_period(period)
    phase = normalize_text(phase)
    entries = TACTICAL_KEYWORDS_DATA.get(period, {}).get(phase, {})
    records = []
    for key, entry in entries.items():
        if position_filter and entry.positions and position_filter not in entry.positions:
            continue
        records.append(KeywordRecord.from_entry(entry, period, phase, key))
    return records
