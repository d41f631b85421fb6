"""Data models for the soccer curriculum knowledge base."""

from dataclasses import dataclass, field
from typing import Optional

PERIODS = ("build-out", "middle-third", "final-third", "wide-play")
CATEGORIES = ("technical", "physical", "mental", "tactical")
PHASES = ("attacking", "defending", "transition-d-to-a", "transition-a-to-d")
POSITIONS = ("GK", "Defenders", "Midfielders", "Forwards")


@dataclass(frozen=True)
class KeywordEntry:
    """Leaf record of the tactical keyword store.

    An empty ``positions`` tuple means the keyword applies to every position.
    """

    keyword: str
    synonyms: tuple[str, ...] = ()
    positions: tuple[str, ...] = ()
    technical_coaching_point: bool = False
    pressing_trigger: bool = False


@dataclass
class KeywordRecord:
    keyword: str
    synonyms: list[str] = field(default_factory=list)
    all_terms: list[str] = field(default_factory=list)
    category: Optional[str] = None
    period: Optional[str] = None
    phase: Optional[str] = None
    key: Optional[str] = None
    skill: Optional[str] = None
    positions: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.all_terms:
            self.all_terms = [self.keyword, *self.synonyms]

    @classmethod
    def from_entry(
        cls, entry: KeywordEntry, period: str, phase: str, key: str
    ) -> "KeywordRecord":
        """Build a tactical record from a stored keyword entry."""
        return cls(
            keyword=entry.keyword,
            synonyms=list(entry.synonyms),
            category="tactical",
            period=period,
            phase=phase,
            key=key,
            positions=list(entry.positions),
        )


@dataclass
class CurriculumMatch:
    period: str
    category: str
    skill: str
    sub_skill: Optional[str] = None
    sub_sub_skill: Optional[str] = None
    path: tuple[str, ...] = ()


@dataclass
class CurriculumFocus:
    focus: str
    related_terms: list[str] = field(default_factory=list)
    period: Optional[str] = None
