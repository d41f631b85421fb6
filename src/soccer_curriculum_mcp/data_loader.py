"""Data loader for mirroring the curriculum backbone into Neo4j."""

from typing import Any

from .curriculum import CURRICULUM_BACKBONE, SKILL_SYNONYMS
from .database import Neo4jDatabase
from .logging_config import configure_logging, get_logger
from .models import KeywordEntry
from .normalize import format_backbone_key_as_label

logger = get_logger(__name__)


class CurriculumGraphLoader:
    """Load curriculum nodes and tactical keywords into Neo4j."""

    def __init__(self, db: Neo4jDatabase):
        self.db = db
        self.stats = {
            "periods": 0,
            "categories": 0,
            "skills": 0,
            "phases": 0,
            "keywords": 0,
        }

    def load_period(self, period: str, order: int) -> None:
        """Load a period into the database."""
        query = """
        MERGE (p:Period {key: $key})
        SET p.label = $label,
            p.order = $order
        """
        self.db.execute_write(
            query,
            {
                "key": period,
                "label": format_backbone_key_as_label(period),
                "order": order,
            },
        )
        self.stats["periods"] += 1

    def load_category(self, period: str, category: str) -> None:
        """Load a category of a period (HAS_CATEGORY relationship)."""
        query = """
        MATCH (p:Period {key: $period})
        MERGE (c:Category {category_id: $category_id})
        SET c.key = $category,
            c.period = $period
        MERGE (p)-[:HAS_CATEGORY]->(c)
        """
        self.db.execute_write(
            query,
            {
                "period": period,
                "category": category,
                "category_id": f"{period}/{category}",
            },
        )
        self.stats["categories"] += 1

    def load_skill(self, period: str, category: str, path: tuple[str, ...]) -> None:
        """Load a skill node at any depth.

        Top-level skills hang off their category (HAS_SKILL); deeper nodes
        hang off their parent skill (HAS_SUB_SKILL).
        """
        key = path[-1]
        params = {
            "path_id": "/".join((period, category) + path),
            "parent_id": "/".join((period, category) + path[:-1]),
            "key": key,
            "keyword": format_backbone_key_as_label(key),
            "synonyms": SKILL_SYNONYMS.get(category, {}).get(key, []),
            "depth": len(path),
            "period": period,
            "category": category,
        }
        if len(path) == 1:
            parent_match = "MATCH (parent:Category {category_id: $parent_id})"
            rel_type = "HAS_SKILL"
        else:
            parent_match = "MATCH (parent:Skill {path_id: $parent_id})"
            rel_type = "HAS_SUB_SKILL"
        query = f"""
        {parent_match}
        MERGE (s:Skill {{path_id: $path_id}})
        SET s.key = $key,
            s.keyword = $keyword,
            s.synonyms = $synonyms,
            s.depth = $depth,
            s.period = $period,
            s.category = $category
        MERGE (parent)-[:{rel_type}]->(s)
        """
        self.db.execute_write(query, params)
        self.stats["skills"] += 1

    def load_skill_tree(self, period: str, category: str, node: Any, path: tuple[str, ...] = ()) -> None:
        """Load a skill tree of variable depth below ``path``."""
        if isinstance(node, dict):
            for key, child in node.items():
                self.load_skill(period, category, path + (key,))
                self.load_skill_tree(period, category, child, path + (key,))
        elif isinstance(node, list):
            for leaf in node:
                self.load_skill(period, category, path + (leaf,))

    def load_phase(self, period: str, phase: str) -> None:
        """Load a tactical phase (HAS_PHASE relationship)."""
        query = """
        MATCH (c:Category {category_id: $category_id})
        MERGE (ph:Phase {phase_id: $phase_id})
        SET ph.key = $phase,
            ph.period = $period
        MERGE (c)-[:HAS_PHASE]->(ph)
        """
        self.db.execute_write(
            query,
            {
                "category_id": f"{period}/tactical",
                "phase_id": f"{period}/{phase}",
                "phase": phase,
                "period": period,
            },
        )
        self.stats["phases"] += 1

    def load_tactical_keyword(self, period: str, phase: str, key: str, entry: KeywordEntry) -> None:
        """Load a tactical keyword (HAS_KEYWORD relationship)."""
        query = """
        MATCH (ph:Phase {phase_id: $phase_id})
        MERGE (k:TacticalKeyword {keyword_id: $keyword_id})
        SET k.key = $key,
            k.keyword = $keyword,
            k.synonyms = $synonyms,
            k.positions = $positions,
            k.technical_coaching_point = $technical_coaching_point,
            k.pressing_trigger = $pressing_trigger
        MERGE (ph)-[:HAS_KEYWORD]->(k)
        """
        self.db.execute_write(
            query,
            {
                "phase_id": f"{period}/{phase}",
                "keyword_id": f"{period}/{phase}/{key}",
                "key": key,
                "keyword": entry.keyword,
                "synonyms": list(entry.synonyms),
                "positions": list(entry.positions),
                "technical_coaching_point": entry.technical_coaching_point,
                "pressing_trigger": entry.pressing_trigger,
            },
        )
        self.stats["keywords"] += 1

    def load_all(self) -> dict[str, int]:
        """Load the whole backbone, period by period."""
        self.db.create_constraints()
        self.db.create_indexes()

        for order, (period, categories) in enumerate(CURRICULUM_BACKBONE.items(), start=1):
            self.load_period(period, order)
            for category, tree in categories.items():
                self.load_category(period, category)
                if category != "tactical":
                    self.load_skill_tree(period, category, tree)
                    continue
                for phase, entries in tree.items():
                    self.load_phase(period, phase)
                    for key, entry in entries.items():
                        self.load_tactical_keyword(period, phase, key, entry)

        logger.info("curriculum_graph_loaded", **self.stats)
        return dict(self.stats)


def load_curriculum_graph(db: Neo4jDatabase) -> dict[str, int]:
    """Load the full curriculum into the database and return node counts."""
    configure_logging()
    loader = CurriculumGraphLoader(db)
    return loader.load_all()
