"""Neo4j connection and operations for the curriculum graph."""

import os
from contextlib import contextmanager
from typing import Any, Generator, Optional

from neo4j import GraphDatabase, Driver, Session
from neo4j.exceptions import Neo4jError

from .logging_config import get_logger

logger = get_logger(__name__)


class Neo4jDatabase:
    """Neo4j database connection manager."""

    def __init__(
        self,
        uri: Optional[str] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
    ):
        self.uri = uri or os.getenv("NEO4J_URI", "bolt://localhost:7687")
        self.user = user or os.getenv("NEO4J_USER", "neo4j")
        self.password = password or os.getenv("NEO4J_PASSWORD", "password")
        self._driver: Optional[Driver] = None

    def connect(self) -> None:
        """Establish connection to Neo4j database."""
        if self._driver is None:
            self._driver = GraphDatabase.driver(
                self.uri,
                auth=(self.user, self.password),
            )
            logger.info("neo4j_connected", uri=self.uri)

    def close(self) -> None:
        """Close database connection."""
        if self._driver:
            self._driver.close()
            self._driver = None
            logger.info("neo4j_closed", uri=self.uri)

    @property
    def driver(self) -> Driver:
        """Get the database driver, connecting if necessary."""
        if self._driver is None:
            self.connect()
        return self._driver  # type: ignore

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Create a database session context manager."""
        session = self.driver.session()
        try:
            yield session
        finally:
            session.close()

    def execute_query(
        self, query: str, parameters: Optional[dict[str, Any]] = None
    ) -> list[dict[str, Any]]:
        """Execute a Cypher query and return results."""
        with self.session() as session:
            result = session.run(query, parameters or {})
            return [dict(record) for record in result]

    def execute_write(
        self, query: str, parameters: Optional[dict[str, Any]] = None
    ) -> None:
        """Execute a write query."""
        with self.session() as session:
            session.run(query, parameters or {})

    def clear_database(self) -> None:
        """Remove every curriculum node and relationship."""
        self.execute_write("MATCH (n) DETACH DELETE n")

    def create_constraints(self) -> None:
        """Create uniqueness constraints for node types."""
        constraints = [
            "CREATE CONSTRAINT period_key IF NOT EXISTS FOR (p:Period) REQUIRE p.key IS UNIQUE",
            "CREATE CONSTRAINT category_id IF NOT EXISTS FOR (c:Category) REQUIRE c.category_id IS UNIQUE",
            "CREATE CONSTRAINT skill_path_id IF NOT EXISTS FOR (s:Skill) REQUIRE s.path_id IS UNIQUE",
            "CREATE CONSTRAINT phase_id IF NOT EXISTS FOR (ph:Phase) REQUIRE ph.phase_id IS UNIQUE",
            "CREATE CONSTRAINT tactical_keyword_id IF NOT EXISTS FOR (k:TacticalKeyword) REQUIRE k.keyword_id IS UNIQUE",
        ]
        for constraint in constraints:
            try:
                self.execute_write(constraint)
            except Neo4jError as exc:
                # Constraint may already exist
                logger.debug("constraint_skipped", query=constraint, error=str(exc))

    def create_indexes(self) -> None:
        """Create indexes for commonly queried properties."""
        indexes = [
            "CREATE INDEX skill_key IF NOT EXISTS FOR (s:Skill) ON (s.key)",
            "CREATE INDEX skill_keyword IF NOT EXISTS FOR (s:Skill) ON (s.keyword)",
            "CREATE INDEX tactical_keyword_key IF NOT EXISTS FOR (k:TacticalKeyword) ON (k.key)",
            "CREATE INDEX tactical_keyword_text IF NOT EXISTS FOR (k:TacticalKeyword) ON (k.keyword)",
        ]
        for index in indexes:
            try:
                self.execute_write(index)
            except Neo4jError as exc:
                # Index may already exist
                logger.debug("index_skipped", query=index, error=str(exc))
