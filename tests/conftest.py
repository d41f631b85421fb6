"""Pytest configuration and fixtures for the soccer curriculum tests."""

import os
import re

import pytest

# Set up test environment
os.environ.setdefault("NEO4J_URI", "bolt://localhost:7687")
os.environ.setdefault("NEO4J_USER", "neo4j")
os.environ.setdefault("NEO4J_PASSWORD", "password")
os.environ.setdefault("LOG_LEVEL", "WARNING")


class RecordingNeo4jDatabase:
    """In-memory stand-in for Neo4jDatabase that records every write."""

    def __init__(self):
        self.writes: list[tuple[str, dict]] = []
        self.constraints_created = False
        self.indexes_created = False
        self._connected = False

    def connect(self):
        self._connected = True

    def close(self):
        self._connected = False

    def execute_query(self, query: str, parameters: dict = None) -> list:
        """Reads are not needed by the loader tests."""
        return []

    def execute_write(self, query: str, parameters: dict = None) -> None:
        self.writes.append((query, parameters or {}))

    def create_constraints(self) -> None:
        self.constraints_created = True

    def create_indexes(self) -> None:
        self.indexes_created = True

    def writes_for(self, label: str) -> list[dict]:
        """Parameters of every write that merges a node with ``label``."""
        pattern = re.compile(rf"MERGE \(\w+:{label} \{{")
        return [params for query, params in self.writes if pattern.search(query)]


@pytest.fixture
def mock_db():
    """Provide a recording database for loader tests."""
    db = RecordingNeo4jDatabase()
    db.connect()
    return db
