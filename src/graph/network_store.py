"""Stores for family network snapshots."""

import logging
import sqlite3
from pathlib import Path
from typing import Optional

from src.config import StorageSettings, settings
from src.models import FamilyNetwork

logger = logging.getLogger(__name__)


class InMemoryNetworkStore:
    """Keep network snapshots in a dict owned by this store."""

    def __init__(self):
        self._networks: dict[str, FamilyNetwork] = {}

    def get_network(self, network_id: str) -> Optional[FamilyNetwork]:
        """Get a copy of a network, or None."""
        network = self._networks.get(network_id)
        return network.model_copy(deep=True) if network else None

    def save_network(self, network: FamilyNetwork) -> None:
        """Insert or replace a network."""
        self._networks[network.id] = network.model_copy(deep=True)

    def list_networks(self) -> list[FamilyNetwork]:
        return [n.model_copy(deep=True) for n in self._networks.values()]


class SQLiteNetworkStore:
    """Store network snapshots as JSON in SQLite."""

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path or settings.storage.db_path
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self):
        """Initialize database schema."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS family_networks (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    data TEXT NOT NULL,
                    updated_at TEXT DEFAULT CURRENT_TIMESTAMP
                )
            """)

    def get_network(self, network_id: str) -> Optional[FamilyNetwork]:
        """Get network by ID."""
        with sqlite3.connect(self.db_path) as conn:
            row = conn.execute(
                "SELECT data FROM family_networks WHERE id = ?", (network_id,)
            ).fetchone()
        return FamilyNetwork.model_validate_json(row[0]) if row else None

    def save_network(self, network: FamilyNetwork) -> None:
        """Insert or replace a network."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                INSERT INTO family_networks (id, name, data, updated_at)
                VALUES (?, ?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(id) DO UPDATE SET
                    name = excluded.name,
                    data = excluded.data,
                    updated_at = CURRENT_TIMESTAMP
            """, (network.id, network.name, network.model_dump_json()))

    def list_networks(self) -> list[FamilyNetwork]:
        with sqlite3.connect(self.db_path) as conn:
            rows = conn.execute("SELECT data FROM family_networks ORDER BY rowid").fetchall()
        return [FamilyNetwork.model_validate_json(row[0]) for row in rows]


def create_store(storage: Optional[StorageSettings] = None):
    """Build the store selected in settings."""
    storage = storage or settings.storage
    if storage.backend == "sqlite":
        logger.info("Using SQLite network store at %s", storage.db_path)
        return SQLiteNetworkStore(storage.db_path)
    if storage.backend != "memory":
        raise ValueError(f"Unknown storage backend: {storage.backend}")
    logger.info("Using in-memory network store")
    return InMemoryNetworkStore()
