"""
Core database management for the box league tracker.

The database is a plain key/value store of JSON blobs. Callers read and write a
whole collection at once under a single key.
"""

import sqlite3
import logging
from typing import Dict, Any, Optional
from config.config_manager import ConfigManager

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Manages core database operations and initialization."""
    
    def __init__(self, db_path: Optional[str] = None, config_file: str = "config.yaml"):
        self.config = ConfigManager.load_config(config_file)
        self.db_path = db_path or self.config['database_path']
        self.init_database()
    
    def init_database(self) -> None:
        """Initialize the database with required tables."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS stored_data (
                    key TEXT PRIMARY KEY,
                    data TEXT NOT NULL,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            conn.commit()
            logger.info("Database initialized successfully")
    
    def read_blob(self, key: str) -> Optional[str]:
        """Return the blob stored under key, or None."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT data FROM stored_data WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row[0] if row else None
    
    def write_blob(self, key: str, data: str) -> None:
        """Replace the blob stored under key in a single transaction."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("""
                INSERT INTO stored_data (key, data) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET data = excluded.data, updated_at = CURRENT_TIMESTAMP
            """, (key, data))
            conn.commit()
            logger.debug(f"Stored {len(data)} bytes under '{key}'")
    
    def delete_blob(self, key: str) -> bool:
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM stored_data WHERE key = ?", (key,))
            conn.commit()
            return cursor.rowcount > 0
    
    def get_database_stats(self) -> Dict[str, Any]:
        """Get basic database statistics."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()
            
            cursor.execute("SELECT COUNT(*), COALESCE(SUM(LENGTH(data)), 0) FROM stored_data")
            keys, total_bytes = cursor.fetchone()
            
            return {
                'stored_keys': keys,
                'total_bytes': total_bytes
            }
