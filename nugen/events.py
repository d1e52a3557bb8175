import sqlite3
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import event_db_path
from .constants import k1E38Cm2, kGeV2ToCm2
from .interaction import Interaction, channel_key


class EventDB:
    """
    Stores selected interactions (one row per generated event) in sqlite.
    Cross sections are stored in units of 1e-38 cm^2.
    """

    def __init__(self, db_path: Optional[Path] = None):
        self.db_path = Path(db_path) if db_path is not None else event_db_path()
        self.create_table()

    @contextmanager
    def get_connection(self):
        """Context manager for safe DB access."""
        conn = sqlite3.connect(self.db_path)
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    def create_table(self):
        with self.get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS events (
                    event_id INTEGER PRIMARY KEY AUTOINCREMENT,
                    channel TEXT,
                    probe INTEGER,
                    target INTEGER,
                    process TEXT,
                    algorithm TEXT,
                    probe_energy REAL,
                    xsec REAL,
                    weight REAL,
                    timestamp TEXT
                )
            """)

    def store_event(self, interaction: Interaction, algorithm: str, xsec: float, weight: float = 1.0) -> int:
        """
        Store one event and return its event_id.

        Args:
            interaction: the selected channel (with probe four-momentum)
            algorithm: id of the cross-section algorithm that owns the channel
            xsec: channel cross section in GeV^-2
            weight: event weight
        """
        with self.get_connection() as conn:
            cur = conn.execute("""
                INSERT INTO events (
                    channel, probe, target, process, algorithm,
                    probe_energy, xsec, weight, timestamp
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """, (
                channel_key(interaction),
                interaction.init_state.probe,
                interaction.target.pdg,
                str(interaction.proc_info),
                algorithm,
                interaction.init_state.probe_energy,
                xsec * kGeV2ToCm2 / k1E38Cm2,
                weight,
                datetime.now().isoformat(timespec="seconds"),
            ))
            return cur.lastrowid

    def fetch_event(self, event_id: int) -> Optional[Dict[str, Any]]:
        with self.get_connection() as conn:
            conn.row_factory = sqlite3.Row
            row = conn.execute("SELECT * FROM events WHERE event_id = ?", (event_id,)).fetchone()
        return dict(row) if row else None

    def list_events(self, limit: int = 10, process: Optional[str] = None) -> List[Dict[str, Any]]:
        """Most recent events first, optionally filtered by process label (e.g. 'Weak[CC],QES')."""
        query = "SELECT * FROM events"
        params: list = []
        if process:
            query += " WHERE process = ?"
            params.append(process)
        query += " ORDER BY event_id DESC LIMIT ?"
        params.append(limit)

        with self.get_connection() as conn:
            conn.row_factory = sqlite3.Row
            return [dict(row) for row in conn.execute(query, params).fetchall()]

    def stats(self) -> Dict[str, Any]:
        with self.get_connection() as conn:
            cur = conn.cursor()
            cur.execute("SELECT COUNT(*) FROM events")
            total = cur.fetchone()[0]
            cur.execute("SELECT process, COUNT(*) FROM events GROUP BY process ORDER BY COUNT(*) DESC")
            by_process = {process: count for process, count in cur.fetchall()}
            cur.execute("SELECT AVG(probe_energy) FROM events")
            avg_energy = cur.fetchone()[0] or 0.0

        return {
            "total_events": total,
            "by_process": by_process,
            "average_probe_energy": avg_energy,
        }

    def clear_events(self):
        """Delete all events (use with caution!)."""
        with self.get_connection() as conn:
            conn.execute("DELETE FROM events")
