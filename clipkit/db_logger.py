"""
db_logger.py - SQLite run log for clipkit.

One row in `runs` per invocation, any number of `log_entries` per run.
Writes are synchronous: a clipkit process does one run and exits.
Clipboard contents are never stored, only commands, sizes and errors.

Schema:
    runs(id, started_at, command)
    log_entries(id, run_id, timestamp, tag, message, command)

Auto-purges entries older than retain_days (default 30).
"""

import sqlite3
import uuid
from datetime import datetime, timedelta
from pathlib import Path

RETAIN_DAYS = 30


class DBLogger:
    def __init__(self, db_path, retain_days: int = RETAIN_DAYS, command: str = ""):
        self._db_path = Path(db_path)
        self._run     = str(uuid.uuid4())[:8]
        self._command = command

        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(str(self._db_path), timeout=10)
        self._conn.execute("PRAGMA journal_mode=WAL")

        self._init_db()
        self._start_run()
        self._purge_old(retain_days)

    # ── Setup ─────────────────────────────────────────────────────────────────

    def _init_db(self):
        with self._conn:
            self._conn.executescript("""
                CREATE TABLE IF NOT EXISTS runs (
                    id         TEXT PRIMARY KEY,
                    started_at TEXT NOT NULL,
                    command    TEXT
                );
                CREATE TABLE IF NOT EXISTS log_entries (
                    id        INTEGER PRIMARY KEY AUTOINCREMENT,
                    run_id    TEXT NOT NULL,
                    timestamp TEXT NOT NULL,
                    tag       TEXT NOT NULL,
                    message   TEXT NOT NULL,
                    command   TEXT
                );
                CREATE INDEX IF NOT EXISTS idx_log_ts
                    ON log_entries(timestamp);
                CREATE INDEX IF NOT EXISTS idx_log_run
                    ON log_entries(run_id);
                CREATE INDEX IF NOT EXISTS idx_log_tag
                    ON log_entries(tag);
            """)

    def _start_run(self):
        with self._conn:
            self._conn.execute(
                "INSERT INTO runs(id, started_at, command) VALUES(?,?,?)",
                (self._run, datetime.now().isoformat(), self._command)
            )

    def _purge_old(self, retain_days: int):
        cutoff = (datetime.now() - timedelta(days=retain_days)).isoformat()
        with self._conn:
            self._conn.execute(
                "DELETE FROM log_entries WHERE timestamp < ?", (cutoff,)
            )
            self._conn.execute(
                "DELETE FROM runs WHERE started_at < ? "
                "AND id NOT IN (SELECT DISTINCT run_id FROM log_entries)",
                (cutoff,)
            )

    # ── Public API ────────────────────────────────────────────────────────────

    def log(self, message: str, tag: str = "info"):
        with self._conn:
            self._conn.execute(
                "INSERT INTO log_entries"
                "(run_id, timestamp, tag, message, command)"
                " VALUES(?,?,?,?,?)",
                (self._run, datetime.now().isoformat(), tag, message, self._command)
            )

    def get_entries(self, tag: str = None, command: str = None,
                    limit: int = 500) -> list:
        """
        Fetch the latest log entries across runs, oldest first. Returns dicts:
            {id, run_id, timestamp, tag, message, command}
        """
        clauses = []
        params  = []
        if tag:
            clauses.append("tag = ?")
            params.append(tag)
        if command:
            clauses.append("command = ?")
            params.append(command)
        where = ("WHERE " + " AND ".join(clauses)) if clauses else ""
        sql = (
            f"SELECT id, run_id, timestamp, tag, message, command "
            f"FROM log_entries {where} "
            f"ORDER BY id DESC LIMIT ?"
        )
        params.append(limit)
        self._conn.row_factory = sqlite3.Row
        try:
            rows = self._conn.execute(sql, params).fetchall()
        finally:
            self._conn.row_factory = None
        return [dict(r) for r in reversed(rows)]

    def close(self):
        self._conn.close()


class NullLogger:
    """Stands in for DBLogger when the run log is switched off."""

    def log(self, message: str, tag: str = "info"):
        pass

    def close(self):
        pass
