"""SQLite storage for daily tasks and study sessions."""

from __future__ import annotations

import sqlite3
from datetime import date, datetime
from typing import Dict, List, Optional

from .tasks import DailyTask, format_time, parse_time

_CREATE_STUDY_TABLE = """
CREATE TABLE IF NOT EXISTS study_sessions (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    start_time TEXT,
    end_time TEXT,
    duration_seconds INTEGER
)
"""

_CREATE_TASK_TABLE = """
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    date TEXT,
    title TEXT,
    start_time TEXT,
    end_time TEXT,
    note TEXT
)
"""


class DatabaseError(Exception):
    """Raised when the database cannot be opened or a statement fails."""


def _iso_datetime(value: datetime) -> str:
    return value.replace(microsecond=0).isoformat()


class Database:
    """Task and study-session store backed by an SQLite file."""

    def __init__(self, path="tasks.db"):
        try:
            self._conn: Optional[sqlite3.Connection] = sqlite3.connect(
                str(path), isolation_level=None
            )
            self._conn.execute(_CREATE_STUDY_TABLE)
            self._conn.execute(_CREATE_TASK_TABLE)
        except sqlite3.Error as exc:
            raise DatabaseError(f"cannot open database: {exc}") from exc

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _execute(self, sql: str, params=()) -> sqlite3.Cursor:
        if self._conn is None:
            raise DatabaseError("database is not open")
        try:
            return self._conn.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def add_task(self, date: date, task: DailyTask) -> int:
        """Insert a task on the given date and return its new id."""
        cursor = self._execute(
            "INSERT INTO tasks (date, title, start_time, end_time, note) VALUES (?, ?, ?, ?, ?)",
            (
                date.isoformat(),
                task.title,
                format_time(task.start_time),
                format_time(task.end_time),
                task.note,
            ),
        )
        return int(cursor.lastrowid)

    def tasks_for_date(self, date: date) -> List[DailyTask]:
        rows = self._execute(
            "SELECT title, start_time, end_time, note, id FROM tasks WHERE date = ?",
            (date.isoformat(),),
        ).fetchall()
        return [
            DailyTask(
                title or "",
                parse_time(start or ""),
                parse_time(end or ""),
                note or "",
                int(task_id),
            )
            for title, start, end, note, task_id in rows
        ]

    def delete_task(self, task_id: int) -> None:
        self._execute("DELETE FROM tasks WHERE id = ?", (task_id,))

    def update_task(self, task_id: int, task: DailyTask) -> None:
        self._execute(
            "UPDATE tasks SET title = ?, start_time = ?, end_time = ?, note = ? WHERE id = ?",
            (
                task.title,
                format_time(task.start_time),
                format_time(task.end_time),
                task.note,
                task_id,
            ),
        )

    def dates_with_tasks(self) -> List[date]:
        """Distinct dates that carry at least one task."""
        dates = []
        for (text,) in self._execute("SELECT DISTINCT date FROM tasks").fetchall():
            try:
                dates.append(date.fromisoformat(text))
            except (TypeError, ValueError):
                continue
        return dates

    def add_study_session(self, start: datetime, end: datetime, duration_seconds: int) -> None:
        self._execute(
            "INSERT INTO study_sessions (start_time, end_time, duration_seconds) VALUES (?, ?, ?)",
            (_iso_datetime(start), _iso_datetime(end), int(duration_seconds)),
        )

    def daily_study_durations(self) -> Dict[date, int]:
        """Total study seconds per day, keyed and ordered by date."""
        totals: Dict[date, int] = {}
        rows = self._execute(
            "SELECT start_time, duration_seconds FROM study_sessions ORDER BY start_time ASC"
        ).fetchall()
        for start_text, duration in rows:
            try:
                day = datetime.fromisoformat(start_text).date()
            except (TypeError, ValueError):
                continue
            totals[day] = totals.get(day, 0) + int(duration or 0)
        return dict(sorted(totals.items()))

    def delete_all_study_sessions(self) -> None:
        self._execute("DELETE FROM study_sessions")
        self._execute("VACUUM")