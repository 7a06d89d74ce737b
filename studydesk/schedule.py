"""Weekly course timetable: parsing, grid placement and persistence."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

NUM_DAYS = 7
NUM_PERIODS = 12
DAY_LABELS = ("一", "二", "三", "四", "五", "六", "日")
SCHEDULE_SUFFIXES = ("html", "txt")

JsonInput = Union[str, bytes, bytearray]


class ScheduleError(Exception):
    """Raised when schedule data is missing or not in the expected format."""


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _to_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class Course:
    """A course occupying consecutive periods on one weekday (both 1-based)."""

    name: str = ""
    classroom: str = ""
    teacher: str = ""
    color: str = ""
    day: int = 0
    start_period: int = 0
    periods: int = 0

    @classmethod
    def from_json(cls, obj: Any) -> "Course":
        if not isinstance(obj, dict):
            obj = {}
        return cls(
            name=_to_text(obj.get("name")),
            classroom=_to_text(obj.get("classroom")),
            teacher=_to_text(obj.get("teacher")),
            color=_to_text(obj.get("color")),
            day=_to_int(obj.get("day")),
            start_period=_to_int(obj.get("start_period")),
            periods=_to_int(obj.get("periods")),
        )

    @property
    def display_text(self) -> str:
        return f"{self.name}\n\n@{self.classroom}\n{self.teacher}"


class ScheduleGrid:
    """A periods-by-days table of courses; rows are periods, columns are days."""

    def __init__(self):
        self._anchors: Dict[Tuple[int, int], Course] = {}

    @classmethod
    def from_courses(cls, courses: Iterable[Course]) -> "ScheduleGrid":
        grid = cls()
        for course in courses:
            grid.place(course)
        return grid

    def place(self, course: Course) -> bool:
        """Place a course; returns False when its day or start lies outside the grid."""
        row = course.start_period - 1
        column = course.day - 1
        if not (0 <= column < NUM_DAYS and 0 <= row < NUM_PERIODS):
            return False
        self._anchors[(row, column)] = course
        return True

    @staticmethod
    def _check(row: int, column: int) -> None:
        if not (0 <= row < NUM_PERIODS and 0 <= column < NUM_DAYS):
            raise IndexError(f"cell ({row}, {column}) is outside the schedule")

    def cell(self, row: int, column: int) -> Optional[Course]:
        """The course covering a 0-based cell, or None when it is free."""
        self._check(row, column)
        if (row, column) in self._anchors:
            return self._anchors[(row, column)]
        for (start, col), course in self._anchors.items():
            if col == column and start <= row < start + max(course.periods, 1):
                return course
        return None

    def is_free(self, row: int, column: int) -> bool:
        return self.cell(row, column) is None

    def __iter__(self):
        return iter(sorted(self._anchors.items()))

    def __len__(self) -> int:
        return len(self._anchors)


class ScheduleStore:
    """Keeps the last successfully parsed schedule JSON in a file."""

    def __init__(self, path):
        self.path = Path(path)

    def save(self, json_data: JsonInput) -> None:
        data = json_data.encode("utf-8") if isinstance(json_data, str) else bytes(json_data)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(data)

    def load(self) -> Optional[bytes]:
        """Saved JSON bytes, or None when nothing has been saved."""
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            return None
        return data or None


def is_schedule_file(path) -> bool:
    """Whether a dropped file has a suffix the scraper accepts."""
    suffix = Path(str(path)).suffix.lstrip(".").lower()
    return suffix in SCHEDULE_SUFFIXES


def parse_schedule(json_data: JsonInput) -> List[Course]:
    """Parse a JSON array of courses. Raises ScheduleError on empty or malformed data."""
    if not json_data:
        raise ScheduleError("未能获取到课表数据，文件可能是空的或格式不正确。")
    text = bytes(json_data).decode("utf-8") if isinstance(json_data, (bytes, bytearray)) else json_data
    try:
        document = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ScheduleError("无法解析课表数据！文件内容可能不符合预期格式。") from exc
    if not isinstance(document, list):
        raise ScheduleError("无法解析课表数据！文件内容可能不符合预期格式。")
    return [Course.from_json(item) for item in document]


def query_title(column: int, period: int, building: str) -> str:
    """Title for a free-room answer, for a 0-based day column and 1-based period."""
    return f"周{DAY_LABELS[column]} 第{period}节 {building} 空闲教室"