"""Free classroom lookup from the JSON produced by a room query."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

BUILDINGS = (
    "一教", "二教", "三教", "四教", "理教",
    "文史", "哲学", "地学楼", "国关", "政管",
)
DAY_OPTIONS = ("今天", "明天", "后天")
SECTION_LABELS = tuple(f"第{i}节课" for i in range(1, 13))

_NON_DIGITS = re.compile(r"[^0-9]")

JsonInput = Union[str, bytes, bytearray]


def section_number(label: str) -> str:
    """Keep only the digits of a section label, e.g. ``第3节课`` or ``c3`` -> ``3``."""
    return _NON_DIGITS.sub("", label)


@dataclass(frozen=True)
class RoomRecord:
    """One free room in one section."""

    section: str
    room: str


@dataclass(frozen=True)
class FreeRoomResult:
    """Rooms found for a building; ``building`` is None when no data was available."""

    building: Optional[str]
    records: Tuple[RoomRecord, ...] = field(default_factory=tuple)

    @property
    def count(self) -> int:
        return len(self.records)

    @property
    def status(self) -> str:
        if self.building is None:
            return "状态：无可用数据"
        if not self.records:
            return "状态：未找到空闲教室"
        return f"状态：共找到 {self.count} 条记录"


def _as_object(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_array(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _decode(json_text: JsonInput) -> str:
    if isinstance(json_text, (bytes, bytearray)):
        return bytes(json_text).decode("utf-8")
    return json_text


def _load_object(payload: str) -> Mapping[str, Any]:
    try:
        document = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise ValueError("JSON document is not an object")
    return document


def parse_free_rooms(
    json_text: JsonInput,
    building: str,
    selected_sections: Iterable[str] = (),
) -> FreeRoomResult:
    """Collect free rooms of a building, optionally filtered to some sections.

    Empty input counts as an empty object. When the building is missing, the
    first building key present is used instead. Raises ValueError when the
    text is not a JSON object.
    """
    payload = _decode(json_text).strip() or "{}"
    root = _load_object(payload)

    actual = building
    if building not in root:
        keys = sorted(root)
        if not keys:
            return FreeRoomResult(building=None)
        actual = keys[0]

    wanted = {section_number(s) for s in selected_sections}
    building_obj = _as_object(root.get(actual))
    records = []
    for date_key in sorted(building_obj):
        sections = _as_object(building_obj[date_key])
        for section_key in sorted(sections):
            number = section_number(section_key)
            if wanted and number not in wanted:
                continue
            for room_value in _as_array(sections[section_key]):
                room = _as_text(room_value)
                if room:
                    records.append(RoomRecord(number, room))
    return FreeRoomResult(building=actual, records=tuple(records))


def free_rooms_for_period(
    data: Union[JsonInput, Mapping[str, Any]],
    building: str,
    period: int,
) -> List[str]:
    """Rooms of a building listed under section ``c<period>`` across all dates.

    Raises ValueError when the data is empty or is not a JSON object.
    """
    if isinstance(data, Mapping):
        root = data
    else:
        text = _decode(data)
        if not text:
            raise ValueError("query returned no data")
        root = _load_object(text)

    section_key = f"c{period}"
    building_obj = _as_object(root.get(building))
    rooms: List[str] = []
    for date_key in sorted(building_obj):
        sections = _as_object(building_obj[date_key])
        if section_key in sections:
            rooms.extend(_as_text(v) for v in _as_array(sections[section_key]))
    return rooms