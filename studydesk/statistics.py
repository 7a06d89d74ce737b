"""Daily study duration charts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Mapping, Optional, Tuple

NO_DATA_MESSAGE = "暂无自习数据，快去自习吧！"


class ChartType(Enum):
    BAR = "条形图"
    LINE = "折线图"

    @property
    def label(self) -> str:
        return self.value


class TimeUnit(Enum):
    """Display unit with its size in seconds and its label."""

    SECONDS = (1.0, "秒")
    MINUTES = (60.0, "分钟")
    HOURS = (3600.0, "小时")

    @property
    def factor(self) -> float:
        return self.value[0]

    @property
    def label(self) -> str:
        return self.value[1]


_UNIT_ORDER = (TimeUnit.MINUTES, TimeUnit.SECONDS, TimeUnit.HOURS)


def unit_from_index(index: int) -> TimeUnit:
    """Map a unit selector position (minutes, seconds, hours) to a unit."""
    if not 0 <= index < len(_UNIT_ORDER):
        raise ValueError(f"no time unit at index {index}")
    return _UNIT_ORDER[index]


@dataclass(frozen=True)
class ChartData:
    """Everything needed to draw one chart."""

    chart_type: ChartType
    unit: TimeUnit
    title: str
    axis_title: str
    categories: Tuple[str, ...]
    values: Tuple[float, ...]
    axis_max: float

    @property
    def points(self) -> List[Tuple[int, float]]:
        return list(enumerate(self.values))


def build_chart_data(
    daily_durations: Mapping[date, int],
    chart_type: ChartType = ChartType.BAR,
    unit: TimeUnit = TimeUnit.MINUTES,
) -> Optional[ChartData]:
    """Convert per-day seconds into chart data; None when there is nothing to show."""
    if not daily_durations:
        return None
    days = sorted(daily_durations)
    values = tuple(daily_durations[d] / unit.factor for d in days)
    max_value = max(0.0, *values)
    axis_max = max_value * 1.1 + (1.0 if max_value > 0 else 5.0)
    return ChartData(
        chart_type=chart_type,
        unit=unit,
        title=f"每日自习时长统计 ({chart_type.label})",
        axis_title=f"时长 ({unit.label})",
        categories=tuple(d.strftime("%m-%d") for d in days),
        values=values,
        axis_max=axis_max,
    )


def render_text(chart_data: Optional[ChartData], width: int = 40) -> str:
    """Draw the chart as plain text, one row per day."""
    if width <= 0:
        raise ValueError("width must be positive")
    if chart_data is None:
        return NO_DATA_MESSAGE
    lines = [chart_data.title, chart_data.axis_title]
    for category, value in zip(chart_data.categories, chart_data.values):
        length = round(value / chart_data.axis_max * width)
        if chart_data.chart_type is ChartType.BAR:
            mark = "█" * length
        else:
            mark = " " * max(length - 1, 0) + "●"
        lines.append(f"{category} | {mark} {value:.1f}")
    return "\n".join(lines)