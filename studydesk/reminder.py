"""Reminder overview of upcoming days that carry tasks."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Iterable

_WEEKDAYS = ("星期一", "星期二", "星期三", "星期四", "星期五", "星期六", "星期日")


class Urgency(Enum):
    """How close a task date is, with the style used to show it."""

    TODAY = "color:#D32F2F; font-weight:bold;"
    SOON = "color:#D32F2F;"
    UPCOMING = "color:#FBC02D;"
    LATER = "color:#388E3C;"

    @property
    def style(self) -> str:
        return self.value


def urgency_for(days_until: int) -> Urgency:
    """Classify a number of days from today."""
    if days_until < 0:
        raise ValueError("date lies in the past")
    if days_until == 0:
        return Urgency.TODAY
    if days_until <= 6:
        return Urgency.SOON
    if days_until <= 14:
        return Urgency.UPCOMING
    return Urgency.LATER


def _long_date(day: date) -> str:
    return f"{day.year:04d}年{day.month:02d}月{day.day:02d}日 ({_WEEKDAYS[day.weekday()]})"


def reminder_html(task_dates: Iterable[date], today: date) -> str:
    """Build the HTML list of task dates from today onward."""
    dates = list(task_dates)
    if not dates:
        return "<h2>太棒了！</h2><p>未来没有任何已安排的日程。</p>"

    future = sorted(d for d in dates if d >= today)
    parts = ["<h1>未来日程一览</h1><hr>"]
    if not future:
        parts.append("<p>未来没有任何已安排的日程。</p>")
        return "".join(parts)

    parts.append("<p>您在以下日期安排了任务：</p><ul>")
    for day in future:
        days_until = (day - today).days
        urgency = urgency_for(days_until)
        distance = " (今天)" if urgency is Urgency.TODAY else f" ({days_until}天后)"
        parts.append(
            f"<li><span style='{urgency.style}'>{_long_date(day)}</span>{distance}</li>"
        )
    parts.append("</ul>")
    return "".join(parts)