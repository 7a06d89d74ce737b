from datetime import date, timedelta

import pytest

from studydesk.reminder import Urgency, reminder_html, urgency_for

TODAY = date(2024, 1, 1)


@pytest.mark.parametrize(
    "days, expected",
    [
        (0, Urgency.TODAY),
        (1, Urgency.SOON),
        (6, Urgency.SOON),
        (7, Urgency.UPCOMING),
        (14, Urgency.UPCOMING),
        (15, Urgency.LATER),
    ],
)
def test_urgency_boundaries(days, expected):
    assert urgency_for(days) is expected


def test_negative_days_rejected():
    with pytest.raises(ValueError):
        urgency_for(-1)


def test_styles_are_source_colours():
    assert urgency_for(0).style == "color:#D32F2F; font-weight:bold;"
    assert urgency_for(3).style == "color:#D32F2F;"
    assert urgency_for(10).style == "color:#FBC02D;"
    assert urgency_for(30).style == "color:#388E3C;"


def test_no_dates():
    assert reminder_html([], TODAY) == "<h2>太棒了！</h2><p>未来没有任何已安排的日程。</p>"


def test_only_past_dates():
    html = reminder_html([TODAY - timedelta(days=3)], TODAY)
    assert html.startswith("<h1>未来日程一览</h1><hr>")
    assert "<p>未来没有任何已安排的日程。</p>" in html
    assert "<ul>" not in html


def test_today_entry():
    html = reminder_html([TODAY], TODAY)
    assert "2024年01月01日 (星期一)" in html
    assert " (今天)</li>" in html
    assert Urgency.TODAY.style in html


def test_days_until_text():
    html = reminder_html([TODAY + timedelta(days=3)], TODAY)
    assert " (3天后)</li>" in html
    assert Urgency.SOON.style in html


def test_future_dates_sorted_and_past_dropped():
    later = TODAY + timedelta(days=20)
    sooner = TODAY + timedelta(days=10)
    past = TODAY - timedelta(days=1)
    html = reminder_html([later, past, sooner], TODAY)
    assert html.count("<li>") == 2
    assert html.index(f"{sooner.month:02d}月{sooner.day:02d}日") < html.index(
        f"{later.month:02d}月{later.day:02d}日"
    )
    assert f"{past.month:02d}月{past.day:02d}日" not in html