# studydesk

A personal study assistant library. It keeps a small SQLite database of daily
tasks and study sessions and offers the logic around them as plain Python
functions and classes:

- **Daily tasks** (`studydesk.tasks`, `studydesk.task_editor`): `DailyTask`
  records with `HH:mm` start and end times (`format_time`, `parse_time`), and a
  `TaskEditor` that selects, creates, updates and deletes one day's tasks while
  keeping the database in step.
- **Storage** (`studydesk.database`): `Database` stores tasks and study sessions
  in an SQLite file and reports per-day study totals. Failures raise
  `DatabaseError`.
- **Reminders** (`studydesk.reminder`): `reminder_html` builds an HTML overview of
  task dates from today onward, coloured by `Urgency` (today, within 6 days,
  within 14 days, later).
- **Study statistics** (`studydesk.statistics`): `build_chart_data` turns per-day
  seconds into bar or line `ChartData` in seconds, minutes or hours;
  `render_text` draws it as plain text.
- **Course schedule** (`studydesk.schedule`): `parse_schedule` reads a JSON array
  of courses, `ScheduleGrid` places them on a 7-day × 12-period grid, and
  `ScheduleStore` keeps the last schedule JSON in a file.
- **Free rooms** (`studydesk.freerooms`): `parse_free_rooms` and
  `free_rooms_for_period` pick free classrooms per building and section out of a
  JSON room report.
- **Weather** (`studydesk.weather`): `fetch_weather` gets the current weather of a
  city as a `WeatherReport`, with condition descriptions translated into Chinese
  by `translate_condition`.
- **Banner** (`studydesk.typewriter`): `Typewriter` types a random phrase letter
  by letter, then erases it, yielding the text and delay of each step.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library use

```python
import datetime
from studydesk.database import Database
from studydesk.tasks import DailyTask
from studydesk.reminder import reminder_html

with Database("tasks.db") as db:
    task = DailyTask(
        title="Read chapter 3",
        start_time=datetime.time(9, 0),
        end_time=datetime.time(10, 30),
    )
    task_id = db.add_task(datetime.date.today(), task)
    print(reminder_html(db.dates_with_tasks(), datetime.date.today()))
```

Editing a day's tasks:

```python
from studydesk.task_editor import TaskEditor

today = datetime.date.today()
editor = TaskEditor(db, today, db.tasks_for_date(today))
editor.save("Revise notes", datetime.time(14, 0), datetime.time(15, 0), "")
editor.select(0)
editor.save("Read chapter 3 again")   # updates the selected task
```

Study statistics:

```python
from studydesk.statistics import ChartType, TimeUnit, build_chart_data, render_text

data = build_chart_data(db.daily_study_durations(), ChartType.BAR, TimeUnit.MINUTES)
print(render_text(data, 40))
```

Course schedule:

```python
from studydesk.schedule import ScheduleGrid, parse_schedule

courses = parse_schedule('[{"name": "Calculus", "day": 1, "start_period": 1, "periods": 2}]')
grid = ScheduleGrid.from_courses(courses)
grid.is_free(1, 0)   # False: the second period of Monday is taken
```

Weather lookups need an API key of your own:

```python
from studydesk.weather import fetch_weather

report = fetch_weather("Beijing", api_key="placeholder")
print(report.city, report.temperature_text, report.condition_zh)
```

## What it does not do

studydesk is a library only. It has no command-line program and no graphical
window; calendar, dialogs and charts are left to the application that uses it.
It has no study-session stopwatch either: study sessions are recorded by calling
`Database.add_study_session` with their start, end and duration. It does not
scrape course timetables or query free rooms itself; it reads the JSON such tools
produce.