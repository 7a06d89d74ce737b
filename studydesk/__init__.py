"""Personal study assistant library: tasks, reminders, study statistics, schedules, free rooms and weather."""

__version__ = "0.1.0"