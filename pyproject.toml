[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "studydesk"
version = "0.1.0"
description = "Personal study assistant library: daily tasks, reminders, study-time statistics, course schedules, free-room lookup and weather."
requires-python = ">=3.10"
dependencies = []
keywords = ["study", "schedule", "tasks", "timetable", "reminder", "statistics", "weather"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["studydesk*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
