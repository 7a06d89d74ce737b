"""Editing the tasks of one day: select, create, update and delete."""

from __future__ import annotations

from datetime import date, time
from typing import Iterable, List, Optional, Tuple

from .database import Database
from .tasks import DailyTask


class TaskEditor:
    """Keeps a day's task list in step with the database.

    The editor is either in new-task mode (nothing selected) or in edit mode,
    where saving replaces the selected task.
    """

    def __init__(self, database: Database, date: date, tasks: Iterable[DailyTask] = ()):
        self._database = database
        self.date = date
        self._tasks: List[DailyTask] = list(tasks)
        self._editing_index = -1

    @property
    def tasks(self) -> Tuple[DailyTask, ...]:
        return tuple(self._tasks)

    @property
    def selected(self) -> Optional[DailyTask]:
        """The task being edited, or None in new-task mode."""
        if self.is_edit_mode():
            return self._tasks[self._editing_index]
        return None

    def titles(self) -> List[str]:
        return [task.title for task in self._tasks]

    def select(self, index: int) -> Optional[DailyTask]:
        """Start editing the task at ``index``; an invalid index returns to new-task mode."""
        if not 0 <= index < len(self._tasks):
            self.new_task()
            return None
        self._editing_index = index
        return self._tasks[index]

    def new_task(self) -> None:
        """Leave edit mode so the next save creates a task."""
        self._editing_index = -1

    def save(
        self,
        title: str,
        start_time: Optional[time] = None,
        end_time: Optional[time] = None,
        note: str = "",
    ) -> DailyTask:
        """Create a task, or update the selected one, and return what was stored.

        Raises ValueError when the title is empty; database failures propagate
        as DatabaseError and leave the list unchanged. Afterwards the editor is
        back in new-task mode.
        """
        if not title:
            raise ValueError("标题不能为空！")

        if self.is_edit_mode():
            old_id = self._tasks[self._editing_index].id
            task = DailyTask(title, start_time, end_time, note, old_id)
            self._database.update_task(old_id, task)
            self._tasks[self._editing_index] = task
        else:
            draft = DailyTask(title, start_time, end_time, note)
            new_id = self._database.add_task(self.date, draft)
            task = DailyTask(title, start_time, end_time, note, new_id)
            self._tasks.append(task)

        self.new_task()
        return task

    def delete_selected(self) -> DailyTask:
        """Delete the selected task from the database and the list.

        Raises LookupError when no task is selected.
        """
        if not self.is_edit_mode():
            raise LookupError("请选择一个要删除的日程！")
        index = self._editing_index
        task = self._tasks[index]
        self._database.delete_task(task.id)
        self.delete_task(index)
        self.new_task()
        return task

    def delete_task(self, index: int) -> Optional[DailyTask]:
        """Drop the task at ``index`` from the list only; out-of-range indices are ignored."""
        if not 0 <= index < len(self._tasks):
            return None
        task = self._tasks.pop(index)
        self._editing_index = -1
        return task

    def is_edit_mode(self) -> bool:
        return 0 <= self._editing_index < len(self._tasks)