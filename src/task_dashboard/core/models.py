# src/task_dashboard/core/models.py

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum


class Section(StrEnum):
    """
    Task list category.

    Declaration order is the display order on the dashboard, and the first
    member is where tasks land before any heading is seen.
    """

    IN_PROGRESS = "in_progress"
    UP_NEXT = "up_next"
    DONE = "done"


@dataclass(slots=True)
class Task:
    text: str
    completed: bool
    tags: list[str] = field(default_factory=list)
    due_date: str | None = None


@dataclass(slots=True)
class TaskSet:
    in_progress: list[Task] = field(default_factory=list)
    up_next: list[Task] = field(default_factory=list)
    done: list[Task] = field(default_factory=list)

    def section(self, section: Section) -> list[Task]:
        if section is Section.IN_PROGRESS:
            return self.in_progress
        if section is Section.UP_NEXT:
            return self.up_next
        return self.done

    def sections(self) -> Iterator[tuple[Section, list[Task]]]:
        for section in Section:
            yield section, self.section(section)

    @property
    def total(self) -> int:
        return len(self.in_progress) + len(self.up_next) + len(self.done)


@dataclass(slots=True, frozen=True)
class Note:
    filename: str
    title: str
    html: str
