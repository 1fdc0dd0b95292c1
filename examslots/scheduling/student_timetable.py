from dataclasses import dataclass, field
from typing import List, Optional

from ..config import ScheduleConfig, resolve
from ..models import ScheduleResult, Student


@dataclass
class TimetableEntry:
    course: str
    slot: int
    day: int
    session: int

    @property
    def label(self) -> str:
        return f"Day {self.day}, Session {self.session}"


@dataclass
class StudentTimetable:
    student: Student
    entries: List[TimetableEntry] = field(default_factory=list)
    conflicts: int = 0  # conflict edges among the student's own courses
    unique_slots: int = 0
    max_day: int = 0  # last exam day, 0 without entries


def slot_to_day_session(slot: int, sessions_per_day: int):
    return (slot - 1) // sessions_per_day + 1, (slot - 1) % sessions_per_day + 1


def find_student(result: ScheduleResult, query: str) -> Student:
    """Exact id first, then case-insensitive id, then substring of the id."""
    q = query.strip()
    for s in result.students:
        if s.id == q:
            return s
    for s in result.students:
        if s.id.lower() == q.lower():
            return s
    if q:
        for s in result.students:
            if q.lower() in s.id.lower():
                return s
    raise KeyError(query)


def student_timetable(result: ScheduleResult, student_id: str,
                      sessions_per_day: Optional[int] = None,
                      config: Optional[ScheduleConfig] = None) -> StudentTimetable:
    if sessions_per_day is None:
        sessions_per_day = resolve(config).sessions_per_day
    if sessions_per_day < 1:
        raise ValueError("sessions_per_day must be >= 1")
    student = find_student(result, student_id)

    mine: List[str] = []
    for c in student.courses:
        if c in result.courses and c not in mine:
            mine.append(c)

    entries = []
    for c in mine:
        slot = result.courses[c].slot
        day, session = slot_to_day_session(slot, sessions_per_day)
        entries.append(TimetableEntry(course=c, slot=slot, day=day, session=session))
    entries.sort(key=lambda e: (e.slot, e.course))

    G = result.graph
    conflicts = sum(1 for i in range(len(mine)) for j in range(i + 1, len(mine))
                    if G.has_edge(mine[i], mine[j]))
    return StudentTimetable(student=student, entries=entries, conflicts=conflicts,
                            unique_slots=len({e.slot for e in entries}),
                            max_day=max((e.day for e in entries), default=0))
