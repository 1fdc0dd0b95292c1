from dataclasses import dataclass, field
from typing import Dict, List, Set, Optional, Tuple

import networkx as nx


@dataclass
class Student:
    id: str
    courses: List[str] = field(default_factory=list)  # enrollment order, may repeat


@dataclass
class Course:
    name: str
    conflicts: Set[str] = field(default_factory=set)
    slot: Optional[int] = None  # 1-based once assigned
    color: Optional[str] = None  # palette entry derived from slot

    @property
    def degree(self) -> int:
        return len(self.conflicts)


@dataclass
class InputWarning:
    kind: str  # malformed_line | empty_courses | unknown_course | duplicate_course
    message: str
    line: Optional[int] = None
    course: Optional[str] = None


@dataclass
class TraceEvent:
    phase: str
    course: Optional[str]
    detail: str


@dataclass
class ScheduleResult:
    graph: nx.Graph
    # course name -> Course with slot/color written in
    courses: Dict[str, Course] = field(default_factory=dict)
    # slot number -> course names in assignment order
    slots: Dict[int, List[str]] = field(default_factory=dict)
    total_slots: int = 0
    total_conflicts: int = 0
    students: List[Student] = field(default_factory=list)
    average_conflicts_per_course: float = 0.0
    conflict_pairs: List[Tuple[str, str]] = field(default_factory=list)
    max_degree: int = 0
    clique_lower_bound: int = 0
    warnings: List[InputWarning] = field(default_factory=list)
    events: List[TraceEvent] = field(default_factory=list)

    def slot_of(self, course: str) -> Optional[int]:
        c = self.courses.get(course)
        return c.slot if c else None
