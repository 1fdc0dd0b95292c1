from dataclasses import dataclass, field
from typing import Dict, List, Optional

# One entry per slot, cycled when there are more slots than colors.
SLOT_COLORS: List[str] = [
    '#3B82F6',  # blue
    '#10B981',  # green
    '#F59E0B',  # amber
    '#EF4444',  # red
    '#8B5CF6',  # purple
    '#06B6D4',  # cyan
    '#F97316',  # orange
    '#84CC16',  # lime
    '#EC4899',  # pink
    '#6366F1',  # indigo
    '#F59E0B',
    '#10B981',
    '#8B5CF6',
    '#06B6D4',
    '#F97316',
]

# Lower-cased spelling -> canonical course name
COURSE_ALIASES: Dict[str, str] = {
    'iot': 'IoT',
    'internet of things': 'IoT',
}


@dataclass
class ScheduleConfig:
    palette: List[str] = field(default_factory=lambda: list(SLOT_COLORS))
    aliases: Dict[str, str] = field(default_factory=lambda: dict(COURSE_ALIASES))
    course_header_prefix: str = 'course'
    student_header_keyword: str = 'student'
    sessions_per_day: int = 3

    def __post_init__(self):
        if not self.palette:
            raise ValueError("palette must contain at least one color")
        if self.sessions_per_day < 1:
            raise ValueError("sessions_per_day must be >= 1")
        self.aliases = {k.lower(): v for k, v in self.aliases.items()}

    def canonical_course(self, name: str) -> str:
        return self.aliases.get(name.lower(), name)

    def color_for_slot(self, slot: int) -> str:
        return self.palette[(slot - 1) % len(self.palette)]


def resolve(config: Optional[ScheduleConfig]) -> ScheduleConfig:
    return config if config is not None else ScheduleConfig()
