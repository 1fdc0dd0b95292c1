"""Top-level entry point: enrollment + course list in, verified schedule out."""
import logging
from typing import Iterable, List, Optional, Union

from .config import ScheduleConfig, resolve
from .errors import EmptyInputError
from .events import EventLog
from .graph_build import build_conflict_graph
from .io_utils import (
    StudentLike, normalize_course_names, normalize_students,
    parse_course_list, parse_student_data,
)
from .models import InputWarning, ScheduleResult
from .scheduling.assign_timeslots import assign_slots
from .scheduling.evaluation import (
    average_degree, clique_lower_bound, conflict_pairs, count_conflicts, max_degree,
    round_half_up,
)
from .scheduling.validation import verify_slots

logger = logging.getLogger(__name__)


def generate_schedule(students: Union[str, Iterable[StudentLike]],
                      courses: Union[str, Iterable[str]],
                      config: Optional[ScheduleConfig] = None,
                      collect_events: bool = False) -> ScheduleResult:
    """Build the conflict graph, color it and verify the result.

    ``students`` and ``courses`` may be raw text or already-parsed lists.
    Raises EmptyInputError when either side is empty after normalization.
    A ScheduleIntegrityError from verification means the engine is broken
    and is left to propagate.
    """
    config = resolve(config)
    warnings: List[InputWarning] = []
    events = EventLog() if collect_events else None

    if isinstance(students, str):
        student_list = parse_student_data(students, config=config, warnings=warnings, events=events)
    else:
        student_list = normalize_students(students, config=config, warnings=warnings)
    if isinstance(courses, str):
        course_list = parse_course_list(courses, config=config, warnings=warnings)
    else:
        course_list = normalize_course_names(courses, config=config, warnings=warnings)

    if not student_list:
        raise EmptyInputError('students', "No valid student data found")
    if not course_list:
        raise EmptyInputError('courses', "No valid courses found")

    G = build_conflict_graph(student_list, course_list, warnings=warnings, events=events)
    course_map, slots = assign_slots(G, config=config, events=events)
    verify_slots(G, slots)

    result = ScheduleResult(
        graph=G,
        courses=course_map,
        slots=slots,
        total_slots=len(slots),
        total_conflicts=count_conflicts(G),
        students=student_list,
        average_conflicts_per_course=round_half_up(average_degree(G)),
        conflict_pairs=conflict_pairs(G),
        max_degree=max_degree(G),
        clique_lower_bound=clique_lower_bound(G),
        warnings=warnings,
        events=events.to_list() if events is not None else [],
    )
    logger.info("Scheduled %d courses into %d slots (%d conflicts, %d warnings)",
                len(course_map), result.total_slots, result.total_conflicts, len(warnings))
    return result
