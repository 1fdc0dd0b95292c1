import logging
from typing import Dict, List, Optional, Sequence

import networkx as nx

from .algorithms.greedy import welsh_powell_order
from .events import EventLog, emit
from .models import Course, InputWarning, Student

logger = logging.getLogger(__name__)


def build_conflict_graph(students: Sequence[Student], course_names: Sequence[str],
                         warnings: Optional[List[InputWarning]] = None,
                         events: Optional[EventLog] = None) -> nx.Graph:
    """One node per official course, an edge wherever a student takes both.

    Courses a student references that are not in ``course_names`` never
    become nodes; each is reported once per student.
    """
    G = nx.Graph()
    for name in course_names:
        if name and name.strip():
            G.add_node(name.strip())

    for student in students:
        exams: List[str] = []
        unknown = set()
        for c in student.courses:
            c = c.strip() if c else ''
            if not c:
                continue
            if c not in G:
                if c not in unknown:
                    unknown.add(c)
                    msg = f"Student {student.id}: course {c!r} referenced but not in course list"
                    logger.warning(msg)
                    if warnings is not None:
                        warnings.append(InputWarning(kind='unknown_course', message=msg, course=c))
                continue
            if c not in exams:
                exams.append(c)
        for i in range(len(exams)):
            for j in range(i + 1, len(exams)):
                G.add_edge(exams[i], exams[j])

    logger.info("Conflict graph: %d courses, %d conflicts from %d students",
                G.number_of_nodes(), G.number_of_edges(), len(students))
    if events is not None:
        for rank, u in enumerate(welsh_powell_order(G), start=1):
            emit(events, 'degree', u,
                 f"{rank}. degree = {G.degree(u)} (conflicts: [{', '.join(sorted(G.neighbors(u)))}])")
    return G


def courses_from_graph(G: nx.Graph) -> Dict[str, Course]:
    """Course view of ``G`` in node insertion order."""
    return {u: Course(name=u, conflicts=set(G.neighbors(u))) for u in G.nodes()}
