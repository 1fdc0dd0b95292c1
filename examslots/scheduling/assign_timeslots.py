from typing import Dict, List, Optional, Tuple

import networkx as nx

from ..algorithms.greedy import welsh_powell
from ..config import ScheduleConfig, resolve
from ..events import EventLog
from ..graph_build import courses_from_graph
from ..models import Course


def assign_slots(G: nx.Graph, config: Optional[ScheduleConfig] = None,
                 events: Optional[EventLog] = None) -> Tuple[Dict[str, Course], Dict[int, List[str]]]:
    """Color ``G`` and write the slot and palette color into each course.

    Returns ``(courses, slots)``; ``slots`` lists course names in the order
    they were assigned and is keyed 1..k.
    """
    config = resolve(config)
    color_map = welsh_powell(G, events=events)
    courses = courses_from_graph(G)
    slots: Dict[int, List[str]] = {}
    for name, slot in color_map.items():
        course = courses[name]
        course.slot = slot
        course.color = config.color_for_slot(slot)
        slots.setdefault(slot, []).append(name)
    return courses, dict(sorted(slots.items()))
