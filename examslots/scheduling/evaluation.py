import math
from typing import List, Tuple

import networkx as nx
import pandas as pd

from ..models import ScheduleResult
from .validation import conflicts_ok


def count_conflicts(G: nx.Graph) -> int:
    """Unordered conflict pairs; each edge counted once."""
    return G.number_of_edges()


def conflict_pairs(G: nx.Graph) -> List[Tuple[str, str]]:
    return sorted(tuple(sorted((u, v))) for u, v in G.edges())


def average_degree(G: nx.Graph) -> float:
    n = G.number_of_nodes()
    if n == 0:
        return 0.0
    return sum(d for _, d in G.degree()) / n


def round_half_up(value: float, digits: int = 1) -> float:
    """Round with halves going up (2.25 -> 2.3), unlike the builtin round."""
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def max_degree(G: nx.Graph) -> int:
    return max((d for _, d in G.degree()), default=0)


def clique_lower_bound(G: nx.Graph) -> int:
    """Fast lower bound on the slot count via a greedy maximal clique.

    Picks the highest-degree course, then greedily grows a clique by adding
    courses adjacent to every current member. Any valid schedule needs at
    least this many slots.
    """
    if G.number_of_nodes() == 0:
        return 0
    seed = max(sorted(G.nodes()), key=lambda u: G.degree(u))
    clique = {seed}
    candidates = set(G.neighbors(seed))
    while candidates:
        u = max(sorted(candidates), key=lambda v: G.degree(v))
        clique.add(u)
        candidates = candidates.intersection(G.neighbors(u))
    return len(clique)


def schedule_frame(result: ScheduleResult) -> pd.DataFrame:
    """One row per course, ordered by slot then assignment order."""
    rows = []
    for slot, names in sorted(result.slots.items()):
        for name in names:
            course = result.courses[name]
            rows.append({
                'course': name,
                'slot': slot,
                'degree': course.degree,
                'color': course.color,
            })
    return pd.DataFrame(rows, columns=['course', 'slot', 'degree', 'color'])


def summary(result: ScheduleResult) -> str:
    G = result.graph
    ok_conf = conflicts_ok(G, result.slots)
    lines = [
        f"Courses: {G.number_of_nodes()}  Conflicts: {result.total_conflicts}  "
        f"Students: {len(result.students)}",
        f"Slots used: {result.total_slots}  Upper bound (max degree + 1): {result.max_degree + 1}",
        f"Clique lower bound: {result.clique_lower_bound}",
        f"Average conflicts per course: {result.average_conflicts_per_course}",
        f"Valid (conflicts): {ok_conf}",
    ]
    for slot, names in sorted(result.slots.items()):
        lines.append(f"Slot {slot}: {', '.join(names)} ({len(names)} courses)")
    if result.warnings:
        lines.append(f"Warnings: {len(result.warnings)}")
        lines.extend(f"  - {w.message}" for w in result.warnings)
    return "\n".join(lines) + "\n"
