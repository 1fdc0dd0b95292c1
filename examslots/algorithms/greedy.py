from typing import Dict, List, Optional

import networkx as nx

from ..events import EventLog, emit


def welsh_powell_order(G: nx.Graph) -> List[str]:
    """Nodes by descending degree, ties broken by ascending name."""
    return sorted(G.nodes(), key=lambda u: (-G.degree(u), u))


def welsh_powell(G: nx.Graph, events: Optional[EventLog] = None) -> Dict[str, int]:
    """Greedy coloring with 1-based slots.

    Each course, in Welsh-Powell order, takes the lowest slot that holds none
    of its neighbours; a new slot is opened when every existing one is blocked.
    """
    coloring: Dict[str, int] = {}
    members: Dict[int, List[str]] = {}
    for idx, u in enumerate(welsh_powell_order(G), start=1):
        emit(events, 'order', u, f"{idx}. degree {G.degree(u)}")
        c = 1
        while True:
            blocking = [v for v in members.get(c, []) if G.has_edge(u, v)]
            if not blocking:
                break
            emit(events, 'skip', u, f"cannot use slot {c}, conflicts with: {', '.join(blocking)}")
            c += 1
        joined = members.setdefault(c, [])
        if joined:
            emit(events, 'assign', u, f"slot {c} (joining: {', '.join(joined)})")
        else:
            emit(events, 'assign', u, f"slot {c} (first course in this slot)")
        joined.append(u)
        coloring[u] = c
    return coloring
