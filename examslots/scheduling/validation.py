import logging
from typing import Dict, List

import networkx as nx

from ..errors import ScheduleIntegrityError

logger = logging.getLogger(__name__)


def conflicts_ok(G: nx.Graph, slots: Dict[int, List[str]]) -> bool:
    slot_of = {c: s for s, names in slots.items() for c in names}
    for u, v in G.edges():
        if slot_of.get(u) == slot_of.get(v):
            return False
    return True


def _fail(message: str, **kw) -> None:
    logger.error("Schedule integrity check failed: %s", message)
    raise ScheduleIntegrityError(message, **kw)


def verify_slots(G: nx.Graph, slots: Dict[int, List[str]]) -> None:
    """Raise ScheduleIntegrityError unless ``slots`` is a valid coloring of ``G``.

    Valid means: slot numbers run 1..k with none empty, every course of ``G``
    sits in exactly one slot, and no two courses in a slot conflict.
    """
    if sorted(slots) != list(range(1, len(slots) + 1)):
        _fail(f"slot numbers are not dense from 1: {sorted(slots)}")

    placed: Dict[str, int] = {}
    for slot, names in slots.items():
        if not names:
            _fail(f"slot {slot} is empty", slot=slot)
        for name in names:
            if name not in G:
                _fail(f"slot {slot} holds unknown course {name!r}", slot=slot)
            if name in placed:
                _fail(f"course {name!r} placed in slots {placed[name]} and {slot}", slot=slot)
            placed[name] = slot
        for i in range(len(names)):
            for j in range(i + 1, len(names)):
                if G.has_edge(names[i], names[j]):
                    _fail(f"conflict detected in slot {slot}: {names[i]} and {names[j]}",
                          slot=slot, pair=(names[i], names[j]))

    missing = [u for u in G.nodes() if u not in placed]
    if missing:
        _fail(f"courses without a slot: {', '.join(missing)}")
