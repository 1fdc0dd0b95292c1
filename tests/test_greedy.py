"""Welsh-Powell slot assignment."""

import networkx as nx
import pytest

from examslots.algorithms.greedy import welsh_powell, welsh_powell_order
from examslots.config import SLOT_COLORS, ScheduleConfig
from examslots.events import EventLog
from examslots.scheduling.assign_timeslots import assign_slots
from examslots.scheduling.validation import conflicts_ok

from conftest import random_course_graph


def _example_graph() -> nx.Graph:
    G = nx.Graph()
    G.add_nodes_from(["Math", "Physics", "Chemistry", "CS", "Biology"])
    G.add_edges_from([("Math", "Physics"), ("Physics", "Chemistry"),
                      ("Math", "CS"), ("Chemistry", "Biology")])
    return G


class TestOrdering:

    def test_degree_desc_then_name(self):
        assert welsh_powell_order(_example_graph()) == [
            "Chemistry", "Math", "Physics", "Biology", "CS"]

    def test_order_independent_of_insertion(self):
        G1 = _example_graph()
        G2 = nx.Graph()
        G2.add_nodes_from(reversed(list(G1.nodes())))
        G2.add_edges_from(reversed(list(G1.edges())))
        assert welsh_powell_order(G1) == welsh_powell_order(G2)


class TestWelshPowell:

    def test_example_coloring(self):
        assert welsh_powell(_example_graph()) == {
            "Chemistry": 1, "Math": 1, "Physics": 2, "Biology": 2, "CS": 2}

    def test_triangle_needs_three_slots(self):
        G = nx.complete_graph(["A", "B", "C"])
        assert sorted(welsh_powell(G).values()) == [1, 2, 3]

    def test_no_edges_single_slot(self):
        G = nx.empty_graph(["A", "B", "C"])
        assert set(welsh_powell(G).values()) == {1}

    def test_empty_graph(self):
        assert welsh_powell(nx.Graph()) == {}

    @pytest.mark.parametrize("seed", range(8))
    def test_valid_and_within_bound(self, seed):
        G = random_course_graph(30, 0.25, seed)
        coloring = welsh_powell(G)
        assert all(coloring[u] != coloring[v] for u, v in G.edges())
        max_deg = max((d for _, d in G.degree()), default=0)
        assert max(coloring.values()) <= max_deg + 1

    def test_slots_dense_from_one(self):
        G = random_course_graph(20, 0.4, 3)
        used = set(welsh_powell(G).values())
        assert used == set(range(1, len(used) + 1))

    def test_narration(self):
        events = EventLog()
        welsh_powell(_example_graph(), events=events)
        assigns = events.phase("assign")
        assert [e.course for e in assigns] == ["Chemistry", "Math", "Physics", "Biology", "CS"]
        assert assigns[0].detail == "slot 1 (first course in this slot)"
        assert assigns[1].detail == "slot 1 (joining: Chemistry)"
        skips = [e for e in events.phase("skip") if e.course == "Physics"]
        assert skips[0].detail == "cannot use slot 1, conflicts with: Chemistry, Math"


class TestAssignSlots:

    def test_slots_written_into_courses(self):
        courses, slots = assign_slots(_example_graph())
        assert slots == {1: ["Chemistry", "Math"], 2: ["Physics", "Biology", "CS"]}
        assert courses["Physics"].slot == 2
        assert courses["Math"].color == SLOT_COLORS[0]
        assert courses["CS"].color == SLOT_COLORS[1]
        assert conflicts_ok(_example_graph(), slots)

    def test_every_course_in_exactly_one_slot(self):
        G = random_course_graph(25, 0.3, 11)
        _, slots = assign_slots(G)
        placed = [c for names in slots.values() for c in names]
        assert sorted(placed) == sorted(G.nodes())

    def test_palette_cycles(self):
        G = nx.complete_graph([f"C{i}" for i in range(4)])
        courses, _ = assign_slots(G, config=ScheduleConfig(palette=["red", "blue", "green"]))
        assert sorted(c.color for c in courses.values()) == ["blue", "green", "red", "red"]
