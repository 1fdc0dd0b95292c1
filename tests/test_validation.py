import networkx as nx
import pytest

from examslots.errors import ExamSlotsError, ScheduleIntegrityError
from examslots.scheduling.validation import conflicts_ok, verify_slots


@pytest.fixture
def path_graph():
    # A - B - C
    G = nx.Graph()
    G.add_edges_from([("A", "B"), ("B", "C")])
    return G


class TestVerifySlots:

    def test_valid_assignment_passes(self, path_graph):
        verify_slots(path_graph, {1: ["A", "C"], 2: ["B"]})
        assert conflicts_ok(path_graph, {1: ["A", "C"], 2: ["B"]})

    def test_same_slot_conflict(self, path_graph):
        with pytest.raises(ScheduleIntegrityError) as exc:
            verify_slots(path_graph, {1: ["A", "B"], 2: ["C"]})
        assert exc.value.slot == 1
        assert exc.value.pair == ("A", "B")
        assert "conflict detected in slot 1" in str(exc.value)
        assert not conflicts_ok(path_graph, {1: ["A", "B"], 2: ["C"]})

    def test_gap_in_slot_numbers(self, path_graph):
        with pytest.raises(ScheduleIntegrityError, match="dense"):
            verify_slots(path_graph, {1: ["A", "C"], 3: ["B"]})

    def test_course_missing(self, path_graph):
        with pytest.raises(ScheduleIntegrityError, match="without a slot: B"):
            verify_slots(path_graph, {1: ["A", "C"]})

    def test_course_placed_twice(self, path_graph):
        with pytest.raises(ScheduleIntegrityError, match="placed in slots"):
            verify_slots(path_graph, {1: ["A", "C"], 2: ["B", "A"]})

    def test_unknown_course(self, path_graph):
        with pytest.raises(ScheduleIntegrityError, match="unknown course"):
            verify_slots(path_graph, {1: ["A", "C", "Z"], 2: ["B"]})

    def test_failure_is_logged(self, path_graph, caplog):
        with caplog.at_level("ERROR", logger="examslots.scheduling.validation"):
            with pytest.raises(ScheduleIntegrityError):
                verify_slots(path_graph, {1: ["A", "B", "C"]})
        assert "integrity check failed" in caplog.text


def test_integrity_error_is_not_an_input_error():
    err = ScheduleIntegrityError("boom")
    assert isinstance(err, ExamSlotsError)
    assert isinstance(err, AssertionError)
    assert not isinstance(err, ValueError)
