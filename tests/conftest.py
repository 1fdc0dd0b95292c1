import networkx as nx
import pytest

from examslots.pipeline import generate_schedule


EXAMPLE_STUDENTS = """S1: Math, Physics
S2: Physics, Chemistry
S3: Math, CS
S4: Chemistry, Biology
S5: CS, Math"""

EXAMPLE_COURSES = "Math, Physics, Chemistry, CS, Biology"


def students_from_edges(G: nx.Graph):
    """One two-course student per edge of ``G``."""
    return [(f"S{i}", [u, v]) for i, (u, v) in enumerate(G.edges())]


def random_course_graph(n: int, p: float, seed: int) -> nx.Graph:
    G = nx.gnp_random_graph(n, p, seed=seed)
    return nx.relabel_nodes(G, lambda x: f"C{x:02d}")


@pytest.fixture
def example_result():
    return generate_schedule(EXAMPLE_STUDENTS, EXAMPLE_COURSES, collect_events=True)
