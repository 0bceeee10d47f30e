from datetime import date

from core.domain import LayoutMode
from core.services.scheduling import apply_layout, compute_critical_path, compute_levels
from core.services.scheduling.layout import HORIZONTAL_GAP, NODE_HEIGHT, NODE_WIDTH, VERTICAL_GAP


def _diamond(make_task):
    tasks = [make_task("A", 1), make_task("B", 2), make_task("C", 3), make_task("D", 1)]
    edges = [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D"), ("A", "D")]
    return tasks, edges


def test_levels_take_the_deepest_predecessor(make_task):
    tasks, edges = _diamond(make_task)
    assert compute_levels(tasks, edges) == {"A": 0, "B": 1, "C": 1, "D": 2}


def test_levels_for_unconnected_tasks_are_zero(make_task):
    tasks = [make_task("A", 1), make_task("B", 1)]
    assert compute_levels(tasks, []) == {"A": 0, "B": 0}


def test_nodes_carry_their_level(make_task):
    tasks, edges = _diamond(make_task)
    nodes = compute_critical_path(tasks, edges)
    assert [nodes[t].level for t in "ABCD"] == [0, 1, 1, 2]


def test_hierarchical_layout_places_levels_in_columns(make_task):
    tasks, edges = _diamond(make_task)
    nodes = apply_layout(compute_critical_path(tasks, edges))

    column = NODE_WIDTH + HORIZONTAL_GAP
    row = NODE_HEIGHT + VERTICAL_GAP
    assert (nodes["A"].x, nodes["A"].y) == (50, 50)
    assert (nodes["B"].x, nodes["B"].y) == (50 + column, 50)
    assert (nodes["C"].x, nodes["C"].y) == (50 + column, 50 + row)
    assert (nodes["D"].x, nodes["D"].y) == (50 + 2 * column, 50)


def test_compact_layout_fills_a_square_grid(make_task):
    tasks, edges = _diamond(make_task)
    nodes = apply_layout(compute_critical_path(tasks, edges), LayoutMode.COMPACT)

    positions = [(nodes[t].x, nodes[t].y) for t in "ABCD"]
    assert positions == [(50, 50), (250, 50), (50, 170), (250, 170)]


def test_timeline_layout_scales_by_planned_start(make_task):
    tasks = [
        make_task("A", start=date(2024, 1, 1), end=date(2024, 1, 10)),
        make_task("B", start=date(2024, 1, 11), end=date(2024, 1, 31)),
        make_task("U", 2),
    ]
    nodes = apply_layout(compute_critical_path(tasks, [("A", "B")]), "TIMELINE")

    assert (nodes["A"].x, nodes["A"].y) == (50, 50)
    assert (nodes["B"].x, nodes["B"].y) == (650, 230)
    assert (nodes["U"].x, nodes["U"].y) == (0.0, 0.0)


def test_layout_of_empty_network_is_a_no_op():
    for mode in LayoutMode:
        assert dict(apply_layout({}, mode)) == {}


def test_service_lays_out_a_project(services, seeded_project):
    pid, _ = seeded_project
    nodes = services["scheduling_service"].layout_project(pid, LayoutMode.HIERARCHICAL)
    assert nodes["A"].x == nodes["B"].x == 50
    assert nodes["D"].x > nodes["C"].x > nodes["A"].x
