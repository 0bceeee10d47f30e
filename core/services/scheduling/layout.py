from __future__ import annotations

import math
from datetime import date, timedelta
from typing import Dict, List, Mapping, Optional

from core.domain import LayoutMode, TaskId
from core.services.scheduling.models import TaskNode

NODE_WIDTH = 180
NODE_HEIGHT = 100
HORIZONTAL_GAP = 50
VERTICAL_GAP = 80
COMPACT_GAP = 20
MARGIN = 50
TIMELINE_WIDTH = 1800.0
TIMELINE_ROWS = 10


def layout_hierarchical(nodes: Mapping[TaskId, TaskNode]) -> None:
    by_level: Dict[int, List[TaskNode]] = {}
    for node in nodes.values():
        by_level.setdefault(node.level, []).append(node)

    for level, members in by_level.items():
        for row, node in enumerate(members):
            node.x = MARGIN + level * (NODE_WIDTH + HORIZONTAL_GAP)
            node.y = MARGIN + row * (NODE_HEIGHT + VERTICAL_GAP)


def layout_timeline(nodes: Mapping[TaskId, TaskNode], today: Optional[date] = None) -> None:
    """
    Places nodes along a horizontal date axis by planned start.
    Nodes without a planned start are left where they are.
    """
    if not nodes:
        return
    today = today or date.today()
    starts = [n.task.planned_start for n in nodes.values() if n.task.planned_start is not None]
    ends = [n.task.planned_end for n in nodes.values() if n.task.planned_end is not None]
    min_date = min(starts) if starts else today
    max_date = max(ends) if ends else today + timedelta(days=30)

    total_days = (max_date - min_date).days
    pixels_per_day = TIMELINE_WIDTH / max(total_days, 1)

    row = 0
    for node in nodes.values():
        start = node.task.planned_start
        if start is None:
            continue
        node.x = MARGIN + int((start - min_date).days * pixels_per_day)
        node.y = MARGIN + (row % TIMELINE_ROWS) * (NODE_HEIGHT + VERTICAL_GAP)
        row += 1


def layout_compact(nodes: Mapping[TaskId, TaskNode]) -> None:
    if not nodes:
        return
    cols = math.ceil(math.sqrt(len(nodes)))
    for index, node in enumerate(nodes.values()):
        row, col = divmod(index, cols)
        node.x = MARGIN + col * (NODE_WIDTH + COMPACT_GAP)
        node.y = MARGIN + row * (NODE_HEIGHT + COMPACT_GAP)


def apply_layout(
    nodes: Mapping[TaskId, TaskNode],
    mode: LayoutMode = LayoutMode.HIERARCHICAL,
    today: Optional[date] = None,
) -> Mapping[TaskId, TaskNode]:
    mode = LayoutMode(mode)
    if mode == LayoutMode.TIMELINE:
        layout_timeline(nodes, today=today)
    elif mode == LayoutMode.COMPACT:
        layout_compact(nodes)
    else:
        layout_hierarchical(nodes)
    return nodes


__all__ = [
    "NODE_WIDTH",
    "NODE_HEIGHT",
    "HORIZONTAL_GAP",
    "VERTICAL_GAP",
    "apply_layout",
    "layout_hierarchical",
    "layout_timeline",
    "layout_compact",
]
