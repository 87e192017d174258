"""
path_planner package

Exposes the planning core:
- PriorityQueue: binary min-heap used as the open set
- has_line_of_sight: Bresenham visibility test
- ThetaStarPlanner: any-angle grid planner
"""

from .priority_queue import PriorityQueue
from .line_of_sight import has_line_of_sight, bresenham_cells, line_cells
from .map_model import GridMap, PlanningRequest, PlanningResult
from .theta_star_planner import ThetaStarPlanner

__all__ = [
    "PriorityQueue",
    "has_line_of_sight",
    "bresenham_cells",
    "line_cells",
    "GridMap",
    "PlanningRequest",
    "PlanningResult",
    "ThetaStarPlanner",
]
