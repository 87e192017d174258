"""
core package

Reference collaborators used by the demo and the tests:
- generate_grid: random noise + rectangular obstacles
- render_ascii: plain-text map with the planned path
"""

from .grid_generator import generate_grid, generate_grid_from_config, default_endpoints, clear_cells
from .ascii_render import render_ascii

__all__ = [
    "generate_grid",
    "generate_grid_from_config",
    "default_endpoints",
    "clear_cells",
    "render_ascii",
]
