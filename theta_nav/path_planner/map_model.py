from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

import numpy as np

from theta_nav.common.constants import MSG_MALFORMED_PREFIX, STATUS_OK, STATUS_ERROR
from theta_nav.common.exceptions import MalformedRequestError

GridCoord = Tuple[int, int]  # (x, y)


@dataclass
class GridMap:
    """行优先扁平栅格及其坐标/索引换算：index = y * width + x"""
    cells: np.ndarray                # 扁平 uint8：1=障碍
    width: int
    height: int

    @classmethod
    def from_grid(cls, grid: Any, width: int, height: int) -> "GridMap":
        """从扁平序列或 (H, W) 数组构建，只做拷贝不修改调用方数据"""
        if width <= 0 or height <= 0:
            raise MalformedRequestError(
                f"{MSG_MALFORMED_PREFIX}: grid size must be positive, got w={width}, h={height}"
            )
        try:
            cells = np.asarray(grid).reshape(-1)
        except (TypeError, ValueError) as e:
            raise MalformedRequestError(f"{MSG_MALFORMED_PREFIX}: grid is not an array: {e}") from e
        if cells.size != width * height:
            raise MalformedRequestError(
                f"{MSG_MALFORMED_PREFIX}: grid length {cells.size} != w*h ({width * height})"
            )
        return cls(cells=(cells != 0).astype(np.uint8), width=width, height=height)

    @property
    def size(self) -> int:
        return self.width * self.height

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def coord(self, index: int) -> GridCoord:
        y, x = divmod(int(index), self.width)
        return x, y

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_blocked(self, x: int, y: int) -> bool:
        return bool(self.cells[y * self.width + x])


@dataclass
class PlanningRequest:
    grid: Any                        # 扁平序列或 (H, W) 数组，0=可通行
    w: int
    h: int
    start: GridCoord
    target: GridCoord
    request_id: Optional[int] = None


@dataclass
class PlanningResult:
    status: str
    path: Optional[List[GridCoord]] = None
    time_ms: float = 0.0
    message: str = ""
    request_id: Optional[int] = None
    expanded: int = 0                # 本次搜索关闭的节点数

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK

    @classmethod
    def error(cls, message: str, request_id: Optional[int] = None) -> "PlanningResult":
        return cls(status=STATUS_ERROR, message=message, request_id=request_id)
