#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PathPlanningService

规划边界层：
- 校验请求（结构 / 越界 / 起终点在障碍上）
- 调用底层 ThetaStarPlanner 进行栅格路径规划
- 统计耗时，输出 PlanningResult / 响应消息
"""

import time
from typing import Any, Dict, Optional

import numpy as np
from loguru import logger

from theta_nav.common.constants import (
    MSG_INSIDE_OBSTACLE,
    MSG_INTERNAL_PREFIX,
    MSG_MALFORMED_PREFIX,
    MSG_OUT_OF_BOUNDS,
    STATUS_OK,
)
from theta_nav.common.exceptions import (
    BlockedEndpointError,
    MalformedRequestError,
    OutOfBoundsError,
    RequestValidationError,
)
from theta_nav.path_planner.map_model import GridMap, PlanningRequest, PlanningResult
from theta_nav.path_planner.theta_star_planner import ThetaStarPlanner
from theta_nav.service.protocol import parse_request, result_to_message


class PathPlanningService:
    """
    路径规划服务（边界层）

    每个请求独立处理，不在请求之间保留任何状态：

    1. 创建实例：pps = PathPlanningService()
    2. 进程内调用：result = pps.handle(PlanningRequest(...))
    3. 消息调用（工作进程使用）：reply = pps.handle_message({...})
    """

    def __init__(self, planner: Optional[ThetaStarPlanner] = None) -> None:
        self._planner = planner or ThetaStarPlanner()

    # ------------------------------------------------------------------
    # 请求校验
    # ------------------------------------------------------------------
    @staticmethod
    def _check_cell(name: str, cell: Any) -> None:
        """起终点必须是整数 (x, y) 对，bool 不算整数"""
        if (
            not isinstance(cell, (tuple, list, np.ndarray))
            or len(cell) != 2
            or any(isinstance(v, (bool, np.bool_)) or not isinstance(v, (int, np.integer)) for v in cell)
        ):
            raise MalformedRequestError(f"{MSG_MALFORMED_PREFIX}: {name} must be an integer (x, y) pair, got {cell!r}")

    @staticmethod
    def validate(request: PlanningRequest) -> GridMap:
        """
        校验请求并构建 GridMap

        Raises:
            MalformedRequestError: 栅格尺寸 / 长度不合法，或起终点不是整数坐标
            OutOfBoundsError: 起点或终点越界
            BlockedEndpointError: 起点或终点位于障碍物上
        """
        grid_map = GridMap.from_grid(request.grid, request.w, request.h)
        PathPlanningService._check_cell("start", request.start)
        PathPlanningService._check_cell("target", request.target)

        sx, sy = request.start
        tx, ty = request.target
        if not (grid_map.in_bounds(sx, sy) and grid_map.in_bounds(tx, ty)):
            raise OutOfBoundsError(MSG_OUT_OF_BOUNDS)

        if grid_map.is_blocked(sx, sy) or grid_map.is_blocked(tx, ty):
            raise BlockedEndpointError(MSG_INSIDE_OBSTACLE)

        return grid_map

    # ------------------------------------------------------------------
    # 路径规划主接口
    # ------------------------------------------------------------------
    def handle(self, request: PlanningRequest) -> PlanningResult:
        """
        处理一次规划请求

        校验失败返回 status=error 的结果；终点不可达返回 status=ok 且 path=None。
        """
        start_time = time.perf_counter()

        try:
            grid_map = self.validate(request)
        except RequestValidationError as e:
            logger.warning(
                f"[PathPlanningService] 请求校验失败: {e}, start={request.start}, target={request.target}"
            )
            return PlanningResult.error(str(e), request_id=request.request_id)

        try:
            path = self._planner.search(grid_map, tuple(request.start), tuple(request.target))
        except Exception as e:
            logger.exception(f"[PathPlanningService] 规划异常: {e}")
            return PlanningResult.error(f"{MSG_INTERNAL_PREFIX}: {e}", request_id=request.request_id)

        elapsed_ms = (time.perf_counter() - start_time) * 1000.0

        if path is None:
            logger.info(
                f"[PathPlanningService] 终点不可达: start={request.start}, target={request.target}, "
                f"耗时={elapsed_ms:.2f}ms"
            )
        else:
            logger.info(
                f"[PathPlanningService] 路径规划成功: 路径点数={len(path)}, "
                f"探索节点数={self._planner.last_expanded}, 耗时={elapsed_ms:.2f}ms"
            )

        return PlanningResult(
            status=STATUS_OK,
            path=path,
            time_ms=elapsed_ms,
            request_id=request.request_id,
            expanded=self._planner.last_expanded,
        )

    def handle_message(self, message: Dict[str, Any]) -> Dict[str, Any]:
        """
        处理一条请求消息，返回响应消息

        请求消息: {grid, w, h, start: {x, y}, target: {x, y}, requestId?}
        响应消息: {status: "ok", path, timeMs} 或 {status: "error", message}
        """
        try:
            request = parse_request(message)
        except RequestValidationError as e:
            logger.warning(f"[PathPlanningService] {e}")
            request_id = message.get("requestId") if isinstance(message, dict) else None
            if not isinstance(request_id, int):
                request_id = None
            return result_to_message(PlanningResult.error(str(e), request_id=request_id))

        return result_to_message(self.handle(request))
