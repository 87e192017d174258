#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
演示主程序

生成一张随机栅格，经由隔离工作进程（或进程内）做一次 Theta* 规划，
输出 ASCII 地图与规划统计。
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np
from loguru import logger

from theta_nav.common.logger import setup_logger
from theta_nav.config.loader import load_config
from theta_nav.config.models import ThetaNavConfig
from theta_nav.core.ascii_render import render_ascii
from theta_nav.core.grid_generator import clear_cells, default_endpoints, generate_grid_from_config
from theta_nav.path_planner.map_model import PlanningRequest, PlanningResult
from theta_nav.service.path_planning_service import PathPlanningService
from theta_nav.service.planning_worker import PlanningWorker
from theta_nav.service.protocol import message_to_result


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Theta* any-angle grid planner demo")
    parser.add_argument("--config", type=Path, default=None, help="YAML 配置文件路径")
    parser.add_argument("--width", type=int, default=None, help="栅格宽度（覆盖配置）")
    parser.add_argument("--height", type=int, default=None, help="栅格高度（覆盖配置）")
    parser.add_argument("--obstacles", type=float, default=None, help="随机障碍概率（覆盖配置）")
    parser.add_argument("--seed", type=int, default=None, help="随机种子（覆盖配置）")
    parser.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), default=None, help="起点")
    parser.add_argument("--target", type=int, nargs=2, metavar=("X", "Y"), default=None, help="终点")
    parser.add_argument("--in-process", action="store_true", help="不启动工作进程，直接在当前进程规划")
    parser.add_argument("--no-map", action="store_true", help="不输出 ASCII 地图")
    parser.add_argument("--log-level", type=str, default=None, help="日志级别（覆盖配置）")
    return parser


def _apply_overrides(cfg: ThetaNavConfig, args) -> ThetaNavConfig:
    grid_updates = {
        key: value
        for key, value in (
            ("width", args.width),
            ("height", args.height),
            ("obstacle_probability", args.obstacles),
            ("seed", args.seed),
        )
        if value is not None
    }
    logging_updates = {"level": args.log_level.upper()} if args.log_level else {}

    # 重新校验覆盖后的配置
    return ThetaNavConfig.model_validate({
        "grid": {**cfg.grid.model_dump(), **grid_updates},
        "worker": cfg.worker.model_dump(),
        "logging": {**cfg.logging.model_dump(), **logging_updates},
    })


def run(
    cfg: ThetaNavConfig,
    start=None,
    target=None,
    in_process: bool = False,
) -> Tuple[PlanningResult, np.ndarray, PlanningRequest]:
    """生成栅格并规划一次，返回 (结果, 栅格, 请求)"""
    grid = generate_grid_from_config(cfg.grid)
    default_start, default_target = default_endpoints(cfg.grid.width, cfg.grid.height)
    start = tuple(start) if start is not None else default_start
    target = tuple(target) if target is not None else default_target

    # 仅清理默认端点，用户指定的端点交给服务校验
    clear_cells(grid, *[p for p in (start, target) if p in (default_start, default_target)])

    request = PlanningRequest(
        grid=grid,
        w=cfg.grid.width,
        h=cfg.grid.height,
        start=start,
        target=target,
    )

    if in_process:
        result = PathPlanningService().handle(request)
    else:
        with PlanningWorker(cfg.worker, cfg.logging.level, cfg.logging.log_dir) as worker:
            result = message_to_result(worker.plan(request))

    return result, grid, request


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        cfg = load_config(args.config) if args.config else ThetaNavConfig()
        cfg = _apply_overrides(cfg, args)
    except Exception as e:
        logger.error(f"配置加载失败: {e}")
        return 1

    setup_logger(cfg.logging.level, cfg.logging.log_dir)

    try:
        result, grid, request = run(cfg, args.start, args.target, in_process=args.in_process)
    except Exception as e:
        logger.exception(f"Main program error: {e}")
        return 1

    if not args.no_map and result.ok:
        print(render_ascii(grid, request.w, request.h, result.path, request.start, request.target))

    if not result.ok:
        print(f"error: {result.message}")
        return 1

    path_len = len(result.path) if result.path else 0
    status = "no path" if result.path is None else f"path length: {path_len}"
    print(f"generation time {result.time_ms:.1f} ms, {status}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
