#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
theta_nav

基于 Theta* 的任意角度栅格路径规划，规划计算在隔离的工作进程中执行。
"""

from .path_planner import ThetaStarPlanner, PlanningRequest, PlanningResult
from .service import PathPlanningService, PlanningWorker

__version__ = "0.1.0"

__all__ = [
    'ThetaStarPlanner',
    'PlanningRequest',
    'PlanningResult',
    'PathPlanningService',
    'PlanningWorker',
]
