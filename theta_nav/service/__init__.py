#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
服务模块：规划边界层、消息协议、隔离工作进程
"""

from .path_planning_service import PathPlanningService
from .planning_worker import PlanningWorker
from .protocol import parse_request, request_to_message, result_to_message, message_to_result

__all__ = [
    'PathPlanningService',
    'PlanningWorker',
    'parse_request',
    'request_to_message',
    'result_to_message',
    'message_to_result',
]
