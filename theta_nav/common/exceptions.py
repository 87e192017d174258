#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
自定义异常类：定义路径规划模块的专用异常
"""


class ThetaNavError(Exception):
    """theta_nav 基础异常类"""
    pass


class RequestValidationError(ThetaNavError):
    """请求校验失败异常（在搜索开始前检测）"""
    pass


class OutOfBoundsError(RequestValidationError):
    """起点或终点超出栅格范围"""
    pass


class BlockedEndpointError(RequestValidationError):
    """起点或终点位于障碍物上"""
    pass


class MalformedRequestError(RequestValidationError):
    """请求消息结构不合法"""
    pass


class ConfigurationError(ThetaNavError):
    """配置错误异常"""
    pass


class WorkerError(ThetaNavError):
    """规划工作进程异常"""
    pass
