#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置模块

提供类型安全的配置管理和验证。
"""

from .models import (
    ThetaNavConfig,
    GridConfig,
    WorkerConfig,
    LoggingConfig,
)
from .loader import load_config

__all__ = [
    'ThetaNavConfig',
    'GridConfig',
    'WorkerConfig',
    'LoggingConfig',
    'load_config'
]
