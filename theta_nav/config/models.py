#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置模型

使用Pydantic定义类型安全的配置模型，所有分组都有默认值，可只写需要覆盖的字段。
"""

from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator

from theta_nav.common.constants import (
    DEFAULT_GRID_HEIGHT,
    DEFAULT_GRID_WIDTH,
    DEFAULT_OBSTACLE_PROBABILITY,
    DEFAULT_RECT_OBSTACLES_PER_CELLS,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_START_METHOD,
    THREAD_JOIN_TIMEOUT,
)


class GridConfig(BaseModel):
    """演示栅格生成配置"""
    width: int = Field(DEFAULT_GRID_WIDTH, description="栅格宽度")
    height: int = Field(DEFAULT_GRID_HEIGHT, description="栅格高度")
    obstacle_probability: float = Field(DEFAULT_OBSTACLE_PROBABILITY, description="随机障碍概率")
    rect_obstacles_per_cells: int = Field(
        DEFAULT_RECT_OBSTACLES_PER_CELLS,
        description="每多少个格子放置一个矩形障碍",
    )
    seed: Optional[int] = Field(None, description="随机种子，None 表示不固定")

    @field_validator('width', 'height', 'rect_obstacles_per_cells')
    @classmethod
    def validate_positive_int(cls, v: int) -> int:
        """验证正整数"""
        if v <= 0:
            raise ValueError(f"值必须大于0: {v}")
        return v

    @field_validator('obstacle_probability')
    @classmethod
    def validate_obstacle_probability(cls, v: float) -> float:
        """验证障碍概率范围"""
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"障碍概率必须在0.0-1.0之间: {v}")
        return v


class WorkerConfig(BaseModel):
    """规划工作进程配置"""
    start_method: Literal["spawn", "fork", "forkserver"] = Field(
        DEFAULT_START_METHOD,
        description="multiprocessing 启动方式",
    )
    request_timeout_s: float = Field(DEFAULT_REQUEST_TIMEOUT, description="单次请求等待超时（秒）")
    join_timeout_s: float = Field(THREAD_JOIN_TIMEOUT, description="进程退出等待超时（秒）")

    @field_validator('request_timeout_s', 'join_timeout_s')
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """验证超时"""
        if v <= 0:
            raise ValueError(f"超时必须大于0: {v}")
        return v


class LoggingConfig(BaseModel):
    """日志配置"""
    level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO",
        description="日志级别",
    )
    log_dir: Optional[str] = Field(None, description="日志目录，None 表示只输出到控制台")

    @field_validator('level', mode='before')
    @classmethod
    def normalize_level(cls, v):
        """日志级别统一为大写"""
        if isinstance(v, str):
            return v.upper()
        return v


class ThetaNavConfig(BaseModel):
    """主配置"""
    grid: GridConfig = Field(default_factory=GridConfig, description="栅格生成配置")
    worker: WorkerConfig = Field(default_factory=WorkerConfig, description="工作进程配置")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="日志配置")
