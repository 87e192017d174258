#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
规划工作进程模块

在独立进程中运行 PathPlanningService，调用方与规划计算只通过两个队列
拷贝请求/响应消息，不共享任何可变内存，避免耗时搜索阻塞调用方。
"""

import itertools
import multiprocessing
import queue
import time
from typing import Any, Dict, Optional, Union

from loguru import logger

from theta_nav.common.constants import MSG_INTERNAL_PREFIX, STATUS_ERROR, WORKER_POLL_INTERVAL
from theta_nav.common.exceptions import WorkerError
from theta_nav.common.logger import setup_logger
from theta_nav.config.models import WorkerConfig
from theta_nav.path_planner.map_model import PlanningRequest
from theta_nav.service.path_planning_service import PathPlanningService
from theta_nav.service.protocol import request_to_message

# 停止信号
_STOP = None


def _take_latest(request_queue, message: Dict[str, Any]):
    """
    清空队列，只保留最新的请求

    Returns:
        (最新请求, 被丢弃的请求数, 是否收到停止信号)
    """
    dropped = 0
    while True:
        try:
            newer = request_queue.get_nowait()
        except queue.Empty:
            return message, dropped, False
        if newer is _STOP:
            return message, dropped, True
        dropped += 1
        message = newer


def _worker_main(request_queue, result_queue, log_level: str, log_dir: Optional[str]) -> None:
    """工作进程入口：循环处理请求直到收到停止信号"""
    setup_logger(log_level, log_dir)
    service = PathPlanningService()
    logger.info("规划工作进程启动")

    while True:
        message = request_queue.get()
        if message is _STOP:
            break

        message, dropped, stop = _take_latest(request_queue, message)
        if dropped:
            logger.info(f"丢弃 {dropped} 个被新请求取代的待处理请求")

        try:
            reply = service.handle_message(message)
        except Exception as e:
            logger.exception(f"处理请求异常: {e}")
            reply = {"status": STATUS_ERROR, "message": f"{MSG_INTERNAL_PREFIX}: {e}"}
            if isinstance(message, dict) and message.get("requestId") is not None:
                reply["requestId"] = message["requestId"]

        result_queue.put(reply)

        if stop:
            break

    logger.info("规划工作进程退出")


class PlanningWorker:
    """
    规划工作进程管理器

    同一时刻只期望一个请求在途；若请求堆积，工作进程只处理最新的一个，
    被取代的请求不回复，在途计算不会被取消。每个响应回传 requestId，
    调用方据此丢弃过期结果。

    示例:
        ```python
        with PlanningWorker() as worker:
            reply = worker.plan({"grid": [...], "w": 5, "h": 5,
                                 "start": {"x": 0, "y": 0}, "target": {"x": 4, "y": 4}})
        ```
    """

    def __init__(
        self,
        config: Optional[WorkerConfig] = None,
        log_level: str = "INFO",
        log_dir: Optional[str] = None,
    ):
        """
        初始化工作进程管理器

        Args:
            config: 工作进程配置，None 使用默认值
            log_level: 子进程日志级别
            log_dir: 子进程日志目录
        """
        self.config_ = config or WorkerConfig()
        self.log_level_ = log_level
        self.log_dir_ = log_dir

        self.process_ = None
        self.request_queue_ = None
        self.result_queue_ = None
        self.request_ids_ = itertools.count(1)

    def start(self) -> bool:
        """
        启动工作进程

        Returns:
            是否成功启动（已在运行时返回 False）
        """
        if self.is_running():
            logger.warning("规划工作进程已在运行")
            return False

        ctx = multiprocessing.get_context(self.config_.start_method)
        self.request_queue_ = ctx.Queue()
        self.result_queue_ = ctx.Queue()
        self.process_ = ctx.Process(
            target=_worker_main,
            args=(self.request_queue_, self.result_queue_, self.log_level_, self.log_dir_),
            name="theta-nav-planner",
            daemon=True,
        )
        self.process_.start()
        logger.info(f"规划工作进程已启动: pid={self.process_.pid}, start_method={self.config_.start_method}")
        return True

    def stop(self, timeout: Optional[float] = None) -> None:
        """停止工作进程"""
        if self.process_ is None:
            return

        timeout = self.config_.join_timeout_s if timeout is None else timeout
        logger.info("正在停止规划工作进程...")

        if self.process_.is_alive():
            self.request_queue_.put(_STOP)
            self.process_.join(timeout=timeout)

        if self.process_.is_alive():
            logger.warning("规划工作进程未按时退出，强制终止")
            self.process_.terminate()
            self.process_.join(timeout=timeout)

        for q in (self.request_queue_, self.result_queue_):
            q.close()

        self.process_ = None
        self.request_queue_ = None
        self.result_queue_ = None
        logger.info("规划工作进程已停止")

    def is_running(self) -> bool:
        return self.process_ is not None and self.process_.is_alive()

    def submit(self, request: Union[PlanningRequest, Dict[str, Any]]) -> int:
        """
        提交一个规划请求（不等待结果）

        Args:
            request: PlanningRequest 或请求消息 dict

        Returns:
            分配的 requestId

        Raises:
            WorkerError: 工作进程未运行
        """
        if not self.is_running():
            raise WorkerError("规划工作进程未运行，请先调用 start()")

        if isinstance(request, PlanningRequest):
            message = request_to_message(request)
        else:
            message = dict(request)

        request_id = next(self.request_ids_)
        message["requestId"] = request_id
        self.request_queue_.put(message)
        logger.debug(f"提交规划请求: requestId={request_id}")
        return request_id

    def get_result(self, timeout: Optional[float] = None) -> Optional[Dict[str, Any]]:
        """
        取一个响应消息

        Returns:
            响应 dict，超时返回 None
        """
        if self.result_queue_ is None:
            raise WorkerError("规划工作进程未启动")
        try:
            return self.result_queue_.get(timeout=timeout)
        except queue.Empty:
            return None

    def plan(
        self,
        request: Union[PlanningRequest, Dict[str, Any]],
        timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        提交请求并等待对应的响应，期间收到的过期响应会被丢弃

        Raises:
            WorkerError: 超时或工作进程意外退出
        """
        timeout = self.config_.request_timeout_s if timeout is None else timeout
        request_id = self.submit(request)
        deadline = time.monotonic() + timeout

        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise WorkerError(f"等待规划结果超时: requestId={request_id}, timeout={timeout}s")

            reply = self.get_result(timeout=min(remaining, WORKER_POLL_INTERVAL))
            if reply is None:
                if not self.is_running():
                    raise WorkerError(f"规划工作进程意外退出: requestId={request_id}")
                continue

            if reply.get("requestId") == request_id:
                return reply
            logger.debug(f"丢弃过期响应: requestId={reply.get('requestId')}, 期望={request_id}")

    def __enter__(self) -> "PlanningWorker":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
