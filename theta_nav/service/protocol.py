#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
消息协议模块

使用Pydantic定义规划请求/响应消息，负责 dict 消息与
PlanningRequest / PlanningResult 之间的转换。
"""

from typing import Any, Dict, List, Literal, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError, model_validator

from theta_nav.common.constants import MSG_MALFORMED_PREFIX, STATUS_ERROR, STATUS_OK
from theta_nav.common.exceptions import MalformedRequestError
from theta_nav.path_planner.map_model import PlanningRequest, PlanningResult


class CellMessage(BaseModel):
    """栅格坐标 {x, y}"""
    x: int = Field(..., description="列")
    y: int = Field(..., description="行")


class RequestMessage(BaseModel):
    """规划请求消息"""
    model_config = ConfigDict(populate_by_name=True)

    grid: List[float] = Field(..., description="扁平栅格，长度 w*h，0=可通行，非 0 即障碍")
    w: PositiveInt = Field(..., description="栅格宽度")
    h: PositiveInt = Field(..., description="栅格高度")
    start: CellMessage = Field(..., description="起点")
    target: CellMessage = Field(..., description="终点")
    request_id: Optional[int] = Field(None, alias="requestId", description="请求编号（工作进程回传）")

    @model_validator(mode='after')
    def validate_grid_length(self) -> "RequestMessage":
        """验证栅格长度"""
        if len(self.grid) != self.w * self.h:
            raise ValueError(f"grid length {len(self.grid)} != w*h ({self.w * self.h})")
        return self


class OkResponse(BaseModel):
    """规划成功响应（path 为 None 表示不可达）"""
    model_config = ConfigDict(populate_by_name=True)

    status: Literal["ok"] = STATUS_OK
    path: Optional[List[CellMessage]] = Field(..., description="路径点")
    time_ms: float = Field(..., alias="timeMs", description="规划耗时（毫秒）")
    request_id: Optional[int] = Field(None, alias="requestId")


class ErrorResponse(BaseModel):
    """请求错误响应"""
    model_config = ConfigDict(populate_by_name=True)

    status: Literal["error"] = STATUS_ERROR
    message: str = Field(..., description="错误描述")
    request_id: Optional[int] = Field(None, alias="requestId")


def _binarize(grid: Any) -> List[int]:
    # 非 0 即障碍，小数值不得截断为 0
    return (np.asarray(grid).reshape(-1) != 0).astype(np.uint8).tolist()


def _plain(value: Any) -> Any:
    return value.item() if isinstance(value, np.generic) else value


def _normalize_grid(message: Dict[str, Any]) -> Dict[str, Any]:
    grid = message.get("grid")
    if isinstance(grid, np.ndarray):
        message = dict(message)
        message["grid"] = _binarize(grid)
    return message


def parse_request(message: Dict[str, Any]) -> PlanningRequest:
    """
    解析并校验请求消息

    Raises:
        MalformedRequestError: 消息结构不合法
    """
    if not isinstance(message, dict):
        raise MalformedRequestError(f"{MSG_MALFORMED_PREFIX}: expected a mapping, got {type(message).__name__}")

    try:
        msg = RequestMessage.model_validate(_normalize_grid(message))
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or 'request'}: {err['msg']}"
            for err in e.errors()
        )
        raise MalformedRequestError(f"{MSG_MALFORMED_PREFIX}: {details}") from e

    return PlanningRequest(
        grid=[0 if v == 0 else 1 for v in msg.grid],
        w=msg.w,
        h=msg.h,
        start=(msg.start.x, msg.start.y),
        target=(msg.target.x, msg.target.y),
        request_id=msg.request_id,
    )


def request_to_message(request: PlanningRequest) -> Dict[str, Any]:
    """将 PlanningRequest 编码为可跨进程拷贝的 dict 消息"""
    message: Dict[str, Any] = {
        "grid": _binarize(request.grid),
        "w": _plain(request.w),
        "h": _plain(request.h),
        # 坐标原样传递，非整数由接收端报告为 malformed
        "start": {"x": _plain(request.start[0]), "y": _plain(request.start[1])},
        "target": {"x": _plain(request.target[0]), "y": _plain(request.target[1])},
    }
    if request.request_id is not None:
        message["requestId"] = request.request_id
    return message


def result_to_message(result: PlanningResult) -> Dict[str, Any]:
    """将 PlanningResult 编码为响应消息"""
    exclude = {"request_id"} if result.request_id is None else set()

    if result.ok:
        path = None
        if result.path is not None:
            path = [CellMessage(x=x, y=y) for x, y in result.path]
        response = OkResponse(path=path, time_ms=result.time_ms, request_id=result.request_id)
    else:
        response = ErrorResponse(message=result.message, request_id=result.request_id)

    return response.model_dump(by_alias=True, exclude=exclude)


def message_to_result(message: Dict[str, Any]) -> PlanningResult:
    """将响应消息解码为 PlanningResult（调用方使用）"""
    if message.get("status") == STATUS_OK:
        resp = OkResponse.model_validate(message)
        path = None
        if resp.path is not None:
            path = [(p.x, p.y) for p in resp.path]
        return PlanningResult(
            status=STATUS_OK,
            path=path,
            time_ms=resp.time_ms,
            request_id=resp.request_id,
        )

    resp = ErrorResponse.model_validate(message)
    return PlanningResult.error(resp.message, request_id=resp.request_id)
