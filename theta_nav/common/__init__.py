#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
公共模块：异常、常量、日志
"""

from .exceptions import (
    ThetaNavError,
    RequestValidationError,
    OutOfBoundsError,
    BlockedEndpointError,
    MalformedRequestError,
    ConfigurationError,
    WorkerError,
)
from .logger import setup_logger

__all__ = [
    'ThetaNavError',
    'RequestValidationError',
    'OutOfBoundsError',
    'BlockedEndpointError',
    'MalformedRequestError',
    'ConfigurationError',
    'WorkerError',
    'setup_logger',
]
