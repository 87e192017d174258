#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置加载器

从YAML文件加载配置并使用Pydantic验证。
"""

import yaml
from pathlib import Path
from typing import Optional, Union
from loguru import logger
from pydantic import ValidationError

from theta_nav.common.exceptions import ConfigurationError
from theta_nav.config.models import ThetaNavConfig


def load_config(config_path: Union[str, Path], base_dir: Optional[Path] = None) -> ThetaNavConfig:
    """
    从YAML文件加载配置

    Args:
        config_path: 配置文件路径
        base_dir: 用于解析相对路径的目录，默认为配置文件所在目录（若为 config/ 则取其上级）

    Returns:
        验证后的ThetaNavConfig对象

    Raises:
        FileNotFoundError: 配置文件不存在
        yaml.YAMLError: YAML格式错误
        ConfigurationError: 配置内容为空或验证失败
    """
    config_path = Path(config_path)
    if base_dir is None:
        default_base = config_path.resolve().parent
        if default_base.name.lower() == "config":
            default_base = default_base.parent
        base_dir = default_base
    else:
        base_dir = Path(base_dir).resolve()

    # 检查文件是否存在
    if not config_path.exists():
        error_msg = f"配置文件不存在: {config_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    # 加载YAML文件
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        error_msg = f"YAML格式错误: {e}"
        logger.error(error_msg)
        raise yaml.YAMLError(error_msg) from e

    if raw_config is None:
        error_msg = "配置文件为空"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    if not isinstance(raw_config, dict):
        error_msg = f"配置文件顶层必须是映射: {type(raw_config).__name__}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    # log_dir 相对路径按 base_dir 解析
    logging_cfg = raw_config.get("logging")
    if isinstance(logging_cfg, dict) and logging_cfg.get("log_dir"):
        log_dir = Path(logging_cfg["log_dir"])
        if not log_dir.is_absolute():
            log_dir = base_dir / log_dir
        logging_cfg["log_dir"] = str(log_dir.resolve())

    # 使用Pydantic验证配置
    try:
        config = ThetaNavConfig(**raw_config)
    except ValidationError as e:
        logger.error(f"配置验证失败: {config_path}")
        # 输出详细的验证错误信息
        for error in e.errors():
            field_path = " -> ".join(str(loc) for loc in error['loc'])
            logger.error(f"  {field_path}: {error['msg']}")
        raise ConfigurationError(f"配置验证失败:\n{e}") from e

    logger.info(f"配置加载成功: {config_path}")
    return config
