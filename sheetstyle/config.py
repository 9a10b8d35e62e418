"""配置管理模块：加载环境变量、.env 文件和默认值。"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_ENV_PREFIX = "SHEETSTYLE_"
_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """配置校验失败时抛出的异常。"""


@dataclass(frozen=True)
class StyleConfig:
    """不可变的全局配置对象。"""

    log_level: str = "INFO"
    builtin_number_formats: bool = True  # 数字格式查找表是否预置内置格式
    cache_resolved: bool = True  # StyleResolver 是否按索引缓存结果
    styles_part: str = "xl/styles.xml"  # 工作簿包内样式表部件路径


def load_runtime_env() -> None:
    """加载当前工作目录 .env（不覆盖已存在环境变量）。"""
    dotenv_path = Path.cwd() / ".env"
    load_dotenv(dotenv_path=dotenv_path, override=False)


def _parse_bool(value: str | None, name: str, default: bool) -> bool:
    """将字符串解析为布尔值。"""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise ConfigError(f"配置项 {name} 必须为布尔值，当前值: {value!r}")


def _parse_log_level(value: str | None) -> str:
    """解析日志级别，非法值抛出 ConfigError。"""
    if value is None or not value.strip():
        return "INFO"
    normalized = value.strip().upper()
    if normalized not in _ALLOWED_LOG_LEVELS:
        raise ConfigError(
            f"配置项 {_ENV_PREFIX}LOG_LEVEL 必须为 "
            f"{', '.join(sorted(_ALLOWED_LOG_LEVELS))} 之一，当前值: {value!r}"
        )
    return normalized


def _parse_styles_part(value: str | None) -> str:
    if value is None or not value.strip():
        return "xl/styles.xml"
    # zip 包内路径不带前导斜杠
    return value.strip().lstrip("/")


def load_config() -> StyleConfig:
    """加载配置。优先级：环境变量 > .env 文件 > 默认值。"""
    load_runtime_env()

    config = StyleConfig(
        log_level=_parse_log_level(os.environ.get(f"{_ENV_PREFIX}LOG_LEVEL")),
        builtin_number_formats=_parse_bool(
            os.environ.get(f"{_ENV_PREFIX}BUILTIN_NUMBER_FORMATS"),
            f"{_ENV_PREFIX}BUILTIN_NUMBER_FORMATS",
            True,
        ),
        cache_resolved=_parse_bool(
            os.environ.get(f"{_ENV_PREFIX}CACHE_RESOLVED"),
            f"{_ENV_PREFIX}CACHE_RESOLVED",
            True,
        ),
        styles_part=_parse_styles_part(os.environ.get(f"{_ENV_PREFIX}STYLES_PART")),
    )
    logger.debug("配置已加载: %s", config)
    return config
