"""日志配置模块：统一命名空间与路径脱敏。"""

from __future__ import annotations

import logging
import re

# 日志器名称常量
LOGGER_NAME = "sheetstyle"

# 绝对路径（Unix / Windows）
_ABS_PATH_PATTERN = re.compile(
    r"(?<![:/\w])/(?!/)(?:[\w.\-]+/)+[\w.\-]+|(?<!\w)[A-Z]:\\(?:[\w.\-]+\\)+[\w.\-]+",
)

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _mask_paths(text: str) -> str:
    """绝对路径脱敏：保留文件名，隐藏目录结构。"""

    def _mask_path(match: re.Match[str]) -> str:
        path = match.group(0)
        sep = "\\" if "\\" in path else "/"
        parts = path.split(sep)
        filename = parts[-1] if parts else path
        return f"<path>/{filename}"

    return _ABS_PATH_PATTERN.sub(_mask_path, text)


class PathMaskingFormatter(logging.Formatter):
    """输出前隐藏工作簿文件所在目录的日志格式化器。"""

    def format(self, record: logging.LogRecord) -> str:
        return _mask_paths(super().format(record))


def setup_logging(level: str = "INFO") -> logging.Logger:
    """配置并返回 sheetstyle 根日志器。

    Args:
        level: 日志级别字符串，支持 DEBUG/INFO/WARNING/ERROR。

    Returns:
        配置好的 Logger 实例。
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    # 避免重复添加 handler
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(numeric_level)
        handler.setFormatter(PathMaskingFormatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)
    else:
        for h in logger.handlers:
            h.setLevel(numeric_level)

    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """获取 sheetstyle 命名空间下的子日志器。

    Args:
        name: 子模块名称，如 "resolver"。为 None 时返回根日志器。
    """
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)
