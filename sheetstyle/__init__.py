"""sheetstyle：XLSX 样式表的单元格样式解析。"""
from sheetstyle.config import ConfigError, StyleConfig, load_config
from sheetstyle.logger import get_logger, setup_logging
from sheetstyle.models import (
    Alignment,
    BorderRecord,
    CellFormatRecord,
    FillRecord,
    FontRecord,
    NumberFormatRecord,
    ResolvedFill,
    ResolvedFont,
    ResolvedStyle,
)
from sheetstyle.number_formats import (
    CUSTOM_FORMAT_MIN_ID,
    build_number_format_lookup,
    is_builtin_id,
)
from sheetstyle.openpyxl_bridge import (
    StyleSheetLoadError,
    load_style_table,
    number_formats_from_stylesheet,
    table_from_stylesheet,
)
from sheetstyle.resolver import StyleResolver, resolve_number_format, resolve_style
from sheetstyle.style_table import StyleArena, StyleTable

__all__ = [
    "Alignment",
    "BorderRecord",
    "CUSTOM_FORMAT_MIN_ID",
    "CellFormatRecord",
    "ConfigError",
    "FillRecord",
    "FontRecord",
    "NumberFormatRecord",
    "ResolvedFill",
    "ResolvedFont",
    "ResolvedStyle",
    "StyleArena",
    "StyleConfig",
    "StyleResolver",
    "StyleSheetLoadError",
    "StyleTable",
    "build_number_format_lookup",
    "get_logger",
    "is_builtin_id",
    "load_config",
    "load_style_table",
    "number_formats_from_stylesheet",
    "resolve_number_format",
    "resolve_style",
    "setup_logging",
    "table_from_stylesheet",
]
