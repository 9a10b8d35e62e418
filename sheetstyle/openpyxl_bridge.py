"""openpyxl 适配层：把 openpyxl 解析出的 Stylesheet 转换为 StyleTable。

XML / zip 解析由 openpyxl 完成，这里只做对象到记录的映射，
保持各集合的顺序与长度不变（命名格式比直接格式短的情况原样保留）。
"""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Any

from openpyxl.styles.stylesheet import Stylesheet
from openpyxl.xml.functions import fromstring

from sheetstyle.config import StyleConfig
from sheetstyle.models import (
    Alignment,
    BorderRecord,
    CellFormatRecord,
    FillRecord,
    FontRecord,
    NumberFormatRecord,
)
from sheetstyle.number_formats import build_number_format_lookup, is_builtin_id
from sheetstyle.style_table import StyleArena, StyleTable

logger = logging.getLogger(__name__)

# openpyxl 对未设置的颜色使用全零 ARGB 作为默认值
_UNSET_RGB = "00000000"


class StyleSheetLoadError(Exception):
    """工作簿无法打开或缺少样式表部件时抛出。"""


# ── 字段转换 ──────────────────────────────────────────────


def _rgb(color_obj: Any) -> str | None:
    """仅 RGB 类型颜色返回十六进制值；主题色、索引色与未设置均返回 None。"""
    if color_obj is None:
        return None
    if getattr(color_obj, "type", None) != "rgb":
        return None
    rgb = getattr(color_obj, "rgb", None)
    if not isinstance(rgb, str) or rgb == _UNSET_RGB:
        return None
    return rgb


def _number_text(value: Any) -> str:
    """把 openpyxl 的数值属性还原为源文件中的文本形式（11.0 → "11"）。"""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _font_record(font: Any) -> FontRecord:
    return FontRecord(
        size=_number_text(font.sz),
        name=font.name or "",
        family=_number_text(font.family),
        charset=_number_text(font.charset),
        color=_rgb(font.color),
    )


def _fill_record(fill: Any) -> FillRecord:
    # GradientFill 没有 patternType，按空填充处理
    pattern_type = getattr(fill, "patternType", None)
    if pattern_type is None and not hasattr(fill, "fgColor"):
        return FillRecord()
    return FillRecord(
        pattern_type=pattern_type or "",
        fg_color=_rgb(getattr(fill, "fgColor", None)),
        bg_color=_rgb(getattr(fill, "bgColor", None)),
    )


def _line_style(side: Any) -> str:
    if side is None:
        return ""
    return side.style or ""


def _border_record(border: Any) -> BorderRecord:
    return BorderRecord(
        left=_line_style(border.left),
        right=_line_style(border.right),
        top=_line_style(border.top),
        bottom=_line_style(border.bottom),
    )


def _alignment(alignment: Any) -> Alignment | None:
    if alignment is None:
        return None
    return Alignment(
        horizontal=alignment.horizontal or "",
        vertical=alignment.vertical or "",
        indent=int(alignment.indent or 0),
        text_rotation=int(alignment.textRotation or 0),
        wrap_text=bool(alignment.wrapText),
        shrink_to_fit=bool(alignment.shrinkToFit),
    )


def _cell_format_record(xf: Any) -> CellFormatRecord:
    return CellFormatRecord(
        apply_border=bool(xf.applyBorder),
        apply_fill=bool(xf.applyFill),
        apply_font=bool(xf.applyFont),
        apply_alignment=bool(xf.applyAlignment),
        apply_protection=bool(xf.applyProtection),
        border_id=xf.borderId or 0,
        fill_id=xf.fillId or 0,
        font_id=xf.fontId or 0,
        num_fmt_id=xf.numFmtId or 0,
        alignment=_alignment(xf.alignment),
    )


# ── 公共接口 ──────────────────────────────────────────────


def table_from_stylesheet(stylesheet: Stylesheet) -> StyleTable:
    """将 openpyxl Stylesheet 映射为 StyleTable。"""
    table = StyleTable(
        fonts=StyleArena(_font_record(f) for f in stylesheet.fonts),
        fills=StyleArena(_fill_record(f) for f in stylesheet.fills),
        borders=StyleArena(_border_record(b) for b in stylesheet.borders),
        cell_formats=StyleArena(_cell_format_record(xf) for xf in stylesheet.cellXfs.xf),
        named_cell_formats=StyleArena(_cell_format_record(xf) for xf in stylesheet.cellStyleXfs.xf),
    )
    if len(table.named_cell_formats) < len(table.cell_formats):
        logger.debug(
            "命名样式格式 %d 个，少于直接格式 %d 个",
            len(table.named_cell_formats),
            len(table.cell_formats),
        )
    return table


def number_formats_from_stylesheet(
    stylesheet: Stylesheet,
    *,
    include_builtin: bool = True,
) -> dict[int, str]:
    """由 numFmts 构建数字格式查找表。"""
    records = [
        NumberFormatRecord(num_fmt_id=n.numFmtId, format_code=n.formatCode or "")
        for n in stylesheet.numFmts.numFmt
    ]
    overridden = [r.num_fmt_id for r in records if is_builtin_id(r.num_fmt_id)]
    if overridden:
        logger.debug("numFmts 重新定义了内置格式 id: %s", overridden)
    return build_number_format_lookup(records, include_builtin=include_builtin)


def load_style_table(
    path: str | Path,
    config: StyleConfig | None = None,
) -> tuple[StyleTable, dict[int, str]]:
    """读取 xlsx 文件中的样式表部件，返回 (StyleTable, 数字格式查找表)。

    Raises:
        StyleSheetLoadError: 文件无法打开、不是 zip 包、缺少样式部件或样式 XML 无法解析。
    """
    config = config or StyleConfig()
    path = Path(path)
    try:
        with zipfile.ZipFile(path) as archive:
            src = archive.read(config.styles_part)
    except KeyError as exc:
        raise StyleSheetLoadError(f"{path.name} 中缺少样式部件 {config.styles_part}") from exc
    except (zipfile.BadZipFile, OSError) as exc:
        raise StyleSheetLoadError(f"无法打开工作簿: {path}") from exc

    try:
        stylesheet = Stylesheet.from_tree(fromstring(src))
    except (SyntaxError, ValueError, TypeError, IndexError) as exc:
        raise StyleSheetLoadError(f"样式表解析失败: {path}") from exc

    table = table_from_stylesheet(stylesheet)
    lookup = number_formats_from_stylesheet(
        stylesheet, include_builtin=config.builtin_number_formats,
    )
    logger.info(
        "已加载样式表 %s：%d 个字体，%d 个填充，%d 个边框，%d 个单元格格式",
        path,
        len(table.fonts),
        len(table.fills),
        len(table.borders),
        len(table.cell_formats),
    )
    return table, lookup
