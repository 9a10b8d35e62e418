"""样式解析：由单元格样式索引还原生效的边框、填充、字体与数字格式。

解析过程从不抛异常：越界索引、缺失的命名样式、无法解析的数值文本
一律降级为零值结果。
"""

from __future__ import annotations

import logging
import re
from typing import Mapping

from sheetstyle.config import StyleConfig
from sheetstyle.models import (
    ZERO_CELL_FORMAT,
    BorderRecord,
    ResolvedFill,
    ResolvedFont,
    ResolvedStyle,
)
from sheetstyle.style_table import StyleTable

logger = logging.getLogger(__name__)

_INT_TEXT = re.compile(r"[+-]?[0-9]+")


def parse_int_text(text: str | None) -> int:
    """宽松解析十进制整数文本，非法或缺失时返回 0。

    只接受可选符号加 ASCII 数字，``"10.5"``、``" 11"``、``"1_0"`` 均视为非法。
    """
    if not text or not _INT_TEXT.fullmatch(text):
        return 0
    return int(text)


def _index_accepted(table: StyleTable, index: int) -> bool:
    # 上界按闭区间判断：部分生成器存在 off-by-one，保留兼容
    return index > -1 and len(table.cell_formats) > 0 and index <= len(table.cell_formats)


def resolve_style(table: StyleTable, index: int) -> ResolvedStyle:
    """返回样式索引对应的 ResolvedStyle，无效索引返回全零值结果。"""
    if not _index_accepted(table, index):
        logger.debug("样式索引 %d 超出范围（共 %d 个格式）", index, len(table.cell_formats))
        return ResolvedStyle()

    cf = table.cell_formats.get(index)
    if cf is None:
        # index == len(cell_formats)：通过了闭区间检查但没有对应记录
        return ResolvedStyle()

    # Google Docs 导出的文件 cellStyleXfs 可能少于 cellXfs
    named = table.named_cell_formats.get(index)
    if named is None:
        named = ZERO_CELL_FORMAT

    border = BorderRecord()
    source_border = table.borders.get(cf.border_id)
    if source_border is not None:
        border = BorderRecord(
            left=source_border.left,
            right=source_border.right,
            top=source_border.top,
            bottom=source_border.bottom,
        )

    fill = ResolvedFill()
    source_fill = table.fills.get(cf.fill_id)
    if source_fill is not None:
        fill = ResolvedFill(
            pattern_type=source_fill.pattern_type,
            fg_color=source_fill.fg_color,
            bg_color=source_fill.bg_color,
        )

    font = ResolvedFont()
    source_font = table.fonts.get(cf.font_id)
    if source_font is not None:
        font = ResolvedFont(
            size=parse_int_text(source_font.size),
            name=source_font.name,
            family=parse_int_text(source_font.family),
            charset=parse_int_text(source_font.charset),
        )

    return ResolvedStyle(
        apply_border=cf.apply_border or named.apply_border,
        apply_fill=cf.apply_fill or named.apply_fill,
        apply_font=cf.apply_font or named.apply_font,
        border=border,
        fill=fill,
        font=font,
    )


def resolve_number_format(
    table: StyleTable,
    index: int,
    number_format_lookup: Mapping[int, str],
) -> str:
    """返回样式索引对应的小写数字格式代码，无法解析时返回空字符串。

    下游按大小写不敏感的方式匹配日期/时间/数值格式，因此统一转小写。
    """
    if not table.cell_formats.items:
        return ""
    code = ""
    if _index_accepted(table, index):
        cf = table.cell_formats.get(index)
        if cf is not None:
            code = number_format_lookup.get(cf.num_fmt_id, "")
    return code.lower()


class StyleResolver:
    """带缓存的解析器：同一索引只解析一次，表内容变化后自动失效。

    只缓存通过范围检查的索引，越界索引每次直接返回零值结果，缓存大小不超过表长度。
    """

    def __init__(
        self,
        table: StyleTable,
        number_format_lookup: Mapping[int, str] | None = None,
        *,
        cache: bool = True,
    ) -> None:
        self.table = table
        # 空 dict 也按引用保留，调用方后续补充的格式可见
        self.number_format_lookup: Mapping[int, str] = (
            {} if number_format_lookup is None else number_format_lookup
        )
        self._cache_enabled = cache
        self._styles: dict[int, ResolvedStyle] = {}
        self._number_formats: dict[int, str] = {}
        self._state = table.state_key()

    @classmethod
    def from_config(
        cls,
        table: StyleTable,
        number_format_lookup: Mapping[int, str] | None,
        config: StyleConfig,
    ) -> StyleResolver:
        return cls(table, number_format_lookup, cache=config.cache_resolved)

    def style(self, index: int) -> ResolvedStyle:
        if not self._cache_enabled or not _index_accepted(self.table, index):
            return resolve_style(self.table, index)
        self._sync()
        cached = self._styles.get(index)
        if cached is None:
            cached = resolve_style(self.table, index)
            self._styles[index] = cached
        return cached

    def number_format(self, index: int) -> str:
        if not self._cache_enabled or not _index_accepted(self.table, index):
            return resolve_number_format(self.table, index, self.number_format_lookup)
        self._sync()
        cached = self._number_formats.get(index)
        if cached is None:
            cached = resolve_number_format(self.table, index, self.number_format_lookup)
            # 未命中查找表的结果不缓存，调用方之后补充的格式仍可解析
            if cached:
                self._number_formats[index] = cached
        return cached

    def cache_size(self) -> int:
        return len(self._styles) + len(self._number_formats)

    def clear(self) -> None:
        self._styles.clear()
        self._number_formats.clear()
        self._state = self.table.state_key()

    def _sync(self) -> None:
        state = self.table.state_key()
        if self._state != state:
            logger.debug("样式表已变化（%s → %s），清空缓存", self._state, state)
            self.clear()
