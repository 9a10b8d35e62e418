"""样式表数据模型：字体、填充、边框、单元格格式记录与解析结果。

所有记录均为不可变值对象，默认值即“零值”（未解析 / 未设置）。
颜色以 RGB 十六进制字符串表示，``None`` 表示未设置，不与任何合法颜色混淆。
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Alignment:
    """单元格对齐子记录（仅随格式携带，解析器不处理）。"""

    horizontal: str = ""
    vertical: str = ""
    indent: int = 0
    text_rotation: int = 0
    wrap_text: bool = False
    shrink_to_fit: bool = False


@dataclass(frozen=True)
class FontRecord:
    """字体记录，数值字段保留源文件中的文本形式。"""

    size: str = ""  # <sz val="11"/>
    name: str = ""
    family: str = ""
    charset: str = ""
    color: str | None = None  # 仅 RGB 颜色


@dataclass(frozen=True)
class FillRecord:
    """图案填充记录。"""

    pattern_type: str = ""  # "solid" / "none" / "gray125" ...
    fg_color: str | None = None
    bg_color: str | None = None


@dataclass(frozen=True)
class BorderRecord:
    """四边线型，空字符串表示无边框。"""

    left: str = ""
    right: str = ""
    top: str = ""
    bottom: str = ""


@dataclass(frozen=True)
class CellFormatRecord:
    """单元格格式（xf）记录，直接格式与命名样式格式共用此结构。"""

    apply_border: bool = False
    apply_fill: bool = False
    apply_font: bool = False
    apply_alignment: bool = False
    apply_protection: bool = False
    border_id: int = 0
    fill_id: int = 0
    font_id: int = 0
    num_fmt_id: int = 0
    alignment: Alignment | None = None


@dataclass(frozen=True)
class NumberFormatRecord:
    """数字格式覆盖项：numFmtId → formatCode。"""

    num_fmt_id: int
    format_code: str = ""


@dataclass(frozen=True)
class ResolvedFill:
    pattern_type: str = ""
    fg_color: str | None = None
    bg_color: str | None = None


@dataclass(frozen=True)
class ResolvedFont:
    size: int = 0
    name: str = ""
    family: int = 0
    charset: int = 0


@dataclass(frozen=True)
class ResolvedStyle:
    """单元格最终生效的边框、填充与字体。

    ``apply_*`` 为直接格式与命名样式格式对应标志的逻辑或。
    """

    apply_border: bool = False
    apply_fill: bool = False
    apply_font: bool = False
    border: BorderRecord = field(default_factory=BorderRecord)
    fill: ResolvedFill = field(default_factory=ResolvedFill)
    font: ResolvedFont = field(default_factory=ResolvedFont)

    @property
    def is_empty(self) -> bool:
        """全部字段均为零值时返回 True。"""
        return self == ResolvedStyle()


# 命名样式缺失时的占位记录
ZERO_CELL_FORMAT = CellFormatRecord()
