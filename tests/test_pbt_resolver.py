"""属性测试：样式解析的健壮性与纯函数性质。

- Property 1: 越界索引（含负数与闭区间上界）得到全零值结果
- Property 2: 解析幂等且无副作用
- Property 3: apply 标志为直接格式与命名格式的逻辑或
- Property 4: 追加返回追加前长度，且记录可在该位置取回
- Property 5: 数字格式结果总是小写，且空表恒为空字符串
"""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from sheetstyle.models import (
    BorderRecord,
    CellFormatRecord,
    FillRecord,
    FontRecord,
    ResolvedStyle,
)
from sheetstyle.resolver import parse_int_text, resolve_number_format, resolve_style
from sheetstyle.style_table import StyleTable


# ── 辅助策略 ──────────────────────────────────────────────

_line_style = st.sampled_from(["", "thin", "medium", "thick", "dashed", "dotted", "double", "hair"])
_rgb = st.one_of(st.none(), st.from_regex(r"[0-9A-F]{8}", fullmatch=True))
_id = st.integers(min_value=-3, max_value=8)
_numeric_text = st.one_of(
    st.integers(min_value=-50, max_value=500).map(str),
    st.text(max_size=6),
)

_fonts = st.builds(
    FontRecord,
    size=_numeric_text,
    name=st.text(max_size=12),
    family=_numeric_text,
    charset=_numeric_text,
    color=_rgb,
)
_fills = st.builds(
    FillRecord,
    pattern_type=st.sampled_from(["", "none", "solid", "gray125"]),
    fg_color=_rgb,
    bg_color=_rgb,
)
_borders = st.builds(BorderRecord, left=_line_style, right=_line_style, top=_line_style, bottom=_line_style)
_cell_formats = st.builds(
    CellFormatRecord,
    apply_border=st.booleans(),
    apply_fill=st.booleans(),
    apply_font=st.booleans(),
    border_id=_id,
    fill_id=_id,
    font_id=_id,
    num_fmt_id=st.integers(min_value=0, max_value=200),
)


@st.composite
def _tables(draw: st.DrawFn) -> StyleTable:
    return StyleTable.from_records(
        fonts=draw(st.lists(_fonts, max_size=4)),
        fills=draw(st.lists(_fills, max_size=4)),
        borders=draw(st.lists(_borders, max_size=4)),
        cell_formats=draw(st.lists(_cell_formats, max_size=6)),
        named_cell_formats=draw(st.lists(_cell_formats, max_size=6)),
    )


# ---------------------------------------------------------------------------
# Property 1：越界索引得到全零值结果
# ---------------------------------------------------------------------------


@given(table=_tables(), offset=st.integers(min_value=0, max_value=50))
def test_property_1_out_of_range_is_zero_valued(table: StyleTable, offset: int) -> None:
    assert resolve_style(table, -1 - offset) == ResolvedStyle()
    assert resolve_style(table, len(table.cell_formats) + offset) == ResolvedStyle()


# ---------------------------------------------------------------------------
# Property 2：幂等、无副作用
# ---------------------------------------------------------------------------


@given(table=_tables(), index=st.integers(min_value=-2, max_value=8))
def test_property_2_resolution_is_pure(table: StyleTable, index: int) -> None:
    snapshot = (
        list(table.fonts.items),
        list(table.fills.items),
        list(table.borders.items),
        list(table.cell_formats.items),
        list(table.named_cell_formats.items),
        table.revision,
    )
    assert resolve_style(table, index) == resolve_style(table, index)
    assert snapshot == (
        table.fonts.items,
        table.fills.items,
        table.borders.items,
        table.cell_formats.items,
        table.named_cell_formats.items,
        table.revision,
    )


# ---------------------------------------------------------------------------
# Property 3：apply 标志为逻辑或；越界 id 不产生部分拷贝
# ---------------------------------------------------------------------------


@given(table=_tables(), data=st.data())
def test_property_3_flags_union_and_bounded_ids(table: StyleTable, data: st.DataObject) -> None:
    if not table.cell_formats.items:
        return
    index = data.draw(st.integers(min_value=0, max_value=len(table.cell_formats) - 1))
    cf = table.cell_formats.items[index]
    named = table.named_cell_formats.get(index) or CellFormatRecord()

    result = resolve_style(table, index)

    assert result.apply_border == (cf.apply_border or named.apply_border)
    assert result.apply_fill == (cf.apply_fill or named.apply_fill)
    assert result.apply_font == (cf.apply_font or named.apply_font)

    expected_border = table.borders.get(cf.border_id) or BorderRecord()
    assert result.border == expected_border

    source_fill = table.fills.get(cf.fill_id)
    if source_fill is None:
        assert result.fill.pattern_type == ""
        assert result.fill.fg_color is None and result.fill.bg_color is None
    else:
        assert result.fill.fg_color == source_fill.fg_color

    source_font = table.fonts.get(cf.font_id)
    if source_font is None:
        assert result.font.name == "" and result.font.size == 0
    else:
        assert result.font.size == parse_int_text(source_font.size)


# ---------------------------------------------------------------------------
# Property 4：追加返回追加前长度
# ---------------------------------------------------------------------------


@given(table=_tables(), font=_fonts, cell_format=_cell_formats)
def test_property_4_append_returns_previous_length(
    table: StyleTable, font: FontRecord, cell_format: CellFormatRecord,
) -> None:
    font_count = len(table.fonts)
    index = table.add_font(font)
    assert index == font_count
    assert table.fonts.count == font_count + 1
    assert table.fonts.get(index) == font

    named_count = len(table.named_cell_formats)
    assert table.add_named_cell_format(cell_format) == named_count
    assert table.named_cell_formats.get(named_count) == cell_format


# ---------------------------------------------------------------------------
# Property 5：数字格式总是小写
# ---------------------------------------------------------------------------


@given(
    table=_tables(),
    index=st.integers(min_value=-2, max_value=8),
    lookup=st.dictionaries(
        st.integers(min_value=0, max_value=200),
        st.text(alphabet=st.characters(min_codepoint=32, max_codepoint=126), max_size=12),
        max_size=10,
    ),
)
def test_property_5_number_format_lower_cased(
    table: StyleTable, index: int, lookup: dict[int, str],
) -> None:
    result = resolve_number_format(table, index, lookup)
    assert result == result.lower()
    if not table.cell_formats.items:
        assert result == ""
