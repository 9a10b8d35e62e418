"""数字格式查找表：合并内置格式与样式表中的自定义 numFmts。"""

from __future__ import annotations

from typing import Iterable, Tuple, Union

from openpyxl.styles.numbers import BUILTIN_FORMATS, BUILTIN_FORMATS_MAX_SIZE

from sheetstyle.models import NumberFormatRecord

NumberFormatSource = Union[NumberFormatRecord, Tuple[int, str]]

# 自定义格式 id 的下限，小于该值的 id 为内置格式
CUSTOM_FORMAT_MIN_ID = BUILTIN_FORMATS_MAX_SIZE


def build_number_format_lookup(
    records: Iterable[NumberFormatSource] = (),
    *,
    include_builtin: bool = True,
) -> dict[int, str]:
    """构建 numFmtId → formatCode 查找表。

    Args:
        records: 自定义格式，``NumberFormatRecord`` 或 ``(id, code)`` 二元组。
        include_builtin: 是否预置 openpyxl 的内置格式（id 0–49 等）。

    Returns:
        新建的 dict，自定义格式覆盖同 id 的内置格式。
    """
    lookup: dict[int, str] = dict(BUILTIN_FORMATS) if include_builtin else {}
    for record in records:
        if isinstance(record, NumberFormatRecord):
            lookup[record.num_fmt_id] = record.format_code
        else:
            num_fmt_id, format_code = record
            lookup[int(num_fmt_id)] = format_code
    return lookup


def is_builtin_id(num_fmt_id: int) -> bool:
    """内置格式 id 判断（0 ≤ id < 164）。"""
    return 0 <= num_fmt_id < CUSTOM_FORMAT_MIN_ID
