"""StyleTable：样式表的内存表示，由五个只追加的索引集合组成。

集合内的位置即引用 id（fontId / fillId / borderId / 样式索引），
追加返回的位置在表的整个生命周期内保持有效（无删除、无原地修改）。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, TypeVar

from sheetstyle.models import (
    BorderRecord,
    CellFormatRecord,
    FillRecord,
    FontRecord,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StyleArena(Generic[T]):
    """只追加的记录集合。

    ``count`` 对应源文件中声明的 count 属性，单独存储；
    边界检查一律以实际长度 ``len(items)`` 为准。
    """

    def __init__(self, items: Iterable[T] = (), count: int | None = None) -> None:
        self.items: list[T] = list(items)
        self.count: int = len(self.items) if count is None else count

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __repr__(self) -> str:
        return f"StyleArena(count={self.count}, items={self.items!r})"

    def get(self, index: int) -> T | None:
        """越界（含负数）时返回 None，不抛异常。"""
        if 0 <= index < len(self.items):
            return self.items[index]
        return None

    def _append(self, record: T) -> int:
        """追加记录并返回其位置（追加前的长度），仅供 StyleTable 的追加操作调用。"""
        index = len(self.items)
        if self.count != index:
            logger.debug("声明 count=%d 与实际长度 %d 不一致", self.count, index)
        self.items.append(record)
        self.count += 1
        return index


@dataclass
class StyleTable:
    """样式表：字体、填充、边框与两组单元格格式记录。

    ``cell_formats`` 对应 cellXfs（单元格直接使用），
    ``named_cell_formats`` 对应 cellStyleXfs（命名样式使用），后者可能更短。
    """

    fonts: StyleArena[FontRecord] = field(default_factory=StyleArena)
    fills: StyleArena[FillRecord] = field(default_factory=StyleArena)
    borders: StyleArena[BorderRecord] = field(default_factory=StyleArena)
    cell_formats: StyleArena[CellFormatRecord] = field(default_factory=StyleArena)
    named_cell_formats: StyleArena[CellFormatRecord] = field(default_factory=StyleArena)
    # 每次追加递增，供缓存判断表是否变化
    revision: int = 0

    @classmethod
    def from_records(
        cls,
        *,
        fonts: Iterable[FontRecord] = (),
        fills: Iterable[FillRecord] = (),
        borders: Iterable[BorderRecord] = (),
        cell_formats: Iterable[CellFormatRecord] = (),
        named_cell_formats: Iterable[CellFormatRecord] = (),
    ) -> StyleTable:
        """由记录序列构建样式表，count 与实际长度一致。"""
        return cls(
            fonts=StyleArena(fonts),
            fills=StyleArena(fills),
            borders=StyleArena(borders),
            cell_formats=StyleArena(cell_formats),
            named_cell_formats=StyleArena(named_cell_formats),
        )

    # ── 追加操作（唯一允许的修改路径） ──────────────────────────

    def add_font(self, font: FontRecord) -> int:
        return self._append(self.fonts, font)

    def add_fill(self, fill: FillRecord) -> int:
        return self._append(self.fills, fill)

    def add_border(self, border: BorderRecord) -> int:
        return self._append(self.borders, border)

    def add_cell_format(self, cell_format: CellFormatRecord) -> int:
        return self._append(self.cell_formats, cell_format)

    def add_named_cell_format(self, cell_format: CellFormatRecord) -> int:
        return self._append(self.named_cell_formats, cell_format)

    def state_key(self) -> tuple[int, ...]:
        """表内容的变化标识：revision 加各集合实际长度。

        绕过 add_* 直接修改 ``items`` 时 revision 不变，长度仍能反映变化。
        """
        return (
            self.revision,
            len(self.fonts),
            len(self.fills),
            len(self.borders),
            len(self.cell_formats),
            len(self.named_cell_formats),
        )

    def _append(self, arena: StyleArena[T], record: T) -> int:
        index = arena._append(record)
        self.revision += 1
        return index
