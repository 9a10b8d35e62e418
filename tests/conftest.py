"""pytest 全局配置与共享 fixtures。"""

import os

import pytest
from hypothesis import settings as hyp_settings, HealthCheck

from sheetstyle.models import BorderRecord, CellFormatRecord, FillRecord, FontRecord
from sheetstyle.style_table import StyleTable

# ---------------------------------------------------------------------------
# Hypothesis profiles: 本地开发默认 dev（快速），CI 通过
# HYPOTHESIS_PROFILE=ci 切换到完整模式
# ---------------------------------------------------------------------------
hyp_settings.register_profile(
    "dev",
    max_examples=10,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
hyp_settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
hyp_settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """每个测试用例自动隔离环境变量，动态清理所有 SHEETSTYLE_ 前缀的变量。"""
    for key in list(os.environ):
        if key.startswith("SHEETSTYLE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sample_table() -> StyleTable:
    """两个直接格式、一个命名格式的样式表（模拟 Google Docs 导出）。"""
    return StyleTable.from_records(
        fonts=[
            FontRecord(size="11", name="Calibri", family="2", charset="0"),
            FontRecord(size="14", name="Arial", family="2", charset="1", color="FFFF0000"),
        ],
        fills=[
            FillRecord(pattern_type="none"),
            FillRecord(pattern_type="solid", fg_color="FFFFFF00", bg_color="FF000000"),
        ],
        borders=[
            BorderRecord(),
            BorderRecord(left="thin", right="thin", top="dashed", bottom="double"),
        ],
        cell_formats=[
            CellFormatRecord(),
            CellFormatRecord(
                apply_border=True,
                apply_fill=True,
                border_id=1,
                fill_id=1,
                font_id=1,
                num_fmt_id=14,
            ),
        ],
        named_cell_formats=[CellFormatRecord(apply_font=True)],
    )
