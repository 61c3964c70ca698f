# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield
    logger.remove()


@pytest.fixture(autouse=True)
def clear_linreg_env(monkeypatch):
    for name in ("LINREG_TRAINING_FILE", "LINREG_LOG_LEVEL", "LINREG_SEED"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def training_file(tmp_path: Path) -> Path:
    """
    y = 2x + 1，混合分隔符 / 逗号小数 / 噪声行
    """
    lines = [
        "x = -2, y = -3",
        "-1;-1",
        "0 1",
        "header line without numbers",
        "1 3",
        "x = 2,5  y = 6",
        "3 7 99",
        "4",
        "5\t11",
    ]
    path = tmp_path / "data.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
