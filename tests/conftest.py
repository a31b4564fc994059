# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture
def line_data():
    """
    y = 2 + 3x, no noise
    """
    x = [0.0, 0.5, 1.0, 1.5, 2.0]
    return [x], [2.0 + 3.0 * v for v in x]


@pytest.fixture
def plane_data():
    """
    y = 1 + 2*x1 - x2, no noise
    """
    x1 = [0.0, 1.0, 0.0, 1.0, 0.5]
    x2 = [0.0, 0.0, 1.0, 1.0, 0.5]
    y = [1.0 + 2.0 * a - b for a, b in zip(x1, x2)]
    return [x1, x2], y


@pytest.fixture
def study_data():
    """
    hours studied -> pass / fail
    """
    return [[1.0, 2.0, 3.0, 4.0, 5.0]], [0.0, 0.0, 0.0, 1.0, 1.0]


@pytest.fixture
def study_csv(tmp_path: Path) -> Path:
    p = tmp_path / "study.csv"
    p.write_text(
        "Name,Pass,Hours\n"
        "a,0,1\n"
        "b,0,2\n"
        "c,0,3\n"
        "d,1,4\n"
        "e,1,5\n",
        encoding="utf-8",
    )
    return p


@pytest.fixture
def captured_logs():
    """
    Collect loguru messages (DEBUG and up) for the duration of a test.
    """
    messages: list[str] = []
    sink_id = logger.add(lambda msg: messages.append(str(msg)), level="DEBUG")
    yield messages
    logger.remove(sink_id)
