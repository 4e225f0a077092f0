# -*- coding: utf-8 -*-
"""
conftest.py – общие OBJ‑документы и фикстуры для тестов загрузчика.
"""

import logging
import pytest

from objmesh.utils.logger import logger


TRIANGLE = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"

QUAD = (
    "v 0 0 0\n"
    "v 1 0 0\n"
    "v 1 1 0\n"
    "v 0 1 0\n"
    "f 1 2 3 4\n"
)

# два треугольника с общим ребром, все атрибуты заданы
TEXTURED = (
    "v 0 0 0\n"
    "v 1 0 0\n"
    "v 0 1 0\n"
    "v 1 1 0\n"
    "vt 0 0\n"
    "vt 1 0\n"
    "vt 0 1\n"
    "vt 1 1\n"
    "vn 0 0 1\n"
    "f 1/1/1 2/2/1 3/3/1\n"
    "f 2/2/1 4/4/1 3/3/1\n"
)


def polygon(n: int) -> str:
    """n вершин на окружности и одна n‑угольная грань."""
    lines = [f"v {i} {i * 2} 0" for i in range(n)]
    lines.append("f " + " ".join(str(i + 1) for i in range(n)))
    return "\n".join(lines) + "\n"


@pytest.fixture(autouse=True)
def _reset_logger_level():
    level = logger.level
    yield
    logger.setLevel(level)


@pytest.fixture
def obj_file(tmp_path):
    """Фабрика: записать документ во временный .obj‑файл."""
    def _write(document: str, name: str = "model.obj"):
        path = tmp_path / name
        path.write_text(document, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def warnings_log(caplog):
    caplog.set_level(logging.WARNING, logger="objmesh")
    return caplog
