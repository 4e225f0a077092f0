# -*- coding: utf-8 -*-
"""
Потоковый парсер Wavefront OBJ (только v / vn / vt / f).

Документ разбирается построчно: первое слово строки выбирает режим,
остальные слова накапливаются в локальном для строки буфере. Грани
триангулируются «на лету», после чего весь список углов передаётся
в reformat() для дедупликации вершин.
"""
import enum
from pathlib import Path
from typing import List, NamedTuple, Optional

from objmesh.loader.diagnostics import Diagnostics, ObjParseError
from objmesh.loader.reformat import reformat
from objmesh.utils.config import Config
from objmesh.utils.logger import logger
from objmesh.utils.profiler import Profiler


class Mode(enum.Enum):
    V = "v"
    VN = "vn"
    VT = "vt"
    F = "f"


class FaceCorner(NamedTuple):
    """Угол грани: индексы с 0; None – индекс не задан."""
    position: int
    texcoord: Optional[int] = None
    normal: Optional[int] = None


# режим -> (число слотов, сообщение о неверном числе компонент)
_RECORDS = {
    Mode.V: (3, "vertices must have 3 components."),
    Mode.VN: (3, "normals must have 3 components."),
    Mode.VT: (2, "texture coordinates must have 2 components."),
}


def _parse_float(line_no, word):
    # float() принял бы "1_0" и не‑ASCII цифры
    if not word.isascii() or "_" in word:
        raise ObjParseError(line_no, f"failed to parse `{word}' as a number.", word)
    try:
        return float(word)
    except ValueError:
        raise ObjParseError(line_no, f"failed to parse `{word}' as a number.", word) from None


def _parse_index(line_no, word):
    # только беззнаковые десятичные числа: int() принял бы "+1", "-1", "1_0"
    if not (word.isascii() and word.isdigit()):
        raise ObjParseError(line_no, f"failed to parse `{word}' as an index.", word)
    idx = int(word)
    if idx == 0:
        raise ObjParseError(line_no, "indices are 1-based, got `0'.", word)
    return idx - 1


def _parse_corner(line_no, word, diagnostics):
    # Четыре формы: v, v/t, v//n, v/t/n
    ids = [None, None, None]
    for i, w in enumerate(word.split("/")):
        if i >= 3:
            diagnostics.warn(line_no, f"face corners have at most 3 indices, ignoring `{w}'.")
            continue
        if i == 0 or w:
            ids[i] = _parse_index(line_no, w)
    return FaceCorner(*ids)


def _triangulate(line_no, words, diagnostics):
    """
    Углы одной грани в виде последовательности треугольников.

    Для слова с позицией i > 3 (ключевое слово – позиция 0) перед новым
    углом дописываются local[len(local) - (i - 1)] и local[-1].
    """
    local: List[FaceCorner] = []
    for i, word in enumerate(words, start=1):
        corner = _parse_corner(line_no, word, diagnostics)
        if i > 3:
            first = local[len(local) - (i - 1)]
            last = local[-1]
            local.extend((first, last))
        local.append(corner)
    return local


class ObjParser:
    """
    Состояние одного разбора: четыре растущие коллекции и приёмник
    предупреждений. Используется через parse().
    """

    def __init__(self, diagnostics: Optional[Diagnostics] = None):
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.positions = []
        self.normals = []
        self.texcoords = []
        self.corners: List[FaceCorner] = []
        self._corner_lines: List[int] = []   # номер строки для каждого угла

    # -----------------------------------------------------------------
    def feed(self, document: str):
        for line_no, line in enumerate(document.splitlines()):
            self.parse_line(line_no, line)
        return self

    def parse_line(self, line_no: int, line: str):
        words = line.split()
        if not words:
            return

        try:
            mode = Mode(words[0])
        except ValueError:
            self.diagnostics.warn(line_no, f"unknown line ignored: `{line}'")
            return

        if mode is Mode.F:
            corners = _triangulate(line_no, words[1:], self.diagnostics)
            if len(words) - 1 < 3:
                raise ObjParseError(line_no, "faces must have at least 3 vertices.")
            self.corners.extend(corners)
            self._corner_lines.extend([line_no] * len(corners))
            return

        slots, message = _RECORDS[mode]
        record = [0.0] * slots
        placed = 0
        for i, word in enumerate(words[1:], start=1):
            value = _parse_float(line_no, word)
            if i - 1 >= slots:
                self.diagnostics.warn(line_no, message)
                continue
            record[i - 1] = value
            placed += 1
        if placed < slots:
            raise ObjParseError(line_no, message)

        if mode is Mode.V:
            self.positions.append(tuple(record))
        elif mode is Mode.VN:
            self.normals.append(tuple(record))
        else:
            self.texcoords.append(tuple(record))

    # -----------------------------------------------------------------
    def missing_attributes(self):
        """(drop_texcoords, drop_normals) – есть ли угол без texcoord / нормали."""
        drop_uvs = False
        drop_normals = False
        for corner in self.corners:
            if corner.texcoord is None:
                drop_uvs = True
            if corner.normal is None:
                drop_normals = True
            if drop_uvs and drop_normals:
                break
        return drop_uvs, drop_normals

    def _check_references(self, use_uvs, use_normals):
        checks = [("position", self.positions)]
        if use_uvs:
            checks.append(("texcoord", self.texcoords))
        if use_normals:
            checks.append(("normal", self.normals))

        for corner, line_no in zip(self.corners, self._corner_lines):
            for field, records in checks:
                idx = getattr(corner, field)
                if idx >= len(records):
                    raise ObjParseError(
                        line_no,
                        f"{field} index {idx + 1} out of range ({len(records)} defined).",
                        str(idx + 1),
                    )

    def build(self, shared: bool = False):
        drop_uvs, drop_normals = self.missing_attributes()

        if self.texcoords and drop_uvs:
            self.diagnostics.warn(None, "some texture coordinates are missing. "
                                        "Dropping texture coordinates for every vertex.")
        if self.normals and drop_normals:
            self.diagnostics.warn(None, "some normals are missing. "
                                        "Dropping normals for every vertex.")

        self._check_references(not drop_uvs, not drop_normals)

        return reformat(
            self.positions,
            None if drop_normals else self.normals,
            None if drop_uvs else self.texcoords,
            self.corners,
            shared,
        )


def parse(document: str, shared: bool = False, diagnostics: Optional[Diagnostics] = None):
    """Разобрать текст OBJ‑документа и вернуть Mesh."""
    return ObjParser(diagnostics).feed(document).build(shared)


def parse_file(path, shared: Optional[bool] = None, config: Optional[Config] = None,
               diagnostics: Optional[Diagnostics] = None):
    """
    Прочитать .obj‑файл и разобрать его.

    Если ``shared`` не задан, берётся из конфигурации.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"OBJ file not found: {p}")
    if not p.is_file():
        raise IsADirectoryError(f"Not a regular file: {p}")

    cfg = config if config is not None else Config()
    if shared is None:
        shared = bool(cfg["shared"])

    document = p.read_text(encoding=cfg["encoding"])
    with Profiler(f"parse {p.name}"):
        mesh = parse(document, shared, diagnostics)
    mesh.name = p.stem
    logger.info(f"[Parser] Loaded {p.name}: {mesh.vertex_count} vertices, "
                f"{mesh.triangle_count} triangles.")
    return mesh
