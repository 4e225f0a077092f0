"""
objmesh – загрузчик текстовых OBJ‑мешей в компактные, готовые к рендеру
буферы: vertex‑буфер без дубликатов + индекс‑буфер треугольников.
"""

from objmesh.utils import logger, Config
from objmesh.mesh import Mesh, StorageMode
from objmesh.loader import (
    Diagnostics,
    FaceCorner,
    ObjParseError,
    ParseWarning,
    parse,
    parse_file,
    reformat,
)

__version__ = "1.0.0"

__all__ = [
    "Config",
    "Diagnostics",
    "FaceCorner",
    "Mesh",
    "ObjParseError",
    "ParseWarning",
    "StorageMode",
    "parse",
    "parse_file",
    "reformat",
]
