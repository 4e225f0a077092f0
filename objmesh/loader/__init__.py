"""
Пакет loader – парсер OBJ и дедупликация вершин.
"""

from objmesh.loader.diagnostics import Diagnostics, ObjParseError, ParseWarning
from objmesh.loader.reformat import reformat
from objmesh.loader.obj_parser import FaceCorner, Mode, ObjParser, parse, parse_file

__all__ = ["Diagnostics", "ObjParseError", "ParseWarning", "reformat",
           "FaceCorner", "Mode", "ObjParser", "parse", "parse_file"]
