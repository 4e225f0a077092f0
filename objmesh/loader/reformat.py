# -*- coding: utf-8 -*-
"""
Дедупликация углов граней и сборка итогового Mesh.

Каждая уникальная тройка (position, texcoord, normal) становится одной
выходной вершиной; индексы группируются по 3 в треугольники.
"""
import numpy as np

from objmesh.mesh.mesh import Mesh, StorageMode


def reformat(positions, normals, texcoords, corners, shared=False):
    """
    positions / normals / texcoords – списки записей (normals и texcoords
    равны None, если атрибут отброшен); corners – углы граней, уже
    сгруппированные по 3.
    """
    vert_dict = {}   # FaceCorner -> индекс выходной вершины
    vertex_ids = []
    out_pos = []
    out_norm = [] if normals is not None else None
    out_tex = [] if texcoords is not None else None

    for corner in corners:
        idx = vert_dict.get(corner)
        if idx is None:
            idx = len(out_pos)
            out_pos.append(positions[corner.position])
            if out_tex is not None:
                out_tex.append(texcoords[corner.texcoord])
            if out_norm is not None:
                out_norm.append(normals[corner.normal])
            vert_dict[corner] = idx
        vertex_ids.append(idx)

    triangles = np.array(vertex_ids, dtype=np.uint32).reshape(-1, 3)

    def _buffer(records, width):
        if records is None:
            return None
        return np.array(records, dtype=np.float32).reshape(-1, width)

    return Mesh(
        _buffer(out_pos, 3),
        triangles,
        normals=_buffer(out_norm, 3),
        texcoords=_buffer(out_tex, 2),
        storage=StorageMode.SHARED if shared else StorageMode.EXCLUSIVE,
    )
