"""
Пакет mesh – контейнер готового треугольного меша.
"""

from objmesh.mesh.mesh import Mesh, StorageMode

__all__ = ["Mesh", "StorageMode"]
