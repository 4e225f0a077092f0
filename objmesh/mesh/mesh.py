# objmesh/mesh/mesh.py
import enum

import numpy as np


class StorageMode(enum.Enum):
    """Режим хранения буферов меша."""
    EXCLUSIVE = "exclusive"   # меш единолично владеет изменяемыми массивами
    SHARED = "shared"         # массивы заморожены и могут разделяться


class Mesh:
    """
    Готовый к рендеру треугольный меш: позиции, треугольники и
    (опционально) нормали / texcoords, по одной записи на вершину.
    """

    def __init__(self,
                 positions: np.ndarray,
                 triangles: np.ndarray,
                 normals: np.ndarray = None,
                 texcoords: np.ndarray = None,
                 storage: StorageMode = StorageMode.EXCLUSIVE,
                 name="Mesh"):
        self.name = name
        self.storage = StorageMode(storage)

        self.positions = self._as_buffer(positions, np.float32, 3)
        self.triangles = self._as_buffer(triangles, np.uint32, 3)
        self.normals = self._as_buffer(normals, np.float32, 3) if normals is not None else None
        self.texcoords = self._as_buffer(texcoords, np.float32, 2) if texcoords is not None else None

        for attr, arr in (("normals", self.normals), ("texcoords", self.texcoords)):
            if arr is not None and len(arr) != len(self.positions):
                raise ValueError(f"{attr} count {len(arr)} does not match "
                                 f"vertex count {len(self.positions)}")
        if self.triangles.size and int(self.triangles.max()) >= len(self.positions):
            raise ValueError("triangle index out of range")

        self._bounding = None

    # -----------------------------------------------------------------
    def _as_buffer(self, data, dtype, width):
        # EXCLUSIVE – собственная копия; SHARED – без копии, но флаги
        # вызывающего массива не трогаем
        if self.storage is StorageMode.SHARED:
            arr = np.asarray(data, dtype=dtype)
        else:
            arr = np.array(data, dtype=dtype, copy=True)
        if arr.size == 0:
            arr = arr.reshape((0, width))
        elif arr.ndim == 1:
            arr = arr.reshape((-1, width))
        if arr.ndim != 2 or arr.shape[1] != width:
            raise ValueError(f"expected an (N, {width}) array, got shape {arr.shape}")
        if self.storage is StorageMode.SHARED and arr.flags.writeable:
            arr = arr.view()
            arr.flags.writeable = False
        return arr

    # -----------------------------------------------------------------
    @property
    def is_shared(self) -> bool:
        return self.storage is StorageMode.SHARED

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)

    @property
    def index_count(self) -> int:
        return self.triangles.size

    @property
    def indices(self) -> np.ndarray:
        """Плоский uint32 индекс‑буфер (3 индекса на треугольник)."""
        return self.triangles.reshape(-1)

    @property
    def vertex_stride(self) -> int:
        """Число float‑ов на вершину в interleaved()."""
        stride = 3
        if self.normals is not None:
            stride += 3
        if self.texcoords is not None:
            stride += 2
        return stride

    def interleaved(self) -> np.ndarray:
        """Плоский vertex‑буфер: pos[, normal][, uv] для каждой вершины."""
        components = [self.positions]
        if self.normals is not None:
            components.append(self.normals)
        if self.texcoords is not None:
            components.append(self.texcoords)
        return np.column_stack(components).astype(np.float32).ravel()

    # -----------------------------------------------------------------
    @property
    def bounding_sphere(self) -> tuple[np.ndarray, float]:
        """(центр, радиус) в локальных координатах меша."""
        if self._bounding is None:
            if self.vertex_count == 0:
                self._bounding = (np.zeros(3, dtype=np.float32), 0.0)
            else:
                center = self.positions.mean(axis=0).astype(np.float32)
                radius = float(np.linalg.norm(self.positions - center, axis=1).max())
                self._bounding = (center, radius)
        return self._bounding

    def clone(self, name=None) -> "Mesh":
        """
        SHARED – новый меш ссылается на те же самые буферы;
        EXCLUSIVE – глубокая копия.
        """
        name = self.name if name is None else name
        return Mesh(self.positions, self.triangles, self.normals,
                    self.texcoords, storage=self.storage, name=name)

    def __repr__(self):
        return (f"Mesh(name={self.name!r}, vertices={self.vertex_count}, "
                f"triangles={self.triangle_count}, "
                f"normals={self.normals is not None}, "
                f"texcoords={self.texcoords is not None}, "
                f"storage={self.storage.value})")
