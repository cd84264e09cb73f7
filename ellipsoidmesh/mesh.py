from __future__ import annotations

from typing import Tuple

import numpy as np

from .vector import Point3D


def _require_cells(name: str, n: int) -> None:
    if n < 1:
        raise ValueError(f"{name} must be >= 1 (got {n})")


# --------------
# Mesh container
# --------------

class Mesh3D:
    """
    Rectangular (stacks x slices) grid of vertex positions and normals.

    Cell (i, j) is stack i, slice j. Positions live in ``v`` and normals in
    ``n``, both float64 arrays of shape (stacks, slices, 3), so a renderer can
    read a whole row or the full grid without copying:

        mesh.v[i, j]        -> position of one cell
        mesh.n[:, 0]        -> normals of the first slice column

    The grid shape is fixed once built; resize by building a new Mesh3D.
    """

    def __init__(self, stacks: int, slices: int):
        _require_cells("stacks", stacks)
        _require_cells("slices", slices)
        self.v = np.zeros((stacks, slices, 3), dtype=np.float64)
        self.n = np.zeros((stacks, slices, 3), dtype=np.float64)

    @property
    def stacks(self) -> int:
        return self.v.shape[0]

    @property
    def slices(self) -> int:
        return self.v.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.stacks, self.slices)

    # ---- per-cell access ----
    def vertex(self, i: int, j: int) -> Point3D:
        x, y, z = self.v[i, j]
        return Point3D(float(x), float(y), float(z))

    def normal(self, i: int, j: int) -> Point3D:
        x, y, z = self.n[i, j]
        return Point3D(float(x), float(y), float(z))

    def set_vertex(self, i: int, j: int, x: float, y: float, z: float) -> None:
        self.v[i, j] = (x, y, z)

    def set_normal(self, i: int, j: int, x: float, y: float, z: float) -> None:
        self.n[i, j] = (x, y, z)

    # ---- shading ----
    def normalize_normals(self) -> "Mesh3D":
        lengths = np.linalg.norm(self.n, axis=-1, keepdims=True)
        # leave zero-length normals at zero instead of dividing by 0
        np.divide(self.n, lengths, out=self.n, where=lengths > 0)
        return self

    def copy(self) -> "Mesh3D":
        m = Mesh3D(self.stacks, self.slices)
        m.v[...] = self.v
        m.n[...] = self.n
        return m

    def __repr__(self) -> str:
        return f"Mesh3D(stacks={self.stacks}, slices={self.slices})"
