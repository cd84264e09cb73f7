"""
Ellipsoid surface as a lat-long grid of positions and normals.

Stack i sweeps latitude pole to pole and slice j sweeps longitude -pi..pi,
both ends inclusive:

    phi   = -pi/2 + i * pi / (stacks - 1)
    theta = -pi   + j * 2pi / (slices - 1)

    v[i, j] = center + (rx cos(phi) cos(theta), ry cos(phi) sin(theta), rz sin(phi))
    n[i, j] = normalize(cos(phi) cos(theta), cos(phi) sin(theta), sin(phi))

Slice 0 and slice (slices - 1) land on the same meridian and the first and last
stacks collapse to the poles. Both are kept so the grid can be walked as plain
triangle strips without wrap-around indexing.

The normal is the sphere normal for the same (phi, theta). For unequal radii it
is not the true ellipsoid normal, which would need the inverse-transpose of the
(rx, ry, rz) scale.
"""
from __future__ import annotations

import logging
import math
import numbers

import numpy as np

from .mesh import Mesh3D
from .vector import Point3D, Vec3

logger = logging.getLogger(__name__)

MIN_RESOLUTION = 2
DEFAULT_STACKS = 32
DEFAULT_SLICES = 32


class InvalidResolutionError(ValueError):
    """Stack or slice count too small to space samples pole-to-pole / seam-to-seam."""


def _require_resolution(name: str, n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise TypeError(f"{name} must be an integer (got {n!r})")
    if n < MIN_RESOLUTION:
        logger.warning("Rejected %s=%d (minimum is %d)", name, n, MIN_RESOLUTION)
        raise InvalidResolutionError(f"{name} must be >= {MIN_RESOLUTION} (got {n})")


class Ellipsoid3D:
    """
    Owns the ellipsoid parameters and the Mesh3D grid built from them.

    Every setter recomputes the grid before returning. Center and radius
    changes refill the existing grid in place; stack and slice changes replace
    ``mesh`` with a freshly allocated grid, so readers holding the old object
    must re-read ``mesh`` afterwards.
    """

    def __init__(self, x: float, y: float, z: float,
                 rx: float, ry: float, rz: float,
                 stacks: int, slices: int):
        _require_resolution("stacks", stacks)
        _require_resolution("slices", slices)
        self._center = Point3D(float(x), float(y), float(z))
        self._rx, self._ry, self._rz = float(rx), float(ry), float(rz)
        self._stacks = int(stacks)
        self._slices = int(slices)
        self.mesh: Mesh3D
        self._init_mesh(self._stacks, self._slices)

    # ---- parameters ----
    @property
    def center(self) -> Point3D:
        return self._center.copy()

    @property
    def radii(self) -> Vec3:
        return (self._rx, self._ry, self._rz)

    @property
    def stacks(self) -> int:
        return self._stacks

    @property
    def slices(self) -> int:
        return self._slices

    def set_center(self, x: float, y: float, z: float) -> None:
        self._center.x, self._center.y, self._center.z = float(x), float(y), float(z)
        self._fill_mesh(self.mesh)

    def set_radii(self, rx: float, ry: float, rz: float) -> None:
        self._rx, self._ry, self._rz = float(rx), float(ry), float(rz)
        self._fill_mesh(self.mesh)

    def set_stacks(self, stacks: int) -> None:
        _require_resolution("stacks", stacks)
        self._init_mesh(int(stacks), self._slices)

    def set_slices(self, slices: int) -> None:
        _require_resolution("slices", slices)
        self._init_mesh(self._stacks, int(slices))

    def get_stack_count(self) -> int:
        return self._stacks

    def get_slice_count(self) -> int:
        return self._slices

    # older names: m rows (stacks) by n columns (slices)
    def get_m(self) -> int:
        return self._stacks

    def get_n(self) -> int:
        return self._slices

    # ---- grid ----
    def _init_mesh(self, stacks: int, slices: int) -> None:
        # always a fresh grid; old contents are never migrated
        logger.debug("Allocating grid stacks=%d slices=%d", stacks, slices)
        mesh = Mesh3D(stacks, slices)
        self._fill_mesh(mesh)
        # commit only once the new grid is complete, so a failed allocation
        # keeps the old counts and grid together
        self._stacks, self._slices = stacks, slices
        self.mesh = mesh

    def _fill_mesh(self, mesh: Mesh3D) -> None:
        stacks, slices = mesh.shape
        phi_step = math.pi / (stacks - 1)
        theta_step = (2 * math.pi) / (slices - 1)
        phi = -math.pi / 2 + np.arange(stacks) * phi_step
        theta = -math.pi + np.arange(slices) * theta_step

        cos_phi = np.cos(phi)[:, None]
        sin_phi = np.sin(phi)[:, None]
        cos_theta = np.cos(theta)[None, :]
        sin_theta = np.sin(theta)[None, :]

        # unit-sphere direction per cell, shape (stacks, slices, 3)
        d = np.empty((stacks, slices, 3), dtype=np.float64)
        d[..., 0] = cos_phi * cos_theta
        d[..., 1] = cos_phi * sin_theta
        d[..., 2] = np.broadcast_to(sin_phi, (stacks, slices))

        c = self._center
        mesh.v[...] = d * (self._rx, self._ry, self._rz) + (c.x, c.y, c.z)
        mesh.n[...] = d
        mesh.normalize_normals()
        logger.debug("Filled %r center=%r rx=%s ry=%s rz=%s", mesh, c, self._rx, self._ry, self._rz)

    def __repr__(self) -> str:
        c = self._center
        return (f"Ellipsoid3D(center=({c.x}, {c.y}, {c.z}), radii={self.radii}, "
                f"stacks={self._stacks}, slices={self._slices})")


# -----------------------
# Primitive constructor
# -----------------------

def ellipsoid(x: float = 0.0, y: float = 0.0, z: float = 0.0,
              rx: float = 1.0, ry: float = 1.0, rz: float = 1.0,
              stacks: int = DEFAULT_STACKS, slices: int = DEFAULT_SLICES) -> Ellipsoid3D:
    return Ellipsoid3D(x, y, z, rx, ry, rz, stacks, slices)
