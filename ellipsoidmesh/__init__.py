from .vector import Point3D, Vec3, v_dot, v_len, v_norm
from .mesh import Mesh3D
from .ellipsoid import (
    DEFAULT_SLICES,
    DEFAULT_STACKS,
    MIN_RESOLUTION,
    Ellipsoid3D,
    InvalidResolutionError,
    ellipsoid,
)
from .logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    "Point3D",
    "Vec3",
    "v_dot",
    "v_len",
    "v_norm",
    "Mesh3D",
    "Ellipsoid3D",
    "InvalidResolutionError",
    "ellipsoid",
    "DEFAULT_STACKS",
    "DEFAULT_SLICES",
    "MIN_RESOLUTION",
    "setup_logging",
]
