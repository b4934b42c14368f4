"""Records produced by the PTX reader."""

from dataclasses import dataclass, field
from typing import Protocol, Tuple

import numpy as np

Vector3 = Tuple[float, float, float]
Matrix3 = Tuple[Vector3, Vector3, Vector3]

IDENTITY: Matrix3 = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
ZEROS: Vector3 = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class RasterPosition:
    """Zero-based location of a record in the scan grid"""
    column: int = 0
    row: int = 0


@dataclass(frozen=True)
class RasterDimensions:
    """Size of a scan grid"""
    columns: int = 0
    rows: int = 0

    @property
    def count(self) -> int:
        return self.columns * self.rows

    def position(self, index: int) -> RasterPosition:
        """
        Map a record index to its raster position.

        Records fill the grid column by column: the row varies fastest.
        """
        return RasterPosition(column=index // self.rows, row=index % self.rows)


@dataclass(frozen=True)
class RegistrationParameters:
    """Rigid transform placing a scan in the common frame. Parsed, never applied."""
    rotation: Matrix3 = IDENTITY
    translation: Vector3 = ZEROS

    def as_matrix(self) -> np.ndarray:
        """Return the 4x4 homogeneous transform."""
        matrix = np.eye(4)
        matrix[:3, :3] = np.array(self.rotation, dtype=float)
        matrix[:3, 3] = np.array(self.translation, dtype=float)
        return matrix


@dataclass(frozen=True)
class ScanInfo:
    dimensions: RasterDimensions = field(default_factory=RasterDimensions)
    registration: RegistrationParameters = field(default_factory=RegistrationParameters)


@dataclass(frozen=True)
class Point:
    """A single record of a scan"""
    position: RasterPosition
    x: float
    y: float
    z: float
    intensity: float
    r: int
    g: int
    b: int

    @property
    def unsampled(self) -> bool:
        """True for grid cells without a laser return, encoded as (0, 0, 0)."""
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0


class PointSink(Protocol):
    """Receives the points of one scan, in raster order."""

    def insert(self, point: Point) -> None:
        ...
