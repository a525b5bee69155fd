"""
Copyright 2026 mirror-diagrams authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

"""
Affine transforms and local coordinate systems.

Transforms are stored as 3x3 homogeneous numpy matrices and applied to points
through shapely.affinity, which takes the (a, b, d, e, xoff, yoff) form:

    x' = a * x + b * y + xoff
    y' = d * x + e * y + yoff
"""

from typing import Tuple

import numpy as np
from shapely.affinity import affine_transform

from .geometry import geometry, Point, Line


class AffineTransform:
    """
    A 2D affine transform.

    Attributes:
        matrix (np.ndarray): 3x3 homogeneous matrix
    """

    def __init__(self, matrix: np.ndarray):
        self.matrix = np.asarray(matrix, dtype=float)

    @classmethod
    def from_coefficients(cls, a: float, b: float, d: float, e: float,
                          xoff: float, yoff: float) -> 'AffineTransform':
        """Build a transform from shapely-style coefficients."""
        return cls(np.array([
            [a, b, xoff],
            [d, e, yoff],
            [0.0, 0.0, 1.0],
        ]))

    @classmethod
    def reflection(cls, l1: Line) -> 'AffineTransform':
        """
        Reflection across an infinite line.

        Args:
            l1: The mirror line

        Returns:
            Transform mapping every point to its mirror image across l1
        """
        u = geometry.direction(l1)
        cos2 = u.x * u.x - u.y * u.y
        sin2 = 2 * u.x * u.y
        p = l1.p1
        # x' = R (x - p) + p
        xoff = p.x - (cos2 * p.x + sin2 * p.y)
        yoff = p.y - (sin2 * p.x - cos2 * p.y)
        return cls.from_coefficients(cos2, sin2, sin2, -cos2, xoff, yoff)

    @property
    def coefficients(self) -> Tuple[float, float, float, float, float, float]:
        """Shapely-style (a, b, d, e, xoff, yoff)."""
        m = self.matrix
        return (m[0, 0], m[0, 1], m[1, 0], m[1, 1], m[0, 2], m[1, 2])

    def apply(self, p1: Point) -> Point:
        """Apply the transform to a point."""
        return Point.from_shapely(affine_transform(p1.to_shapely(), list(self.coefficients)))

    def inverse(self) -> 'AffineTransform':
        """
        Inverse transform.

        Raises:
            ValueError: If the transform is singular
        """
        if abs(np.linalg.det(self.matrix)) < 1e-15:
            raise ValueError("Affine transform is singular")
        return AffineTransform(np.linalg.inv(self.matrix))

    def compose(self, other: 'AffineTransform') -> 'AffineTransform':
        """Transform applying `other` first, then `self`."""
        return AffineTransform(self.matrix @ other.matrix)

    def __repr__(self) -> str:
        return f"AffineTransform(coefficients={self.coefficients})"


class CoordinateSystem:
    """
    A local coordinate system given by an origin and two (scaled) axis vectors,
    all expressed in global coordinates.

    A local point (x, y) is the global point origin + x * x_unit + y * y_unit.

    Attributes:
        origin (Point): Global position of the local origin
        x_unit (Point): Global vector of one local unit along x
        y_unit (Point): Global vector of one local unit along y
    """

    def __init__(self, origin: Point, x_unit: Point, y_unit: Point):
        self.origin = origin
        self.x_unit = x_unit
        self.y_unit = y_unit
        self._to_global = AffineTransform.from_coefficients(
            x_unit.x, y_unit.x, x_unit.y, y_unit.y, origin.x, origin.y
        )
        self._to_local = self._to_global.inverse()

    @classmethod
    def from_axis(cls, origin: Point, x_axis: Point, unit: float) -> 'CoordinateSystem':
        """
        Orthogonal system with both axes scaled to `unit`.

        Args:
            origin: Global position of the local origin
            x_axis: Direction of the local x axis (need not be normalized)
            unit: Length of one local unit in global units

        Returns:
            CoordinateSystem whose y axis is x rotated by +90 degrees
        """
        u = geometry.normalize_vec(x_axis)
        x_unit = Point(u.x * unit, u.y * unit)
        y_unit = Point(-x_unit.y, x_unit.x)
        return cls(origin, x_unit, y_unit)

    def to_local(self, p1: Point) -> Point:
        """Convert a global point to local coordinates."""
        return self._to_local.apply(p1)

    def to_global(self, p1: Point) -> Point:
        """Convert a local point to global coordinates."""
        return self._to_global.apply(p1)

    def __repr__(self) -> str:
        return f"CoordinateSystem(origin={self.origin}, x_unit={self.x_unit}, y_unit={self.y_unit})"
