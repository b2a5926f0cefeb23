"""
Copyright 2026 circuit-svg authors and contributors

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
Shapely geometry builders for the coordinate-bearing fields of elements.

Bounds collectors turn every element into a handful of these shapes and the
bounds calculator takes the union of their envelopes.
"""

import math
from typing import Iterable, List, Mapping, Sequence, Tuple, Union

from shapely import affinity
from shapely.geometry import LineString, MultiPoint, Point, box
from shapely.geometry.base import BaseGeometry

PointLike = Union[Mapping[str, float], Sequence[float]]


def xy(point: PointLike) -> Tuple[float, float]:
    """Read ``(x, y)`` from a ``{'x', 'y'}`` mapping or a 2-sequence."""
    if isinstance(point, Mapping):
        return float(point['x']), float(point['y'])
    return float(point[0]), float(point[1])


def rotation_degrees(rotation) -> float:
    """
    Raises:
        ValueError: If the rotation is not a finite number of degrees.
    """
    angle = float(rotation or 0.0)
    if not math.isfinite(angle):
        raise ValueError(f"Rotation must be finite, got {rotation!r}")
    return angle


def point_geometry(point: PointLike) -> Point:
    return Point(*xy(point))


def rect_geometry(center: PointLike, width: float, height: float,
                  rotation: float = 0.0) -> BaseGeometry:
    """
    Axis-aligned rectangle around ``center``, optionally rotated about it.

    Args:
        center: Rectangle centre
        width (float): Full width
        height (float): Full height
        rotation (float): Counter-clockwise rotation in degrees
    """
    cx, cy = xy(center)
    half_w = abs(float(width)) / 2
    half_h = abs(float(height)) / 2
    rect = box(cx - half_w, cy - half_h, cx + half_w, cy + half_h)
    angle = rotation_degrees(rotation)
    if angle:
        rect = affinity.rotate(rect, angle, origin=(cx, cy))
    return rect


def square_geometry(center: PointLike, size: float) -> BaseGeometry:
    return rect_geometry(center, size, size)


def disc_geometry(center: PointLike, radius: float) -> BaseGeometry:
    """Circle approximated by a buffered point (extremes lie on the axes)."""
    radius = abs(float(radius))
    if radius == 0:
        return point_geometry(center)
    return point_geometry(center).buffer(radius)


def path_geometry(points: Iterable[PointLike]) -> BaseGeometry:
    """LineString through the points; a lone point degrades to a Point."""
    coords = [xy(p) for p in points]
    if not coords:
        return MultiPoint()
    if len(coords) == 1:
        return Point(coords[0])
    return LineString(coords)


def rotated_corners(center: PointLike, width: float, height: float,
                    rotation: float = 0.0) -> List[Tuple[float, float]]:
    """
    The four corners of a rotated rectangle, in order
    (top-left, top-right, bottom-right, bottom-left) before rotation.
    """
    cx, cy = xy(center)
    half_w = float(width) / 2
    half_h = float(height) / 2
    angle = math.radians(rotation_degrees(rotation))
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    corners = []
    for dx, dy in ((-half_w, half_h), (half_w, half_h),
                   (half_w, -half_h), (-half_w, -half_h)):
        corners.append((cx + dx * cos_a - dy * sin_a,
                        cy + dx * sin_a + dy * cos_a))
    return corners
