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
Affine transforms from real-world circuit coordinates to screen pixels.

The transform is stored with the same six components an SVG ``matrix()``
uses::

    | a  c  e |     x' = a*x + c*y + e
    | b  d  f |     y' = b*x + d*y + f
    | 0  0  1 |

It is fitted from three point correspondences (an anchor triangle), so a
vertical flip and a uniform scale are encoded by one solve instead of being
chained by hand.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Dict, Mapping, Sequence, Tuple, Union

import numpy as np
from shapely import affinity
from shapely.geometry.base import BaseGeometry

from .bounds import RealBounds
from .constants import EPSILON, MIN_EXTENT
from .geometry import rotation_degrees

logger = logging.getLogger(__name__)

PointLike = Union[Mapping[str, float], Sequence[float]]

_MATRIX_RE = re.compile(r'matrix\(\s*([^)]*)\)')


def _as_xy(point: PointLike) -> Tuple[float, float]:
    if isinstance(point, Mapping):
        return float(point['x']), float(point['y'])
    return float(point[0]), float(point[1])


def format_number(value: float) -> str:
    """
    Format a number for markup output.

    Up to 10 significant digits, no trailing zeros, and negative zero or
    values closer to zero than 1e-10 written as ``0``.

    Args:
        value (float): Number to format

    Returns:
        str: Compact decimal representation
    """
    if value == 0.0 or abs(value) < 1e-10:
        return '0'
    text = format(value, '.10g')
    if 'e' in text:
        text = format(value, '.10f').rstrip('0').rstrip('.')
    return text


@dataclass(frozen=True)
class Matrix:
    """
    A 2D affine transform in SVG matrix form.

    Attributes:
        a, b, c, d (float): Linear part (scale, rotation, flip)
        e, f (float): Translation
    """
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> 'Matrix':
        return cls()

    @classmethod
    def translation(cls, tx: float, ty: float) -> 'Matrix':
        return cls(e=tx, f=ty)

    @classmethod
    def scaling(cls, sx: float, sy: float = None) -> 'Matrix':
        if sy is None:
            sy = sx
        return cls(a=sx, d=sy)

    @classmethod
    def rotation(cls, angle: float) -> 'Matrix':
        """Counter-clockwise rotation by ``angle`` radians about the origin."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return cls(a=cos_a, b=sin_a, c=-sin_a, d=cos_a)

    @classmethod
    def from_triangles(cls, src: Sequence[PointLike],
                       dst: Sequence[PointLike]) -> 'Matrix':
        """
        Fit the affine map taking three source points onto three target points.

        Args:
            src: Three non-collinear points in the source space
            dst: The three points they must map to, in the same order

        Returns:
            Matrix: The unique affine transform with ``M(src[i]) == dst[i]``

        Raises:
            ValueError: If there are not exactly three points on each side,
                or if the source points are collinear.
        """
        if len(src) != 3 or len(dst) != 3:
            raise ValueError(
                f"from_triangles needs 3 source and 3 target points, "
                f"got {len(src)} and {len(dst)}"
            )
        src_xy = [_as_xy(p) for p in src]
        dst_xy = [_as_xy(p) for p in dst]

        (x0, y0), (x1, y1), (x2, y2) = src_xy
        area2 = (x1 - x0) * (y2 - y0) - (x2 - x0) * (y1 - y0)
        if abs(area2) < EPSILON:
            raise ValueError(f"Source anchor points are collinear: {src_xy}")

        system = np.array([[x, y, 1.0] for x, y in src_xy])
        a, c, e = np.linalg.solve(system, np.array([p[0] for p in dst_xy]))
        b, d, f = np.linalg.solve(system, np.array([p[1] for p in dst_xy]))
        return cls(float(a), float(b), float(c), float(d), float(e), float(f))

    @property
    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        """Map a point given as two floats."""
        return (self.a * x + self.c * y + self.e,
                self.b * x + self.d * y + self.f)

    def apply_to_point(self, point: PointLike) -> Dict[str, float]:
        """
        Map a point through the full affine transform.

        Args:
            point: ``{'x': .., 'y': ..}`` mapping or ``(x, y)`` sequence

        Returns:
            dict: Transformed point with 'x' and 'y' keys
        """
        x, y = _as_xy(point)
        tx, ty = self.apply(x, y)
        return {'x': tx, 'y': ty}

    def apply_to_vector(self, dx: float, dy: float) -> Tuple[float, float]:
        """Map a direction through the linear part only (no translation)."""
        return (self.a * dx + self.c * dy, self.b * dx + self.d * dy)

    def apply_to_length(self, length: float) -> float:
        """
        Map a length (radius, stroke width, font size) to screen units.

        Uses the uniform scale of the linear part, ``sqrt(|det|)``, so lengths
        are never translated and never change sign under a flip.
        """
        return abs(length) * math.sqrt(abs(self.determinant))

    def apply_to_geometry(self, geometry: BaseGeometry) -> BaseGeometry:
        """Map a Shapely geometry through the transform."""
        return affinity.affine_transform(
            geometry, [self.a, self.c, self.b, self.d, self.e, self.f]
        )

    def compose(self, other: 'Matrix') -> 'Matrix':
        """Return ``self * other``: apply ``other`` first, then ``self``."""
        return Matrix(
            a=self.a * other.a + self.c * other.b,
            b=self.b * other.a + self.d * other.b,
            c=self.a * other.c + self.c * other.d,
            d=self.b * other.c + self.d * other.d,
            e=self.a * other.e + self.c * other.f + self.e,
            f=self.b * other.e + self.d * other.f + self.f,
        )

    def inverse(self) -> 'Matrix':
        det = self.determinant
        if abs(det) < EPSILON:
            raise ValueError("Matrix is singular and cannot be inverted")
        return Matrix(
            a=self.d / det,
            b=-self.b / det,
            c=-self.c / det,
            d=self.a / det,
            e=(self.c * self.f - self.d * self.e) / det,
            f=(self.b * self.e - self.a * self.f) / det,
        )

    def to_svg(self) -> str:
        """Serialize as an SVG ``matrix(a,b,c,d,e,f)`` string."""
        parts = ','.join(format_number(v) for v in
                         (self.a, self.b, self.c, self.d, self.e, self.f))
        return f'matrix({parts})'


def parse_svg_matrix(text: str) -> Matrix:
    """
    Parse a ``matrix(a,b,c,d,e,f)`` string as produced by Matrix.to_svg().

    Commas and whitespace are both accepted as separators.

    Raises:
        ValueError: If the text is not a six-component matrix().
    """
    match = _MATRIX_RE.search(text or '')
    if match is None:
        raise ValueError(f"Not an SVG matrix() transform: {text!r}")
    parts = [p for p in re.split(r'[\s,]+', match.group(1).strip()) if p]
    if len(parts) != 6:
        raise ValueError(f"matrix() needs 6 components, got {len(parts)}: {text!r}")
    return Matrix(*(float(p) for p in parts))


@dataclass(frozen=True)
class ScreenPadding:
    """
    Pixel offsets added on each side of the viewport to keep the circuit's
    aspect ratio. Only one axis is padded (letterboxing).
    """
    x: float = 0.0
    y: float = 0.0


def compute_screen_padding(real_width: float, real_height: float,
                           width: float, height: float) -> ScreenPadding:
    """
    Work out which axis to pad so the circuit keeps its proportions.

    If the circuit is relatively wider than the container, the width is
    filled and the leftover height is split top and bottom; otherwise the
    height is filled and the leftover width is split left and right.
    """
    circuit_aspect_ratio = real_width / real_height
    container_aspect_ratio = width / height

    if circuit_aspect_ratio > container_aspect_ratio:
        new_height = width / circuit_aspect_ratio
        return ScreenPadding(x=0.0, y=(height - new_height) / 2)
    new_width = height * circuit_aspect_ratio
    return ScreenPadding(x=(width - new_width) / 2, y=0.0)


def viewport_anchors(bounds: RealBounds, width: float, height: float,
                     padding: ScreenPadding):
    """
    The anchor triangle used to fit the viewport transform.

    Returns:
        tuple: (real_points, screen_points), three (x, y) pairs each. Real
        top-left, top-right and bottom-right map onto the padded screen
        corners, which flips the Y axis.
    """
    real_points = [
        (bounds.min_x, bounds.max_y),
        (bounds.max_x, bounds.max_y),
        (bounds.max_x, bounds.min_y),
    ]
    screen_points = [
        (padding.x, padding.y),
        (width - padding.x, padding.y),
        (width - padding.x, height - padding.y),
    ]
    return real_points, screen_points


def build_viewport_transform(bounds: RealBounds, width: float,
                             height: float) -> Tuple[Matrix, ScreenPadding]:
    """
    Build the real-to-screen transform for a fixed-size viewport.

    Zero-width or zero-height bounds are first clamped to MIN_EXTENT, so the
    aspect ratio is always finite.

    Args:
        bounds (RealBounds): Real-world bounding box of the circuit
        width (float): Viewport width in pixels
        height (float): Viewport height in pixels

    Returns:
        tuple: (Matrix, ScreenPadding)

    Raises:
        ValueError: If width or height is not positive.
    """
    if not width > 0 or not height > 0:
        raise ValueError(f"Viewport size must be positive, got {width}x{height}")

    bounds = bounds.clamped(MIN_EXTENT)
    padding = compute_screen_padding(bounds.width, bounds.height, width, height)
    real_points, screen_points = viewport_anchors(bounds, width, height, padding)
    transform = Matrix.from_triangles(real_points, screen_points)

    logger.debug("Viewport %sx%s, padding=%s, transform=%s",
                 width, height, padding, transform.to_svg())
    return transform, padding


def screen_angle(transform: Matrix, degrees: float) -> float:
    """
    Screen rotation (degrees, SVG convention) of a real-world direction
    given as a counter-clockwise angle.

    Under the usual Y flip a real CCW rotation of 30 becomes -30 on screen.
    """
    rad = math.radians(rotation_degrees(degrees))
    sx, sy = transform.apply_to_vector(math.cos(rad), math.sin(rad))
    angle = math.degrees(math.atan2(sy, sx))
    if abs(angle) < 1e-9:
        return 0.0
    return angle


def readable_angle(angle: float) -> float:
    """
    Fold a screen angle into (-90, 90] so text is never upside down.
    Angles within 1e-9 of the limits count as exactly on them.
    """
    while angle > 90 + 1e-9:
        angle -= 180
    while angle <= -90 + 1e-9:
        angle += 180
    return angle
