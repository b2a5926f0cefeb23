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
Orthographic camera for the 3D view.

The camera orbits the board: ``azimuth`` turns it about the board normal
(0 = looking from -y towards +y), ``elevation`` raises it from the board
plane (0) to straight overhead (90). Projection gives a 2D point with y
pointing up, so the usual viewport transform can be applied afterwards.
"""

import math
from dataclasses import dataclass
from typing import Mapping

import numpy as np

ISOMETRIC_ELEVATION = math.degrees(math.atan(1 / math.sqrt(2)))


@dataclass(frozen=True)
class Camera:
    """
    Attributes:
        azimuth (float): Rotation about the z axis in degrees (default: 0)
        elevation (float): Angle above the board plane in degrees, 0 to 90
            (default: 90, top-down)
    """
    azimuth: float = 0.0
    elevation: float = 90.0

    def __post_init__(self):
        for name in ('azimuth', 'elevation'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) \
                    or not math.isfinite(value):
                raise ValueError(f"Camera {name} must be a finite number, got {value!r}")
        if not 0.0 <= self.elevation <= 90.0:
            raise ValueError(f"Camera elevation must be between 0 and 90, got {self.elevation}")
        object.__setattr__(self, 'azimuth', float(self.azimuth) % 360.0)
        object.__setattr__(self, 'elevation', float(self.elevation))

    @classmethod
    def topdown(cls) -> 'Camera':
        return cls(0.0, 90.0)

    @classmethod
    def isometric(cls) -> 'Camera':
        return cls(45.0, ISOMETRIC_ELEVATION)

    @classmethod
    def from_value(cls, value) -> 'Camera':
        """``None`` -> topdown, a preset name, a mapping or a Camera."""
        if value is None:
            return cls.topdown()
        if isinstance(value, Camera):
            return value
        if isinstance(value, str):
            presets = {'topdown': cls.topdown, 'isometric': cls.isometric}
            if value not in presets:
                raise ValueError(f"Unknown camera preset {value!r}, "
                                 f"expected one of {sorted(presets)}")
            return presets[value]()
        if isinstance(value, Mapping):
            return cls(value.get('azimuth', 0.0), value.get('elevation', 90.0))
        raise ValueError(f"camera must be a preset name, a mapping or a Camera, got {value!r}")

    def _angles(self):
        a = math.radians(self.azimuth)
        e = math.radians(self.elevation)
        return math.cos(a), math.sin(a), math.cos(e), math.sin(e)

    def view_direction(self) -> np.ndarray:
        """Unit vector pointing from the scene towards the camera."""
        cos_a, sin_a, cos_e, sin_e = self._angles()
        return np.array([sin_a * cos_e, -cos_a * cos_e, sin_e])

    def faces_camera(self, normal, eps: float = 1e-9) -> bool:
        return float(np.dot(self.view_direction(), normal)) > eps

    def project(self, points) -> np.ndarray:
        """
        Project 3D points.

        Args:
            points: Sequence of (x, y, z)

        Returns:
            np.ndarray: Shape (n, 3) with columns screen x, screen y (up)
            and depth (larger is nearer the camera)
        """
        pts = np.asarray(points, dtype=float).reshape(-1, 3)
        cos_a, sin_a, cos_e, sin_e = self._angles()
        x1 = pts[:, 0] * cos_a + pts[:, 1] * sin_a
        y1 = -pts[:, 0] * sin_a + pts[:, 1] * cos_a
        z = pts[:, 2]
        screen_y = y1 * sin_e + z * cos_e
        depth = -y1 * cos_e + z * sin_e
        return np.column_stack([x1, screen_y, depth])
