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
Real-world bounding box of an element collection.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping, Sequence

from shapely.geometry import GeometryCollection
from shapely.geometry.base import BaseGeometry

from .constants import EPSILON, MIN_EXTENT

logger = logging.getLogger(__name__)

BoundsCollector = Callable[[Mapping], Iterable[BaseGeometry]]


@dataclass(frozen=True)
class RealBounds:
    """
    Axis-aligned box in real-world (circuit) units.

    Attributes:
        min_x, max_x, min_y, max_y (float): Box limits, ``max >= min``
    """
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @classmethod
    def unit(cls, extent: float = MIN_EXTENT) -> 'RealBounds':
        """Box of side ``extent`` centred on the origin."""
        half = extent / 2
        return cls(-half, half, -half, half)

    @classmethod
    def from_shapely(cls, bounds: Sequence[float]) -> 'RealBounds':
        """Build from Shapely's ``(minx, miny, maxx, maxy)`` ordering."""
        min_x, min_y, max_x, max_y = bounds
        return cls(float(min_x), float(max_x), float(min_y), float(max_y))

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self):
        return {'x': (self.min_x + self.max_x) / 2,
                'y': (self.min_y + self.max_y) / 2}

    def expanded(self, padding: float) -> 'RealBounds':
        if not padding:
            return self
        return RealBounds(self.min_x - padding, self.max_x + padding,
                          self.min_y - padding, self.max_y + padding)

    def clamped(self, min_extent: float = MIN_EXTENT) -> 'RealBounds':
        """
        Grow any axis narrower than ``min_extent`` symmetrically about its
        centre. Axes already wide enough are untouched.
        """
        min_x, max_x, min_y, max_y = self.min_x, self.max_x, self.min_y, self.max_y
        if max_x - min_x < min_extent:
            cx = (min_x + max_x) / 2
            min_x, max_x = cx - min_extent / 2, cx + min_extent / 2
        if max_y - min_y < min_extent:
            cy = (min_y + max_y) / 2
            min_y, max_y = cy - min_extent / 2, cy + min_extent / 2
        return RealBounds(min_x, max_x, min_y, max_y)

    def contains(self, x: float, y: float, tolerance: float = EPSILON) -> bool:
        return (self.min_x - tolerance <= x <= self.max_x + tolerance and
                self.min_y - tolerance <= y <= self.max_y + tolerance)

    def to_dict(self):
        return {'minX': self.min_x, 'maxX': self.max_x,
                'minY': self.min_y, 'maxY': self.max_y}


def compute_bounds(elements: Iterable[Mapping], collector: BoundsCollector,
                   padding: float = 0.0,
                   min_extent: float = MIN_EXTENT) -> RealBounds:
    """
    Compute the real-world bounds of every coordinate-bearing field.

    Args:
        elements: Circuit elements (read only)
        collector: Callable returning the Shapely geometries of one element.
            Elements it does not recognise should yield nothing.
        padding (float): Real-world margin added on every side
        min_extent (float): Minimum width/height before padding

    Returns:
        RealBounds: Never NaN. With no geometry at all, the unit box of side
        ``min_extent`` centred on the origin (plus padding).
    """
    geometries = []
    for element in elements:
        try:
            found = [g for g in collector(element) if not g.is_empty]
        except (KeyError, TypeError, ValueError) as e:
            # The dispatcher skips the same element
            logger.warning("Ignoring malformed %s element in bounds: %r",
                           element.get('type'), e)
            continue
        geometries.extend(found)

    if not geometries:
        logger.debug("No coordinate-bearing elements, using unit bounds")
        bounds = RealBounds.unit(min_extent)
    else:
        bounds = RealBounds.from_shapely(GeometryCollection(geometries).bounds)
        bounds = bounds.clamped(min_extent)

    bounds = bounds.expanded(padding)
    logger.debug("Computed bounds %s from %d geometries",
                 bounds.to_dict(), len(geometries))
    return bounds
