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
Conversion options.

Callers may pass ``None``, a plain mapping (snake_case or camelCase keys, as
they arrive from JSON) or a ViewOptions instance. Everything is normalised
and validated once, up front, before any geometry is computed.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

_MISSING = object()


def _pick(mapping: Mapping, *keys, default=_MISSING):
    for key in keys:
        if key in mapping:
            return mapping[key]
    return default


def _positive(name: str, value) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(number) or number <= 0:
        raise ValueError(f"{name} must be a positive finite number, got {value!r}")
    return number


@dataclass(frozen=True)
class GridOptions:
    """
    Background grid settings.

    Attributes:
        cell_size (float): Grid spacing in real-world units (default: 1)
        label_cells (bool): Write each cell's coordinates in its corner
    """
    cell_size: float = 1.0
    label_cells: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'cell_size', _positive('grid cell_size', self.cell_size))

    @classmethod
    def from_value(cls, value) -> Optional['GridOptions']:
        """``True`` -> defaults, ``False``/``None`` -> no grid, mapping -> fields."""
        if value is None or value is False:
            return None
        if value is True:
            return cls()
        if isinstance(value, GridOptions):
            return value
        if isinstance(value, Mapping):
            return cls(
                cell_size=_pick(value, 'cell_size', 'cellSize', default=1.0),
                label_cells=bool(_pick(value, 'label_cells', 'labelCells', default=False)),
            )
        raise ValueError(f"grid must be a bool or a mapping, got {value!r}")


@dataclass(frozen=True)
class LabeledPoint:
    x: float
    y: float
    label: str = ''

    @classmethod
    def from_value(cls, value) -> 'LabeledPoint':
        if isinstance(value, LabeledPoint):
            return value
        if isinstance(value, Mapping):
            x = _pick(value, 'x', default=None)
            y = _pick(value, 'y', default=None)
            label = value.get('label', '')
        else:
            try:
                x, y, label = value
            except (TypeError, ValueError):
                raise ValueError(f"Labeled point must be {{x, y, label}}, got {value!r}") from None
        if not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
            raise ValueError(f"Labeled point needs numeric x and y, got {value!r}")
        return cls(float(x), float(y), str(label))


@dataclass(frozen=True)
class ViewOptions:
    """
    Normalised options for one conversion call.

    Attributes:
        width (float): Viewport width in pixels
        height (float): Viewport height in pixels
        grid (GridOptions or None): Background grid, None for no grid
        labeled_points (tuple): LabeledPoint overlays
        theme: Theme instance for the view, None for the view's default
        camera: Camera for the 3D view, None for the default topdown camera
    """
    width: float
    height: float
    grid: Optional[GridOptions] = None
    labeled_points: Tuple[LabeledPoint, ...] = field(default_factory=tuple)
    theme: Any = None
    camera: Any = None

    def __post_init__(self):
        object.__setattr__(self, 'width', _positive('width', self.width))
        object.__setattr__(self, 'height', _positive('height', self.height))

    @classmethod
    def from_value(cls, options, default_width: float,
                   default_height: float) -> 'ViewOptions':
        """
        Normalise caller options.

        Args:
            options: None, a mapping, or a ViewOptions instance
            default_width (float): Width used when options give none
            default_height (float): Height used when options give none

        Raises:
            ValueError: On a non-positive size, an invalid grid or a labeled
                point without numeric coordinates.
        """
        if isinstance(options, ViewOptions):
            return options
        if options is None:
            options = {}
        if not isinstance(options, Mapping):
            raise ValueError(f"options must be a mapping, got {type(options).__name__}")

        width = options.get('width')
        height = options.get('height')
        points = _pick(options, 'labeled_points', 'labeledPoints', default=None) or ()
        return cls(
            width=default_width if width is None else width,
            height=default_height if height is None else height,
            grid=GridOptions.from_value(options.get('grid')),
            labeled_points=tuple(LabeledPoint.from_value(p) for p in points),
            theme=options.get('theme'),
            camera=options.get('camera'),
        )
