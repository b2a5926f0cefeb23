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
Decorative layers shared by the 2D views: the coordinate grid (under the
circuit) and labeled debug points (over it).
"""

import logging
import math
from typing import Iterable, List

from .bounds import RealBounds
from .constants import GRID_MIN_LABEL_SPACING, GRID_MIN_LINE_SPACING
from .options import GridOptions, LabeledPoint
from .scene_node import SceneNode, element, group
from .transform import Matrix, format_number

logger = logging.getLogger(__name__)


def _grid_positions(low: float, high: float, step: float) -> List[float]:
    # positions are start + k * spacing, never a running sum
    start = math.floor(low / step) * step
    count = int(math.ceil((high - start) / step - 1e-9))
    return [start + i * step for i in range(count + 1)]


def _cell_multiple(pixel_spacing: float, min_spacing: float) -> int:
    """Smallest whole number of cells spanning at least ``min_spacing`` pixels."""
    if pixel_spacing >= min_spacing:
        return 1
    return int(math.ceil(min_spacing / pixel_spacing))


def draw_grid(bounds: RealBounds, transform: Matrix, grid: GridOptions,
              color: str, label_color: str) -> SceneNode:
    """
    Grid lines every ``grid.cell_size`` real units across the bounds.

    Args:
        bounds (RealBounds): Real-world area to cover
        transform (Matrix): Real-to-screen transform
        grid (GridOptions): Spacing and labelling
        color (str): Line color
        label_color (str): Cell label color

    Returns:
        SceneNode: ``<g class="grid">``
    """
    pixel_spacing = transform.apply_to_length(grid.cell_size)
    step = grid.cell_size * _cell_multiple(pixel_spacing, GRID_MIN_LINE_SPACING)
    if step != grid.cell_size:
        logger.debug("Grid cell %s is %.3g px on screen, drawing every %s",
                     grid.cell_size, pixel_spacing, step)
    xs = _grid_positions(bounds.min_x, bounds.max_x, step)
    ys = _grid_positions(bounds.min_y, bounds.max_y, step)
    stroke_width = transform.apply_to_length(0.01)

    lines = []
    for x in xs:
        x1, y1 = transform.apply(x, ys[0])
        x2, y2 = transform.apply(x, ys[-1])
        lines.append(element('line', x1=x1, y1=y1, x2=x2, y2=y2, stroke=color,
                             stroke_width=stroke_width, stroke_opacity=0.5))
    for y in ys:
        x1, y1 = transform.apply(xs[0], y)
        x2, y2 = transform.apply(xs[-1], y)
        lines.append(element('line', x1=x1, y1=y1, x2=x2, y2=y2, stroke=color,
                             stroke_width=stroke_width, stroke_opacity=0.5))

    if grid.label_cells:
        label_every = _cell_multiple(transform.apply_to_length(step), GRID_MIN_LABEL_SPACING)
        font_size = transform.apply_to_length(grid.cell_size / 5)
        for x in xs[::label_every]:
            for y in ys[::label_every]:
                sx, sy = transform.apply(x, y)
                lines.append(element(
                    'text',
                    value=f'{format_number(x)},{format_number(y)}',
                    x=sx - 2.5, y=sy - 5,
                    fill=label_color, fill_opacity=0.5,
                    font_size=font_size, font_family='sans-serif',
                    text_anchor='middle', dominant_baseline='middle',
                ))

    return group(lines, class_='grid')


def draw_labeled_points(points: Iterable[LabeledPoint], transform: Matrix,
                        color: str) -> SceneNode:
    """
    An X marker plus a text label for every point. Points without a label
    are captioned with their real coordinates.

    Returns:
        SceneNode: ``<g class="labeled-points">``
    """
    children = []
    offset = transform.apply_to_length(0.1)
    for point in points:
        x, y = transform.apply(point.x, point.y)
        children.append(element(
            'path',
            d=(f'M {format_number(x - offset)} {format_number(y - offset)} '
               f'L {format_number(x + offset)} {format_number(y + offset)} '
               f'M {format_number(x - offset)} {format_number(y + offset)} '
               f'L {format_number(x + offset)} {format_number(y - offset)}'),
            stroke=color, stroke_width=transform.apply_to_length(0.02),
            fill='none', class_='labeled-point',
        ))
        label = point.label or f'({format_number(point.x)}, {format_number(point.y)})'
        children.append(element(
            'text', value=label,
            x=x + offset * 1.5, y=y - offset * 1.5,
            fill=color, font_family='sans-serif',
            font_size=transform.apply_to_length(0.15),
            text_anchor='start', dominant_baseline='text-after-edge',
            class_='labeled-point-label',
        ))
    return group(children, class_='labeled-points')
