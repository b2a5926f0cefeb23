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
Bounds contributions and required fields of PCB elements.
"""

from typing import Iterator, Mapping

from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry

from ..core.constants import PCB_DEFAULT_TRACE_WIDTH
from ..core.geometry import disc_geometry, path_geometry, point_geometry, rect_geometry
from .shapes import board_outline


def _board_fields(board: Mapping):
    if board.get('outline'):
        return ('outline[].x', 'outline[].y')
    return ('center.x', 'center.y', 'width', 'height')


def _smtpad_fields(pad: Mapping):
    if pad.get('shape') == 'circle':
        return ('x', 'y', 'radius')
    return ('x', 'y', 'width', 'height')


def _plated_hole_fields(hole: Mapping):
    if hole.get('shape') in ('pill', 'oval'):
        return ('x', 'y', 'outer_width', 'outer_height', 'hole_width', 'hole_height')
    return ('x', 'y', 'outer_diameter', 'hole_diameter')


PCB_REQUIRED_FIELDS = {
    'pcb_board': _board_fields,
    'pcb_component': ('center.x', 'center.y', 'width', 'height'),
    'pcb_smtpad': _smtpad_fields,
    'pcb_plated_hole': _plated_hole_fields,
    'pcb_hole': ('x', 'y', 'hole_diameter'),
    'pcb_via': ('x', 'y', 'outer_diameter', 'hole_diameter'),
    'pcb_trace': ('route[].x', 'route[].y'),
    'pcb_silkscreen_text': ('anchor_position.x', 'anchor_position.y'),
    'pcb_silkscreen_path': ('route[].x', 'route[].y'),
}


def collect_pcb_geometry(elm: Mapping) -> Iterator[BaseGeometry]:
    """Yield the Shapely geometries covering one PCB element."""
    elm_type = elm.get('type')
    if elm_type == 'pcb_board':
        yield Polygon(board_outline(elm))
    elif elm_type == 'pcb_component':
        yield rect_geometry(elm['center'], elm['width'], elm['height'],
                            elm.get('rotation') or 0.0)
    elif elm_type == 'pcb_smtpad':
        if elm.get('shape') == 'circle':
            yield disc_geometry(elm, elm['radius'])
        else:
            yield rect_geometry(elm, elm['width'], elm['height'],
                                elm.get('ccw_rotation') or elm.get('rotation') or 0.0)
    elif elm_type == 'pcb_plated_hole':
        if elm.get('shape') in ('pill', 'oval'):
            yield rect_geometry(elm, elm['outer_width'], elm['outer_height'])
        else:
            yield disc_geometry(elm, elm['outer_diameter'] / 2)
    elif elm_type == 'pcb_hole':
        yield disc_geometry(elm, elm['hole_diameter'] / 2)
    elif elm_type == 'pcb_via':
        yield disc_geometry(elm, elm['outer_diameter'] / 2)
    elif elm_type == 'pcb_trace':
        for point in elm.get('route') or []:
            yield disc_geometry(point, (point.get('width') or PCB_DEFAULT_TRACE_WIDTH) / 2)
    elif elm_type == 'pcb_silkscreen_text':
        yield point_geometry(elm['anchor_position'])
    elif elm_type == 'pcb_silkscreen_path':
        yield path_geometry(elm.get('route') or [])
