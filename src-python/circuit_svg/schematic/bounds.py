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
Which geometry each schematic element contributes to the bounds, and which
fields must be present for it to be drawn at all.
"""

from typing import Iterator, Mapping

from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry

from ..core.constants import SCHEMATIC_POINT_SIZE, SCHEMATIC_PORT_SIZE
from ..core.geometry import rect_geometry, square_geometry
from .annotations import debug_object_fields, voltage_probe_points
from .net_label import net_label_outline


def _trace_fields(trace: Mapping):
    fields = ('edges[].from.x', 'edges[].from.y', 'edges[].to.x', 'edges[].to.y')
    if trace.get('junctions'):
        fields += ('junctions[].x', 'junctions[].y')
    return fields


def _net_label_fields(label: Mapping):
    if label.get('anchor_position'):
        return ('anchor_position.x', 'anchor_position.y')
    return ('center.x', 'center.y')


SCHEMATIC_REQUIRED_FIELDS = {
    'schematic_component': ('center.x', 'center.y', 'size.width', 'size.height'),
    'schematic_port': ('center.x', 'center.y'),
    'schematic_trace': _trace_fields,
    'schematic_net_label': _net_label_fields,
    'schematic_text': ('position.x', 'position.y'),
    'schematic_debug_object': debug_object_fields,
    'schematic_voltage_probe': ('position.x', 'position.y'),
    'schematic_box': ('x', 'y', 'width', 'height'),
}


def collect_schematic_geometry(elm: Mapping) -> Iterator[BaseGeometry]:
    """
    Yield the Shapely geometries covering one schematic element.

    Small features (ports, trace endpoints, text anchors) are given a token
    size so they are never flush with the edge of the picture.
    """
    elm_type = elm.get('type')
    if elm_type == 'schematic_component':
        yield rect_geometry(elm['center'], elm['size']['width'],
                            elm['size']['height'], elm.get('rotation') or 0.0)
    elif elm_type == 'schematic_port':
        yield square_geometry(elm['center'], SCHEMATIC_PORT_SIZE)
    elif elm_type == 'schematic_trace':
        for edge in elm.get('edges') or []:
            yield square_geometry(edge['from'], SCHEMATIC_POINT_SIZE)
            yield square_geometry(edge['to'], SCHEMATIC_POINT_SIZE)
        for junction in elm.get('junctions') or []:
            yield square_geometry(junction, SCHEMATIC_POINT_SIZE)
    elif elm_type == 'schematic_net_label':
        yield Polygon(net_label_outline(elm))
    elif elm_type == 'schematic_text':
        yield square_geometry(elm['position'], SCHEMATIC_POINT_SIZE)
    elif elm_type == 'schematic_debug_object':
        shape = elm.get('shape')
        if shape == 'rect':
            yield rect_geometry(elm['center'], elm['size']['width'], elm['size']['height'])
        elif shape == 'line':
            yield square_geometry(elm['start'], SCHEMATIC_POINT_SIZE)
            yield square_geometry(elm['end'], SCHEMATIC_POINT_SIZE)
        elif shape == 'point':
            yield square_geometry(elm['center'], SCHEMATIC_POINT_SIZE)
    elif elm_type == 'schematic_box':
        yield rect_geometry((elm['x'], elm['y']), elm['width'], elm['height'])
    elif elm_type == 'schematic_voltage_probe':
        tip, stem_end = voltage_probe_points(elm)
        yield square_geometry(tip, SCHEMATIC_POINT_SIZE)
        yield square_geometry(stem_end, SCHEMATIC_POINT_SIZE)
