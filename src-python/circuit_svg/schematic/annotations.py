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
Debug objects (rectangles, lines and points drawn by layout tools) and
voltage probes.
"""

from typing import List, Mapping, Sequence

from ..core.constants import (SCHEMATIC_FONT_SIZE, SCHEMATIC_POINT_SIZE,
                              SCHEMATIC_STROKE_WIDTH)
from ..core.dispatch import RenderContext
from ..core.geometry import xy
from ..core.scene_node import SceneNode, element, group
from ..core.shapes import polygon_element, text_element
from ..core.transform import format_number

DEBUG_SHAPE_FIELDS = {
    'rect': ('center.x', 'center.y', 'size.width', 'size.height'),
    'line': ('start.x', 'start.y', 'end.x', 'end.y'),
    'point': ('center.x', 'center.y'),
}

# Probe symbol in circuit units: the tip sits on ``position`` and the
# stem runs up and to the right to where the reading is written.
PROBE_STEM = (0.3, 0.3)
PROBE_HEAD = 0.08


def debug_object_fields(debug_object: Mapping) -> Sequence[str]:
    return DEBUG_SHAPE_FIELDS.get(debug_object.get('shape'), ())


def create_svg_objects_from_sch_debug_object(debug_object: Mapping,
                                             ctx: RenderContext) -> List[SceneNode]:
    """Unknown shapes produce nothing, like unknown element types."""
    theme = ctx.theme
    shape = debug_object.get('shape')
    label = debug_object.get('label')
    stroke_width = ctx.length(SCHEMATIC_STROKE_WIDTH)
    font_size = ctx.length(SCHEMATIC_FONT_SIZE * 0.7)
    children = []

    if shape == 'rect':
        cx, cy = xy(debug_object['center'])
        half_w = debug_object['size']['width'] / 2
        half_h = debug_object['size']['height'] / 2
        x1, y1 = ctx.point((cx - half_w, cy + half_h))
        x2, y2 = ctx.point((cx + half_w, cy - half_h))
        children.append(element('rect', x=min(x1, x2), y=min(y1, y2),
                                width=abs(x2 - x1), height=abs(y2 - y1),
                                fill='none', stroke=theme.debug,
                                stroke_width=stroke_width,
                                stroke_dasharray='4 2'))
        label_at = ctx.point((cx, cy))
    elif shape == 'line':
        x1, y1 = ctx.point(debug_object['start'])
        x2, y2 = ctx.point(debug_object['end'])
        children.append(element('line', x1=x1, y1=y1, x2=x2, y2=y2,
                                stroke=theme.debug, stroke_width=stroke_width,
                                stroke_dasharray='4 2'))
        label_at = ((x1 + x2) / 2, (y1 + y2) / 2)
    elif shape == 'point':
        x, y = ctx.point(debug_object['center'])
        children.append(element('circle', cx=x, cy=y,
                                r=ctx.length(SCHEMATIC_POINT_SIZE / 2),
                                fill=theme.debug))
        label_at = (x, y)
    else:
        return []

    if label:
        children.append(text_element(label_at[0], label_at[1], str(label), font_size,
                                     fill=theme.debug, anchor='center'))
    return [group(children, class_='debug-object', data_shape=shape)]


def create_svg_objects_from_sch_box(box: Mapping, ctx: RenderContext) -> List[SceneNode]:
    """Grouping rectangle around related parts, centred on x, y."""
    half_w = box['width'] / 2
    half_h = box['height'] / 2
    x1, y1 = ctx.point((box['x'] - half_w, box['y'] + half_h))
    x2, y2 = ctx.point((box['x'] + half_w, box['y'] - half_h))
    return [element('rect', x=min(x1, x2), y=min(y1, y2),
                    width=abs(x2 - x1), height=abs(y2 - y1), fill='none',
                    stroke=ctx.theme.component_outline,
                    stroke_width=ctx.length(SCHEMATIC_STROKE_WIDTH),
                    stroke_dasharray='4 2' if box.get('is_dashed') else None,
                    class_='schematic-box')]


def voltage_probe_points(probe: Mapping):
    """Tip and stem end of the probe symbol, in real coordinates."""
    px, py = xy(probe['position'])
    return (px, py), (px + PROBE_STEM[0], py + PROBE_STEM[1])


def probe_reading(probe: Mapping) -> str:
    voltage = probe.get('voltage')
    name = probe.get('name')
    if isinstance(voltage, (int, float)) and not isinstance(voltage, bool):
        reading = f'{format_number(round(voltage, 3))}V'
        return f'{name}: {reading}' if name else reading
    return str(name or '')


def create_svg_objects_from_sch_voltage_probe(probe: Mapping,
                                              ctx: RenderContext) -> List[SceneNode]:
    theme = ctx.theme
    (tip_x, tip_y), (end_x, end_y) = voltage_probe_points(probe)
    stroke_width = ctx.length(SCHEMATIC_STROKE_WIDTH)

    sx1, sy1 = ctx.point((tip_x, tip_y))
    sx2, sy2 = ctx.point((end_x, end_y))
    # Arrow head: a small triangle pointing at the tip, built in real space
    head = [(tip_x, tip_y),
            (tip_x + PROBE_HEAD, tip_y + PROBE_HEAD * 0.4),
            (tip_x + PROBE_HEAD * 0.4, tip_y + PROBE_HEAD)]

    children = [
        element('line', x1=sx1, y1=sy1, x2=sx2, y2=sy2, stroke=theme.probe,
                stroke_width=stroke_width, class_='voltage-probe-stem'),
        polygon_element([ctx.point(p) for p in head], fill=theme.probe,
                        class_='voltage-probe-head'),
    ]
    reading = probe_reading(probe)
    if reading:
        children.append(text_element(sx2, sy2, reading,
                                     ctx.length(SCHEMATIC_FONT_SIZE),
                                     fill=theme.probe, anchor='bottom_left',
                                     font_family=theme.font_family,
                                     class_='voltage-probe-reading'))
    return [group(children, class_='voltage-probe',
                  data_schematic_voltage_probe_id=probe.get('schematic_voltage_probe_id'),
                  data_schematic_trace_id=probe.get('schematic_trace_id'))]
