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
Copper traces and silkscreen (text and paths).
"""

from typing import List, Mapping

from ..core.constants import (PCB_DEFAULT_TRACE_WIDTH, PCB_SILKSCREEN_FONT_SIZE,
                              PCB_SILKSCREEN_STROKE_WIDTH)
from ..core.dispatch import RenderContext
from ..core.scene_node import SceneNode
from ..core.shapes import polyline_path, text_element
from ..core.transform import readable_angle, screen_angle


def trace_runs(route: List[Mapping]) -> List[List[Mapping]]:
    """
    Split a route into runs of wire points sharing layer and width.

    A via point ends the current run; the wire after it starts a new one.
    Consecutive runs share their boundary point so the copper stays joined.
    """
    runs = []
    current = []
    for point in route:
        if point.get('route_type', 'wire') != 'wire':
            if len(current) > 1:
                runs.append(current)
            current = []
            continue
        if current and (point.get('layer') != current[-1].get('layer') or
                        point.get('width') != current[-1].get('width')):
            boundary = current[-1]
            if len(current) > 1:
                runs.append(current)
            current = [boundary] if point.get('layer') == boundary.get('layer') else []
        current.append(point)
    if len(current) > 1:
        runs.append(current)
    return runs


def create_svg_objects_from_pcb_trace(trace: Mapping, ctx: RenderContext) -> List[SceneNode]:
    nodes = []
    for run in trace_runs(list(trace.get('route') or [])):
        layer = run[-1].get('layer')
        width = run[-1].get('width') or PCB_DEFAULT_TRACE_WIDTH
        nodes.append(polyline_path(
            [ctx.point(p) for p in run], fill='none',
            stroke=ctx.theme.copper(layer), stroke_width=ctx.length(width),
            class_='pcb-trace', data_layer=layer,
            data_pcb_trace_id=trace.get('pcb_trace_id'),
        ))
    return nodes


def create_svg_objects_from_pcb_silkscreen_text(text: Mapping,
                                                ctx: RenderContext) -> List[SceneNode]:
    theme = ctx.theme
    x, y = ctx.point(text['anchor_position'])
    font_size = text.get('font_size') or PCB_SILKSCREEN_FONT_SIZE
    angle = readable_angle(screen_angle(ctx.transform, text.get('ccw_rotation') or 0.0))
    return [text_element(x, y, str(text.get('text', '')), ctx.length(font_size),
                         fill=theme.silkscreen(text.get('layer')),
                         anchor=text.get('anchor_alignment') or 'center',
                         angle=angle, class_='pcb-silkscreen-text',
                         data_layer=text.get('layer'))]


def create_svg_objects_from_pcb_silkscreen_path(path: Mapping,
                                                ctx: RenderContext) -> List[SceneNode]:
    route = list(path.get('route') or [])
    if len(route) < 2:
        return []
    width = path.get('stroke_width') or PCB_SILKSCREEN_STROKE_WIDTH
    return [polyline_path([ctx.point(p) for p in route], fill='none',
                          stroke=ctx.theme.silkscreen(path.get('layer')),
                          stroke_width=ctx.length(width),
                          stroke_linecap='round', stroke_linejoin='round',
                          class_='pcb-silkscreen', data_layer=path.get('layer'))]
