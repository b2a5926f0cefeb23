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
Schematic traces: wire edges joined into one path, crossing outlines and
junction dots.
"""

from typing import List, Mapping, Tuple

from ..core.constants import (EPSILON, SCHEMATIC_JUNCTION_RADIUS,
                              SCHEMATIC_STROKE_WIDTH)
from ..core.dispatch import RenderContext
from ..core.geometry import xy
from ..core.scene_node import SceneNode, element, group
from ..core.transform import format_number


def _same_point(p1: Tuple[float, float], p2: Tuple[float, float]) -> bool:
    return abs(p1[0] - p2[0]) < EPSILON and abs(p1[1] - p2[1]) < EPSILON


def edge_path_data(edges: List[Mapping], ctx: RenderContext) -> str:
    """
    Path data for consecutive edges. An edge starting where the previous one
    ended continues the current subpath; otherwise a new ``M`` starts one.
    """
    commands = []
    last_end = None
    for edge in edges:
        start = xy(edge['from'])
        end = xy(edge['to'])
        if last_end is None or not _same_point(last_end, start):
            sx, sy = ctx.point(start)
            commands.append(f'M {format_number(sx)} {format_number(sy)}')
        ex, ey = ctx.point(end)
        commands.append(f'L {format_number(ex)} {format_number(ey)}')
        last_end = end
    return ' '.join(commands)


def create_schematic_trace(trace: Mapping, ctx: RenderContext) -> List[SceneNode]:
    """
    Build the nodes for one ``schematic_trace``.

    Edges flagged ``is_crossing`` get a wider background-colored outline
    underneath, so the wire visibly hops over the one it crosses.
    """
    theme = ctx.theme
    edges = list(trace.get('edges') or [])
    if not edges:
        return []

    stroke_width = ctx.length(SCHEMATIC_STROKE_WIDTH)
    children = []

    crossing = [edge for edge in edges if edge.get('is_crossing')]
    if crossing:
        children.append(element('path', d=edge_path_data(crossing, ctx),
                                stroke=theme.background, fill='none',
                                stroke_width=stroke_width * 3,
                                stroke_linecap='butt',
                                class_='trace-crossing-outline'))

    children.append(element('path', d=edge_path_data(edges, ctx),
                            stroke=theme.wire, fill='none',
                            stroke_width=stroke_width, stroke_linecap='round',
                            class_='trace-wire'))

    for junction in trace.get('junctions') or []:
        jx, jy = ctx.point(junction)
        children.append(element('circle', cx=jx, cy=jy,
                                r=ctx.length(SCHEMATIC_JUNCTION_RADIUS),
                                fill=theme.junction, class_='trace-junction'))

    return [group(children, class_='trace',
                  data_schematic_trace_id=trace.get('schematic_trace_id'))]
