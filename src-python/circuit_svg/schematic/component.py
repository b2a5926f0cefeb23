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
Schematic components drawn as a box with pins.

The body is the component's (possibly rotated) rectangle. Every
``schematic_port`` of the component gets a pin line from the port to the
nearest point of the body outline, a small marker, its pin number and, when
the component names it, a port label inside the body. The reference name
comes from the linked ``source_component``.
"""

import math
from typing import List, Mapping, Optional

from shapely.geometry import Point, Polygon
from shapely.ops import nearest_points

from ..core.constants import (SCHEMATIC_FONT_SIZE, SCHEMATIC_PORT_MARKER_RADIUS,
                              SCHEMATIC_STROKE_WIDTH)
from ..core.dispatch import RenderContext
from ..core.geometry import rotated_corners, xy
from ..core.scene_node import SceneNode, element, group
from ..core.shapes import polygon_element, text_element


def component_ports(component: Mapping, ctx: RenderContext) -> List[Mapping]:
    component_id = component.get('schematic_component_id')
    if component_id is None:
        return []
    return [port for port in ctx.of_type('schematic_port')
            if port.get('schematic_component_id') == component_id]


def component_name(component: Mapping, ctx: RenderContext) -> Optional[str]:
    source_id = component.get('source_component_id')
    if source_id is None:
        return None
    source = ctx.find('source_component', 'source_component_id', source_id)
    if source is None:
        return None
    return source.get('name')


def port_label(component: Mapping, port: Mapping) -> Optional[str]:
    if port.get('display_pin_label'):
        return str(port['display_pin_label'])
    labels = component.get('port_labels') or {}
    pin_number = port.get('pin_number')
    if pin_number is None:
        return None
    return labels.get(f'pin{pin_number}') or labels.get(str(pin_number))


def _create_pin(component: Mapping, port: Mapping, body: Polygon,
                ctx: RenderContext) -> List[SceneNode]:
    theme = ctx.theme
    px, py = xy(port['center'])
    port_point = Point(px, py)
    nodes = []

    # Pin line from the port to the body outline (none if the port is inside)
    edge_point = nearest_points(body.exterior, port_point)[0]
    if port_point.distance(body) > 0:
        sx1, sy1 = ctx.point((px, py))
        sx2, sy2 = ctx.point((edge_point.x, edge_point.y))
        nodes.append(element('line', x1=sx1, y1=sy1, x2=sx2, y2=sy2,
                             stroke=theme.component_outline,
                             stroke_width=ctx.length(SCHEMATIC_STROKE_WIDTH),
                             class_='component-pin'))

    sx, sy = ctx.point((px, py))
    nodes.append(element('circle', cx=sx, cy=sy,
                         r=ctx.length(SCHEMATIC_PORT_MARKER_RADIUS),
                         fill='none', stroke=theme.component_outline,
                         stroke_width=ctx.length(SCHEMATIC_STROKE_WIDTH / 2),
                         class_='component-pin'))

    font_size = ctx.length(SCHEMATIC_FONT_SIZE * 0.8)
    if port.get('pin_number') is not None:
        # Pin number sits halfway along the pin, nudged above it
        mx, my = ctx.point(((px + edge_point.x) / 2, (py + edge_point.y) / 2 + 0.05))
        nodes.append(text_element(mx, my, str(port['pin_number']), font_size,
                                  fill=theme.pin_number, anchor='bottom',
                                  class_='pin-number'))

    label = port_label(component, port)
    if label:
        # Port label goes just inside the body, reading away from the pin
        cx, cy = xy(component['center'])
        dx, dy = edge_point.x - px, edge_point.y - py
        length = math.hypot(dx, dy)
        if length == 0:
            dx, dy = cx - px, cy - py
            length = math.hypot(dx, dy) or 1.0
        inset = 0.1
        lx = edge_point.x + dx / length * inset
        ly = edge_point.y + dy / length * inset
        slx, sly = ctx.point((lx, ly))
        sdx, _ = ctx.transform.apply_to_vector(dx, dy)
        anchor = 'left' if sdx > 1e-9 else 'right' if sdx < -1e-9 else 'center'
        nodes.append(text_element(slx, sly, label, font_size,
                                  fill=theme.reference, anchor=anchor,
                                  class_='port-label'))
    return nodes


def create_svg_objects_from_sch_component(component: Mapping,
                                          ctx: RenderContext) -> List[SceneNode]:
    """
    Build the nodes for one ``schematic_component``.

    Returns:
        list: A single ``<g class="component">`` node
    """
    theme = ctx.theme
    size = component['size']
    corners = rotated_corners(component['center'], size['width'], size['height'],
                              component.get('rotation') or 0.0)
    body = Polygon(corners)

    children = [polygon_element([ctx.point(c) for c in corners],
                                fill=theme.component_body,
                                stroke=theme.component_outline,
                                stroke_width=ctx.length(SCHEMATIC_STROKE_WIDTH),
                                class_='chip')]

    for port in component_ports(component, ctx):
        children.extend(_create_pin(component, port, body, ctx))

    name = component_name(component, ctx)
    if name:
        # Reference name centred above the body's top edge
        top = max(y for _, y in corners)
        cx, _ = xy(component['center'])
        nx, ny = ctx.point((cx, top + 0.05))
        children.append(text_element(nx, ny, name,
                                     ctx.length(SCHEMATIC_FONT_SIZE),
                                     fill=theme.reference, anchor='bottom',
                                     font_family=theme.font_family,
                                     class_='component-name'))

    return [group(children, class_='component',
                  data_schematic_component_id=component.get('schematic_component_id'))]
