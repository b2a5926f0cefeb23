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
Board outline, component footprints, copper pads, plated holes, vias and
drill holes.
"""

from typing import List, Mapping

from ..core.constants import PCB_SILKSCREEN_STROKE_WIDTH
from ..core.dispatch import RenderContext
from ..core.geometry import rotated_corners, xy
from ..core.scene_node import SceneNode, element, group
from ..core.shapes import polygon_element, polyline_path


def board_outline(board: Mapping):
    """Real-world outline of a ``pcb_board``: its ``outline`` or its rectangle."""
    if board.get('outline'):
        return [xy(p) for p in board['outline']]
    return rotated_corners(board['center'], board['width'], board['height'])


def create_svg_objects_from_pcb_board(board: Mapping, ctx: RenderContext) -> List[SceneNode]:
    outline = [ctx.point(p) for p in board_outline(board)]
    return [polyline_path(outline, closed=True, fill='none',
                          stroke=ctx.theme.board_outline,
                          stroke_width=ctx.length(PCB_SILKSCREEN_STROKE_WIDTH),
                          class_='pcb-board',
                          data_pcb_board_id=board.get('pcb_board_id'))]


def create_svg_objects_from_pcb_component(component: Mapping,
                                          ctx: RenderContext) -> List[SceneNode]:
    """Fabrication outline of the component's footprint rectangle."""
    corners = rotated_corners(component['center'], component['width'],
                              component['height'], component.get('rotation') or 0.0)
    return [polygon_element([ctx.point(c) for c in corners], fill='none',
                            stroke=ctx.theme.fabrication,
                            stroke_width=ctx.length(PCB_SILKSCREEN_STROKE_WIDTH / 2),
                            stroke_dasharray='2 2', class_='pcb-component',
                            data_pcb_component_id=component.get('pcb_component_id'))]


def create_svg_objects_from_pcb_smtpad(pad: Mapping, ctx: RenderContext) -> List[SceneNode]:
    """Rectangular (optionally rotated) or circular surface-mount pads."""
    color = ctx.theme.copper(pad.get('layer'))
    attrs = dict(fill=color, class_='pcb-pad', data_layer=pad.get('layer'),
                 data_pcb_smtpad_id=pad.get('pcb_smtpad_id'))
    shape = pad.get('shape', 'rect')
    if shape == 'circle':
        x, y = ctx.point(pad)
        return [element('circle', cx=x, cy=y, r=ctx.length(pad['radius']), **attrs)]
    if shape in ('rect', 'rotated_rect'):
        corners = rotated_corners(pad, pad['width'], pad['height'],
                                  pad.get('ccw_rotation') or pad.get('rotation') or 0.0)
        return [polygon_element([ctx.point(c) for c in corners], **attrs)]
    return []


def _pill(x: float, y: float, width: float, height: float, **attributes) -> SceneNode:
    radius = min(width, height) / 2
    return element('rect', x=x - width / 2, y=y - height / 2, width=width,
                   height=height, rx=radius, ry=radius, **attributes)


def create_svg_objects_from_pcb_plated_hole(hole: Mapping,
                                            ctx: RenderContext) -> List[SceneNode]:
    """Copper annulus with the drill drawn on top; circular or pill shaped."""
    theme = ctx.theme
    x, y = ctx.point(hole)
    copper = theme.copper(hole.get('layer'))
    shape = hole.get('shape', 'circle')
    if shape == 'circle':
        children = [
            element('circle', cx=x, cy=y, r=ctx.length(hole['outer_diameter'] / 2),
                    fill=copper, class_='pcb-plated-hole-outer'),
            element('circle', cx=x, cy=y, r=ctx.length(hole['hole_diameter'] / 2),
                    fill=theme.drill, class_='pcb-plated-hole-drill'),
        ]
    elif shape in ('pill', 'oval'):
        children = [
            _pill(x, y, ctx.length(hole['outer_width']), ctx.length(hole['outer_height']),
                  fill=copper, class_='pcb-plated-hole-outer'),
            _pill(x, y, ctx.length(hole['hole_width']), ctx.length(hole['hole_height']),
                  fill=theme.drill, class_='pcb-plated-hole-drill'),
        ]
    else:
        return []
    return [group(children, class_='pcb-plated-hole',
                  data_pcb_plated_hole_id=hole.get('pcb_plated_hole_id'))]


def create_svg_objects_from_pcb_via(via: Mapping, ctx: RenderContext) -> List[SceneNode]:
    theme = ctx.theme
    x, y = ctx.point(via)
    return [group([
        element('circle', cx=x, cy=y, r=ctx.length(via['outer_diameter'] / 2),
                fill=theme.via, class_='pcb-via-outer'),
        element('circle', cx=x, cy=y, r=ctx.length(via['hole_diameter'] / 2),
                fill=theme.drill, class_='pcb-via-drill'),
    ], class_='pcb-via', data_pcb_via_id=via.get('pcb_via_id'))]


def create_svg_objects_from_pcb_hole(hole: Mapping, ctx: RenderContext) -> List[SceneNode]:
    """Unplated drill: a circle, or a square for ``hole_shape == 'square'``."""
    x, y = ctx.point(hole)
    size = ctx.length(hole['hole_diameter'])
    attrs = dict(fill=ctx.theme.drill, class_='pcb-hole',
                 data_pcb_hole_id=hole.get('pcb_hole_id'))
    if hole.get('hole_shape') == 'square':
        return [element('rect', x=x - size / 2, y=y - size / 2,
                        width=size, height=size, **attrs)]
    return [element('circle', cx=x, cy=y, r=size / 2, **attrs)]
