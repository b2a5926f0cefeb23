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
Net labels: a flag-shaped tag whose point touches the wire on
``anchor_side``, with the net name written inside.
"""

import math
from typing import List, Mapping, Tuple

from ..core.constants import (SCHEMATIC_CHAR_WIDTH, SCHEMATIC_FONT_SIZE,
                              SCHEMATIC_NET_LABEL_HEIGHT, SCHEMATIC_STROKE_WIDTH)
from ..core.dispatch import RenderContext
from ..core.geometry import xy
from ..core.scene_node import SceneNode, group
from ..core.shapes import polygon_element, text_element
from ..core.transform import readable_angle

# Direction from the anchor point into the label body, per anchor side
BODY_DIRECTIONS = {
    'left': (1.0, 0.0),
    'right': (-1.0, 0.0),
    'top': (0.0, -1.0),
    'bottom': (0.0, 1.0),
}


def net_label_text(label: Mapping) -> str:
    return str(label.get('text') or label.get('source_net_id') or '')


def net_label_width(label: Mapping) -> float:
    height = SCHEMATIC_NET_LABEL_HEIGHT
    text_width = len(net_label_text(label)) * SCHEMATIC_FONT_SIZE * SCHEMATIC_CHAR_WIDTH
    return height / 2 + text_width + SCHEMATIC_FONT_SIZE * 0.5


def net_label_frame(label: Mapping) -> Tuple[Tuple[float, float], Tuple[float, float], float]:
    """
    Returns:
        tuple: (anchor point, body direction, body length) in real units.
        Without an explicit ``anchor_position`` the anchor sits half a body
        length behind ``center``.
    """
    side = label.get('anchor_side') or 'right'
    if side not in BODY_DIRECTIONS:
        raise ValueError(f"Unknown net label anchor_side {side!r}")
    direction = BODY_DIRECTIONS[side]
    width = net_label_width(label)
    if label.get('anchor_position'):
        anchor = xy(label['anchor_position'])
    else:
        cx, cy = xy(label['center'])
        anchor = (cx - direction[0] * width / 2, cy - direction[1] * width / 2)
    return anchor, direction, width


def net_label_outline(label: Mapping) -> List[Tuple[float, float]]:
    """The five corners of the flag, in real-world coordinates."""
    (ax, ay), (dx, dy), width = net_label_frame(label)
    half = SCHEMATIC_NET_LABEL_HEIGHT / 2
    # Perpendicular to the body direction
    px, py = -dy, dx
    local = [(0.0, 0.0), (half, half), (width, half), (width, -half), (half, -half)]
    return [(ax + u * dx + v * px, ay + u * dy + v * py) for u, v in local]


def create_svg_objects_for_sch_net_label(label: Mapping,
                                         ctx: RenderContext) -> List[SceneNode]:
    theme = ctx.theme
    outline = [ctx.point(p) for p in net_label_outline(label)]
    (ax, ay), (dx, dy), width = net_label_frame(label)

    # Text sits in the middle of the rectangular part of the flag
    text_offset = SCHEMATIC_NET_LABEL_HEIGHT / 4 + width / 2
    tx, ty = ctx.point((ax + dx * text_offset, ay + dy * text_offset))
    sdx, sdy = ctx.transform.apply_to_vector(dx, dy)
    angle = readable_angle(math.degrees(math.atan2(sdy, sdx)))

    children = [
        polygon_element(outline, fill=theme.label_background,
                        stroke=theme.label_local,
                        stroke_width=ctx.length(SCHEMATIC_STROKE_WIDTH),
                        class_='net-label-outline'),
        text_element(tx, ty, net_label_text(label),
                     font_size=ctx.length(SCHEMATIC_FONT_SIZE),
                     fill=theme.label_local, anchor='center', angle=angle,
                     font_family=theme.font_family, class_='net-label-text'),
    ]
    return [group(children, class_='net-label',
                  data_source_net_id=label.get('source_net_id'),
                  data_schematic_net_label_id=label.get('schematic_net_label_id'))]
