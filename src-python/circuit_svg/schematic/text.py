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

from typing import List, Mapping

from ..core.constants import SCHEMATIC_FONT_SIZE
from ..core.dispatch import RenderContext
from ..core.scene_node import SceneNode
from ..core.shapes import text_element
from ..core.transform import readable_angle, screen_angle


def create_svg_objects_from_sch_text(text: Mapping, ctx: RenderContext) -> List[SceneNode]:
    """
    Free text at ``position``. ``rotation`` is a counter-clockwise angle in
    degrees in circuit space; ``font_size`` is in circuit units.
    """
    theme = ctx.theme
    x, y = ctx.point(text['position'])
    font_size = text.get('font_size') or SCHEMATIC_FONT_SIZE
    angle = readable_angle(screen_angle(ctx.transform, text.get('rotation') or 0.0))
    return [text_element(x, y, str(text.get('text', '')), ctx.length(font_size),
                         fill=text.get('color') or theme.reference,
                         anchor=text.get('anchor') or 'center', angle=angle,
                         font_family=theme.font_family, class_='text',
                         data_schematic_text_id=text.get('schematic_text_id'))]
