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
3D view: a projected picture of the board and its components.
"""

from typing import Iterator, List, Mapping

from shapely.geometry.base import BaseGeometry

from ..core.constants import PCB_BOUNDS_PADDING, PCB_DEFAULT_HEIGHT, PCB_DEFAULT_WIDTH
from ..core.dispatch import Dispatcher, RenderContext
from ..core.geometry import path_geometry
from ..core.pipeline import View, build_scene, convert
from ..core.scene_node import SceneNode
from ..core.shapes import polygon_element
from ..core.theme import DEFAULT_3D_THEME
from ..pcb.bounds import PCB_REQUIRED_FIELDS
from .project import (BOARD_FACE, COMPONENT_FACE, UNDERSIDE_FACE,
                      cad_component_fields, project_scene)

THREE_D_LAYER_ORDER = ('underside', 'board', 'components')

THREE_D_REQUIRED_FIELDS = {
    'pcb_board': PCB_REQUIRED_FIELDS['pcb_board'],
    'pcb_component': PCB_REQUIRED_FIELDS['pcb_component'],
    'cad_component': cad_component_fields,
}


def create_svg_objects_from_face(face: Mapping, ctx: RenderContext) -> List[SceneNode]:
    theme = ctx.theme
    if face['type'] == BOARD_FACE:
        fill = theme.board_top if face['side'] == 'top' else theme.board_side
    else:
        fill = theme.component_top if face['side'] == 'top' else theme.component_side
    return [polygon_element([ctx.point(p) for p in face['points']], fill=fill,
                            class_=f"face face-{face['side']}",
                            data_source_type=face.get('source_type'),
                            data_source_id=face.get('source_id'))]


def collect_face_geometry(face: Mapping) -> Iterator[BaseGeometry]:
    yield path_geometry(face['points'])


three_d_dispatcher = Dispatcher('3d')
three_d_dispatcher.add(UNDERSIDE_FACE, 'underside', create_svg_objects_from_face)
three_d_dispatcher.add(BOARD_FACE, 'board', create_svg_objects_from_face)
three_d_dispatcher.add(COMPONENT_FACE, 'components', create_svg_objects_from_face)

THREE_D_VIEW = View(
    name='3d',
    dispatcher=three_d_dispatcher,
    layer_order=THREE_D_LAYER_ORDER,
    required_fields=THREE_D_REQUIRED_FIELDS,
    bounds_collector=collect_face_geometry,
    bounds_padding=PCB_BOUNDS_PADDING,
    default_width=PCB_DEFAULT_WIDTH,
    default_height=PCB_DEFAULT_HEIGHT,
    default_theme=DEFAULT_3D_THEME,
    supports_grid=False,
    preprocess=project_scene,
)


def convert_to_3d_svg(elements, options=None) -> str:
    """
    Render the board and its components as seen by a camera.

    Args:
        elements: List of circuit element mappings (not modified)
        options: As for convert_to_board_svg(), plus ``camera``: None
            (top-down), 'topdown', 'isometric', {'azimuth', 'elevation'}
            or a Camera. The grid option is ignored.

    Returns:
        str: SVG markup
    """
    return convert(THREE_D_VIEW, elements, options)


def build_3d_scene(elements, options=None):
    return build_scene(THREE_D_VIEW, elements, options)
