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
Board view: circuit elements -> PCB SVG.
"""

from ..core.constants import PCB_BOUNDS_PADDING, PCB_DEFAULT_HEIGHT, PCB_DEFAULT_WIDTH
from ..core.dispatch import Dispatcher
from ..core.pipeline import View, build_scene, convert
from ..core.theme import DEFAULT_PCB_THEME
from .bounds import PCB_REQUIRED_FIELDS, collect_pcb_geometry
from .shapes import (create_svg_objects_from_pcb_board,
                     create_svg_objects_from_pcb_component,
                     create_svg_objects_from_pcb_hole,
                     create_svg_objects_from_pcb_plated_hole,
                     create_svg_objects_from_pcb_smtpad,
                     create_svg_objects_from_pcb_via)
from .traces import (create_svg_objects_from_pcb_silkscreen_path,
                     create_svg_objects_from_pcb_silkscreen_text,
                     create_svg_objects_from_pcb_trace)

PCB_LAYER_ORDER = (
    'board',
    'components',
    'traces',
    'pads',
    'vias',
    'holes',
    'silkscreen',
)

pcb_dispatcher = Dispatcher('pcb')
pcb_dispatcher.add('pcb_board', 'board', create_svg_objects_from_pcb_board)
pcb_dispatcher.add('pcb_component', 'components', create_svg_objects_from_pcb_component)
pcb_dispatcher.add('pcb_trace', 'traces', create_svg_objects_from_pcb_trace)
pcb_dispatcher.add('pcb_smtpad', 'pads', create_svg_objects_from_pcb_smtpad)
pcb_dispatcher.add('pcb_plated_hole', 'vias', create_svg_objects_from_pcb_plated_hole)
pcb_dispatcher.add('pcb_via', 'vias', create_svg_objects_from_pcb_via)
pcb_dispatcher.add('pcb_hole', 'holes', create_svg_objects_from_pcb_hole)
pcb_dispatcher.add('pcb_silkscreen_text', 'silkscreen',
                   create_svg_objects_from_pcb_silkscreen_text)
pcb_dispatcher.add('pcb_silkscreen_path', 'silkscreen',
                   create_svg_objects_from_pcb_silkscreen_path)

PCB_VIEW = View(
    name='pcb',
    dispatcher=pcb_dispatcher,
    layer_order=PCB_LAYER_ORDER,
    required_fields=PCB_REQUIRED_FIELDS,
    bounds_collector=collect_pcb_geometry,
    bounds_padding=PCB_BOUNDS_PADDING,
    default_width=PCB_DEFAULT_WIDTH,
    default_height=PCB_DEFAULT_HEIGHT,
    default_theme=DEFAULT_PCB_THEME,
)


def convert_to_board_svg(elements, options=None) -> str:
    """
    Render circuit elements as a PCB (board) SVG document.

    Options are the same as for convert_to_schematic_svg(), with an
    800 x 600 default viewport and a PcbTheme.
    """
    return convert(PCB_VIEW, elements, options)


def build_board_scene(elements, options=None):
    return build_scene(PCB_VIEW, elements, options)
