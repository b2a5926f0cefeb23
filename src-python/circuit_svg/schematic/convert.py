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
Schematic view: circuit elements -> schematic SVG.
"""

import warnings

from ..core.constants import (SCHEMATIC_BOUNDS_PADDING, SCHEMATIC_DEFAULT_HEIGHT,
                              SCHEMATIC_DEFAULT_WIDTH)
from ..core.dispatch import Dispatcher
from ..core.pipeline import View, build_scene, convert
from ..core.theme import DEFAULT_SCHEMATIC_THEME
from .annotations import (create_svg_objects_from_sch_box,
                          create_svg_objects_from_sch_debug_object,
                          create_svg_objects_from_sch_voltage_probe)
from .bounds import SCHEMATIC_REQUIRED_FIELDS, collect_schematic_geometry
from .component import create_svg_objects_from_sch_component
from .net_label import create_svg_objects_for_sch_net_label
from .text import create_svg_objects_from_sch_text
from .trace import create_schematic_trace

# Bottom to top. Grid (under) and labeled points (over) are added around these.
SCHEMATIC_LAYER_ORDER = (
    'debug-objects',
    'components',
    'traces',
    'net-labels',
    'text',
    'voltage-probes',
)

schematic_dispatcher = Dispatcher('schematic')
schematic_dispatcher.add('schematic_debug_object', 'debug-objects',
                         create_svg_objects_from_sch_debug_object)
schematic_dispatcher.add('schematic_box', 'debug-objects', create_svg_objects_from_sch_box)
schematic_dispatcher.add('schematic_component', 'components',
                         create_svg_objects_from_sch_component)
schematic_dispatcher.add('schematic_trace', 'traces', create_schematic_trace)
schematic_dispatcher.add('schematic_net_label', 'net-labels',
                         create_svg_objects_for_sch_net_label)
schematic_dispatcher.add('schematic_text', 'text', create_svg_objects_from_sch_text)
schematic_dispatcher.add('schematic_voltage_probe', 'voltage-probes',
                         create_svg_objects_from_sch_voltage_probe)

SCHEMATIC_VIEW = View(
    name='schematic',
    dispatcher=schematic_dispatcher,
    layer_order=SCHEMATIC_LAYER_ORDER,
    required_fields=SCHEMATIC_REQUIRED_FIELDS,
    bounds_collector=collect_schematic_geometry,
    bounds_padding=SCHEMATIC_BOUNDS_PADDING,
    default_width=SCHEMATIC_DEFAULT_WIDTH,
    default_height=SCHEMATIC_DEFAULT_HEIGHT,
    default_theme=DEFAULT_SCHEMATIC_THEME,
)


def convert_to_schematic_svg(elements, options=None) -> str:
    """
    Render circuit elements as a schematic SVG document.

    Args:
        elements: List of circuit element mappings (not modified)
        options: None, a mapping or a ViewOptions. Mapping keys:
            - width, height: viewport in pixels (default 1200 x 600)
            - grid: True or {'cell_size', 'label_cells'} (camelCase accepted)
            - labeled_points: [{'x', 'y', 'label'}] drawn on top
            - theme: a SchematicTheme

    Returns:
        str: SVG markup

    Example:
        svg = convert_to_schematic_svg(circuit_json, {'grid': True})
    """
    return convert(SCHEMATIC_VIEW, elements, options)


def build_schematic_scene(elements, options=None):
    """Like convert_to_schematic_svg() but return the SceneNode tree."""
    return build_scene(SCHEMATIC_VIEW, elements, options)


def circuit_json_to_schematic_svg(elements, options=None) -> str:
    """Deprecated name of convert_to_schematic_svg()."""
    warnings.warn(
        "circuit_json_to_schematic_svg() is deprecated, "
        "use convert_to_schematic_svg() instead",
        DeprecationWarning, stacklevel=2,
    )
    return convert_to_schematic_svg(elements, options)
