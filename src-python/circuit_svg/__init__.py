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

Circuit SVG
===========

Renders circuit JSON (a flat list of typed circuit elements in real-world
units) as SVG: schematic, board (PCB) and projected 3D views.

Main modules:
- core: Bounds, viewport transform, dispatch, composition, serialization
- schematic, pcb, three_d: One view each
- export: Loading circuit JSON and saving renders

Quick start:
    from circuit_svg import convert_to_schematic_svg
    svg = convert_to_schematic_svg(circuit_json, {'grid': True})
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Convenience imports for common usage
from .core.errors import CircuitJsonError, MalformedElementError
from .core.options import GridOptions, LabeledPoint, ViewOptions
from .core.theme import PcbTheme, SchematicTheme, ThreeDTheme
from .core.svg_serializer import screen_to_real
from .schematic import circuit_json_to_schematic_svg, convert_to_schematic_svg
from .pcb import convert_to_board_svg
from .three_d import Camera, convert_to_3d_svg

__all__ = [
    'Camera',
    'CircuitJsonError',
    'GridOptions',
    'LabeledPoint',
    'MalformedElementError',
    'PcbTheme',
    'SchematicTheme',
    'ThreeDTheme',
    'ViewOptions',
    'circuit_json_to_schematic_svg',
    'convert_to_3d_svg',
    'convert_to_board_svg',
    'convert_to_schematic_svg',
    'screen_to_real',
    '__version__',
]
