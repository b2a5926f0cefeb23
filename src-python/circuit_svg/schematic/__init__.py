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

from .convert import (SCHEMATIC_LAYER_ORDER, SCHEMATIC_VIEW,
                      build_schematic_scene, circuit_json_to_schematic_svg,
                      convert_to_schematic_svg)

__all__ = [
    'SCHEMATIC_LAYER_ORDER',
    'SCHEMATIC_VIEW',
    'build_schematic_scene',
    'circuit_json_to_schematic_svg',
    'convert_to_schematic_svg',
]
