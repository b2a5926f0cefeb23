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

from . import constants
from .bounds import RealBounds, compute_bounds
from .compositor import LayerBuckets, compose
from .dispatch import Dispatcher, RenderContext
from .errors import CircuitJsonError, MalformedElementError
from .options import GridOptions, LabeledPoint, ViewOptions
from .pipeline import View, build_scene, convert
from .scene_node import SceneNode, element, group
from .svg_serializer import TRANSFORM_ATTRIBUTE, read_transform, screen_to_real, serialize
from .theme import PcbTheme, SchematicTheme, ThreeDTheme
from .transform import Matrix, ScreenPadding, build_viewport_transform, parse_svg_matrix

__all__ = [
    'constants',
    'RealBounds', 'compute_bounds',
    'LayerBuckets', 'compose',
    'Dispatcher', 'RenderContext',
    'CircuitJsonError', 'MalformedElementError',
    'GridOptions', 'LabeledPoint', 'ViewOptions',
    'View', 'build_scene', 'convert',
    'SceneNode', 'element', 'group',
    'TRANSFORM_ATTRIBUTE', 'read_transform', 'screen_to_real', 'serialize',
    'PcbTheme', 'SchematicTheme', 'ThreeDTheme',
    'Matrix', 'ScreenPadding', 'build_viewport_transform', 'parse_svg_matrix',
]
