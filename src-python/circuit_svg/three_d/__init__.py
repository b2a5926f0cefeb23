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

from .camera import Camera
from .convert import THREE_D_LAYER_ORDER, THREE_D_VIEW, build_3d_scene, convert_to_3d_svg

__all__ = ['Camera', 'THREE_D_LAYER_ORDER', 'THREE_D_VIEW', 'build_3d_scene',
           'convert_to_3d_svg']
