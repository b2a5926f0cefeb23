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
Small screen-space shape helpers used by the per-element builders.

All inputs here are already in screen pixels; callers transform real-world
points and lengths first.
"""

from typing import Optional, Sequence, Tuple

from .scene_node import SceneNode, element, path_data, points_attribute
from .transform import format_number

TEXT_ANCHORS = {
    'left': 'start',
    'right': 'end',
    'center': 'middle',
}

BASELINES = {
    'top': 'hanging',
    'bottom': 'ideographic',
    'center': 'central',
}


def split_anchor(anchor: Optional[str]) -> Tuple[str, str]:
    """
    Split an anchor name such as ``'top_left'`` or ``'center'`` into a
    (horizontal, vertical) pair drawn from left/center/right and
    top/center/bottom.

    Raises:
        TypeError: If ``anchor`` is neither None nor a string.
    """
    if anchor is not None and not isinstance(anchor, str):
        raise TypeError(f"Text anchor must be a string, got {type(anchor).__name__}")
    horizontal = 'center'
    vertical = 'center'
    for part in (anchor or 'center').replace('-', '_').split('_'):
        if part in ('left', 'right'):
            horizontal = part
        elif part in ('top', 'bottom'):
            vertical = part
    return horizontal, vertical


def text_element(x: float, y: float, text: str, font_size: float, fill: str,
                 anchor: Optional[str] = 'center', angle: float = 0.0,
                 font_family: Optional[str] = None, **attributes) -> SceneNode:
    """
    A ``<text>`` node anchored at (x, y).

    Args:
        x, y (float): Anchor in screen pixels
        text (str): Text content
        font_size (float): Font size in pixels
        fill (str): Text color
        anchor (str): Anchor name (see split_anchor)
        angle (float): Screen rotation in degrees about the anchor
        font_family (str or None): Overrides the stylesheet font
        **attributes: Extra attributes (svgwrite keyword convention)
    """
    horizontal, vertical = split_anchor(anchor)
    transform = None
    if angle:
        transform = f'rotate({format_number(angle)} {format_number(x)} {format_number(y)})'
    return element(
        'text', value=text, x=x, y=y, fill=fill, font_size=font_size,
        font_family=font_family,
        text_anchor=TEXT_ANCHORS[horizontal],
        dominant_baseline=BASELINES[vertical],
        transform=transform, **attributes
    )


def polygon_element(points: Sequence[Tuple[float, float]], **attributes) -> SceneNode:
    return element('polygon', points=points_attribute(points), **attributes)


def polyline_path(points: Sequence[Tuple[float, float]], closed: bool = False,
                  **attributes) -> SceneNode:
    return element('path', d=path_data(points, closed=closed), **attributes)
