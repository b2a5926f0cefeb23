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
SceneNode tree -> SVG markup, using svgwrite.

The root node must be an ``svg`` node carrying ``width`` and ``height``; its
attributes are copied onto an svgwrite Drawing and every descendant becomes a
generic svgwrite element with the node's tag, attributes and text.
"""

import xml.etree.ElementTree as ET
from typing import Dict

import svgwrite
from svgwrite.base import BaseElement

from .scene_node import SceneNode
from .transform import parse_svg_matrix

TRANSFORM_ATTRIBUTE = 'data-real-to-screen-transform'


class _NodeElement(BaseElement):
    """svgwrite element whose tag and text come from a SceneNode."""

    def __init__(self, node: SceneNode, **extra):
        self.elementname = node.name
        self.text = node.value
        super().__init__(**extra)

    def get_xml(self):
        xml = super().get_xml()
        if self.text:
            xml.text = self.text
        return xml


def _to_element(node: SceneNode, drawing: svgwrite.Drawing) -> BaseElement:
    # debug=False: data-* attributes and arbitrary tags skip svgwrite's validator
    elem = _NodeElement(node, factory=drawing, debug=False)
    for key, value in node.attributes.items():
        elem[key] = value
    for child in node.children:
        elem.add(_to_element(child, drawing))
    return elem


def to_drawing(root: SceneNode) -> svgwrite.Drawing:
    """
    Build an svgwrite Drawing from a root ``svg`` SceneNode.

    Raises:
        ValueError: If the root is not an ``svg`` node.
    """
    if root.name != 'svg':
        raise ValueError(f"Root node must be <svg>, got <{root.name}>")

    width = root.attributes.get('width', '100%')
    height = root.attributes.get('height', '100%')
    drawing = svgwrite.Drawing(size=(width, height), profile='full', debug=False)
    for key, value in root.attributes.items():
        if key == 'xmlns':
            continue
        drawing[key] = value
    for child in root.children:
        drawing.add(_to_element(child, drawing))
    return drawing


def serialize(root: SceneNode) -> str:
    """Serialize a scene tree to SVG text."""
    return to_drawing(root).tostring()


def read_transform(svg_text: str):
    """
    Recover the real-to-screen Matrix embedded in a rendered document.

    Raises:
        ValueError: If the document has no transform attribute.
    """
    root = ET.fromstring(svg_text)
    value = root.attrib.get(TRANSFORM_ATTRIBUTE)
    if value is None:
        raise ValueError(f"Document has no {TRANSFORM_ATTRIBUTE} attribute")
    return parse_svg_matrix(value)


def screen_to_real(svg_text: str, x: float, y: float) -> Dict[str, float]:
    """
    Map a screen position (e.g. a click) in a rendered document back to
    real-world circuit coordinates.
    """
    return read_transform(svg_text).inverse().apply_to_point((x, y))
