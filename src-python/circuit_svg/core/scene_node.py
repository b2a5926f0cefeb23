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
Generic scene graph node.

Every shape builder returns SceneNodes and the compositor assembles them into
one tree; only the serializer knows about SVG markup. A node has a tag name,
string attributes, ordered children and an optional text value, and belongs
to at most one parent.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

from .transform import format_number


def _attribute_name(key: str) -> str:
    # Same keyword convention as svgwrite: class_ -> class, stroke_width -> stroke-width
    return key.rstrip('_').replace('_', '-')


def _attribute_value(value) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


@dataclass(eq=False)
class SceneNode:
    """
    One node of the output tree.

    Attributes:
        name (str): Tag name, e.g. 'g', 'path', 'text'
        attributes (dict): Attribute name -> string value
        children (list): Ordered child nodes
        value (str): Text content ('' when none)
    """
    name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List['SceneNode'] = field(default_factory=list)
    value: str = ''
    parent: Optional['SceneNode'] = field(default=None, repr=False)

    def __post_init__(self):
        children, self.children = self.children, []
        self.extend(children)

    def append(self, child: 'SceneNode') -> 'SceneNode':
        """
        Append a child and return it.

        Raises:
            ValueError: If the child already belongs to a parent (nodes are
                never shared between branches).
        """
        if child.parent is not None:
            raise ValueError(
                f"<{child.name}> already belongs to <{child.parent.name}>"
            )
        if child is self:
            raise ValueError("A node cannot be its own child")
        child.parent = self
        self.children.append(child)
        return child

    def extend(self, children: Iterable['SceneNode']) -> None:
        for child in children:
            self.append(child)

    def iter(self) -> Iterator['SceneNode']:
        """Depth-first, document-order walk starting with this node."""
        yield self
        for child in self.children:
            yield from child.iter()

    def find_all(self, name: str = None, class_name: str = None) -> List['SceneNode']:
        found = []
        for node in self.iter():
            if name is not None and node.name != name:
                continue
            if class_name is not None and class_name not in node.classes:
                continue
            found.append(node)
        return found

    @property
    def classes(self) -> List[str]:
        return self.attributes.get('class', '').split()

    def text_content(self) -> str:
        return ''.join(node.value for node in self.iter())


def element(name: str, children: Iterable[SceneNode] = (), value: str = '',
            **attributes) -> SceneNode:
    """
    Convenience constructor.

    Keyword attributes follow the svgwrite naming convention: a trailing
    underscore is dropped and underscores become hyphens
    (``class_='trace'``, ``stroke_width=2``). ``None`` values are omitted and
    numbers are formatted with format_number().

    Example:
        element('circle', cx=10, cy=20, r=3, class_='junction')
    """
    attrs = {}
    for key, raw in attributes.items():
        if raw is None:
            continue
        attrs[_attribute_name(key)] = _attribute_value(raw)
    return SceneNode(name=name, attributes=attrs, children=list(children),
                     value=str(value))


def group(children: Iterable[SceneNode] = (), **attributes) -> SceneNode:
    return element('g', children=children, **attributes)


def points_attribute(points) -> str:
    """Format ``[(x, y), ...]`` for a polyline/polygon ``points`` attribute."""
    return ' '.join(f'{format_number(x)},{format_number(y)}' for x, y in points)


def path_data(points, closed: bool = False) -> str:
    """SVG path ``d`` string through the points (M then L segments)."""
    commands = []
    for i, (x, y) in enumerate(points):
        commands.append(f"{'M' if i == 0 else 'L'} {format_number(x)} {format_number(y)}")
    if closed and commands:
        commands.append('Z')
    return ' '.join(commands)
