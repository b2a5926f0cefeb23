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
Scene composition: layer buckets in a fixed stacking order, wrapped with the
background, the global style block and optional under/overlays into one
``svg`` root node.
"""

import logging
from collections import OrderedDict
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from .scene_node import SceneNode, element, group
from .svg_serializer import TRANSFORM_ATTRIBUTE
from .transform import Matrix, format_number

logger = logging.getLogger(__name__)

SVG_NAMESPACE = 'http://www.w3.org/2000/svg'


class LayerBuckets:
    """
    Ordered node lists, one per layer.

    The layer order is fixed at construction (bottom to top). Nodes keep
    their insertion order inside a layer.
    """

    def __init__(self, layer_order: Sequence[str]):
        if len(set(layer_order)) != len(layer_order):
            raise ValueError(f"Duplicate layer names in {list(layer_order)}")
        self._buckets: Dict[str, List[SceneNode]] = OrderedDict(
            (name, []) for name in layer_order
        )

    @property
    def layer_order(self) -> List[str]:
        return list(self._buckets)

    def extend(self, layer: str, nodes: Iterable[SceneNode]) -> None:
        if layer not in self._buckets:
            raise KeyError(f"Unknown layer '{layer}', expected one of {self.layer_order}")
        self._buckets[layer].extend(nodes)

    def append(self, layer: str, node: SceneNode) -> None:
        self.extend(layer, [node])

    def __getitem__(self, layer: str) -> List[SceneNode]:
        return self._buckets[layer]

    def in_order(self) -> Iterator[Tuple[str, List[SceneNode]]]:
        return iter(self._buckets.items())

    def counts(self) -> Dict[str, int]:
        return {name: len(nodes) for name, nodes in self._buckets.items()}


def compose(buckets: LayerBuckets, width: float, height: float, theme,
            transform: Matrix, underlays: Sequence[SceneNode] = (),
            overlays: Sequence[SceneNode] = ()) -> SceneNode:
    """
    Assemble the final scene tree.

    Children of the root, bottom to top: style block, background rectangle,
    underlays (e.g. grid), one ``<g id="layer-...">`` per non-empty layer in
    the bucket order, overlays (e.g. labeled points).

    Args:
        buckets (LayerBuckets): Dispatched nodes
        width, height (float): Viewport size in pixels
        theme: Theme providing ``background`` and ``css()``
        transform (Matrix): Real-to-screen transform, embedded for consumers
        underlays: Nodes drawn right above the background
        overlays: Nodes drawn above everything else

    Returns:
        SceneNode: The ``svg`` root
    """
    root = SceneNode('svg', attributes={
        'xmlns': SVG_NAMESPACE,
        'width': format_number(width),
        'height': format_number(height),
        'style': f'background-color: {theme.background}',
        TRANSFORM_ATTRIBUTE: transform.to_svg(),
    })
    root.append(element('style', value=theme.css()))
    root.append(element('rect', class_='boundary', x=0, y=0,
                        width=width, height=height))
    root.extend(underlays)

    for name, nodes in buckets.in_order():
        if nodes:
            root.append(group(nodes, id=f'layer-{name}', data_layer=name))

    root.extend(overlays)
    logger.debug("Composed scene with layers %s", buckets.counts())
    return root
