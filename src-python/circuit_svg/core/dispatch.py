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
Element type -> shape builder registry.

Each view owns one Dispatcher. A builder takes one element and the per-call
RenderContext and returns SceneNodes already in screen coordinates. Types
without a builder produce nothing, so collections containing newer element
kinds still render.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from .elements import index_by_id
from .scene_node import SceneNode
from .transform import Matrix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderContext:
    """
    Read-only state shared by the builders of one conversion call.

    Attributes:
        transform (Matrix): Real-to-screen transform
        elements (tuple): The full (validated) element collection
        theme: The view's theme
    """
    transform: Matrix
    elements: Tuple[Mapping, ...]
    theme: Any
    _by_type: Dict[str, List[Mapping]] = field(default=None, repr=False, compare=False)

    @classmethod
    def create(cls, transform: Matrix, elements: Sequence[Mapping], theme) -> 'RenderContext':
        by_type = defaultdict(list)
        for element in elements:
            by_type[element.get('type')].append(element)
        return cls(transform, tuple(elements), theme, dict(by_type))

    def of_type(self, element_type: str) -> List[Mapping]:
        return self._by_type.get(element_type, [])

    def find(self, element_type: str, id_field: str, id_value) -> Optional[Mapping]:
        """First element of ``element_type`` whose ``id_field`` equals ``id_value``."""
        for element in self.of_type(element_type):
            if element.get(id_field) == id_value:
                return element
        return None

    def index(self, element_type: str, id_field: str) -> Dict[Any, Mapping]:
        return index_by_id(self.of_type(element_type), element_type, id_field)

    # Shorthands used by nearly every builder
    def point(self, point) -> Tuple[float, float]:
        p = self.transform.apply_to_point(point)
        return p['x'], p['y']

    def length(self, value: float) -> float:
        return self.transform.apply_to_length(value)


Builder = Callable[[Mapping, RenderContext], Sequence[SceneNode]]


class Dispatcher:
    """
    Registry mapping an element ``type`` to (layer name, builder).

    Example:
        dispatcher = Dispatcher('schematic')
        dispatcher.add('schematic_text', 'text', create_svg_objects_from_sch_text)
    """

    def __init__(self, name: str):
        self.name = name
        self._builders: Dict[str, Tuple[str, Builder]] = {}

    def add(self, element_type: str, layer: str, builder: Builder) -> None:
        if element_type in self._builders:
            raise ValueError(f"{self.name}: '{element_type}' already has a builder")
        self._builders[element_type] = (layer, builder)

    def register(self, element_type: str, layer: str):
        """Decorator form of add()."""
        def decorator(builder: Builder) -> Builder:
            self.add(element_type, layer, builder)
            return builder
        return decorator

    @property
    def element_types(self) -> List[str]:
        return list(self._builders)

    def layer_for(self, element_type: str) -> Optional[str]:
        entry = self._builders.get(element_type)
        return entry[0] if entry else None

    def dispatch(self, element: Mapping,
                 context: RenderContext) -> Tuple[Optional[str], List[SceneNode]]:
        """
        Build the nodes for one element.

        Returns:
            tuple: (layer name, nodes). Unknown types give ``(None, [])``.
            A recognised element whose builder trips over a bad field gives
            ``(layer, [])`` and a warning.
        """
        element_type = element.get('type')
        entry = self._builders.get(element_type)
        if entry is None:
            logger.debug("%s: no builder for element type %r, skipping",
                         self.name, element_type)
            return None, []
        layer, builder = entry
        try:
            nodes = list(builder(element, context))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("%s: skipping malformed %s element: %r",
                           self.name, element_type, e)
            return layer, []
        return layer, nodes

    def dispatch_all(self, context: RenderContext, buckets) -> None:
        """Dispatch every element of the context once, in input order."""
        for element in context.elements:
            layer, nodes = self.dispatch(element, context)
            if nodes:
                buckets.extend(layer, nodes)
