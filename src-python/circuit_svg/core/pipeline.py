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
The conversion pipeline shared by every view.

    validate -> bounds -> viewport transform -> dispatch -> compose -> serialize

A View bundles what differs between the schematic, board and 3D renderings:
which element types it knows, how they contribute to the bounds, the layer
order, the defaults and an optional pre-processing step.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple

from .bounds import BoundsCollector, compute_bounds
from .compositor import LayerBuckets, compose
from .dispatch import Dispatcher, RenderContext
from .elements import RequiredFields, as_element_list, partition_elements
from .options import ViewOptions
from .overlays import draw_grid, draw_labeled_points
from .scene_node import SceneNode
from .svg_serializer import serialize
from .transform import build_viewport_transform

logger = logging.getLogger(__name__)

# (validated elements, options) -> (elements to render, options)
Preprocessor = Callable[[List[Mapping], ViewOptions], Tuple[List[Mapping], ViewOptions]]


@dataclass(frozen=True)
class View:
    """
    Everything one rendering flavour plugs into the pipeline.

    Attributes:
        name (str): View name used in log messages
        dispatcher (Dispatcher): Element type -> builder registry
        layer_order (tuple): Layer names, bottom to top
        required_fields: Field paths validated per element type
        bounds_collector: Element -> Shapely geometries for the bounds
        bounds_padding (float): Real-world margin around the bounds
        default_width, default_height (float): Viewport when not given
        default_theme: Theme used when the options carry none
        supports_grid (bool): Whether the grid option is honoured
        preprocess: Optional step run on the validated elements
    """
    name: str
    dispatcher: Dispatcher
    layer_order: Tuple[str, ...]
    required_fields: RequiredFields
    bounds_collector: BoundsCollector
    bounds_padding: float
    default_width: float
    default_height: float
    default_theme: Any
    supports_grid: bool = True
    preprocess: Optional[Preprocessor] = None


def build_scene(view: View, elements: Sequence[Mapping], options=None) -> SceneNode:
    """
    Run the pipeline up to (not including) serialization.

    Args:
        view (View): The rendering flavour
        elements: Circuit elements, never modified
        options: None, mapping or ViewOptions

    Returns:
        SceneNode: The ``svg`` root node

    Raises:
        CircuitJsonError: If ``elements`` is not a sequence of mappings.
        ValueError: If the options are invalid.
    """
    opts = ViewOptions.from_value(options, view.default_width, view.default_height)
    theme = opts.theme if opts.theme is not None else view.default_theme

    usable, rejected = partition_elements(as_element_list(elements), view.required_fields)
    if view.preprocess is not None:
        usable, opts = view.preprocess(usable, opts)

    bounds = compute_bounds(usable, view.bounds_collector, padding=view.bounds_padding)
    transform, _ = build_viewport_transform(bounds, opts.width, opts.height)

    context = RenderContext.create(transform, usable, theme)
    buckets = LayerBuckets(view.layer_order)
    view.dispatcher.dispatch_all(context, buckets)

    underlays = []
    if opts.grid is not None:
        if view.supports_grid:
            underlays.append(draw_grid(bounds, transform, opts.grid,
                                       theme.grid, theme.grid_label))
        else:
            logger.debug("%s view has no grid, ignoring grid option", view.name)

    overlays = []
    if opts.labeled_points:
        overlays.append(draw_labeled_points(opts.labeled_points, transform,
                                            theme.labeled_point))

    logger.debug("%s view: %d elements rendered, %d rejected",
                 view.name, len(usable), len(rejected))
    return compose(buckets, opts.width, opts.height, theme, transform,
                   underlays=underlays, overlays=overlays)


def convert(view: View, elements: Sequence[Mapping], options=None) -> str:
    """Run the whole pipeline and return SVG text."""
    return serialize(build_scene(view, elements, options))


def with_labeled_points(options: ViewOptions, points) -> ViewOptions:
    return replace(options, labeled_points=tuple(points))
