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
Turns a board and its components into camera-facing polygons.

The board is a slab extruded from its outline, its top surface at z = 0.
Components are boxes standing on the surface of their layer: the
``cad_component`` size when one is linked, otherwise the ``pcb_component``
footprint with a default height. Each visible face becomes a pseudo
element carrying its projected outline and depth, so the regular 2D
pipeline can fit, order and draw it.
"""

import logging
import math
from dataclasses import dataclass, replace
from typing import Dict, List, Mapping, Sequence, Tuple

import numpy as np
from shapely.geometry import Polygon
from shapely.geometry.polygon import orient

from ..core.constants import BOARD_THICKNESS, DEFAULT_COMPONENT_HEIGHT, EPSILON
from ..core.geometry import rotated_corners, xy
from ..core.options import LabeledPoint, ViewOptions
from ..core.transform import format_number
from ..pcb.shapes import board_outline
from .camera import Camera

logger = logging.getLogger(__name__)

BOARD_FACE = 'board_face'
COMPONENT_FACE = 'component_face'
UNDERSIDE_FACE = 'underside_face'


@dataclass(frozen=True)
class Face:
    """
    One planar face of a solid.

    Attributes:
        vertices (np.ndarray): (n, 3) corners, counter-clockwise seen from outside
        normal (np.ndarray): Outward unit normal
        side (str): 'top', 'bottom' or 'side'
    """
    vertices: np.ndarray
    normal: np.ndarray
    side: str


def prism_faces(outline: Sequence[Tuple[float, float]], z_bottom: float,
                z_top: float) -> List[Face]:
    """
    Faces of the vertical prism over a 2D outline.

    Raises:
        ValueError: If the outline encloses no area or the prism has no height.
    """
    if z_top - z_bottom <= EPSILON:
        raise ValueError(f"Prism needs a positive height, got {z_bottom}..{z_top}")
    polygon = Polygon(outline)
    if polygon.area <= EPSILON:
        raise ValueError("Prism outline encloses no area")
    ring = list(orient(polygon, sign=1.0).exterior.coords)[:-1]

    faces = [
        Face(np.array([(x, y, z_top) for x, y in ring]), np.array([0.0, 0.0, 1.0]), 'top'),
        Face(np.array([(x, y, z_bottom) for x, y in reversed(ring)]),
             np.array([0.0, 0.0, -1.0]), 'bottom'),
    ]
    for (x0, y0), (x1, y1) in zip(ring, ring[1:] + ring[:1]):
        dx, dy = x1 - x0, y1 - y0
        length = math.hypot(dx, dy)
        if length <= EPSILON:
            continue
        faces.append(Face(
            np.array([(x0, y0, z_bottom), (x1, y1, z_bottom),
                      (x1, y1, z_top), (x0, y0, z_top)]),
            np.array([dy / length, -dx / length, 0.0]),
            'side',
        ))
    return faces


def board_thickness(board: Mapping) -> float:
    thickness = board.get('thickness')
    if isinstance(thickness, (int, float)) and not isinstance(thickness, bool) \
            and thickness > 0:
        return float(thickness)
    return BOARD_THICKNESS


def _is_positive_size(size) -> bool:
    if not isinstance(size, Mapping):
        return False
    return all(isinstance(size.get(k), (int, float)) and size.get(k) > 0
               for k in ('x', 'y', 'z'))


def cad_component_fields(cad: Mapping):
    if cad.get('size') is None:
        return ()
    return ('position.x', 'position.y', 'size.x', 'size.y', 'size.z')


def _cad_box(cad: Mapping, footprint: Mapping):
    rotation = cad.get('rotation')
    if rotation is not None and not isinstance(rotation, Mapping):
        raise TypeError(f"'rotation' must be an {{x, y, z}} mapping, got {rotation!r}")
    angle = (rotation or {}).get('z')
    if angle is None:
        angle = footprint.get('rotation') or 0.0
    size = cad['size']
    outline = rotated_corners(cad['position'], size['x'], size['y'], angle)
    layer = cad.get('layer') or footprint.get('layer') or 'top'
    return outline, size['z'], layer == 'bottom'


def _footprint_box(component: Mapping):
    outline = rotated_corners(component['center'], component['width'],
                              component['height'], component.get('rotation') or 0.0)
    return outline, DEFAULT_COMPONENT_HEIGHT, component.get('layer') == 'bottom'


def component_solids(elements: Sequence[Mapping], thickness: float
                     ) -> List[Tuple[Mapping, List[Face], bool]]:
    """
    Boxes for every component.

    A component whose box cannot be built is skipped with a warning.

    Returns:
        list: (source element, faces, on the bottom layer) in input order
    """
    pcb_components: Dict[str, Mapping] = {}
    for elm in elements:
        if elm.get('type') == 'pcb_component' and 'pcb_component_id' in elm:
            pcb_components.setdefault(elm['pcb_component_id'], elm)

    covered = set()
    boxes = []
    for elm in elements:
        if elm.get('type') != 'cad_component' or not _is_positive_size(elm.get('size')):
            continue
        footprint = pcb_components.get(elm.get('pcb_component_id'), {})
        covered.add(elm.get('pcb_component_id'))
        boxes.append((elm, footprint))

    for elm in elements:
        if elm.get('type') != 'pcb_component' or elm.get('pcb_component_id') in covered:
            continue
        boxes.append((elm, None))

    result = []
    for elm, footprint in boxes:
        try:
            if footprint is None:
                outline, height, bottom = _footprint_box(elm)
            else:
                outline, height, bottom = _cad_box(elm, footprint)
            if bottom:
                faces = prism_faces(outline, -thickness - height, -thickness)
            else:
                faces = prism_faces(outline, 0.0, height)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping %s: %s", elm.get('type'), e)
            continue
        result.append((elm, faces, bottom))
    return result


def _source_id(elm: Mapping):
    for key in ('cad_component_id', 'pcb_component_id', 'pcb_board_id'):
        if key in elm:
            return elm[key]
    return None


def face_elements(faces: Sequence[Face], camera: Camera, element_type: str,
                  source: Mapping) -> List[Dict]:
    """Project the camera-facing faces into pseudo elements."""
    direction = camera.view_direction()
    result = []
    for face in faces:
        if float(np.dot(direction, face.normal)) <= EPSILON:
            continue
        projected = camera.project(face.vertices)
        result.append({
            'type': element_type,
            'points': [{'x': float(px), 'y': float(py)} for px, py, _ in projected],
            'depth': float(projected[:, 2].mean()),
            'side': face.side,
            'source_type': source.get('type'),
            'source_id': _source_id(source),
        })
    return result


def project_labeled_points(points: Sequence[LabeledPoint],
                           camera: Camera) -> List[LabeledPoint]:
    """Board-plane points (z = 0) moved to their projected position."""
    result = []
    for point in points:
        px, py, _ = camera.project([(point.x, point.y, 0.0)])[0]
        label = point.label or f'({format_number(point.x)}, {format_number(point.y)})'
        result.append(LabeledPoint(float(px), float(py), label))
    return result


def project_scene(elements: List[Mapping],
                  opts: ViewOptions) -> Tuple[List[Dict], ViewOptions]:
    """
    Replace board and component elements by their visible, depth-sorted faces.

    Faces are sorted far to near, the sort being stable so coplanar faces
    keep input order.
    """
    camera = Camera.from_value(opts.camera)
    faces = []

    thickness = BOARD_THICKNESS
    for elm in elements:
        if elm.get('type') != 'pcb_board':
            continue
        thickness = board_thickness(elm)
        try:
            solid = prism_faces(board_outline(elm), -thickness, 0.0)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping pcb_board: %s", e)
            continue
        faces.extend(face_elements(solid, camera, BOARD_FACE, elm))

    for elm, solid, bottom in component_solids(elements, thickness):
        element_type = UNDERSIDE_FACE if bottom else COMPONENT_FACE
        faces.extend(face_elements(solid, camera, element_type, elm))

    faces.sort(key=lambda face: face['depth'])
    logger.debug("3D view: %d visible faces from camera %s", len(faces), camera)
    opts = replace(opts, labeled_points=tuple(
        project_labeled_points(opts.labeled_points, camera)))
    return faces, opts
