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
Input checks for circuit element collections.

Each view declares, per element type, the dotted field paths that must hold
finite numbers (``'center.x'``, ``'edges[].from.x'``). Elements of a
recognised type that fail are logged and dropped before bounds and dispatch,
the same way for every variant. Unknown types pass through untouched; the
dispatcher ignores them.
"""

import logging
import math
from collections.abc import Iterable as IterableABC
from typing import Any, Callable, Dict, Iterable, List, Mapping, Sequence, Tuple, Union

from .errors import CircuitJsonError, MalformedElementError

logger = logging.getLogger(__name__)

# A type maps to its field paths, or to a callable choosing them per element
RequiredFields = Mapping[str, Union[Sequence[str], Callable[[Mapping], Sequence[str]]]]


def as_element_list(elements) -> List[Mapping]:
    """
    Check the collection's overall shape and return it as a list.

    ``None`` is treated as an empty collection.

    Raises:
        CircuitJsonError: If ``elements`` is not an iterable of mappings.
    """
    if elements is None:
        return []
    if isinstance(elements, (str, bytes, Mapping)) or not isinstance(elements, IterableABC):
        raise CircuitJsonError(
            f"Expected a sequence of circuit elements, got {type(elements).__name__}"
        )
    result = list(elements)
    for index, elm in enumerate(result):
        if not isinstance(elm, Mapping):
            raise CircuitJsonError(
                f"Element {index} is a {type(elm).__name__}, expected a mapping"
            )
    return result


def _is_number(value: Any) -> bool:
    return (isinstance(value, (int, float)) and not isinstance(value, bool)
            and math.isfinite(value))


def field_values(element: Mapping, path: str) -> List[Any]:
    """
    Resolve a dotted path; ``name[]`` fans out over a list.

    Raises:
        KeyError: If a segment is missing.
        TypeError: If a segment is not a mapping/list where one is needed.
    """
    values = [element]
    for segment in path.split('.'):
        fan_out = segment.endswith('[]')
        key = segment[:-2] if fan_out else segment
        next_values = []
        for value in values:
            if not isinstance(value, Mapping):
                raise TypeError(f"'{key}' is looked up on a {type(value).__name__}")
            item = value[key]
            if fan_out:
                if isinstance(item, (str, bytes, Mapping)) or not isinstance(item, IterableABC):
                    raise TypeError(f"'{key}' must be a list")
                next_values.extend(item)
            else:
                next_values.append(item)
        values = next_values
    return values


def validate_element(element: Mapping, required: Sequence[str]) -> None:
    """
    Raises:
        MalformedElementError: If any required path is missing or not a
            finite number.
    """
    element_type = element.get('type')
    for path in required:
        try:
            values = field_values(element, path)
        except (KeyError, TypeError) as e:
            raise MalformedElementError(
                element_type, path, f"{element_type}: missing or invalid '{path}' ({e})"
            ) from None
        for value in values:
            if not _is_number(value):
                raise MalformedElementError(
                    element_type, path,
                    f"{element_type}: '{path}' must be a finite number, got {value!r}"
                )


def partition_elements(elements: Iterable[Mapping],
                       required_fields: RequiredFields
                       ) -> Tuple[List[Mapping], List[MalformedElementError]]:
    """
    Split elements into usable ones and the errors of those dropped.

    Returns:
        tuple: (usable elements in input order, list of MalformedElementError)
    """
    usable = []
    rejected = []
    for element in elements:
        required = required_fields.get(element.get('type'))
        if callable(required):
            required = required(element)
        if required:
            try:
                validate_element(element, required)
            except MalformedElementError as e:
                logger.warning("Skipping malformed element: %s", e)
                rejected.append(e)
                continue
        usable.append(element)
    return usable, rejected


def index_by_id(elements: Iterable[Mapping], element_type: str,
                id_field: str) -> Dict[Any, Mapping]:
    """Map ``element[id_field]`` -> element for one type (first one wins)."""
    index = {}
    for element in elements:
        if element.get('type') == element_type and id_field in element:
            index.setdefault(element[id_field], element)
    return index
