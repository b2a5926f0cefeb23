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

from typing import Optional


class CircuitJsonError(ValueError):
    """Raised when the element collection as a whole cannot be converted."""


class MalformedElementError(ValueError):
    """
    A recognised element is missing a required field or carries a
    non-numeric coordinate.

    Conversions never let this escape: the element is logged and skipped.

    Attributes:
        element_type (str): The element's ``type`` discriminant
        field (str or None): Dotted path of the offending field
    """

    def __init__(self, element_type: str, field: Optional[str], message: str):
        super().__init__(message)
        self.element_type = element_type
        self.field = field
