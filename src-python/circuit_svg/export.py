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
Reading circuit JSON from disk and writing rendered documents.

Conversion itself never touches the filesystem; these helpers are for
scripts and notebooks.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .core.errors import CircuitJsonError

logger = logging.getLogger(__name__)


def load_circuit_json(path) -> List[Mapping]:
    """
    Load a circuit element list from a JSON file.

    Raises:
        CircuitJsonError: If the file does not hold a JSON list.
    """
    with open(path, encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise CircuitJsonError(f"{path}: expected a JSON list of elements, "
                               f"got {type(data).__name__}")
    logger.debug("Loaded %d elements from %s", len(data), path)
    return data


def save_svg(svg_string: str, path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(svg_string, encoding='utf-8')
    return path


def _svg_to_png(svg_string: str, png_path: str, width: int, height: int) -> bool:
    """
    Convert an SVG string to PNG using cairosvg (optional dependency).

    Returns:
        True if conversion succeeded, False if cairosvg is not installed
        or its cairo library cannot be loaded.
    """
    try:
        import cairosvg
        cairosvg.svg2png(
            bytestring=svg_string.encode('utf-8'),
            write_to=png_path,
            output_width=width,
            output_height=height,
        )
        return True
    except (ImportError, OSError) as e:
        logger.info("PNG export unavailable: %s", e)
        return False


def save_render(
    svg_string: str,
    render_dir,
    prefix: str,
    width: int,
    height: int,
    description: str = '',
    metadata: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Save an SVG document (and a PNG when possible) and describe the result.

    Files are named ``{prefix}_{n:03d}.svg`` / ``.png``, ``n`` being one more
    than the number of ``{prefix}_*.svg`` files already in ``render_dir``.

    Args:
        svg_string: Output of one of the convert functions
        render_dir: Directory to write into (created if missing)
        prefix: Filename prefix, e.g. 'schematic'
        width, height: PNG size in pixels
        description: Free text stored in the descriptor
        metadata: Extra JSON-serializable details stored in the descriptor

    Returns:
        JSON-serializable descriptor with file paths and metadata.
    """
    render_path = Path(render_dir)
    render_path.mkdir(parents=True, exist_ok=True)

    index = len(list(render_path.glob(f'{prefix}_*.svg'))) + 1
    base_name = f'{prefix}_{index:03d}'
    svg_path = save_svg(svg_string, render_path / f'{base_name}.svg')
    png_path = render_path / f'{base_name}.png'
    png_ok = _svg_to_png(svg_string, str(png_path), width, height)

    return {
        'svg_path': str(svg_path),
        'png_path': str(png_path) if png_ok else None,
        'png_available': png_ok,
        'width': width,
        'height': height,
        'description': description,
        'metadata': metadata,
    }
