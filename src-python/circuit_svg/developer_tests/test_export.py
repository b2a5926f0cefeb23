"""
===============================================================================
Export helpers - Feature Verification
===============================================================================

Tests:
1. load_circuit_json reads a list and rejects anything else
2. save_render writes numbered SVG files and a JSON-serializable descriptor
3. PNG output is optional (png_path is None without cairosvg)
4. setup_logging attaches handlers without duplicating them

USAGE
-----
    python -m circuit_svg.developer_tests.test_export

===============================================================================
"""

import sys
import os
import json
import logging
import tempfile
from pathlib import Path

# Ensure the package is importable when running directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from circuit_svg import CircuitJsonError, convert_to_schematic_svg
from circuit_svg.export import load_circuit_json, save_render, save_svg
from circuit_svg.logging_config import setup_logging

CIRCUIT = [
    {'type': 'schematic_text', 'text': 'hi', 'position': {'x': 0, 'y': 0}},
]


# =============================================================================
# Tests
# =============================================================================

def test_load_circuit_json():
    """Test 1: JSON lists load; objects are rejected."""
    print("\nTest 1: load_circuit_json")
    with tempfile.TemporaryDirectory(prefix='test_export_') as tmpdir:
        good = Path(tmpdir) / 'circuit.json'
        good.write_text(json.dumps(CIRCUIT), encoding='utf-8')
        assert load_circuit_json(good) == CIRCUIT

        bad = Path(tmpdir) / 'object.json'
        bad.write_text(json.dumps({'type': 'schematic_text'}), encoding='utf-8')
        try:
            load_circuit_json(bad)
        except CircuitJsonError:
            pass
        else:
            assert False, "Expected CircuitJsonError for a JSON object"
    print("  PASS")


def test_save_render():
    """Test 2: numbered files and descriptor keys."""
    print("\nTest 2: save_render")
    svg = convert_to_schematic_svg(CIRCUIT, {'width': 300, 'height': 200})
    with tempfile.TemporaryDirectory(prefix='test_export_') as tmpdir:
        render_dir = Path(tmpdir) / 'renders'
        r1 = save_render(svg, render_dir, 'schematic', 300, 200, 'first')
        r2 = save_render(svg, render_dir, 'schematic', 300, 200, 'second',
                         metadata={'elements': len(CIRCUIT)})
        assert r1['svg_path'].endswith('schematic_001.svg'), r1['svg_path']
        assert r2['svg_path'].endswith('schematic_002.svg'), r2['svg_path']
        assert Path(r1['svg_path']).read_text(encoding='utf-8') == svg
        assert set(r1) == {'svg_path', 'png_path', 'png_available', 'width',
                           'height', 'description', 'metadata'}
        assert r2['metadata'] == {'elements': 1}
        assert json.dumps(r2)

        other = save_render(svg, render_dir, 'board', 300, 200)
        assert other['svg_path'].endswith('board_001.svg')

        direct = save_svg(svg, Path(tmpdir) / 'nested' / 'out.svg')
        assert direct.exists()
    print("  PASS")


def test_png_optional():
    """Test 3: png_path follows png_available."""
    print("\nTest 3: PNG fallback")
    svg = convert_to_schematic_svg(CIRCUIT, {'width': 300, 'height': 200})
    with tempfile.TemporaryDirectory(prefix='test_export_') as tmpdir:
        result = save_render(svg, tmpdir, 'png', 300, 200)
        if result['png_available']:
            assert Path(result['png_path']).exists()
        else:
            assert result['png_path'] is None
    print(f"  PASS: png_available={result['png_available']}")


def test_setup_logging():
    """Test 4: repeated setup keeps a single console handler."""
    print("\nTest 4: setup_logging")
    logger = logging.getLogger('circuit_svg')
    saved_handlers, saved_level = list(logger.handlers), logger.level
    try:
        setup_logging(logging.DEBUG)
        setup_logging(logging.WARNING)
        streams = [h for h in logger.handlers if type(h) is logging.StreamHandler]
        assert len(streams) == 1, f"{logger.handlers}"
        assert logger.level == logging.WARNING
    finally:
        logger.handlers = saved_handlers
        logger.setLevel(saved_level)
    print("  PASS")


# =============================================================================

TESTS = [
    ("load_circuit_json", test_load_circuit_json),
    ("save_render", test_save_render),
    ("PNG fallback", test_png_optional),
    ("setup_logging", test_setup_logging),
]


def main():
    print("=" * 70)
    print("Export helpers - Feature Verification")
    print("=" * 70)

    results = []
    for name, test in TESTS:
        try:
            test()
            results.append((name, True))
        except AssertionError as e:
            print(f"  FAIL: {e}")
            results.append((name, False))

    print("\n" + "=" * 70)
    passed = sum(1 for _, ok in results if ok)
    print(f"Results: {passed}/{len(results)} tests passed")
    for name, ok in results:
        print(f"  [{'PASS' if ok else 'FAIL'}] {name}")
    print("=" * 70)
    if passed != len(results):
        sys.exit(1)


if __name__ == '__main__':
    main()
