"""
===============================================================================
Bounds, scene tree and serialization - Feature Verification
===============================================================================

Tests:
1. compute_bounds covers rotated rectangles, endpoints and padding
2. Empty input gives the unit box, single points are clamped
3. A collector error skips only that element
4. SceneNode is a strict tree; element() follows the svgwrite keyword style
5. LayerBuckets rejects undeclared layers and keeps insertion order
6. compose() orders style, background, underlays, layers, overlays
7. serialize() produces parseable SVG with the embedded transform
8. screen_to_real() inverts the embedded transform

USAGE
-----
    python -m circuit_svg.developer_tests.test_scene_pipeline

===============================================================================
"""

import sys
import os
import xml.etree.ElementTree as ET

# Ensure the package is importable when running directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from shapely.geometry import Point

from circuit_svg.core.bounds import RealBounds, compute_bounds
from circuit_svg.core.compositor import LayerBuckets, compose
from circuit_svg.core.elements import as_element_list, field_values, partition_elements
from circuit_svg.core.errors import CircuitJsonError
from circuit_svg.core.geometry import rect_geometry
from circuit_svg.core.scene_node import SceneNode, element, group, path_data
from circuit_svg.core.svg_serializer import (TRANSFORM_ATTRIBUTE, read_transform,
                                             screen_to_real, serialize)
from circuit_svg.core.theme import DEFAULT_SCHEMATIC_THEME
from circuit_svg.core.transform import build_viewport_transform

SVG_NS = '{http://www.w3.org/2000/svg}'


def box_collector(elm):
    if elm.get('type') == 'box':
        yield rect_geometry(elm['center'], elm['width'], elm['height'],
                            elm.get('rotation', 0))
    elif elm.get('type') == 'dot':
        yield Point(elm['x'], elm['y'])


# =============================================================================
# Tests
# =============================================================================

def test_bounds_cover_geometry():
    """Test 1: bounds include the full rotated extent plus padding."""
    print("\nTest 1: compute_bounds")
    elements = [{'type': 'box', 'center': {'x': 0, 'y': 0}, 'width': 10, 'height': 10}]
    bounds = compute_bounds(elements, box_collector)
    assert bounds == RealBounds(-5, 5, -5, 5), f"{bounds}"

    rotated = [{'type': 'box', 'center': {'x': 0, 'y': 0}, 'width': 4, 'height': 2,
                'rotation': 90}]
    bounds = compute_bounds(rotated, box_collector)
    assert abs(bounds.max_x - 1) < 1e-9 and abs(bounds.max_y - 2) < 1e-9, f"{bounds}"

    mixed = elements + [{'type': 'dot', 'x': 20, 'y': -8}, {'type': 'unknown'}]
    bounds = compute_bounds(mixed, box_collector, padding=1.0)
    assert bounds == RealBounds(-6, 21, -9, 6), f"{bounds}"
    print(f"  PASS: {bounds.to_dict()}")


def test_empty_and_point_bounds():
    """Test 2: degenerate inputs never produce NaN or zero extents."""
    print("\nTest 2: degenerate bounds")
    assert compute_bounds([], box_collector) == RealBounds(-0.5, 0.5, -0.5, 0.5)
    single = compute_bounds([{'type': 'dot', 'x': 3, 'y': 4}], box_collector)
    assert single == RealBounds(2.5, 3.5, 3.5, 4.5), f"{single}"
    print("  PASS: unit box and clamped point")


def test_collector_errors_skip_element():
    """Test 3: a malformed element is skipped, the others still count."""
    print("\nTest 3: collector errors")
    elements = [{'type': 'dot', 'x': 1, 'y': 1}, {'type': 'box', 'center': None}]
    bounds = compute_bounds(elements, box_collector)
    assert bounds.contains(1, 1)
    assert bounds.width == 1.0
    print("  PASS: malformed box ignored")


def test_element_validation():
    """Test 3b: input shape checks and required field partitioning."""
    print("\nTest 3b: element validation")
    for bad in ('[]', {'type': 'x'}, 42, [1, 2]):
        try:
            as_element_list(bad)
        except CircuitJsonError:
            continue
        assert False, f"Expected CircuitJsonError for {bad!r}"
    assert as_element_list(None) == []

    trace = {'edges': [{'from': {'x': 1}}, {'from': {'x': 2}}]}
    assert field_values(trace, 'edges[].from.x') == [1, 2]

    usable, rejected = partition_elements(
        [{'type': 'dot', 'x': 1, 'y': 2},
         {'type': 'dot', 'x': 'one', 'y': 2},
         {'type': 'dot', 'x': True, 'y': 2},
         {'type': 'dot', 'y': 2},
         {'type': 'other'}],
        {'dot': ('x', 'y')},
    )
    assert [e.get('x') for e in usable] == [1, None]
    assert len(rejected) == 3
    assert all(e.element_type == 'dot' and e.field == 'x' for e in rejected)
    print("  PASS")


def test_scene_node_is_a_tree():
    """Test 4: a node cannot be attached twice."""
    print("\nTest 4: SceneNode")
    child = element('circle', cx=1.5, cy=0, r=2, class_='dot', stroke_width=0.5,
                    fill=None)
    assert child.attributes == {'cx': '1.5', 'cy': '0', 'r': '2',
                                'class': 'dot', 'stroke-width': '0.5'}
    parent = group([child], class_='outer')
    assert child.parent is parent
    try:
        group([child])
    except ValueError:
        pass
    else:
        assert False, "A node with a parent must not be re-attached"
    assert [n.name for n in parent.iter()] == ['g', 'circle']
    assert parent.find_all(class_name='dot') == [child]
    assert path_data([(0, 0), (1, 2)], closed=True) == 'M 0 0 L 1 2 Z'
    print("  PASS")


def test_layer_buckets():
    """Test 5: undeclared layers are programming errors."""
    print("\nTest 5: LayerBuckets")
    buckets = LayerBuckets(('bottom', 'top'))
    first, second = element('a'), element('b')
    buckets.append('top', first)
    buckets.append('top', second)
    assert buckets['top'] == [first, second]
    try:
        buckets.append('middle', element('c'))
    except KeyError:
        pass
    else:
        assert False, "Expected KeyError for an unknown layer"
    try:
        LayerBuckets(('a', 'a'))
    except ValueError:
        pass
    else:
        assert False, "Duplicate layer names must be rejected"
    assert buckets.counts() == {'bottom': 0, 'top': 2}
    print("  PASS")


def _composed():
    transform, _ = build_viewport_transform(RealBounds(-5, 5, -5, 5), 200, 100)
    buckets = LayerBuckets(('under', 'empty', 'over'))
    buckets.append('over', element('circle', class_='top-thing'))
    buckets.append('under', element('rect', class_='bottom-thing'))
    root = compose(buckets, 200, 100, DEFAULT_SCHEMATIC_THEME, transform,
                   underlays=[group(class_='grid')],
                   overlays=[group(class_='labeled-points')])
    return root, transform


def test_compose_order():
    """Test 6: fixed child order of the root node."""
    print("\nTest 6: compose")
    root, transform = _composed()
    assert root.name == 'svg'
    assert root.attributes['width'] == '200' and root.attributes['height'] == '100'
    assert root.attributes[TRANSFORM_ATTRIBUTE] == transform.to_svg()
    assert DEFAULT_SCHEMATIC_THEME.background in root.attributes['style']

    kinds = []
    for child in root.children:
        kinds.append(child.attributes.get('id') or child.attributes.get('class') or child.name)
    assert kinds == ['style', 'boundary', 'grid', 'layer-under', 'layer-over',
                     'labeled-points'], f"{kinds}"
    print(f"  PASS: {kinds}")


def test_serialize_roundtrip():
    """Test 7 + 8: parseable markup, transform readable back."""
    print("\nTest 7: serialize / screen_to_real")
    root, transform = _composed()
    svg = serialize(root)
    doc = ET.fromstring(svg)
    assert doc.tag == SVG_NS + 'svg'
    assert doc.attrib['width'] == '200'
    assert doc.find(SVG_NS + 'style').text.strip().startswith('.boundary')
    assert doc.find(f"{SVG_NS}g[@id='layer-over']/{SVG_NS}circle") is not None

    parsed = read_transform(svg)
    assert abs(parsed.a - transform.a) < 1e-6
    real = screen_to_real(svg, *transform.apply(3, -2))
    assert abs(real['x'] - 3) < 1e-6 and abs(real['y'] + 2) < 1e-6, f"{real}"

    assert serialize(_composed()[0]) == svg, "Output must be deterministic"
    try:
        serialize(SceneNode('g'))
    except ValueError:
        pass
    else:
        assert False, "Only an <svg> root can be serialized"
    print("  PASS")


# =============================================================================

TESTS = [
    ("compute_bounds", test_bounds_cover_geometry),
    ("degenerate bounds", test_empty_and_point_bounds),
    ("collector errors", test_collector_errors_skip_element),
    ("element validation", test_element_validation),
    ("SceneNode", test_scene_node_is_a_tree),
    ("LayerBuckets", test_layer_buckets),
    ("compose", test_compose_order),
    ("serialize / screen_to_real", test_serialize_roundtrip),
]


def main():
    print("=" * 70)
    print("Bounds, scene tree and serialization - Feature Verification")
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
