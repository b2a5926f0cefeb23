"""
===============================================================================
Board (PCB) view - Feature Verification
===============================================================================

Tests:
1. Default 800x600 viewport and the board stacking order
2. Bounds: board outline plus the 1 mm margin
3. Trace routes split at vias and width changes
4. SMT pads (rect, circle, bottom layer colors)
5. Plated holes, vias and unplated holes
6. Silkscreen text and paths; outline boards
7. Malformed pads are skipped; layer order ignores input order
8. Themes can be overridden
9. Bounds contain every coordinate-bearing field
10. Wrongly typed fields skip only their element

USAGE
-----
    python -m circuit_svg.developer_tests.test_board_view

===============================================================================
"""

import sys
import os
import xml.etree.ElementTree as ET

# Ensure the package is importable when running directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from circuit_svg import PcbTheme, convert_to_board_svg
from circuit_svg.core.bounds import compute_bounds
from circuit_svg.core.svg_serializer import read_transform
from circuit_svg.core.theme import DEFAULT_PCB_THEME
from circuit_svg.pcb import PCB_LAYER_ORDER, build_board_scene
from circuit_svg.pcb.bounds import collect_pcb_geometry
from circuit_svg.pcb.traces import trace_runs

SVG_NS = '{http://www.w3.org/2000/svg}'


def wire(x, y, layer='top', width=0.2):
    return {'route_type': 'wire', 'x': x, 'y': y, 'layer': layer, 'width': width}


def sample_board():
    return [
        {'type': 'pcb_board', 'pcb_board_id': 'b1', 'center': {'x': 0, 'y': 0},
         'width': 20, 'height': 10},
        {'type': 'pcb_component', 'pcb_component_id': 'pc1', 'center': {'x': -5, 'y': 0},
         'width': 4, 'height': 2, 'rotation': 0, 'layer': 'top'},
        {'type': 'pcb_smtpad', 'pcb_smtpad_id': 'pad1', 'shape': 'rect',
         'x': -6, 'y': 0, 'width': 1, 'height': 0.6, 'layer': 'top'},
        {'type': 'pcb_smtpad', 'pcb_smtpad_id': 'pad2', 'shape': 'circle',
         'x': -4, 'y': 0, 'radius': 0.4, 'layer': 'bottom'},
        {'type': 'pcb_plated_hole', 'pcb_plated_hole_id': 'ph1', 'shape': 'circle',
         'x': 5, 'y': 2, 'outer_diameter': 1.2, 'hole_diameter': 0.6},
        {'type': 'pcb_plated_hole', 'pcb_plated_hole_id': 'ph2', 'shape': 'pill',
         'x': 5, 'y': -2, 'outer_width': 2, 'outer_height': 1,
         'hole_width': 1.2, 'hole_height': 0.6},
        {'type': 'pcb_hole', 'pcb_hole_id': 'h1', 'x': 8, 'y': 3, 'hole_diameter': 1},
        {'type': 'pcb_via', 'pcb_via_id': 'v1', 'x': 0, 'y': 3,
         'outer_diameter': 0.6, 'hole_diameter': 0.3},
        {'type': 'pcb_trace', 'pcb_trace_id': 'tr1', 'route': [
            wire(-6, 0), wire(0, 0),
            {'route_type': 'via', 'x': 0, 'y': 3, 'from_layer': 'top', 'to_layer': 'bottom'},
            wire(0, 3, 'bottom'), wire(5, 3, 'bottom', 0.3),
        ]},
        {'type': 'pcb_silkscreen_text', 'anchor_position': {'x': -5, 'y': 2},
         'text': 'U1', 'layer': 'top', 'font_size': 1},
        {'type': 'pcb_silkscreen_path', 'layer': 'top', 'stroke_width': 0.1,
         'route': [{'x': -7, 'y': -1.5}, {'x': -3, 'y': -1.5}]},
    ]


def layer_ids(svg):
    doc = ET.fromstring(svg)
    return [g.get('id') for g in doc.findall(SVG_NS + 'g') if g.get('id')]


# =============================================================================
# Tests
# =============================================================================

def test_default_viewport_and_layers():
    """Test 1: 800x600 by default, layers in board order."""
    print("\nTest 1: viewport and layers")
    svg = convert_to_board_svg(sample_board())
    doc = ET.fromstring(svg)
    assert doc.get('width') == '800' and doc.get('height') == '600'
    assert DEFAULT_PCB_THEME.background in doc.get('style')
    expected = [f'layer-{name}' for name in PCB_LAYER_ORDER]
    assert layer_ids(svg) == expected, f"{layer_ids(svg)}"
    print(f"  PASS: {expected}")


def test_bounds_fit_board():
    """Test 2: [-11, 11] x [-6, 6] fills the width, centred vertically."""
    print("\nTest 2: bounds")
    transform = read_transform(convert_to_board_svg(sample_board()))
    scale = 800 / 22
    assert abs(transform.a - scale) < 1e-6, f"a={transform.a}"
    x, y = transform.apply(-11, 6)
    assert abs(x) < 1e-6 and abs(y - (600 - 12 * scale) / 2) < 1e-6, f"{(x, y)}"
    print(f"  PASS: scale={transform.a}")


def test_trace_runs():
    """Test 3: vias and width changes split the copper into runs."""
    print("\nTest 3: trace runs")
    route = sample_board()[8]['route']
    runs = trace_runs(route)
    assert [[(p['x'], p['y']) for p in run] for run in runs] == \
        [[(-6, 0), (0, 0)], [(0, 3), (5, 3)]], f"{runs}"

    scene = build_board_scene(sample_board())
    paths = scene.find_all('path', 'pcb-trace')
    assert len(paths) == 2
    assert paths[0].attributes['data-layer'] == 'top'
    assert paths[1].attributes['stroke'] == DEFAULT_PCB_THEME.copper_bottom
    widths = [float(p.attributes['stroke-width']) for p in paths]
    assert abs(widths[1] / widths[0] - 1.5) < 1e-6, f"{widths}"
    print("  PASS")


def test_smt_pads():
    """Test 4: rect pads are polygons, circle pads circles, colored by layer."""
    print("\nTest 4: pads")
    scene = build_board_scene(sample_board())
    transform = read_transform(convert_to_board_svg(sample_board()))
    rect_pad = scene.find_all('polygon', 'pcb-pad')[0]
    assert len(rect_pad.attributes['points'].split()) == 4
    assert rect_pad.attributes['fill'] == DEFAULT_PCB_THEME.copper_top

    circle_pad = scene.find_all('circle', 'pcb-pad')[0]
    assert abs(float(circle_pad.attributes['r']) - 0.4 * transform.a) < 1e-6
    assert circle_pad.attributes['fill'] == DEFAULT_PCB_THEME.copper_bottom
    print("  PASS")


def test_holes_and_vias():
    """Test 5: annulus plus drill for plated holes and vias."""
    print("\nTest 5: holes and vias")
    scene = build_board_scene(sample_board())
    plated = scene.find_all('g', 'pcb-plated-hole')
    assert len(plated) == 2
    assert [n.name for n in plated[0].children] == ['circle', 'circle']
    pill = plated[1].children[0]
    assert pill.name == 'rect' and float(pill.attributes['rx']) > 0

    via = scene.find_all('g', 'pcb-via')[0]
    assert len(via.find_all('circle')) == 2
    assert len(scene.find_all('circle', 'pcb-hole')) == 1

    square = build_board_scene([{'type': 'pcb_hole', 'x': 0, 'y': 0,
                                 'hole_diameter': 1, 'hole_shape': 'square'}])
    assert len(square.find_all('rect', 'pcb-hole')) == 1
    print("  PASS")


def test_silkscreen_and_outline():
    """Test 6: silkscreen text/paths; boards given as an outline polygon."""
    print("\nTest 6: silkscreen and outline boards")
    scene = build_board_scene(sample_board())
    text = scene.find_all('text', 'pcb-silkscreen-text')[0]
    assert text.value == 'U1'
    assert text.attributes['fill'] == DEFAULT_PCB_THEME.silkscreen_top
    assert len(scene.find_all('path', 'pcb-silkscreen')) == 1

    outline_board = [{'type': 'pcb_board', 'outline': [
        {'x': 0, 'y': 0}, {'x': 10, 'y': 0}, {'x': 10, 'y': 5}, {'x': 0, 'y': 8}]}]
    scene = build_board_scene(outline_board)
    board = scene.find_all('path', 'pcb-board')[0]
    assert board.attributes['d'].endswith('Z')
    assert board.attributes['d'].count('L') == 3
    print("  PASS")


def test_malformed_and_order():
    """Test 7: bad pads dropped; layer order stable under reordering."""
    print("\nTest 7: malformed elements and order")
    broken = sample_board() + [
        {'type': 'pcb_smtpad', 'shape': 'rect', 'x': 1, 'y': 1, 'height': 1},
        {'type': 'pcb_via', 'x': 1, 'y': 1},
        {'type': 'pcb_trace', 'route': [{'x': 0}]},
    ]
    assert convert_to_board_svg(broken) == convert_to_board_svg(sample_board())

    reordered = list(reversed(sample_board()))
    assert layer_ids(convert_to_board_svg(reordered)) == \
        layer_ids(convert_to_board_svg(sample_board()))
    print("  PASS")


def test_theme_override():
    """Test 8: a custom theme changes colors, not geometry."""
    print("\nTest 8: theme override")
    theme = PcbTheme().with_overrides(background='#123456', copper_top='#00ff00')
    svg = convert_to_board_svg(sample_board(), {'theme': theme})
    assert 'background-color: #123456' in ET.fromstring(svg).get('style')
    assert '#00ff00' in svg
    assert read_transform(svg) == read_transform(convert_to_board_svg(sample_board()))
    print("  PASS")


def coordinate_fields(elm):
    """Extreme real-world points each board element covers."""
    elm_type = elm.get('type')
    if elm_type == 'pcb_board' and 'outline' in elm:
        return [(p['x'], p['y']) for p in elm['outline']]
    if elm_type in ('pcb_board', 'pcb_component'):
        cx, cy = elm['center']['x'], elm['center']['y']
        hw, hh = elm['width'] / 2, elm['height'] / 2
        return [(cx - hw, cy - hh), (cx + hw, cy + hh)]
    if elm_type == 'pcb_smtpad' and elm.get('shape') == 'circle':
        r = elm['radius']
        return [(elm['x'] - r, elm['y']), (elm['x'] + r, elm['y']),
                (elm['x'], elm['y'] - r), (elm['x'], elm['y'] + r)]
    if elm_type == 'pcb_smtpad':
        hw, hh = elm['width'] / 2, elm['height'] / 2
        return [(elm['x'] - hw, elm['y'] - hh), (elm['x'] + hw, elm['y'] + hh)]
    if elm_type == 'pcb_plated_hole' and elm.get('shape') == 'circle':
        r = elm['outer_diameter'] / 2
        return [(elm['x'] - r, elm['y'] - r), (elm['x'] + r, elm['y'] + r)]
    if elm_type == 'pcb_plated_hole':
        hw, hh = elm['outer_width'] / 2, elm['outer_height'] / 2
        return [(elm['x'] - hw, elm['y'] - hh), (elm['x'] + hw, elm['y'] + hh)]
    if elm_type == 'pcb_hole':
        return [(elm['x'] + elm['hole_diameter'] / 2, elm['y'])]
    if elm_type == 'pcb_via':
        return [(elm['x'] - elm['outer_diameter'] / 2, elm['y'])]
    if elm_type in ('pcb_trace', 'pcb_silkscreen_path'):
        return [(p['x'], p['y']) for p in elm['route']]
    if elm_type == 'pcb_silkscreen_text':
        return [(elm['anchor_position']['x'], elm['anchor_position']['y'])]
    return []


def test_bounds_contain_every_point():
    """Test 9: pads, holes, routes, silkscreen and outlines all lie inside."""
    print("\nTest 9: bounds contain every coordinate")
    outline_board = [
        {'type': 'pcb_board', 'outline': [
            {'x': 0, 'y': 0}, {'x': 30, 'y': 0}, {'x': 30, 'y': 15}, {'x': 0, 'y': 18}]},
        {'type': 'pcb_trace', 'route': [wire(-3, -2), wire(34, 20)]},
    ]
    for elements in (sample_board(), outline_board):
        bounds = compute_bounds(elements, collect_pcb_geometry)
        for elm in elements:
            for x, y in coordinate_fields(elm):
                assert bounds.contains(x, y, tolerance=1e-6), \
                    f"{elm['type']} point {(x, y)} outside {bounds.to_dict()}"
    print("  PASS")


def test_bad_field_types_are_skipped():
    """Test 10: a wrongly typed anchor or rotation drops just that element."""
    print("\nTest 10: wrongly typed fields")
    broken = sample_board() + [
        {'type': 'pcb_silkscreen_text', 'anchor_position': {'x': 0, 'y': 0},
         'text': 'U2', 'layer': 'top', 'anchor_alignment': ['left']},
        {'type': 'pcb_component', 'pcb_component_id': 'pc2', 'center': {'x': 0, 'y': 0},
         'width': 2, 'height': 2, 'rotation': 'abc'},
    ]
    assert convert_to_board_svg(broken) == convert_to_board_svg(sample_board())
    print("  PASS")


# =============================================================================

TESTS = [
    ("viewport and layers", test_default_viewport_and_layers),
    ("bounds", test_bounds_fit_board),
    ("trace runs", test_trace_runs),
    ("pads", test_smt_pads),
    ("holes and vias", test_holes_and_vias),
    ("silkscreen and outline", test_silkscreen_and_outline),
    ("malformed and order", test_malformed_and_order),
    ("theme override", test_theme_override),
    ("bounds contain every coordinate", test_bounds_contain_every_point),
    ("wrongly typed fields", test_bad_field_types_are_skipped),
]


def main():
    print("=" * 70)
    print("Board (PCB) view - Feature Verification")
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
