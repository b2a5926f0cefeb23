import sys
import os
import logging

# Add parent directories to path to import circuit_svg
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from circuit_svg import (convert_to_3d_svg, convert_to_board_svg,
                         convert_to_schematic_svg)
from circuit_svg.export import save_render
from circuit_svg.logging_config import setup_logging


def divider_circuit():
    """A two-resistor voltage divider: schematic, board and one 3D body."""
    elements = [
        {'type': 'source_component', 'source_component_id': 'sc_r1', 'name': 'R1'},
        {'type': 'source_component', 'source_component_id': 'sc_r2', 'name': 'R2'},
    ]
    for index, (name, y) in enumerate((('r1', 1.5), ('r2', -1.5))):
        elements.append({
            'type': 'schematic_component', 'schematic_component_id': f'sch_{name}',
            'source_component_id': f'sc_{name}', 'center': {'x': 0, 'y': y},
            'size': {'width': 0.4, 'height': 1.0}, 'rotation': 0,
        })
        for pin, dy in ((1, 0.8), (2, -0.8)):
            elements.append({
                'type': 'schematic_port', 'schematic_port_id': f'{name}_p{pin}',
                'schematic_component_id': f'sch_{name}',
                'center': {'x': 0, 'y': y + dy}, 'pin_number': pin,
            })
        elements.append({
            'type': 'pcb_component', 'pcb_component_id': f'pcb_{name}',
            'center': {'x': -2 + 4 * index, 'y': 0}, 'width': 3, 'height': 1.2,
            'layer': 'top',
        })
        for pad, dx in ((1, -1), (2, 1)):
            elements.append({
                'type': 'pcb_smtpad', 'pcb_smtpad_id': f'{name}_pad{pad}',
                'shape': 'rect', 'x': -2 + 4 * index + dx, 'y': 0,
                'width': 0.8, 'height': 1.0, 'layer': 'top',
            })

    elements += [
        {'type': 'schematic_trace', 'schematic_trace_id': 'mid',
         'edges': [{'from': {'x': 0, 'y': 0.7}, 'to': {'x': 0, 'y': -0.7}},
                   {'from': {'x': 0, 'y': 0}, 'to': {'x': 1.5, 'y': 0}}],
         'junctions': [{'x': 0, 'y': 0}]},
        {'type': 'schematic_net_label', 'source_net_id': 'VOUT', 'text': 'VOUT',
         'anchor_position': {'x': 1.5, 'y': 0}, 'anchor_side': 'left'},
        {'type': 'schematic_net_label', 'source_net_id': 'VIN', 'text': 'VIN',
         'anchor_position': {'x': 0, 'y': 2.3}, 'anchor_side': 'bottom'},
        {'type': 'schematic_net_label', 'source_net_id': 'GND', 'text': 'GND',
         'anchor_position': {'x': 0, 'y': -2.3}, 'anchor_side': 'top'},
        {'type': 'schematic_voltage_probe', 'position': {'x': 0, 'y': 0}, 'voltage': 2.5},
        {'type': 'pcb_board', 'center': {'x': 0, 'y': 0}, 'width': 10, 'height': 5},
        {'type': 'pcb_trace', 'route': [
            {'route_type': 'wire', 'x': -1, 'y': 0, 'width': 0.3, 'layer': 'top'},
            {'route_type': 'wire', 'x': 1, 'y': 0, 'width': 0.3, 'layer': 'top'}]},
        {'type': 'pcb_silkscreen_text', 'text': 'DIVIDER', 'layer': 'top',
         'anchor_position': {'x': 0, 'y': 1.8}, 'font_size': 0.6},
        {'type': 'cad_component', 'cad_component_id': 'cad_r1',
         'pcb_component_id': 'pcb_r1', 'position': {'x': -2, 'y': 0, 'z': 0.3},
         'size': {'x': 2.2, 'y': 1.0, 'z': 0.6}},
    ]
    return elements


def divider_demo():
    """Render the divider in every view and save the files under ./output."""
    setup_logging(logging.INFO)
    output_dir = os.path.join(os.path.dirname(__file__), 'output')
    elements = divider_circuit()

    renders = [
        ('schematic', convert_to_schematic_svg(elements, {'grid': True}), 1200, 600),
        ('board', convert_to_board_svg(elements), 800, 600),
        ('board_3d', convert_to_3d_svg(elements, {'camera': 'isometric'}), 800, 600),
    ]
    for prefix, svg, width, height in renders:
        result = save_render(svg, output_dir, prefix, width, height,
                             description=f'Voltage divider, {prefix} view')
        print(f"{prefix:10s} -> {result['svg_path']}")


if __name__ == '__main__':
    divider_demo()
