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
Color themes.

Themes are frozen dataclasses handed to the conversion explicitly, so two
conversions with different themes can run side by side. Each theme renders
the global ``<style>`` block for its view with css().
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class SchematicTheme:
    background: str = 'rgb(245, 241, 237)'
    component_outline: str = 'rgb(132, 0, 0)'
    component_body: str = 'rgb(255, 255, 194)'
    wire: str = 'rgb(0, 150, 0)'
    junction: str = 'rgb(0, 150, 0)'
    pin_number: str = 'rgb(169, 0, 0)'
    reference: str = 'rgb(0, 100, 100)'
    net_name: str = 'rgb(132, 132, 132)'
    label_local: str = 'rgb(15, 15, 15)'
    label_background: str = 'white'
    grid: str = 'rgb(181, 181, 181)'
    grid_label: str = 'rgb(160, 160, 160)'
    debug: str = 'rgb(255, 0, 255)'
    probe: str = 'rgb(0, 0, 200)'
    labeled_point: str = 'rgb(0, 0, 0)'
    font_family: str = 'sans-serif'

    def with_overrides(self, **colors) -> 'SchematicTheme':
        return replace(self, **colors)

    def css(self) -> str:
        # Defaults only; shape builders set inline attributes that win over these
        return f"""
.boundary {{ fill: {self.background}; }}
.schematic-boundary {{ fill: none; stroke: #fff; }}
.component {{ fill: none; stroke: {self.component_outline}; }}
.chip {{ fill: {self.component_body}; stroke: {self.component_outline}; }}
.component-pin {{ fill: none; stroke: {self.component_outline}; }}
.trace:hover {{ filter: invert(1); }}
.trace:hover .trace-crossing-outline {{ opacity: 0; }}
.text {{ font-family: {self.font_family}; fill: {self.wire}; }}
.pin-number {{ fill: {self.pin_number}; }}
.port-label {{ fill: {self.reference}; }}
.component-name {{ fill: {self.reference}; }}
"""


@dataclass(frozen=True)
class PcbTheme:
    background: str = '#000'
    board_outline: str = 'rgba(255, 255, 255, 0.5)'
    copper_top: str = 'rgb(200, 52, 52)'
    copper_bottom: str = 'rgb(77, 127, 196)'
    silkscreen_top: str = '#f2eda1'
    silkscreen_bottom: str = '#5da9e9'
    drill: str = '#FF26E2'
    via: str = 'rgb(236, 236, 236)'
    fabrication: str = 'rgba(255, 255, 255, 0.5)'
    grid: str = 'rgba(255, 255, 255, 0.15)'
    grid_label: str = 'rgba(255, 255, 255, 0.4)'
    labeled_point: str = 'rgb(255, 255, 255)'
    font_family: str = 'Arial, sans-serif'

    def with_overrides(self, **colors) -> 'PcbTheme':
        return replace(self, **colors)

    def copper(self, layer: str) -> str:
        return self.copper_bottom if layer == 'bottom' else self.copper_top

    def silkscreen(self, layer: str) -> str:
        return self.silkscreen_bottom if layer == 'bottom' else self.silkscreen_top

    def css(self) -> str:
        return f"""
.boundary {{ fill: {self.background}; }}
.pcb-board {{ fill: none; stroke: {self.board_outline}; }}
.pcb-trace {{ fill: none; stroke-linecap: round; stroke-linejoin: round; }}
.pcb-pad:hover, .pcb-trace:hover {{ filter: brightness(1.3); }}
.pcb-silkscreen {{ fill: none; }}
.pcb-silkscreen-text {{ font-family: {self.font_family}; }}
.pcb-hole {{ fill: {self.drill}; }}
"""


@dataclass(frozen=True)
class ThreeDTheme:
    background: str = 'rgb(250, 250, 250)'
    board_top: str = 'rgb(0, 110, 50)'
    board_side: str = 'rgb(0, 70, 30)'
    component_top: str = 'rgb(90, 90, 90)'
    component_side: str = 'rgb(50, 50, 50)'
    edge: str = 'rgba(0, 0, 0, 0.4)'
    labeled_point: str = 'rgb(0, 0, 0)'
    font_family: str = 'sans-serif'

    def with_overrides(self, **colors) -> 'ThreeDTheme':
        return replace(self, **colors)

    def css(self) -> str:
        return f"""
.boundary {{ fill: {self.background}; }}
.face {{ stroke: {self.edge}; stroke-width: 0.5; stroke-linejoin: round; }}
.text {{ font-family: {self.font_family}; }}
"""


DEFAULT_SCHEMATIC_THEME = SchematicTheme()
DEFAULT_PCB_THEME = PcbTheme()
DEFAULT_3D_THEME = ThreeDTheme()
