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
Constants used throughout the circuit-to-SVG conversion.

Kept in one module so the bounds, transform and shape modules can share them
without importing each other.
"""

# Smallest real-world extent (in circuit units) allowed on either axis.
# Empty, single-point and collinear inputs are clamped to this.
MIN_EXTENT = 1.0

# Tolerance used when comparing transformed points and detecting collinearity
EPSILON = 1e-9

# Default viewports (pixels)
SCHEMATIC_DEFAULT_WIDTH = 1200
SCHEMATIC_DEFAULT_HEIGHT = 600
PCB_DEFAULT_WIDTH = 800
PCB_DEFAULT_HEIGHT = 600

# Real-world padding added around the computed bounds
SCHEMATIC_BOUNDS_PADDING = 0.5
PCB_BOUNDS_PADDING = 1.0

# Extents contributed to the bounds by small schematic features
SCHEMATIC_PORT_SIZE = 0.2
SCHEMATIC_POINT_SIZE = 0.1
SCHEMATIC_NET_LABEL_HEIGHT = 0.25
SCHEMATIC_FONT_SIZE = 0.18
SCHEMATIC_CHAR_WIDTH = 0.6  # as a fraction of the font size

SCHEMATIC_PORT_MARKER_RADIUS = 0.04
SCHEMATIC_JUNCTION_RADIUS = 0.05
SCHEMATIC_STROKE_WIDTH = 0.02

# Closest the grid overlay draws its lines and cell labels (pixels); finer
# cell sizes are coarsened to a whole multiple of the requested one
GRID_MIN_LINE_SPACING = 4.0
GRID_MIN_LABEL_SPACING = 40.0

# PCB defaults (millimetres)
PCB_DEFAULT_TRACE_WIDTH = 0.15
PCB_SILKSCREEN_FONT_SIZE = 1.0
PCB_SILKSCREEN_STROKE_WIDTH = 0.1

# 3D view defaults (millimetres)
BOARD_THICKNESS = 1.6
DEFAULT_COMPONENT_HEIGHT = 1.0
