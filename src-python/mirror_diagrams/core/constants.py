"""
Copyright 2026 mirror-diagrams authors and contributors

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
Constants used throughout the mirror diagrams.

Numeric tolerances and default drawing parameters live here so that the
geometry module, the renderer and the mirror objects can share them without
circular imports. All lengths are in drawing units (the units of the
renderer's viewbox).
"""

# Below this squared length a direction vector is considered degenerate
MIN_VECTOR_LENGTH_SQUARED = 1e-18

# Determinant threshold for line-line intersection
PARALLEL_THRESHOLD = 1e-12

# Tolerance for the region boundaries of the concave mirror (local units,
# i.e. fractions of the radius of curvature)
REGION_TOLERANCE = 1e-9

# Default canvas (pixels) and viewbox (drawing units, Y-up)
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
DEFAULT_VIEWBOX = (-10.0, -7.5, 20.0, 15.0)

# Mirror body
DEFAULT_MIRROR_THICKNESS = 0.2
DEFAULT_ARC_SEGMENTS = 48

# How far reflected rays of the concave mirror run past the image point,
# as a multiple of the entry-point -> image-point distance
DEFAULT_BY_PARALLEL = 1.5
DEFAULT_BY_FOCUS = 1.8
DEFAULT_BY_CENTER = 1.6

# Position of the arrow head along a ray (fraction of its length)
RAY_ARROW_POSITION = 0.6

# Radius of the angle arcs drawn by PlanarMirror.label_rays
DEFAULT_ANGLE_ARC_RADIUS = 0.8

# Style dicts. SVGRenderer merges per-key overrides on top of these.
DEFAULT_THEME = {
    'ray': {'color': 'rgb(200, 0, 0)', 'width': 0.04, 'arrow_size': 0.3},
    'virtual_ray': {'color': 'rgb(200, 0, 0)', 'width': 0.03, 'dash': '0.15, 0.1'},
    'normal': {'color': 'black', 'width': 0.025, 'dash': '0.2, 0.1'},
    'optical_axis': {'color': 'gray', 'width': 0.025, 'dash': '0.5, 0.12, 0.12, 0.12'},
    'mirror': {'color': 'black', 'width': 0.06},
    'mirror_fill': {'color': 'rgb(168, 168, 168)', 'opacity': 1.0},
    'angle_arc': {'color': 'black', 'width': 0.02, 'arrow_size': 0.15},
    'label': {'color': 'black', 'font_size': 0.45, 'font_family': 'serif'},
    'point': {'color': 'black', 'radius': 0.07},
}
