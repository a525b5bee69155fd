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

Mirror Diagrams
===============

Optics figures of planar and concave mirrors, drawn as SVG.

Main modules:
- core: Geometry primitives, affine transforms, SVG renderer
- mirrors: PlanarMirror and ConcaveMirror with their reflection and
  image construction
- examples: Scripts producing example figures

Quick start:
    from mirror_diagrams import SVGRenderer, PlanarMirror, Point

    renderer = SVGRenderer()
    mirror = PlanarMirror(Point(0, 1), Point(0, 0)).setup_mirror_size(4)
    source = Point(-3, 4)
    mirror.draw_mirror(renderer).draw_normal(renderer)
    mirror.draw_incident_ray(renderer, source)
    mirror.draw_reflected_ray_from_position(renderer, source)
    renderer.save('planar.svg')
"""

__version__ = "0.1.0"

from .core.geometry import Point, Line
from .core.svg_renderer import SVGRenderer
from .mirrors import PlanarMirror, ConcaveMirror, PointLine, ImageRegion

__all__ = [
    'Point',
    'Line',
    'SVGRenderer',
    'PlanarMirror',
    'ConcaveMirror',
    'PointLine',
    'ImageRegion',
    '__version__',
]
