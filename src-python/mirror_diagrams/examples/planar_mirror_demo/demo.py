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
Planar Mirror Demo - Law of Reflection

Draws a horizontal mirror with two incident rays:
- one hitting the centre, with its normal and the angles of incidence and
  reflection marked
- one hitting the mirror off-centre, found from its direction, with the
  dashed backward extension to the virtual image of the source

Output: planar_mirror_demo.svg next to this script.
"""

import os
import sys

# Add parent directories to path to import mirror_diagrams modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from mirror_diagrams.core.geometry import Point
from mirror_diagrams.core.svg_renderer import SVGRenderer
from mirror_diagrams.mirrors.planar_mirror import PlanarMirror


def main():
    print("Planar Mirror Demo - Law of Reflection")
    print("=" * 60)

    renderer = SVGRenderer(width=800, height=500, viewbox=(-8, -2, 16, 10))
    mirror = PlanarMirror(Point(0, 1), Point(0, 0)).setup_mirror_size(6, normal_length=5)

    # Ray 1: hits the centre
    source = Point(-4, 5)
    at_center = mirror.normal_at_offset(0)
    (mirror.draw_mirror(renderer)
           .draw_normal(renderer, at_center)
           .draw_incident_ray(renderer, source, at_center)
           .draw_reflected_ray_from_point_line(renderer, source, at_center)
           .label_rays(renderer, source, at_center, 'α', "α'")
           .label_mirror(renderer, 'M'))
    print(f"  Ray 1: source {source} -> reflected towards "
          f"{mirror.reflected_point(source, at_center)}")

    # Ray 2: defined by its direction, drawn with its virtual extension
    source2 = Point(2, 6)
    hit = mirror.normal_from_ray(source2, Point(1, -2))
    (mirror.draw_normal(renderer, hit)
           .draw_incident_ray(renderer, source2, hit)
           .draw_reflected_ray_from_point_line(renderer, source2, hit, ray_length=4)
           .draw_image_segment(renderer, source2, hit))
    renderer.draw_point(source2, label='S')
    renderer.draw_point(mirror.image_point(source2), label="S'")
    print(f"  Ray 2: hits the mirror at {hit.p}, image of source at {mirror.image_point(source2)}")

    output = os.path.join(os.path.dirname(__file__), 'planar_mirror_demo.svg')
    renderer.save(output)
    print(f"\nSaved {output}")


if __name__ == "__main__":
    main()
