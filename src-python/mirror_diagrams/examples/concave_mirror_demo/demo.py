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
Concave Mirror Demo - Characteristic Rays

Constructs the real image of a source beyond the centre of curvature using
the parallel, focal and centre rays, then tries a source in each of the
other regions to show the reported result.

Setup:
- Vertex at (-6, 0), optical axis along +x, focal length 3
- Source at (5, 1.5), beyond the centre of curvature at (0, 0)

Output: concave_mirror_demo.svg next to this script.
"""

import logging
import os
import sys

# Add parent directories to path to import mirror_diagrams modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from mirror_diagrams.core.geometry import Point
from mirror_diagrams.core.svg_renderer import SVGRenderer
from mirror_diagrams.mirrors.concave_mirror import ConcaveMirror


def main():
    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')

    print("Concave Mirror Demo - Characteristic Rays")
    print("=" * 60)

    renderer = SVGRenderer(width=900, height=450, viewbox=(-8, -4, 16, 8))
    mirror = (ConcaveMirror(Point(-6, 0), Point(1, 0), 3.0)
              .setup_mirror_size(35)
              .setup_rays_extend(by_parallel=1.4, by_focus=1.6, by_center=1.5))
    mirror.draw_mirror(renderer).draw_optical_axis(renderer).draw_characteristic_points(renderer)

    source = Point(5, 1.5)
    renderer.draw_point(source, label='S')
    result = mirror.draw_image(renderer, source, image_label="S'")
    print(f"  Source {source}: {result.region.value}")
    if result.is_supported:
        print(f"  Image point: {result.image_point}")

    # The other regions are classified but not drawn
    for probe in (mirror.center, Point(-1.5, 0.5), mirror.focus_point, Point(-4.5, 0.3), Point(-7, 1)):
        result = mirror.construct_image(probe)
        print(f"  Source {probe}: {result.region.value} (supported: {result.is_supported})")

    output = os.path.join(os.path.dirname(__file__), 'concave_mirror_demo.svg')
    renderer.save(output)
    print(f"\nSaved {output}")


if __name__ == "__main__":
    main()
