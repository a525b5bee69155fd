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

import logging
import math
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from ..core.constants import DEFAULT_ANGLE_ARC_RADIUS, DEFAULT_MIRROR_THICKNESS
from ..core.geometry import geometry, Point, Line
from ..core.transform import AffineTransform
from .point_line import PointLine, MirrorNotConfiguredError

if TYPE_CHECKING:
    from ..core.svg_renderer import SVGRenderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanarMirrorSize:
    """
    Drawn extent of a planar mirror.

    Attributes:
        left_width: Length drawn from the centre against the surface direction
        right_width: Length drawn from the centre along the surface direction
        normal_length: Length of drawn normals
        thickness: Depth of the filled backing behind the reflective face
    """
    left_width: float
    right_width: float
    normal_length: float
    thickness: float


class PlanarMirror:
    """
    Flat mirror, modelled as an infinite reflecting line through `center`
    and drawn as a finite segment.

    The normal points out of the reflective face. The surface line runs
    through the centre along the normal rotated by -90 degrees, so a mirror
    with normal (0, 1) has surface direction (1, 0); positive incident
    positions lie along that direction.

    Attributes:
        normal_direction (Point): Unit normal vector
        center (Point): Point on the mirror
        normal_line (Line): Line through the centre along the normal
        surface_line (Line): Line through the centre along the mirror surface
        center_point_line (PointLine): (center, normal_line)
        size (PlanarMirrorSize or None): Drawn extent, set by setup_mirror_size
    """

    def __init__(self, normal_direction: Point, center: Point):
        """
        Args:
            normal_direction: Normal vector of the reflective face (need not be normalized)
            center: Point on the mirror

        Raises:
            ValueError: If normal_direction has zero length
        """
        self.normal_direction = geometry.normalize_vec(normal_direction)
        self.center = center
        self.surface_direction = geometry.rotate_vec(self.normal_direction, -math.pi / 2)
        self.normal_line = geometry.line_through(center, self.normal_direction)
        self.surface_line = geometry.line_through(center, self.surface_direction)
        self.center_point_line = PointLine(center, self.normal_line)
        self._surface_reflection = AffineTransform.reflection(self.surface_line)
        self.size: Optional[PlanarMirrorSize] = None

    def __repr__(self) -> str:
        return f"PlanarMirror(normal_direction={self.normal_direction}, center={self.center})"

    # =========================================================================
    # Reflection geometry
    # =========================================================================

    def normal_at_offset(self, incident_position: float) -> PointLine:
        """
        The point at a signed distance from the centre along the surface line,
        with the normal line through it.

        Args:
            incident_position: Signed distance from the centre

        Returns:
            PointLine; for 0 the precomputed center_point_line itself
        """
        if incident_position == 0:
            return self.center_point_line
        p = geometry.point_at(self.surface_line, incident_position)
        return PointLine(p, geometry.perpendicular_line_through_point(self.surface_line, p))

    def normal_from_ray(self, source: Point, direction: Point) -> PointLine:
        """
        Where the line source + t * direction meets the mirror, with the
        normal line there.

        Args:
            source: A point on the incident ray
            direction: Direction of the incident ray

        Returns:
            PointLine at the incidence point

        Raises:
            ParallelLinesError: If the ray is parallel to the mirror surface
        """
        incident_line = geometry.line_through(source, direction)
        p = geometry.lines_intersection(incident_line, self.surface_line)
        return PointLine(p, geometry.perpendicular_line_through_point(self.surface_line, p))

    def reflected_point(self, source: Point, point_line: PointLine) -> Point:
        """
        Reflect `source` across the normal line of `point_line`.

        The result lies on the reflected ray leaving point_line.p, at the
        same distance from it as the source.
        """
        return AffineTransform.reflection(point_line.l).apply(source)

    def reflected_point_at_offset(self, source: Point, incident_position: float) -> Point:
        """reflected_point for the normal at `incident_position`."""
        return self.reflected_point(source, self.normal_at_offset(incident_position))

    def image_point(self, source: Point) -> Point:
        """
        Mirror image of `source` across the mirror surface.

        Unlike reflected_point this does not depend on any particular ray.
        """
        return self._surface_reflection.apply(source)

    # =========================================================================
    # Configuration
    # =========================================================================

    def setup_mirror_size(self, left_width: float, right_width: Optional[float] = None,
                          normal_length: Optional[float] = None,
                          thickness: float = DEFAULT_MIRROR_THICKNESS) -> 'PlanarMirror':
        """
        Configure the drawn extent of the mirror. May be called again to
        replace the previous values.

        Args:
            left_width: Extent against the surface direction
            right_width: Extent along the surface direction (default left_width)
            normal_length: Length of drawn normals (default left_width)
            thickness: Depth of the backing

        Returns:
            self
        """
        if right_width is None:
            right_width = left_width
        if normal_length is None:
            normal_length = left_width
        self.size = PlanarMirrorSize(left_width, right_width, normal_length, thickness)
        return self

    def _require_size(self) -> PlanarMirrorSize:
        if self.size is None:
            raise MirrorNotConfiguredError(
                "PlanarMirror.setup_mirror_size() must be called before drawing the mirror"
            )
        return self.size

    @property
    def left_end(self) -> Point:
        return geometry.point_at(self.surface_line, -self._require_size().left_width)

    @property
    def right_end(self) -> Point:
        return geometry.point_at(self.surface_line, self._require_size().right_width)

    # =========================================================================
    # Drawing
    # =========================================================================

    def draw_mirror(self, renderer: 'SVGRenderer') -> 'PlanarMirror':
        """
        Draw the reflective face and the filled backing behind it.
        """
        size = self._require_size()
        left, right = self.left_end, self.right_end
        back = geometry.translate(Point(0, 0), self.normal_direction, -size.thickness)
        renderer.draw_polygon([
            left,
            right,
            geometry.translate(right, back),
            geometry.translate(left, back),
        ], label='mirror backing')
        renderer.draw_line_segment(left, right, kind='mirror', label='mirror')
        return self

    def draw_normal(self, renderer: 'SVGRenderer',
                    point_line: Optional[PointLine] = None) -> 'PlanarMirror':
        """
        Draw the normal at `point_line` (the centre if None) as a dashed segment.
        """
        size = self._require_size()
        if point_line is None:
            point_line = self.center_point_line
        end = geometry.translate(point_line.p, self.normal_direction, size.normal_length)
        renderer.draw_line_segment(point_line.p, end, kind='normal', dashed=True, label='normal')
        return self

    def draw_normal_at_offset(self, renderer: 'SVGRenderer',
                              incident_position: float) -> 'PlanarMirror':
        return self.draw_normal(renderer, self.normal_at_offset(incident_position))

    def draw_incident_ray(self, renderer: 'SVGRenderer', source: Point,
                          point_line: Optional[PointLine] = None) -> 'PlanarMirror':
        """
        Draw the incident ray from `source` to the incidence point.
        """
        if point_line is None:
            point_line = self.center_point_line
        renderer.draw_ray(source, point_line.p, kind='ray', label='incident ray')
        return self

    def draw_reflected_ray_from_point_line(self, renderer: 'SVGRenderer', source: Point,
                                           point_line: PointLine,
                                           ray_length: Optional[float] = None) -> 'PlanarMirror':
        """
        Draw the reflected ray leaving point_line.p.

        Args:
            renderer: Target renderer
            source: Origin of the incident ray
            point_line: Incidence point and normal line
            ray_length: Length of the drawn ray. If None the ray ends at
                reflected_point(source, point_line), i.e. it is as long as
                the incident ray.
        """
        end = self.reflected_point(source, point_line)
        if ray_length is not None:
            end = geometry.point_at(geometry.line(point_line.p, end), ray_length)
        renderer.draw_ray(point_line.p, end, kind='ray', label='reflected ray')
        return self

    def draw_reflected_ray_from_position(self, renderer: 'SVGRenderer', source: Point,
                                         incident_position: float = 0.0,
                                         ray_length: Optional[float] = None) -> 'PlanarMirror':
        return self.draw_reflected_ray_from_point_line(
            renderer, source, self.normal_at_offset(incident_position), ray_length
        )

    def draw_image_segment(self, renderer: 'SVGRenderer', source: Point,
                           point_line: Optional[PointLine] = None) -> 'PlanarMirror':
        """
        Draw the backward extension of the reflected ray, from the incidence
        point to the image of `source` behind the mirror, as a dashed line.
        """
        if point_line is None:
            point_line = self.center_point_line
        renderer.draw_ray(point_line.p, self.image_point(source), kind='virtual_ray',
                          show_arrow=False, dashed=True, label='virtual ray')
        return self

    def label_mirror(self, renderer: 'SVGRenderer', text: str,
                     align: str = 'start') -> 'PlanarMirror':
        """
        Put `text` just beyond the right end of the mirror.
        """
        self._require_size()
        gap = renderer.theme['label']['font_size'] * 0.5
        position = geometry.translate(self.right_end, self.surface_direction, gap)
        renderer.draw_label(position, text, align=align)
        return self

    def label_rays(self, renderer: 'SVGRenderer', source: Point, point_line: PointLine,
                   incident: str, reflected: Optional[str] = None,
                   radius: float = DEFAULT_ANGLE_ARC_RADIUS) -> 'PlanarMirror':
        """
        Mark the angles of incidence and reflection between the normal and
        the two rays at point_line.p.

        Args:
            renderer: Target renderer
            source: Origin of the incident ray
            point_line: Incidence point and normal line
            incident: Label of the angle of incidence
            reflected: Label of the angle of reflection (default: `incident`)
            radius: Radius of the angle arcs
        """
        if reflected is None:
            reflected = incident
        p = point_line.p
        normal = geometry.direction(point_line.l)
        # Orient the normal towards the side the light comes from
        to_source = geometry.vector(p, source)
        if geometry.dot(normal, to_source) < 0:
            normal = Point(-normal.x, -normal.y)
        to_reflected = geometry.vector(p, self.reflected_point(source, point_line))

        renderer.draw_angle_arc(p, to_source, normal, radius, arrow_start=False,
                                arrow_end=True, label=incident)
        renderer.draw_angle_arc(p, normal, to_reflected, radius, arrow_start=False,
                                arrow_end=True, label=reflected)
        logger.debug("Labelled rays at %s: incident %r, reflected %r", p, incident, reflected)
        return self
