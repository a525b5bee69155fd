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
from typing import List, Optional, TYPE_CHECKING

from ..core.constants import (
    DEFAULT_ARC_SEGMENTS,
    DEFAULT_BY_CENTER,
    DEFAULT_BY_FOCUS,
    DEFAULT_BY_PARALLEL,
    DEFAULT_MIRROR_THICKNESS,
)
from ..core.geometry import geometry, Point, Line, GeometryError, NoIntersectionError
from ..core.transform import CoordinateSystem
from .image_construction import (
    LOCAL_FOCUS_X,
    LOCAL_VERTEX_X,
    UNSUPPORTED_MESSAGES,
    UNSUPPORTED_RESULTS,
    DegenerateGeometry,
    ImageConstruction,
    ImageRegion,
    RealImageInside,
    SourceBehindMirror,
    classify_local_x,
)
from .point_line import PointLine, MirrorNotConfiguredError

if TYPE_CHECKING:
    from ..core.svg_renderer import SVGRenderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConcaveMirrorSize:
    """
    Drawn extent of a concave mirror.

    Attributes:
        up_angle: Arc extent on the +y side of the axis, in degrees seen from
            the centre of curvature
        down_angle: Arc extent on the -y side of the axis, in degrees
        thickness: Depth of the filled backing behind the reflective surface
        axis_length: Length of the drawn optical axis, starting at the vertex
    """
    up_angle: float
    down_angle: float
    thickness: float
    axis_length: float


class ConcaveMirror:
    """
    Spherical concave mirror in the paraxial approximation.

    Geometry is described by the vertex, the optical axis (pointing from the
    mirror surface outward, into the space in front of the mirror) and the
    focal length. The radius of curvature is twice the focal length.

    All image construction happens in a local coordinate system `intern_cs`
    with its origin at the centre of curvature, its x axis pointing towards
    the vertex and one unit equal to the radius. In it the mirror is the unit
    circle, the vertex is (1, 0), the focus (0.5, 0) and the centre (0, 0),
    whatever the position and orientation of the mirror in the drawing.

    Attributes:
        mirror_vertex (Point): Point of the mirror surface on the optical axis
        optical_axis (Point): Unit vector of the optical axis
        focus (float): Focal length
        radius (float): Radius of curvature (2 * focus)
        center (Point): Centre of curvature
        focus_point (Point): Focal point
        intern_cs (CoordinateSystem): Local coordinate system
        size (ConcaveMirrorSize or None): Drawn extent, set by setup_mirror_size
        arc (list of Point): Sampled reflective surface, set by setup_mirror_size
        axis_line (Line or None): Drawn optical axis, set by setup_mirror_size
        by_parallel, by_focus, by_center (float): Extension factors of the
            reflected characteristic rays
    """

    # Local positions, fixed by the normalization of intern_cs
    local_center = Point(0.0, 0.0)
    local_focus = Point(LOCAL_FOCUS_X, 0.0)
    local_vertex = Point(LOCAL_VERTEX_X, 0.0)
    # Optical axis from the centre towards the vertex
    local_axis = geometry.line(local_center, local_vertex)
    mirror_circle = geometry.circle(Point(0.0, 0.0), 1.0)

    def __init__(self, mirror_vertex: Point, optical_axis: Point, focus: float):
        """
        Args:
            mirror_vertex: Point of the mirror surface on the optical axis
            optical_axis: Direction from the mirror surface outward (need not be normalized)
            focus: Focal length, > 0

        Raises:
            ValueError: If focus is not positive or optical_axis has zero length
        """
        if not focus > 0:
            raise ValueError(f"Focal length of a concave mirror must be positive, got {focus}")
        self.mirror_vertex = mirror_vertex
        self.optical_axis = geometry.normalize_vec(optical_axis)
        self.focus = focus
        self.radius = 2 * focus
        self.center = geometry.translate(mirror_vertex, self.optical_axis, self.radius)
        self.focus_point = geometry.translate(mirror_vertex, self.optical_axis, focus)
        self.intern_cs = CoordinateSystem.from_axis(
            self.center, Point(-self.optical_axis.x, -self.optical_axis.y), self.radius
        )

        self.size: Optional[ConcaveMirrorSize] = None
        self.arc: List[Point] = []
        self.axis_line: Optional[Line] = None

        self.by_parallel = DEFAULT_BY_PARALLEL
        self.by_focus = DEFAULT_BY_FOCUS
        self.by_center = DEFAULT_BY_CENTER

    @classmethod
    def from_focus_point(cls, mirror_vertex: Point, focus_point: Point) -> 'ConcaveMirror':
        """
        Build a mirror from its vertex and its focal point.

        Raises:
            ValueError: If the two points coincide
        """
        axis = geometry.vector(mirror_vertex, focus_point)
        return cls(mirror_vertex, axis, geometry.distance(mirror_vertex, focus_point))

    def __repr__(self) -> str:
        return (f"ConcaveMirror(mirror_vertex={self.mirror_vertex}, "
                f"optical_axis={self.optical_axis}, focus={self.focus})")

    # =========================================================================
    # Coordinates
    # =========================================================================

    def to_local(self, p1: Point) -> Point:
        return self.intern_cs.to_local(p1)

    def to_global(self, p1: Point) -> Point:
        return self.intern_cs.to_global(p1)

    def classify_source(self, source: Point) -> ImageRegion:
        """Region of a (global) source point, see image_construction."""
        return classify_local_x(self.to_local(source).x)

    # =========================================================================
    # Characteristic rays (local coordinates)
    # =========================================================================

    def _front_facing_intersection(self, l1: Line, ray_name: str) -> Point:
        """
        Intersection of l1 with the mirror circle on the reflecting side (x >= 0).

        Of two front-facing candidates the one further along l1 is used.
        When the line meets the circle only on the back side, a warning is
        logged and the first candidate is returned.

        Raises:
            NoIntersectionError: If l1 misses the circle
        """
        candidates = geometry.line_circle_intersections(l1, self.mirror_circle)
        if not candidates:
            raise NoIntersectionError(f"The {ray_name} ray misses the mirror")
        for candidate in candidates:
            if candidate.x >= 0:
                return candidate
        logger.warning("No front-facing intersection for the %s ray; using %s",
                       ray_name, candidates[0])
        return candidates[0]

    def calculate_intersection_point_from_parallel_ray(self, source: Point) -> PointLine:
        """
        The ray through `source` parallel to the optical axis, travelling
        towards the mirror.

        Args:
            source: Source point in local coordinates

        Returns:
            PointLine of the entry point on the mirror and the reflected ray,
            which passes through the focus (local coordinates)

        Raises:
            NoIntersectionError: If the ray passes outside the mirror sphere
        """
        incident = geometry.parallel_line_through_point(self.local_axis, source)
        entry = self._front_facing_intersection(incident, 'parallel')
        return PointLine(entry, geometry.line(entry, self.local_focus))

    def calculate_intersection_point_from_focus_ray(self, source: Point) -> PointLine:
        """
        The ray from `source` through the focus.

        Args:
            source: Source point in local coordinates

        Returns:
            PointLine of the entry point on the mirror and the reflected ray,
            which runs parallel to the optical axis away from the mirror

        Raises:
            NoIntersectionError: If the ray misses the mirror sphere
        """
        incident = geometry.line(source, self.local_focus)
        entry = self._front_facing_intersection(incident, 'focus')
        away = geometry.line(self.local_vertex, self.local_center)
        return PointLine(entry, geometry.parallel_line_through_point(away, entry))

    def calculate_intersection_point_from_center_ray(self, source: Point,
                                                     image_point: Point) -> Point:
        """
        Entry point of the ray from `source` aimed through the already
        constructed image point.

        This ray stands for the centre-of-curvature ray. It is fitted to the
        image point rather than derived independently, which matches the
        centre ray only in the paraxial limit.

        Args:
            source: Source point in local coordinates
            image_point: Image point in local coordinates

        Returns:
            Entry point on the mirror (local coordinates)

        Raises:
            NoIntersectionError: If the ray misses the mirror sphere
        """
        incident = geometry.line(source, image_point)
        return self._front_facing_intersection(incident, 'center')

    # =========================================================================
    # Image construction
    # =========================================================================

    def construct_image(self, source: Point) -> ImageConstruction:
        """
        Classify `source` and, where supported, build its image from the
        three characteristic rays. Nothing is drawn.

        Unsupported regions log one INFO record and invalid sources one
        WARNING record, with nothing logged at DEBUG. A constructed image logs
        a single DEBUG trace.

        Args:
            source: Source point in global coordinates

        Returns:
            One of the ImageConstruction subclasses; check `is_supported`
        """
        local_source = self.to_local(source)
        region = classify_local_x(local_source.x)

        if region is ImageRegion.BEHIND_MIRROR:
            message = f"Source {source} is at or behind the mirror; no image constructed"
            logger.warning(message)
            return SourceBehindMirror(source, local_source, message)

        if region is not ImageRegion.BEYOND_CENTER:
            message = UNSUPPORTED_MESSAGES[region]
            logger.info(message)
            return UNSUPPORTED_RESULTS[region](source, local_source, message)

        try:
            return self._construct_real_image(source, local_source)
        except GeometryError as e:
            message = f"Degenerate image construction for source {source}: {e}"
            logger.warning(message)
            return DegenerateGeometry(source, local_source, message)

    def _construct_real_image(self, source: Point, local_source: Point) -> RealImageInside:
        parallel = self.calculate_intersection_point_from_parallel_ray(local_source)
        focus = self.calculate_intersection_point_from_focus_ray(local_source)
        image = geometry.lines_intersection(parallel.l, focus.l)
        center_entry = self.calculate_intersection_point_from_center_ray(local_source, image)
        logger.debug("Source %s (local %s) beyond the centre: image at local %s",
                     source, local_source, image)

        def extend(entry: Point, factor: float) -> Point:
            return self.to_global(geometry.rel_point(geometry.line(entry, image), factor))

        return RealImageInside(
            source,
            local_source,
            message='',
            image_point=self.to_global(image),
            parallel_entry=self.to_global(parallel.p),
            focus_entry=self.to_global(focus.p),
            center_entry=self.to_global(center_entry),
            parallel_end=extend(parallel.p, self.by_parallel),
            focus_end=extend(focus.p, self.by_focus),
            center_end=extend(center_entry, self.by_center),
        )

    def draw_image(self, renderer: 'SVGRenderer', source: Point, color: Optional[str] = None,
                   image_label: Optional[str] = None) -> ImageConstruction:
        """
        Construct the image of `source` and draw the characteristic rays.

        The three incident rays are drawn to their entry points, then the
        image point is marked, then each reflected ray is drawn from its entry
        point through the image point and on by its extension factor.
        Unsupported regions and invalid sources draw nothing.

        Args:
            renderer: Target renderer
            source: Source point in global coordinates
            color: Ray color (theme color if None)
            image_label: Optional label of the image point

        Returns:
            The ImageConstruction result
        """
        result = self.construct_image(source)
        if not isinstance(result, RealImageInside):
            return result

        for entry in result.entry_points:
            renderer.draw_ray(source, entry, kind='ray', color=color, label='incident ray')
        renderer.draw_point(result.image_point, label=image_label, color=color)
        for start, end in result.reflected_segments:
            renderer.draw_ray(start, end, kind='ray', color=color, label='reflected ray')
        return result

    # =========================================================================
    # Configuration
    # =========================================================================

    def setup_mirror_size(self, up_angle: float, down_angle: Optional[float] = None,
                          thickness: float = DEFAULT_MIRROR_THICKNESS,
                          axis_length: Optional[float] = None) -> 'ConcaveMirror':
        """
        Configure the drawn arc of the mirror and the drawn optical axis.

        Args:
            up_angle: Arc extent on the +y side, degrees in (0, 90]
            down_angle: Arc extent on the -y side (default up_angle)
            thickness: Depth of the backing
            axis_length: Drawn length of the optical axis (default 1.25 * 2 * radius)

        Returns:
            self

        Raises:
            ValueError: If an angle is outside (0, 90]
        """
        if down_angle is None:
            down_angle = up_angle
        for angle in (up_angle, down_angle):
            if not 0 < angle <= 90:
                raise ValueError(f"Mirror arc angle must be in (0, 90] degrees, got {angle}")
        if axis_length is None:
            axis_length = 2.5 * self.radius

        self.size = ConcaveMirrorSize(up_angle, down_angle, thickness, axis_length)
        self.arc = self._sample_arc(1.0)
        self.axis_line = geometry.line(
            self.mirror_vertex,
            geometry.translate(self.mirror_vertex, self.optical_axis, axis_length)
        )
        return self

    def setup_rays_extend(self, by_parallel: Optional[float] = None,
                          by_focus: Optional[float] = None,
                          by_center: Optional[float] = None) -> 'ConcaveMirror':
        """
        Set how far the reflected rays are drawn past the image point, as a
        multiple of the entry point to image point distance. None keeps the
        current value.
        """
        if by_parallel is not None:
            self.by_parallel = by_parallel
        if by_focus is not None:
            self.by_focus = by_focus
        if by_center is not None:
            self.by_center = by_center
        return self

    def _require_size(self) -> ConcaveMirrorSize:
        if self.size is None:
            raise MirrorNotConfiguredError(
                "ConcaveMirror.setup_mirror_size() must be called before drawing the mirror"
            )
        return self.size

    def _sample_arc(self, local_radius: float) -> List[Point]:
        size = self._require_size()
        start = -math.radians(size.down_angle)
        end = math.radians(size.up_angle)
        n = DEFAULT_ARC_SEGMENTS
        return [
            self.to_global(Point(local_radius * math.cos(start + (end - start) * i / n),
                                 local_radius * math.sin(start + (end - start) * i / n)))
            for i in range(n + 1)
        ]

    @property
    def _vertex_angle(self) -> float:
        """Global angle of the vertex seen from the centre of curvature."""
        return math.atan2(-self.optical_axis.y, -self.optical_axis.x)

    # =========================================================================
    # Drawing
    # =========================================================================

    def draw_mirror(self, renderer: 'SVGRenderer') -> 'ConcaveMirror':
        """
        Draw the reflective arc and the filled backing behind it.
        """
        size = self._require_size()
        outer = self._sample_arc(1.0 + size.thickness / self.radius)
        renderer.draw_polygon(self.arc + outer[::-1], label='mirror backing')
        base = self._vertex_angle
        renderer.draw_arc(self.center, self.radius,
                          base - math.radians(size.down_angle),
                          base + math.radians(size.up_angle),
                          kind='mirror', label='mirror')
        return self

    def draw_optical_axis(self, renderer: 'SVGRenderer') -> 'ConcaveMirror':
        self._require_size()
        renderer.draw_line_segment(self.axis_line.p1, self.axis_line.p2, kind='optical_axis',
                                   dashed=True, clip=True, label='optical axis')
        return self

    def draw_characteristic_points(self, renderer: 'SVGRenderer', focus_label: str = 'F',
                                   center_label: str = 'C') -> 'ConcaveMirror':
        """
        Mark the focus and the centre of curvature on the optical axis.
        """
        renderer.draw_point(self.focus_point, label=focus_label)
        renderer.draw_point(self.center, label=center_label)
        return self

    def label_mirror(self, renderer: 'SVGRenderer', text: str,
                     align: str = 'middle') -> 'ConcaveMirror':
        """
        Put `text` just beyond the upper end of the drawn arc.
        """
        self._require_size()
        top = self.arc[-1]
        gap = renderer.theme['label']['font_size']
        outward = geometry.normalize_vec(geometry.vector(self.center, top))
        renderer.draw_label(geometry.translate(top, outward, gap), text, align=align)
        return self
