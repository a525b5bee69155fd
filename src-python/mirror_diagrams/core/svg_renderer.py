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

import copy
import math
from typing import Dict, Iterable, List, Optional, Tuple

import svgwrite

from .constants import (
    DEFAULT_HEIGHT,
    DEFAULT_THEME,
    DEFAULT_VIEWBOX,
    DEFAULT_WIDTH,
    RAY_ARROW_POSITION,
)
from .geometry import geometry, Point


def merge_theme(overrides: Optional[Dict[str, Dict]] = None) -> Dict[str, Dict]:
    """
    Merge per-key style overrides on top of DEFAULT_THEME.

    Args:
        overrides: e.g. {'ray': {'color': 'blue'}}. Unknown keys are added as-is.

    Returns:
        A new theme dict; DEFAULT_THEME itself is never modified.
    """
    theme = copy.deepcopy(DEFAULT_THEME)
    for key, style in (overrides or {}).items():
        theme.setdefault(key, {}).update(style)
    return theme


class SVGRenderer:
    """
    SVG renderer for mirror diagrams.

    The SVG is organized into four layers (bottom to top):
    - objects: Mirror bodies and marked points
    - graphic annotations: Normals, optical axes, angle arcs
    - rays: Incident, reflected and virtual rays
    - labels: Text annotations

    Coordinate System:
        The renderer uses a Y-up coordinate system (positive Y points upward),
        which matches mathematical convention. This is achieved by applying
        a vertical flip transformation to every layer. All coordinates, line
        widths and font sizes are in drawing units (the units of the viewbox).

    Attributes:
        width (int): Canvas width in pixels
        height (int): Canvas height in pixels
        user_viewbox (tuple): Y-up viewbox (min_x, min_y, width, height)
        theme (dict): Style dicts keyed by element kind (see constants.DEFAULT_THEME)
        dwg (svgwrite.Drawing): The SVG drawing object
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 viewbox: Optional[Tuple[float, float, float, float]] = None,
                 theme: Optional[Dict[str, Dict]] = None,
                 metadata_level: str = 'standard'):
        """
        Initialize the SVG renderer.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            viewbox: Viewbox as (min_x, min_y, width, height) in Y-up drawing
                units. If None, uses constants.DEFAULT_VIEWBOX.
            theme: Style overrides merged on top of constants.DEFAULT_THEME
            metadata_level: 'none' for bare elements, 'standard' to add
                class and inkscape:label attributes
        """
        self.width = width
        self.height = height
        self.metadata_level = metadata_level
        self.theme = merge_theme(theme)
        self.user_viewbox = viewbox if viewbox is not None else DEFAULT_VIEWBOX

        # SVG needs the viewbox flipped: min_y becomes -(min_y + height)
        min_x, min_y, vb_width, vb_height = self.user_viewbox
        self.viewbox = (min_x, -(min_y + vb_height), vb_width, vb_height)

        # profile='full' with debug=False so the Inkscape namespace attributes
        # are accepted
        self.dwg = svgwrite.Drawing(size=(f'{width}px', f'{height}px'),
                                    profile='full', debug=False)
        self.dwg.viewbox(*self.viewbox)
        self.dwg['xmlns:inkscape'] = 'http://www.inkscape.org/namespaces/inkscape'

        self.dwg.add(self.dwg.rect(
            insert=(self.viewbox[0], self.viewbox[1]),
            size=(self.viewbox[2], self.viewbox[3]),
            fill='white'
        ))

        self.layer_objects = self._add_layer('layer-objects', 'Objects')
        self.layer_graphic_symb = self._add_layer('layer-graphic-symb', 'Graphic Annotations')
        self.layer_rays = self._add_layer('layer-rays', 'Rays')
        self.layer_labels = self._add_layer('layer-labels', 'Labels')

    def _add_layer(self, layer_id: str, label: str):
        return self.dwg.add(self.dwg.g(
            id=layer_id,
            transform='scale(1, -1)',
            **{'inkscape:groupmode': 'layer', 'inkscape:label': label}
        ))

    @property
    def layers(self) -> List:
        return [self.layer_objects, self.layer_graphic_symb, self.layer_rays, self.layer_labels]

    def element_count(self) -> int:
        """Number of top-level elements drawn into all layers."""
        return sum(len(layer.elements) for layer in self.layers)

    def _normalize_coord(self, value: float) -> float:
        """
        Normalize a coordinate value: negative zero and values within 1e-10
        of zero become 0.0.
        """
        if value == 0.0 or abs(value) < 1e-10:
            return 0.0
        return value

    def _normalize_point(self, point: Point) -> Tuple[float, float]:
        return (self._normalize_coord(point.x), self._normalize_coord(point.y))

    def _is_finite(self, *points: Point) -> bool:
        return all(math.isfinite(p.x) and math.isfinite(p.y) for p in points)

    def _attach_metadata(self, element, css_class: str, label: Optional[str] = None) -> None:
        if self.metadata_level == 'none':
            return
        element['class'] = css_class
        if label:
            element['inkscape:label'] = label

    def _style(self, kind: str, color: Optional[str], width: Optional[float]) -> Tuple[str, float]:
        style = self.theme[kind]
        return (color or style['color'], width if width is not None else style.get('width', 0.0))

    # =========================================================================
    # Lines and rays
    # =========================================================================

    def draw_line_segment(self, p1: Point, p2: Point, kind: str = 'mirror',
                          color: Optional[str] = None, stroke_width: Optional[float] = None,
                          dashed: bool = False, clip: bool = False,
                          label: Optional[str] = None) -> bool:
        """
        Draw a plain line segment.

        Dashed segments (normals, optical axes) go to the graphic annotations
        layer, solid ones to the objects layer.

        Args:
            p1: Start point
            p2: End point
            kind: Theme key supplying color, width and dash pattern
            color: Overrides the theme color
            stroke_width: Overrides the theme width
            dashed: Use the theme's dash pattern
            clip: Clip the segment to the viewbox first
            label: Optional inkscape label

        Returns:
            True if something was drawn
        """
        if not self._is_finite(p1, p2):
            return False
        if clip:
            p1, p2 = self._clip_to_viewbox(p1, p2)
            if p1 is None:
                return False

        color, stroke_width = self._style(kind, color, stroke_width)
        kwargs = dict(
            start=self._normalize_point(p1),
            end=self._normalize_point(p2),
            stroke=color,
            stroke_width=stroke_width,
            stroke_linecap='round',
        )
        if dashed:
            kwargs['stroke_dasharray'] = self.theme[kind].get('dash', '0.2, 0.1')
        line = self.dwg.line(**kwargs)
        self._attach_metadata(line, kind, label)

        if dashed:
            self.layer_graphic_symb.add(line)
        else:
            self.layer_objects.add(line)
        return True

    def draw_ray(self, p1: Point, p2: Point, kind: str = 'ray', color: Optional[str] = None,
                 stroke_width: Optional[float] = None, show_arrow: bool = True,
                 arrow_size: Optional[float] = None,
                 arrow_position: float = RAY_ARROW_POSITION,
                 dashed: bool = False, label: Optional[str] = None) -> bool:
        """
        Draw a ray segment with an optional direction arrow.

        Args:
            p1: Start point
            p2: End point
            kind: Theme key ('ray' or 'virtual_ray')
            color: Overrides the theme color
            stroke_width: Overrides the theme width
            show_arrow: Draw an arrow head pointing from p1 towards p2
            arrow_size: Length of the arrow head; theme value if None
            arrow_position: Position of the arrow centre along the ray, 0.0-1.0
            dashed: Use the theme's dash pattern
            label: Optional inkscape label

        Returns:
            True if something was drawn
        """
        if not self._is_finite(p1, p2):
            return False

        color, stroke_width = self._style(kind, color, stroke_width)
        length = geometry.distance(p1, p2)
        if length < 1e-9:
            return False

        group = self.dwg.g()
        self._attach_metadata(group, kind, label)

        line_kwargs = dict(
            start=self._normalize_point(p1),
            end=self._normalize_point(p2),
            stroke=color,
            stroke_width=stroke_width,
            stroke_linecap='round',
        )
        if dashed:
            line_kwargs['stroke_dasharray'] = self.theme[kind].get('dash', '0.15, 0.1')
        group.add(self.dwg.line(**line_kwargs))

        if show_arrow:
            if arrow_size is None:
                arrow_size = self.theme[kind].get('arrow_size', self.theme['ray']['arrow_size'])
            # Keep the head inside short rays
            arrow_size = min(arrow_size, length * 0.5)
            u = geometry.vector(p1, p2)
            u = Point(u.x / length, u.y / length)
            at = geometry.rel_point(geometry.line(p1, p2), arrow_position)
            group.add(self._arrow_head(at, u, arrow_size, color))

        self.layer_rays.add(group)
        return True

    def _arrow_head(self, center: Point, u: Point, size: float, color: str):
        """Filled triangle centred on `center` pointing along unit vector u."""
        half_width = size * 0.35
        tip = Point(center.x + u.x * size / 2, center.y + u.y * size / 2)
        back_x = center.x - u.x * size / 2
        back_y = center.y - u.y * size / 2
        points = [
            self._normalize_point(tip),
            (back_x - u.y * half_width, back_y + u.x * half_width),
            (back_x + u.y * half_width, back_y - u.x * half_width),
        ]
        return self.dwg.polygon(points=points, fill=color)

    # =========================================================================
    # Areas and arcs
    # =========================================================================

    def draw_polygon(self, points: Iterable[Point], kind: str = 'mirror_fill',
                     fill: Optional[str] = None, fill_opacity: Optional[float] = None,
                     label: Optional[str] = None) -> bool:
        """
        Draw a filled polygon without outline (mirror backings).

        Returns:
            True if something was drawn
        """
        points = list(points)
        if len(points) < 3 or not self._is_finite(*points):
            return False
        style = self.theme[kind]
        polygon = self.dwg.polygon(
            points=[self._normalize_point(p) for p in points],
            fill=fill or style['color'],
            fill_opacity=fill_opacity if fill_opacity is not None else style.get('opacity', 1.0),
            stroke='none',
        )
        self._attach_metadata(polygon, kind, label)
        self.layer_objects.add(polygon)
        return True

    def _arc_path(self, center: Point, radius: float, start_angle: float,
                  end_angle: float) -> str:
        """
        SVG path data for a counter-clockwise arc (angles in radians, Y-up).

        The layers are flipped, so the arc is written in Y-up coordinates and
        sweep-flag 1 (positive angle direction) is counter-clockwise.
        """
        span = end_angle - start_angle
        start = Point(center.x + radius * math.cos(start_angle),
                      center.y + radius * math.sin(start_angle))
        end = Point(center.x + radius * math.cos(end_angle),
                    center.y + radius * math.sin(end_angle))
        sx, sy = self._normalize_point(start)
        ex, ey = self._normalize_point(end)
        large_arc = 1 if abs(span) > math.pi else 0
        sweep = 1 if span > 0 else 0
        return f"M {sx},{sy} A {radius},{radius} 0 {large_arc} {sweep} {ex},{ey}"

    def draw_arc(self, center: Point, radius: float, start_angle: float, end_angle: float,
                 kind: str = 'mirror', color: Optional[str] = None,
                 stroke_width: Optional[float] = None, label: Optional[str] = None) -> bool:
        """
        Stroke a circular arc from start_angle to end_angle (radians).

        A positive span runs counter-clockwise, a negative one clockwise.

        Returns:
            True if something was drawn
        """
        if not self._is_finite(center) or radius <= 0 or start_angle == end_angle:
            return False
        color, stroke_width = self._style(kind, color, stroke_width)
        path = self.dwg.path(
            d=self._arc_path(center, radius, start_angle, end_angle),
            fill='none',
            stroke=color,
            stroke_width=stroke_width,
        )
        self._attach_metadata(path, kind, label)
        self.layer_objects.add(path)
        return True

    def draw_angle_arc(self, vertex: Point, from_vec: Point, to_vec: Point, radius: float,
                       arrow_start: bool = False, arrow_end: bool = True,
                       label: Optional[str] = None, color: Optional[str] = None) -> bool:
        """
        Mark the angle between two rays leaving `vertex`.

        The arc runs the short way round from from_vec to to_vec. Arrow heads,
        when requested, are tangent to the arc at its ends. The label is placed
        just outside the middle of the arc.

        Args:
            vertex: Common start point of both rays
            from_vec: Direction of the first ray
            to_vec: Direction of the second ray
            radius: Arc radius
            arrow_start: Arrow head at the from_vec end
            arrow_end: Arrow head at the to_vec end
            label: Optional text
            color: Overrides the theme color

        Returns:
            True if something was drawn
        """
        if radius <= 0:
            return False
        style = self.theme['angle_arc']
        color = color or style['color']
        start_angle = math.atan2(from_vec.y, from_vec.x)
        span = geometry.signed_angle(from_vec, to_vec)
        if abs(span) < 1e-9:
            return False
        end_angle = start_angle + span

        group = self.dwg.g()
        self._attach_metadata(group, 'angle-arc', label)
        group.add(self.dwg.path(
            d=self._arc_path(vertex, radius, start_angle, end_angle),
            fill='none',
            stroke=color,
            stroke_width=style['width'],
        ))

        size = min(style['arrow_size'], abs(span) * radius * 0.5)
        orientation = 1.0 if span > 0 else -1.0
        if arrow_end:
            group.add(self._arc_arrow(vertex, radius, end_angle, orientation, size, color))
        if arrow_start:
            group.add(self._arc_arrow(vertex, radius, start_angle, -orientation, size, color))
        self.layer_graphic_symb.add(group)

        if label:
            mid = start_angle + span / 2
            position = Point(vertex.x + (radius + self.theme['label']['font_size']) * math.cos(mid),
                             vertex.y + (radius + self.theme['label']['font_size']) * math.sin(mid))
            self.draw_label(position, label, align='middle', color=color)
        return True

    def _arc_arrow(self, center: Point, radius: float, angle: float, orientation: float,
                   size: float, color: str):
        """Arrow head at the arc point `angle`, pointing along the arc in `orientation`."""
        tangent = Point(-math.sin(angle) * orientation, math.cos(angle) * orientation)
        tip = Point(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))
        head_center = Point(tip.x - tangent.x * size / 2, tip.y - tangent.y * size / 2)
        return self._arrow_head(head_center, tangent, size, color)

    # =========================================================================
    # Points and labels
    # =========================================================================

    def draw_point(self, point: Point, label: Optional[str] = None,
                   color: Optional[str] = None, radius: Optional[float] = None,
                   align: str = 'start') -> bool:
        """
        Draw a point (filled circle) with an optional label to its upper right.

        Returns:
            True if something was drawn
        """
        if not self._is_finite(point):
            return False
        style = self.theme['point']
        color = color or style['color']
        radius = radius if radius is not None else style['radius']

        circle = self.dwg.circle(center=self._normalize_point(point), r=radius, fill=color)
        self._attach_metadata(circle, 'point', label)
        self.layer_objects.add(circle)

        if label:
            offset = radius + self.theme['label']['font_size'] * 0.3
            self.draw_label(Point(point.x + offset, point.y + offset), label,
                            align=align, color=color)
        return True

    def draw_label(self, position: Point, text: str, align: str = 'middle',
                   color: Optional[str] = None, font_size: Optional[float] = None) -> bool:
        """
        Place a text label.

        Args:
            position: Anchor point (Y-up)
            text: Label text
            align: 'start', 'middle' or 'end' (SVG text-anchor)
            color: Overrides the theme color
            font_size: Overrides the theme font size

        Returns:
            True if something was drawn
        """
        if not text or not self._is_finite(position):
            return False
        if align not in ('start', 'middle', 'end'):
            raise ValueError(f"Invalid label alignment '{align}'")
        style = self.theme['label']
        font_size = font_size if font_size is not None else style['font_size']
        x, y = self._normalize_point(position)
        # Approximate vertical centering
        vertical_offset = font_size * 0.35

        label = self.dwg.text(
            text,
            insert=(x, -y + vertical_offset),
            fill=color or style['color'],
            font_size=font_size,
            font_family=style['font_family'],
            text_anchor=align,
            transform='scale(1, -1)'  # Flip text back to be readable
        )
        self.layer_labels.add(label)
        return True

    # =========================================================================
    # Viewbox helpers
    # =========================================================================

    def _clip_to_viewbox(self, p1: Point, p2: Point):
        """
        Clip a line segment to the viewbox boundaries (Liang-Barsky).

        Returns:
            tuple: (clipped_p1, clipped_p2) or (None, None) if completely outside
        """
        min_x, min_y, width, height = self.user_viewbox
        max_x = min_x + width
        max_y = min_y + height

        x1, y1 = p1.x, p1.y
        dx = p2.x - x1
        dy = p2.y - y1

        t0, t1 = 0.0, 1.0
        for p, q in ((-dx, x1 - min_x), (dx, max_x - x1), (-dy, y1 - min_y), (dy, max_y - y1)):
            if abs(p) < 1e-10:
                # Parallel to this edge
                if q < 0:
                    return None, None
            else:
                t = q / p
                if p < 0:
                    t0 = max(t0, t)
                else:
                    t1 = min(t1, t)

        if t0 > t1:
            return None, None

        return (Point(x1 + t0 * dx, y1 + t0 * dy), Point(x1 + t1 * dx, y1 + t1 * dy))

    def save(self, filename: Optional[str] = None) -> None:
        """
        Save the SVG to a file.

        Args:
            filename: Output filename (default 'output.svg')
        """
        if filename is None:
            filename = "output.svg"
        self.dwg.saveas(filename)

    def to_string(self) -> str:
        """
        Get the SVG as a string.
        """
        return self.dwg.tostring()
