"""
===============================================================================
SVG RENDERER - Verification Tests
===============================================================================

Tests the drawing collaborator the mirrors draw through:

1. Theme overrides merge on top of the defaults without touching them
2. Degenerate input (zero length, non-finite points) draws nothing
3. Segments outside the viewbox are clipped away when clipping is asked for
4. Arcs, angle arcs, points and labels land in their layers
5. save() writes a readable SVG file

USAGE
-----
    pytest developer_tests/test_svg_renderer.py -v
    python developer_tests/test_svg_renderer.py

===============================================================================
"""

import math
import sys
import tempfile
from pathlib import Path

from _helpers import run_tests

from mirror_diagrams.core.constants import DEFAULT_THEME
from mirror_diagrams.core.geometry import Point
from mirror_diagrams.core.svg_renderer import SVGRenderer, merge_theme


def test_theme_merge():
    """Overrides replace single keys; DEFAULT_THEME is left alone."""
    print("\nTest: theme merge")
    theme = merge_theme({'ray': {'color': 'blue'}, 'extra': {'color': 'green'}})
    assert theme['ray']['color'] == 'blue'
    assert theme['ray']['width'] == DEFAULT_THEME['ray']['width']
    assert theme['extra']['color'] == 'green'
    assert DEFAULT_THEME['ray']['color'] != 'blue'

    renderer = SVGRenderer(theme={'mirror': {'width': 0.5}})
    assert renderer.theme['mirror']['width'] == 0.5
    print("  PASS")


def test_degenerate_rays_are_skipped():
    print("\nTest: degenerate rays")
    renderer = SVGRenderer()
    assert not renderer.draw_ray(Point(1, 1), Point(1, 1))
    assert not renderer.draw_ray(Point(0, 0), Point(math.inf, 1))
    assert not renderer.draw_line_segment(Point(math.nan, 0), Point(1, 1))
    assert renderer.element_count() == 0
    assert renderer.draw_ray(Point(0, 0), Point(2, 1))
    assert len(renderer.layer_rays.elements) == 1
    print("  PASS")


def test_ray_arrow():
    """A ray with an arrow is a group of a line and a filled triangle."""
    print("\nTest: ray arrow")
    renderer = SVGRenderer()
    renderer.draw_ray(Point(0, 0), Point(4, 0))
    group = renderer.layer_rays.elements[0]
    assert len(group.elements) == 2
    renderer.draw_ray(Point(0, 0), Point(4, 0), show_arrow=False)
    assert len(renderer.layer_rays.elements[1].elements) == 1
    print("  PASS")


def test_clipping():
    print("\nTest: clipping to the viewbox")
    renderer = SVGRenderer(viewbox=(0, 0, 10, 10))
    assert not renderer.draw_line_segment(Point(20, 20), Point(30, 25), clip=True)
    assert renderer.draw_line_segment(Point(-5, 5), Point(15, 5), kind='optical_axis',
                                      dashed=True, clip=True)
    line = renderer.layer_graphic_symb.elements[0]
    assert float(line['x1']) == 0.0 and float(line['x2']) == 10.0
    print("  PASS")


def test_arc_and_angle_arc():
    print("\nTest: arcs")
    renderer = SVGRenderer()
    assert renderer.draw_arc(Point(0, 0), 2.0, -0.5, 0.5)
    assert not renderer.draw_arc(Point(0, 0), 2.0, 0.5, 0.5)
    path = renderer.layer_objects.elements[0]
    assert ' A 2.0,2.0 0 0 1 ' in ' '.join(map(str, path.commands))
    assert ' A 2.0,2.0 0 0 1 ' in renderer.to_string()

    assert renderer.draw_angle_arc(Point(0, 0), Point(1, 0), Point(0, 1), 1.0,
                                   arrow_start=True, arrow_end=True, label='theta')
    group = renderer.layer_graphic_symb.elements[0]
    assert len(group.elements) == 3  # arc + two arrow heads
    assert '>theta</text>' in renderer.to_string()
    assert not renderer.draw_angle_arc(Point(0, 0), Point(1, 0), Point(2, 0), 1.0)
    print("  PASS")


def test_points_and_labels():
    print("\nTest: points and labels")
    renderer = SVGRenderer()
    assert renderer.draw_point(Point(1, 2), label='P')
    assert len(renderer.layer_objects.elements) == 1
    assert len(renderer.layer_labels.elements) == 1
    assert not renderer.draw_label(Point(0, 0), '')
    try:
        renderer.draw_label(Point(0, 0), 'x', align='left')
    except ValueError:
        print("  PASS")
        return
    raise AssertionError("Expected ValueError for invalid alignment")


def test_save():
    print("\nTest: save")
    renderer = SVGRenderer()
    renderer.draw_ray(Point(0, 0), Point(3, 3))
    with tempfile.TemporaryDirectory(prefix='test_render_') as tmpdir:
        path = Path(tmpdir) / 'figure.svg'
        renderer.save(str(path))
        content = path.read_text(encoding='utf-8')
        assert '<svg' in content
        assert 'layer-rays' in content
    print("  PASS")


def run_all_tests():
    print("=" * 78)
    print("SVG RENDERER")
    print("=" * 78)
    return run_tests([
        ("Theme merge", test_theme_merge),
        ("Degenerate rays", test_degenerate_rays_are_skipped),
        ("Ray arrow", test_ray_arrow),
        ("Clipping", test_clipping),
        ("Arcs", test_arc_and_angle_arc),
        ("Points and labels", test_points_and_labels),
        ("save()", test_save),
    ])


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
