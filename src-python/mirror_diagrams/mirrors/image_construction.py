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
Classification of a source point in front of a concave mirror and the tagged
results of the characteristic-ray image construction.

Regions are defined on the x coordinate of the source in the mirror's local
coordinate system (unit = radius of curvature, origin = centre of curvature,
x axis pointing from the centre towards the vertex):

    x < 0          beyond the centre of curvature   -> real image (constructed)
    x == 0         at the centre of curvature       -> not supported
    0 < x < 0.5    between centre and focus         -> not supported
    x == 0.5       at the focus                     -> not supported
    0.5 < x < 1    between focus and vertex         -> not supported (virtual image)
    x >= 1         at or behind the vertex          -> invalid source
"""

from dataclasses import dataclass
from enum import Enum

from ..core.constants import REGION_TOLERANCE
from ..core.geometry import Point


# Local x of the characteristic points
LOCAL_CENTER_X = 0.0
LOCAL_FOCUS_X = 0.5
LOCAL_VERTEX_X = 1.0


class ImageRegion(Enum):
    BEYOND_CENTER = 'beyond_center'
    AT_CENTER = 'at_center'
    BETWEEN_CENTER_AND_FOCUS = 'between_center_and_focus'
    AT_FOCUS = 'at_focus'
    BETWEEN_FOCUS_AND_VERTEX = 'between_focus_and_vertex'
    BEHIND_MIRROR = 'behind_mirror'


def classify_local_x(x: float, tolerance: float = REGION_TOLERANCE) -> ImageRegion:
    """
    Classify a local x coordinate into an ImageRegion.

    Args:
        x: Local x of the source (units of the radius of curvature)
        tolerance: Half-width of the "at centre" and "at focus" bands

    Returns:
        The region the source lies in
    """
    if abs(x - LOCAL_CENTER_X) <= tolerance:
        return ImageRegion.AT_CENTER
    if abs(x - LOCAL_FOCUS_X) <= tolerance:
        return ImageRegion.AT_FOCUS
    if x >= LOCAL_VERTEX_X - tolerance:
        return ImageRegion.BEHIND_MIRROR
    if x < LOCAL_CENTER_X:
        return ImageRegion.BEYOND_CENTER
    if x < LOCAL_FOCUS_X:
        return ImageRegion.BETWEEN_CENTER_AND_FOCUS
    return ImageRegion.BETWEEN_FOCUS_AND_VERTEX


@dataclass(frozen=True)
class ImageConstruction:
    """
    Base class of all image construction outcomes.

    Attributes:
        source: The source point (global coordinates)
        local_source: The source point in the mirror's local coordinates
        message: Human readable diagnostic (empty on success)
    """
    source: Point
    local_source: Point
    message: str

    region = None
    is_supported = False


@dataclass(frozen=True)
class RealImageInside(ImageConstruction):
    """
    Real image built from the three characteristic rays.

    All points are in global coordinates. Each reflected segment runs from its
    entry point on the mirror past the image point, by the mirror's extension
    factor for that ray.
    """
    image_point: Point
    parallel_entry: Point
    focus_entry: Point
    center_entry: Point
    parallel_end: Point
    focus_end: Point
    center_end: Point

    region = ImageRegion.BEYOND_CENTER
    is_supported = True

    @property
    def entry_points(self):
        return (self.parallel_entry, self.focus_entry, self.center_entry)

    @property
    def reflected_segments(self):
        """(start, end) of the parallel, focus and centre reflected rays."""
        return (
            (self.parallel_entry, self.parallel_end),
            (self.focus_entry, self.focus_end),
            (self.center_entry, self.center_end),
        )


@dataclass(frozen=True)
class RealImageOutsideUnsupported(ImageConstruction):
    region = ImageRegion.BETWEEN_CENTER_AND_FOCUS


@dataclass(frozen=True)
class VirtualImageUnsupported(ImageConstruction):
    region = ImageRegion.BETWEEN_FOCUS_AND_VERTEX


@dataclass(frozen=True)
class AtCenterUnsupported(ImageConstruction):
    region = ImageRegion.AT_CENTER


@dataclass(frozen=True)
class AtFocusUnsupported(ImageConstruction):
    region = ImageRegion.AT_FOCUS


@dataclass(frozen=True)
class SourceBehindMirror(ImageConstruction):
    region = ImageRegion.BEHIND_MIRROR


@dataclass(frozen=True)
class DegenerateGeometry(ImageConstruction):
    """The construction hit a degenerate configuration (e.g. a ray missing the mirror)."""
    region = ImageRegion.BEYOND_CENTER


UNSUPPORTED_RESULTS = {
    ImageRegion.AT_CENTER: AtCenterUnsupported,
    ImageRegion.BETWEEN_CENTER_AND_FOCUS: RealImageOutsideUnsupported,
    ImageRegion.AT_FOCUS: AtFocusUnsupported,
    ImageRegion.BETWEEN_FOCUS_AND_VERTEX: VirtualImageUnsupported,
}

UNSUPPORTED_MESSAGES = {
    ImageRegion.AT_CENTER: "Source at the centre of curvature: image construction not implemented",
    ImageRegion.BETWEEN_CENTER_AND_FOCUS: "Source between centre of curvature and focus: "
                                          "real image construction not implemented",
    ImageRegion.AT_FOCUS: "Source at the focus: image at infinity, construction not implemented",
    ImageRegion.BETWEEN_FOCUS_AND_VERTEX: "Source between focus and mirror: "
                                          "virtual image construction not implemented",
}
