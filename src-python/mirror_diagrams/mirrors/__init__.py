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

from .point_line import PointLine, MirrorNotConfiguredError
from .image_construction import (
    ImageRegion,
    ImageConstruction,
    RealImageInside,
    RealImageOutsideUnsupported,
    VirtualImageUnsupported,
    AtCenterUnsupported,
    AtFocusUnsupported,
    SourceBehindMirror,
    DegenerateGeometry,
    classify_local_x,
)
from .planar_mirror import PlanarMirror, PlanarMirrorSize
from .concave_mirror import ConcaveMirror, ConcaveMirrorSize

__all__ = [
    'PointLine', 'MirrorNotConfiguredError',
    'ImageRegion', 'ImageConstruction', 'RealImageInside', 'RealImageOutsideUnsupported',
    'VirtualImageUnsupported', 'AtCenterUnsupported', 'AtFocusUnsupported',
    'SourceBehindMirror', 'DegenerateGeometry', 'classify_local_x',
    'PlanarMirror', 'PlanarMirrorSize',
    'ConcaveMirror', 'ConcaveMirrorSize',
]
