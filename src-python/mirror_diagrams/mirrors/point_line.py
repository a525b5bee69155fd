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

from dataclasses import dataclass

from ..core.geometry import Point, Line


class MirrorNotConfiguredError(RuntimeError):
    """Raised when a mirror is drawn before setup_mirror_size was called."""


@dataclass(frozen=True)
class PointLine:
    """
    A point together with a line through it.

    Carries an intersection point and the line it was found on from the
    geometry calculations to the drawing operations, so neither has to be
    recomputed.

    Attributes:
        p: The point (lies on l)
        l: The line through p
    """
    p: Point
    l: Line
