# ##### BEGIN GPL LICENSE BLOCK #####
#
#  This program is free software; you can redistribute it and/or
#  modify it under the terms of the GNU General Public License
#  as published by the Free Software Foundation; either version 2
#  of the License, or (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with this program; if not, write to the Free Software Foundation,
#  Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301, USA.
#
# ##### END GPL LICENSE BLOCK #####

import logging
from dataclasses import dataclass
from math import radians
from typing import List, Sequence

from mathutils import Euler, Vector

from .turtle import TurtleState

__all__ = (
    "BASE_RADIUS_FACTOR",
    "ROTATION_ORDER",
    "BranchDescriptor",
    "get_point_pairs",
    "make_branch",
    "build",
    )

logger = logging.getLogger(__name__)

BASE_RADIUS_FACTOR = 0.1
# Z first, then X, then Y.
ROTATION_ORDER = 'ZXY'

@dataclass(frozen=True)
class BranchDescriptor:
    start: Vector
    end: Vector
    length: float
    radius: float
    rotation: Vector #degs

    def __post_init__(self):
        # Frozen copies keep the descriptor immutable and hashable.
        for name in ("start", "end", "rotation"):
            object.__setattr__(self, name, Vector(getattr(self, name)).freeze())

    @property
    def position(self) -> Vector:
        return self.start.copy()

    @property
    def scale(self) -> Vector:
        # Unit cylinder primitive: radius 1, height 2, centered on its origin.
        return Vector((self.radius, self.length / 2.0, self.radius))

    def rotation_euler(self) -> Euler:
        return Euler([radians(a) for a in self.rotation], ROTATION_ORDER)

def get_point_pairs(num_points: int):
    # Each drawn segment starts at an even index. Consecutive segment starts are
    # chained together, so the last segment's start has no partner.
    pairs = [(i, i + 2) for i in range(0, num_points - 2, 2)]
    if not pairs and num_points >= 2:
        pairs.append((0, 1))
    return pairs

def make_branch(point1: TurtleState, point2: TurtleState, radius_factor: float = BASE_RADIUS_FACTOR) -> BranchDescriptor:
    length = (point2.position - point1.position).length
    return BranchDescriptor(
        start=point1.position,
        end=point2.position,
        length=length,
        radius=radius_factor * length,
        rotation=point2.angle,
        )

def build(points: Sequence[TurtleState], radius_factor: float = BASE_RADIUS_FACTOR) -> List[BranchDescriptor]:
    branches = [make_branch(points[i], points[j], radius_factor) for i, j in get_point_pairs(len(points))]
    logger.debug("built %d branches from %d points", len(branches), len(points))
    return branches
