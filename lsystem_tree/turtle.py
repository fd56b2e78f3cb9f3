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
import random
from dataclasses import dataclass
from math import radians
from typing import Callable, List, Optional

from mathutils import Matrix, Vector

from .errors import UnbalancedBracketError

__all__ = (
    "TURN_ANGLE",
    "LENGTH_DECAY",
    "MIN_LENGTH",
    "INITIAL_LENGTH",
    "JITTER_RANGE",
    "TurtleState",
    "uniform_angle_jitter",
    "constant_angle_jitter",
    "pivot",
    "turtle_3D",
    "interpret",
    )

logger = logging.getLogger(__name__)

TURN_ANGLE = 30.0 #degs
LENGTH_DECAY = 0.02
MIN_LENGTH = 0.001
INITIAL_LENGTH = 1.0
JITTER_RANGE = (-30, 30) #degs, inclusive

@dataclass
class TurtleState:
    position: Vector
    angle: Vector #degs, per axis
    branch_length: float

    @classmethod
    def origin(cls):
        return cls(Vector((0.0, 0.0, 0.0)), Vector((0.0, 0.0, 0.0)), INITIAL_LENGTH)

    def copy(self):
        return TurtleState(self.position.copy(), self.angle.copy(), self.branch_length)

#------------------------------------------------------------------------------------------------------------------

def uniform_angle_jitter(seed=None) -> Callable[[], int]:
    rng = random.Random(seed)
    low, high = JITTER_RANGE
    return lambda: rng.randint(low, high)

def constant_angle_jitter(value: int) -> Callable[[], int]:
    low, high = JITTER_RANGE
    if not low <= value <= high:
        raise ValueError("jitter must lie in [" + str(low) + ", " + str(high) + "], got " + str(value))
    return lambda: value

def pivot(point: Vector, origin: Vector, mat_rot: Matrix) -> Vector:
    # Rotate point about origin.
    return mat_rot @ (point - origin) + origin

#------------------------------------------------------------------------------------------------------------------

class turtle_3D:
    """Walks an expanded L-system string and records a pair of points per drawn segment.

    F draws forward along the local up axis, + and - turn about X, [ and ] save and
    restore the full turtle state. Other symbols are ignored.
    """

    def __init__(self, jitter: Optional[Callable[[], int]] = None):
        self.jitter = jitter if jitter is not None else uniform_angle_jitter()
        self.reset()

    def reset(self):
        self.cur_state = TurtleState.origin()
        # The root entry is never popped.
        self.stack = [self.cur_state.copy()]
        self.points: List[TurtleState] = []

    def draw(self, symbols: str) -> List[TurtleState]:
        self.reset()
        for i, c in enumerate(symbols):
            if c == "F":
                self.one_step_forward()
            elif c == "+":
                self.cur_state.angle.x += TURN_ANGLE
            elif c == "-":
                self.cur_state.angle.x -= TURN_ANGLE
            elif c == "[":
                self.stack.append(self.cur_state.copy())
            elif c == "]":
                if len(self.stack) <= 1:
                    raise UnbalancedBracketError(i)
                self.cur_state = self.stack.pop()

        if len(self.stack) > 1:
            logger.debug("%d branch(es) left open at end of input", len(self.stack) - 1)
        return self.points

    def one_step_forward(self):
        last = self.cur_state
        self.points.append(last.copy())

        branch_length = last.branch_length - LENGTH_DECAY
        if branch_length <= 0.0:
            branch_length = MIN_LENGTH

        angle = last.angle.copy()
        angle.y = last.angle.y + self.jitter()

        end_pt = last.position + Vector((0.0, last.branch_length, 0.0))
        end_pt = pivot(end_pt, last.position, Matrix.Rotation(radians(angle.x), 3, 'X'))
        end_pt = pivot(end_pt, last.position, Matrix.Rotation(radians(angle.y), 3, 'Y'))

        self.cur_state = TurtleState(end_pt, angle, branch_length)
        self.points.append(self.cur_state.copy())

def interpret(symbols: str, jitter: Optional[Callable[[], int]] = None) -> List[TurtleState]:
    points = turtle_3D(jitter).draw(symbols)
    logger.debug("interpreted %d symbols into %d points", len(symbols), len(points))
    return points
