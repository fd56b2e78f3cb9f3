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

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from math import degrees
from typing import Any, Dict, List

import numpy as np
from mathutils import Euler, Vector

from .errors import RenderBackendError
from .geometry import ROTATION_ORDER

__all__ = (
    "renderer",
    "RecordedBranch",
    "recording_renderer",
    )

class renderer(ABC):
    """Scene-graph collaborator that owns the visual objects for each branch."""

    @abstractmethod
    def instantiate(self, prefab, parent):
        ...

    @abstractmethod
    def set_transform(self, handle, position: Vector, rotation: Euler, scale: Vector):
        ...

    @abstractmethod
    def reparent(self, handle, new_parent):
        ...

    @abstractmethod
    def destroy(self, handle):
        ...

#------------------------------------------------------------------------------------------------------------------

@dataclass(eq=False)
class RecordedBranch:
    index: int
    prefab: Any
    parent: Any
    location: Vector = field(default_factory=lambda: Vector((0.0, 0.0, 0.0)))
    rotation: Euler = field(default_factory=lambda: Euler((0.0, 0.0, 0.0), ROTATION_ORDER))
    scale: Vector = field(default_factory=lambda: Vector((1.0, 1.0, 1.0)))
    destroyed: bool = False

def _round_value(value):
    if isinstance(value, (int, float)):
        return round(float(value), 6)
    if isinstance(value, (list, tuple, Vector)):
        return [_round_value(v) for v in value]
    return value

class recording_renderer(renderer):
    """Headless renderer that keeps every branch in memory."""

    def __init__(self):
        self.objects: List[RecordedBranch] = []
        self.num_created = 0

    def _check_live(self, handle):
        if isinstance(handle, RecordedBranch) and handle.destroyed:
            raise RenderBackendError("branch " + str(handle.index) + " was already destroyed")
        if not any(o is handle for o in self.objects):
            raise RenderBackendError("unknown branch handle " + repr(handle))

    def instantiate(self, prefab, parent):
        obj = RecordedBranch(self.num_created, prefab, parent)
        self.num_created += 1
        self.objects.append(obj)
        return obj

    def set_transform(self, handle, position, rotation, scale):
        self._check_live(handle)
        handle.location = Vector(position)
        handle.rotation = Euler(rotation, rotation.order)
        handle.scale = Vector(scale)

    def reparent(self, handle, new_parent):
        self._check_live(handle)
        handle.parent = new_parent

    def destroy(self, handle):
        self._check_live(handle)
        handle.destroyed = True
        self.objects.remove(handle)

    def live_objects(self) -> List[RecordedBranch]:
        return list(self.objects)

    def snapshot(self) -> List[Dict[str, Any]]:
        return [
            {
                "index": o.index,
                "location": _round_value(o.location),
                "rotation_deg": _round_value([degrees(a) for a in o.rotation]),
                "rotation_order": o.rotation.order,
                "scale": _round_value(o.scale),
            }
            for o in self.live_objects()
        ]

    def dimensions(self):
        # Axis-aligned extent of the branch origins, X, Y, Z.
        objs = self.live_objects()
        if len(objs) < 1:
            return 0.0, 0.0, 0.0
        locations = np.array([[o.location[0], o.location[1], o.location[2]] for o in objs]).reshape(len(objs), 3)
        spans = np.max(locations, axis=0) - np.min(locations, axis=0)
        return float(spans[0]), float(spans[1]), float(spans[2])
