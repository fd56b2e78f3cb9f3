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
from typing import Callable, List, Optional

from .config import TreeConfig, validate_iterations
from .errors import ConfigurationError, RenderBackendError
from .geometry import BranchDescriptor, build
from .grammar import DEFAULT_RULES, ProductionRules, expand
from .renderer import renderer
from .turtle import TurtleState, interpret

__all__ = (
    "lsystem_tree_generator",
    )

logger = logging.getLogger(__name__)

class lsystem_tree_generator:
    """Expands the grammar, walks it with the turtle and places one branch object per descriptor."""

    def __init__(self, scene: renderer, config: Optional[TreeConfig] = None, jitter: Optional[Callable[[], int]] = None):
        self.scene = scene
        self.config = config if config is not None else TreeConfig()
        self.jitter = jitter
        self.rules: Optional[ProductionRules] = None
        self._expanded = ""
        self._points: List[TurtleState] = []
        self._descriptors: List[BranchDescriptor] = []
        self._branches = []

    @property
    def branches(self):
        return tuple(self._branches)

    @property
    def points(self):
        return tuple(self._points)

    @property
    def descriptors(self):
        return tuple(self._descriptors)

    @property
    def expanded(self) -> str:
        return self._expanded

    def regenerate(self, axiom: Optional[str] = None, iterations: Optional[int] = None):
        axiom = self.config.axiom if axiom is None else axiom
        iterations = self.config.iterations if iterations is None else iterations
        if not isinstance(axiom, str):
            raise ConfigurationError("axiom must be a string, got " + repr(axiom))
        validate_iterations(iterations)

        self.clear()
        try:
            self.rules = DEFAULT_RULES
            self._expanded = expand(axiom, self.rules, iterations)
            self._points = interpret(self._expanded, self.jitter)
            self._descriptors = build(self._points)
            for d in self._descriptors:
                self.create_branch(d)
        except Exception as exc:
            logger.debug("regeneration failed, removing %d partial branches", len(self._branches))
            try:
                self._rollback()
            except RenderBackendError as cleanup_exc:
                logger.warning("rollback left branches in the scene: %s", cleanup_exc)
                raise exc
            raise

        logger.debug("regenerated tree: %d symbols, %d points, %d branches",
            len(self._expanded), len(self._points), len(self._branches))

    def _scene_call(self, action: str, fn, *args):
        try:
            return fn(*args)
        except RenderBackendError:
            raise
        except Exception as exc:
            raise RenderBackendError("failed to " + action + " branch: " + str(exc)) from exc

    def create_branch(self, descriptor: BranchDescriptor):
        obj = self._scene_call("instantiate", self.scene.instantiate, self.config.prefab, self.config.parent)
        self._branches.append(obj)
        self._scene_call("transform", self.scene.set_transform, obj, descriptor.position, descriptor.rotation_euler(),
            descriptor.scale)
        self._scene_call("reparent", self.scene.reparent, obj, self.config.reparent_target)
        return obj

    def clear(self):
        self.rules = None
        self._expanded = ""
        self._points = []
        self._descriptors = []

        # A branch stays registered until the scene has actually removed it.
        while self._branches:
            self._scene_call("destroy", self.scene.destroy, self._branches[0])
            del self._branches[0]

    def _rollback(self):
        # Unlike clear(), every branch is attempted and the registry always ends up empty.
        branches = self._branches
        self._branches = []
        self.clear()

        first_error = None
        num_failed = 0
        for obj in branches:
            try:
                self._scene_call("destroy", self.scene.destroy, obj)
            except RenderBackendError as e:
                num_failed += 1
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise RenderBackendError(str(num_failed) + " of " + str(len(branches)) + " branch(es) could not be removed") \
                from first_error
