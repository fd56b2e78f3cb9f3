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
from dataclasses import dataclass, fields
from typing import Any, Mapping

from .errors import ConfigurationError

__all__ = (
    "DEFAULT_AXIOM",
    "MAX_ITERATIONS",
    "TreeConfig",
    "validate_iterations",
    "config_from_dict",
    )

logger = logging.getLogger(__name__)

DEFAULT_AXIOM = "F"
MAX_ITERATIONS = 6

def validate_iterations(num_iters) -> int:
    if isinstance(num_iters, bool) or not isinstance(num_iters, int):
        raise ConfigurationError("iterations must be an integer, got " + repr(num_iters))
    if num_iters < 0 or num_iters > MAX_ITERATIONS:
        raise ConfigurationError("iterations must lie in [0, " + str(MAX_ITERATIONS) + "], got " + str(num_iters))
    return num_iters

@dataclass
class TreeConfig:
    axiom: str = DEFAULT_AXIOM
    iterations: int = 0
    prefab: Any = None
    parent: Any = None
    # Branches are moved under owner once placed. Falls back to parent.
    owner: Any = None

    def validate(self):
        if not isinstance(self.axiom, str):
            raise ConfigurationError("axiom must be a string, got " + repr(self.axiom))
        validate_iterations(self.iterations)
        return self

    @property
    def reparent_target(self):
        return self.owner if self.owner is not None else self.parent

def config_from_dict(mapping: Mapping[str, Any]) -> TreeConfig:
    """Build a TreeConfig from loose settings, clamping iterations into range."""
    known = {f.name for f in fields(TreeConfig)}
    unknown = sorted(set(mapping) - known)
    if unknown:
        raise ConfigurationError("unknown tree settings: " + ", ".join(unknown))

    values = dict(mapping)
    if "iterations" in values:
        num_iters = values["iterations"]
        if isinstance(num_iters, bool) or not isinstance(num_iters, (int, float)):
            raise ConfigurationError("iterations must be a number, got " + repr(num_iters))
        clamped = min(max(int(num_iters), 0), MAX_ITERATIONS)
        if clamped != num_iters:
            logger.warning("iterations %r clamped to %d", num_iters, clamped)
        values["iterations"] = clamped

    return TreeConfig(**values).validate()
