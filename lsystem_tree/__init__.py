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

from .config import DEFAULT_AXIOM, MAX_ITERATIONS, TreeConfig, config_from_dict
from .errors import ConfigurationError, LSystemTreeError, RenderBackendError, UnbalancedBracketError
from .geometry import BASE_RADIUS_FACTOR, BranchDescriptor, build
from .grammar import DEFAULT_RULES, ProductionRules, expand, rewrite
from .renderer import RecordedBranch, recording_renderer, renderer
from .tree import lsystem_tree_generator
from .turtle import TurtleState, constant_angle_jitter, interpret, turtle_3D, uniform_angle_jitter

__version__ = "0.1.0"
