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

__all__ = (
    "LSystemTreeError",
    "ConfigurationError",
    "UnbalancedBracketError",
    "RenderBackendError",
    )

class LSystemTreeError(Exception):
    pass

class ConfigurationError(LSystemTreeError, ValueError):
    pass

class UnbalancedBracketError(LSystemTreeError, ValueError):
    def __init__(self, index: int, symbol: str = "]"):
        self.index = index
        self.symbol = symbol
        super().__init__("'" + symbol + "' at index " + str(index) + " has no matching '['")

class RenderBackendError(LSystemTreeError, RuntimeError):
    pass
