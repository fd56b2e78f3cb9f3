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
from typing import Iterable, Tuple

from .errors import ConfigurationError

__all__ = (
    "ProductionRules",
    "DEFAULT_RULES",
    "rewrite",
    "expand",
    )

logger = logging.getLogger(__name__)

class ProductionRules:
    """Fixed symbol -> replacement table. Symbols without an entry rewrite to themselves."""

    def __init__(self, pairs: Iterable[Tuple[str, str]]):
        self._pairs = tuple(pairs)
        self._lookup = {}
        for predecessor, successor in self._pairs:
            if not isinstance(predecessor, str) or len(predecessor) != 1:
                raise ConfigurationError("rule key must be a single symbol, got " + repr(predecessor))
            if not isinstance(successor, str):
                raise ConfigurationError("replacement for '" + predecessor + "' must be a string")
            if predecessor in self._lookup:
                raise ConfigurationError("duplicate rule for '" + predecessor + "'")
            self._lookup[predecessor] = successor

    @classmethod
    def from_dict(cls, rewriting_rules: dict):
        return cls(rewriting_rules.items())

    def replacement(self, symbol: str) -> str:
        return self._lookup.get(symbol, symbol)

    def __contains__(self, symbol):
        return symbol in self._lookup

    def __len__(self):
        return len(self._pairs)

    def __iter__(self):
        return iter(self._pairs)

    def __eq__(self, other):
        if not isinstance(other, ProductionRules):
            return NotImplemented
        return self._pairs == other._pairs

    def __hash__(self):
        return hash(self._pairs)

    def __repr__(self):
        return "ProductionRules(" + repr(list(self._pairs)) + ")"

DEFAULT_RULES = ProductionRules((("F", "F[-F]F[+F][F]"),))

def rewrite(symbols: str, rules: ProductionRules) -> str:
    # One pass, left to right. Every symbol is either replaced or kept.
    return "".join([rules.replacement(c) for c in symbols])

def expand(axiom: str, rules: ProductionRules = DEFAULT_RULES, num_iters: int = 0) -> str:
    if num_iters < 0:
        raise ConfigurationError("iteration count must be >= 0, got " + str(num_iters))

    str_output = axiom
    for i in range(num_iters):
        str_output = rewrite(str_output, rules)
        logger.debug("iteration %d: %d symbols", i + 1, len(str_output))

    return str_output
