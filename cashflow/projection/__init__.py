"""Mini README: Projection builder for what-if scenarios.

The ``builder`` module parses adjustment and removal options and derives a
projected transaction sequence while keeping the original one intact.
"""

from .builder import Projection, build_projection, parse_adjustments, parse_removals, project_transaction

__all__ = [
    "Projection",
    "build_projection",
    "parse_adjustments",
    "parse_removals",
    "project_transaction",
]
