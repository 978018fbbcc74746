"""Shared typing constructs for routegraph.

Defines the type aliases used across graph containers and algorithms. Contains
no runtime logic.
"""

from routegraph.types.base import Cost, CostMap, NodeID, PredMap

__all__ = [
    "Cost",
    "CostMap",
    "NodeID",
    "PredMap",
]
