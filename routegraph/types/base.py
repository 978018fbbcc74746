"""Base type aliases shared by graph containers and algorithms."""

from __future__ import annotations

from typing import Dict, Hashable, Optional, Union

#: Represents numeric cost along a route (sum of integer edge weights).
Cost = Union[int, float]

#: Identifier of a node: the value it wraps.
NodeID = Hashable

#: Best-known distance per node. A node absent from the map has unknown distance.
CostMap = Dict[NodeID, Cost]

#: Predecessor of each reached node on its best-known route; None for the source.
PredMap = Dict[NodeID, Optional[NodeID]]
