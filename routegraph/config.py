"""Configuration classes for routegraph components."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SearchConfig:
    """Configuration for path enumeration and topology loading."""

    # Walk length ceiling for weight-bounded searches over graphs that contain
    # zero-weight edges (cumulative weight alone cannot bound those walks).
    zero_weight_hop_ceiling: int = 64

    # Weight assigned by loaders when an edge definition carries none.
    # None means a missing weight is an error.
    default_weight: Optional[int] = None

    def hop_ceiling(self, has_zero_weight_edges: bool) -> Optional[int]:
        """Return the walk length ceiling to apply, if any."""
        return self.zero_weight_hop_ceiling if has_zero_weight_edges else None


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
