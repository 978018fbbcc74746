"""Result model package.

Defines the value objects returned by routegraph algorithms.
"""

from routegraph.model.path import Path

__all__ = ["Path"]
