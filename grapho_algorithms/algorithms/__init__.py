"""
Graph algorithms over any GraphStore.

This module provides traversals, single-source and all-pairs shortest
paths, topological sorting and cycle detection. Every function resets
the store it is given before running.
"""

from .traversal import *
from .shortest_path import *
from .ordering import *
