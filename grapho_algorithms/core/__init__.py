"""
Core functionality for Grapho Algorithms.

This module contains the node and edge entities, the two graph stores
and the error types that every algorithm builds on.
"""

from .errors import *
from .graph import *
from .adjacency_list import *
from .adjacency_matrix import *
