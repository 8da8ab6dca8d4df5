"""
Visualization functions for Grapho Algorithms.

This module provides functions for plotting graphs, highlighted paths
and all-pairs distance matrices.
"""

from .network import *
