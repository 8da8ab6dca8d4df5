"""
Grapho Algorithms - A Python package of weighted graph stores and classic graph algorithms.
"""

__version__ = '0.1.0'

# Import main submodules for easy access
from . import core
from . import algorithms
from . import io
from . import visualization
from . import graph_config
