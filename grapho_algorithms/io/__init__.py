"""
Input/output operations for graphs.

This module provides functions for loading graphs from edge lists
and tables, and for rendering and exporting graphs and results.
"""

from .loaders import *
from .exporters import *
