"""Video wall size calculator.

Resolves wall dimensions from any two of aspect ratio, height, width and
diagonal, and finds the closest cabinet grids below and above the target.
"""

__version__ = "0.1.0"
