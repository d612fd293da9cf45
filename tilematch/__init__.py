"""
Tile-match solvability checker.

Subpackages:
    - solver: beam search solvability engine
    - layout: layered slot geometry and blocking rule
"""

__version__ = "0.1.0"
