"""
Rendering Layer
===============

Bounded Context: Painting render plans onto images.

Responsibilities:
- Draw rings and axis lines
- Draw cardinal labels
- Pure rendering - layout comes from the geometry layer
"""

from winddirections_grid.rendering.visualizer import GridVisualizer

__all__ = [
    "GridVisualizer",
]
