"""
Wind Directions Grid CLI - Render the compass grid from the command line.

Usage:
    winddirections-grid render --width 400 --height 400 --output grid.png
    winddirections-grid render --width 400 --height 300 --config config/grid.yaml
    winddirections-grid plan --width 200 --height 200 --circles 2
"""

__version__ = "1.0.0"
