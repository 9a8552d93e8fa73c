"""
Font Custom: icon font generation from SVG vectors.
"""

__version__ = "2.0.0"
