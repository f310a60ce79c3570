"""
Painting for the render engine.
"""

from .painter import Painter

__all__ = ['Painter']
