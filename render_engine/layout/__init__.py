"""
Block layout for the render engine.
"""

from .layout import LayoutEngine, LayoutNode, Dimensions, Position, resolve_length

__all__ = ['LayoutEngine', 'LayoutNode', 'Dimensions', 'Position', 'resolve_length']
