"""
Wink Render - the styling and layout core of the Wink renderer.

Pipeline: style text -> rule groups -> cascade (resolved tree) -> layout tree.
"""

from render_engine.engine import RenderEngine, RenderResult

# Package information
__version__ = "1.0.0"
__author__ = "Wink Browser Team"
__description__ = "Styling and layout core of the Wink renderer"

__all__ = ['RenderEngine', 'RenderResult']
