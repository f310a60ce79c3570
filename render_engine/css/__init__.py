"""
Style model, parser and cascade for the render engine.
"""

from .errors import CSSParseError, ErrorKind, LayoutError, RenderEngineError
from .values import Color, Declarations, NumericValue, StringValue, Unit, Value
from .selector import RuleGroup, Selector, Specificity
from .parser import CSSParser, parse_stylesheet
from .cascade import CascadeResolver, DisplayType, ResolvedNode

__all__ = [
    'CSSParseError', 'ErrorKind', 'LayoutError', 'RenderEngineError',
    'Color', 'Declarations', 'NumericValue', 'StringValue', 'Unit', 'Value',
    'RuleGroup', 'Selector', 'Specificity',
    'CSSParser', 'parse_stylesheet',
    'CascadeResolver', 'DisplayType', 'ResolvedNode',
]
