"""
Style Mapper Module
Palette definition and mapping of primitive styles to PowerPoint.
"""

from .palette import Palette
from .style_mapper import StyleMapper

__all__ = ['Palette', 'StyleMapper']
