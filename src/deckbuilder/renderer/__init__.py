"""
Renderer Module
Converts slide content into drawing primitives.
"""

from .templates import TemplateRenderer

__all__ = ['TemplateRenderer']
