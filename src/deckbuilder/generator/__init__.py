"""
PPTX Generator Module
Generates PowerPoint presentations from slide models.
"""

from .pptx_generator import PPTXGenerator
from .element_renderer import ElementRenderer

__all__ = ['PPTXGenerator', 'ElementRenderer']
