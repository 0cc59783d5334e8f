"""
Utilities Module
Low-level DrawingML helpers.
"""

from .xml_utils import set_run_font_xml, set_run_char_spacing, set_solid_fill_alpha, set_outer_shadow

__all__ = ['set_run_font_xml', 'set_run_char_spacing', 'set_solid_fill_alpha', 'set_outer_shadow']
