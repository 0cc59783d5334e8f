"""
Style Mapper - Maps primitive styles to PowerPoint attributes
"""

import logging
from typing import Optional, Tuple

from pptx.dml.color import RGBColor
from pptx.enum.text import MSO_ANCHOR, PP_ALIGN
from pptx.util import Pt

from ..utils.xml_utils import set_outer_shadow, set_run_char_spacing, set_run_font_xml, set_solid_fill_alpha

logger = logging.getLogger(__name__)

ALIGNMENT_MAP = {
    'left': PP_ALIGN.LEFT,
    'center': PP_ALIGN.CENTER,
    'right': PP_ALIGN.RIGHT,
}


class StyleMapper:
    """
    Applies fill, line, shadow and font styles to python-pptx objects.
    """

    def __init__(self, default_font: str = 'Segoe UI'):
        """
        Initialize Style Mapper.

        Args:
            default_font: Typeface used when a text primitive names none
        """
        self.default_font = default_font
        logger.info(f"StyleMapper initialized with default font '{default_font}'")

    def apply_shape_style(self, shape, primitive):
        """
        Apply fill, border and shadow of a ShapePrimitive.

        Args:
            shape: PowerPoint autoshape
            primitive: ShapePrimitive
        """
        rgb = self.hex_to_rgb(primitive.fill)
        if rgb is None:
            shape.fill.background()
            logger.warning(f"Invalid fill color: {primitive.fill}")
        else:
            shape.fill.solid()
            shape.fill.fore_color.rgb = RGBColor(*rgb)
            if primitive.fill_opacity < 1.0:
                set_solid_fill_alpha(shape.element.spPr, primitive.fill_opacity)
                logger.debug(f"Set shape transparency: opacity {primitive.fill_opacity:.2f}")

        line_rgb = self.hex_to_rgb(primitive.line_color)
        if line_rgb is not None:
            shape.line.color.rgb = RGBColor(*line_rgb)
            shape.line.width = Pt(primitive.line_width if primitive.line_width else 0.75)
            if primitive.line_opacity < 1.0:
                set_solid_fill_alpha(shape.element.spPr.ln, primitive.line_opacity)
        else:
            # No border
            shape.line.fill.background()

        if primitive.shadow is not None:
            s = primitive.shadow
            set_outer_shadow(shape, s.opacity, s.blur, s.offset, s.angle, s.color)
        else:
            # Suppress the theme's default shape shadow
            shape.shadow.inherit = False

    def apply_text_style(self, text_frame, primitive):
        """
        Write a TextPrimitive into a text frame.

        Args:
            text_frame: PowerPoint text frame
            primitive: TextPrimitive
        """
        text_frame.clear()
        text_frame.word_wrap = True
        text_frame.vertical_anchor = MSO_ANCHOR.TOP
        text_frame.margin_left = text_frame.margin_right = 0
        text_frame.margin_top = text_frame.margin_bottom = 0

        paragraph = text_frame.paragraphs[0]
        paragraph.alignment = ALIGNMENT_MAP.get(primitive.align, PP_ALIGN.LEFT)

        run = paragraph.add_run()
        run.text = primitive.text
        run.font.size = Pt(primitive.size_pt)
        run.font.bold = primitive.bold

        rgb = self.hex_to_rgb(primitive.color)
        if rgb is not None:
            run.font.color.rgb = RGBColor(*rgb)

        if primitive.char_spacing:
            set_run_char_spacing(run, primitive.char_spacing)

        set_run_font_xml(run, primitive.font_face or self.default_font)

    def hex_to_rgb(self, hex_color: Optional[str]) -> Optional[Tuple[int, int, int]]:
        """
        Convert hex color to RGB tuple.

        Args:
            hex_color: Hex color string (e.g., 'FF0000' or '#FF0000'), or None

        Returns:
            RGB tuple (r, g, b), or None if conversion fails
        """
        if not hex_color or not isinstance(hex_color, str):
            return None

        hex_color = hex_color.lstrip('#')

        try:
            if len(hex_color) == 6:
                return (int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16))
            elif len(hex_color) == 3:
                return tuple(int(c * 2, 16) for c in hex_color)
        except ValueError:
            logger.warning(f"Invalid hex color: {hex_color}")

        return None
