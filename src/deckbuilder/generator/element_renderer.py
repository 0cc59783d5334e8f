"""
Element Renderer - Renders drawing primitives to PowerPoint shapes
"""

import logging
from typing import Any

from pptx.enum.shapes import MSO_SHAPE
from pptx.util import Inches

from ..mapper.style_mapper import StyleMapper
from ..model.slide_model import DrawingPrimitive, ShapePrimitive, TextPrimitive

logger = logging.getLogger(__name__)

SHAPE_MAP = {
    'rect': MSO_SHAPE.RECTANGLE,
    'roundRect': MSO_SHAPE.ROUNDED_RECTANGLE,
    'ellipse': MSO_SHAPE.OVAL,
}

# Rounded rectangle adjustment is radius / shorter side, capped at a full capsule
MAX_CORNER_ADJUSTMENT = 0.5


def corner_adjustment(radius: float, width: float, height: float) -> float:
    """
    Convert a corner radius in inches to a ROUNDED_RECTANGLE adjustment value.

    Args:
        radius: Corner radius in inches
        width: Shape width in inches
        height: Shape height in inches
    """
    shorter = min(width, height)
    if shorter <= 0:
        return 0.0
    return round(min(radius / shorter, MAX_CORNER_ADJUSTMENT), 5)


class ElementRenderer:
    """
    Renders slide primitives to PowerPoint shapes.
    """

    def __init__(self, style_mapper: StyleMapper):
        """
        Initialize Element Renderer.

        Args:
            style_mapper: StyleMapper instance
        """
        self.style_mapper = style_mapper

    def render_shape(self, slide, primitive: ShapePrimitive) -> Any:
        """
        Render a shape primitive to the slide.

        Args:
            slide: PowerPoint slide object
            primitive: ShapePrimitive

        Returns:
            Created shape object
        """
        r = primitive.region
        shape = slide.shapes.add_shape(
            SHAPE_MAP[primitive.kind],
            Inches(r.x), Inches(r.y), Inches(r.width), Inches(r.height),
        )
        if primitive.role:
            shape.name = f"{primitive.role} {shape.shape_id}"

        if primitive.kind == 'roundRect':
            radius = primitive.radius if primitive.radius is not None else 0.0
            shape.adjustments[0] = corner_adjustment(radius, r.width, r.height)

        self.style_mapper.apply_shape_style(shape, primitive)
        return shape

    def render_text(self, slide, primitive: TextPrimitive) -> Any:
        """
        Render a text primitive to the slide.

        Args:
            slide: PowerPoint slide object
            primitive: TextPrimitive

        Returns:
            Created text box
        """
        r = primitive.region
        textbox = slide.shapes.add_textbox(Inches(r.x), Inches(r.y), Inches(r.width), Inches(r.height))
        if primitive.role:
            textbox.name = f"{primitive.role} {textbox.shape_id}"

        self.style_mapper.apply_text_style(textbox.text_frame, primitive)
        return textbox

    def render_element(self, slide, primitive: DrawingPrimitive) -> Any:
        """
        Render any primitive to the slide.

        Args:
            slide: PowerPoint slide object
            primitive: ShapePrimitive or TextPrimitive

        Returns:
            Created shape/object
        """
        if isinstance(primitive, ShapePrimitive):
            return self.render_shape(slide, primitive)
        elif isinstance(primitive, TextPrimitive):
            return self.render_text(slide, primitive)
        raise TypeError(f"Unknown primitive type: {type(primitive).__name__}")
