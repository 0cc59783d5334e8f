"""
PPTX Generator - Main generator for creating PowerPoint presentations
"""

import io
import logging
from pathlib import Path
from typing import Optional, Union

from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.util import Inches

from ..layout.design import Theme
from ..mapper.style_mapper import StyleMapper
from ..model.slide_model import SlideModel
from ..postprocess.archive import normalize_and_write
from .element_renderer import ElementRenderer

logger = logging.getLogger(__name__)

BLANK_LAYOUT_INDEX = 6
DEFAULT_AUTHOR = "PowerPoint Generator"


class PPTXGenerator:
    """
    Generates PowerPoint presentations from slide models.
    """

    def __init__(self, theme: Theme, title: Optional[str] = None, author: Optional[str] = None,
                 template_path: Optional[str] = None):
        """
        Initialize PPTX Generator.

        Args:
            theme: Theme providing slide dimensions and fonts
            title: Document title (core properties)
            author: Document author (core properties)
            template_path: Optional .pptx whose masters and layouts are reused
        """
        self.theme = theme

        if template_path and Path(template_path).exists():
            self.prs = Presentation(template_path)
            logger.info(f"Using template: {template_path}")
        else:
            if template_path:
                logger.warning(f"Template not found, using default: {template_path}")
            self.prs = Presentation()

        design = theme.design
        self.prs.slide_width = Inches(design.slide_width_in)
        self.prs.slide_height = Inches(design.slide_height_in)

        self.prs.core_properties.title = title or "Presentation"
        self.prs.core_properties.author = author or DEFAULT_AUTHOR

        self.style_mapper = StyleMapper(theme.font_face)
        self.element_renderer = ElementRenderer(self.style_mapper)

        logger.info(f"PPTXGenerator initialized: {design.slide_width_in}\" x {design.slide_height_in}\", "
                    f"title '{self.prs.core_properties.title}'")

    def add_slide_from_model(self, slide_model: SlideModel):
        """
        Add a slide to the presentation from a slide model.

        Primitives are rendered strictly in model order, so later primitives
        draw on top of earlier ones.

        Args:
            slide_model: SlideModel to render

        Returns:
            Created slide object
        """
        layouts = self.prs.slide_layouts
        layout = layouts[BLANK_LAYOUT_INDEX] if len(layouts) > BLANK_LAYOUT_INDEX else layouts[-1]
        slide = self.prs.slides.add_slide(layout)

        logger.info(f"Creating slide {slide_model.slide_number + 1} with {len(slide_model)} elements")

        if slide_model.background_color:
            self._set_slide_background_color(slide, slide_model.background_color)

        for primitive in slide_model.elements:
            self.element_renderer.render_element(slide, primitive)

        return slide

    def to_bytes(self) -> bytes:
        """Serialize the presentation to an in-memory .pptx archive."""
        buffer = io.BytesIO()
        self.prs.save(buffer)
        return buffer.getvalue()

    def save(self, output_path: Union[str, Path]) -> Path:
        """
        Save the presentation to file.

        The serialized archive always goes through the group-extent
        normalization before it reaches disk.

        Args:
            output_path: Path to save the PPTX file

        Returns:
            Path of the written file
        """
        design = self.theme.design
        path = normalize_and_write(self.to_bytes(), design.slide_width_in, design.slide_height_in, output_path)
        logger.info(f"Presentation saved to: {path}")
        return path

    def _set_slide_background_color(self, slide, hex_color: str):
        """
        Set solid color background for a slide.

        Args:
            slide: PowerPoint slide object
            hex_color: Hex color string
        """
        rgb = self.style_mapper.hex_to_rgb(hex_color)
        if rgb is None:
            logger.warning(f"Invalid background color: {hex_color}")
            return
        fill = slide.background.fill
        fill.solid()
        fill.fore_color.rgb = RGBColor(*rgb)

    def get_slide_count(self) -> int:
        """Get the number of slides in the presentation."""
        return len(self.prs.slides)
