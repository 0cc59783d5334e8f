"""
SlideBuilder - builds single slides and multi-slide decks from content
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

from .config import load_config, theme_from_config
from .errors import ContentSchemaError
from .generator.pptx_generator import DEFAULT_AUTHOR, PPTXGenerator
from .layout.design import Theme
from .model.content import SlideContent, parse_slide_content
from .model.slide_model import SlideModel
from .renderer.templates import TemplateRenderer

logger = logging.getLogger(__name__)


class SlideBuilder:
    """
    Builds presentations following the card slide template.

    Each call creates its own presentation; slides of one presentation are
    rendered strictly one after another into that document.
    """

    def __init__(self, theme: Optional[Theme] = None, config: Optional[Dict[str, Any]] = None):
        """
        Initialize SlideBuilder.

        Args:
            theme: Theme to render with (built from `config` when omitted)
            config: Configuration dictionary as returned by load_config
        """
        self.config = config if config is not None else load_config()
        self.theme = theme or theme_from_config(self.config)
        self.renderer = TemplateRenderer(self.theme)

        generator_config = self.config.get('generator') or {}
        self.default_author = generator_config.get('author') or DEFAULT_AUTHOR
        self.default_title = generator_config.get('title')
        self.template_path = generator_config.get('template')

    def _new_generator(self, title: Optional[str], author: Optional[str], fallback_title: str) -> PPTXGenerator:
        # explicit title, then the configured default, then one derived from the content
        return PPTXGenerator(
            self.theme,
            title=title or self.default_title or fallback_title,
            author=author or self.default_author,
            template_path=self.template_path,
        )

    def render(self, slide_data: Union[SlideContent, Dict[str, Any]], slide_number: int = 0,
               split_columns: Optional[bool] = None) -> SlideModel:
        """
        Validate slide content and render it to a SlideModel.

        Args:
            slide_data: SlideContent or descriptor dictionary
            slide_number: Zero-based slide position
            split_columns: Overrides the content's splitColumns flag when given

        Returns:
            SlideModel
        """
        content = parse_slide_content(slide_data)
        if split_columns is not None:
            content = content.model_copy(update={'split_columns': bool(split_columns)})
        return self.renderer.render_slide(content, slide_number)

    def build_slide(self, generator: PPTXGenerator, slide_data: Union[SlideContent, Dict[str, Any]],
                    split_columns: Optional[bool] = None):
        """
        Append one slide to an in-progress presentation.

        Args:
            generator: Target presentation
            slide_data: SlideContent or descriptor dictionary
            split_columns: Overrides the content's splitColumns flag when given

        Returns:
            Created slide object
        """
        model = self.render(slide_data, generator.get_slide_count(), split_columns)
        return generator.add_slide_from_model(model)

    def build_single_slide(self, slide_data: Union[SlideContent, Dict[str, Any]],
                           output_path: Union[str, Path], split_columns: Optional[bool] = None) -> Path:
        """
        Build a presentation holding a single slide.

        Args:
            slide_data: Slide content
            output_path: Output .pptx path (parent directories are created)
            split_columns: Use equal column widths; defaults to the content's flag

        Returns:
            Path of the written file
        """
        content = parse_slide_content(slide_data)
        generator = self._new_generator(None, None, content.header.title or "Slide")
        self.build_slide(generator, content, split_columns)
        return generator.save(output_path)

    def build_presentation(self, slides: Sequence[Union[SlideContent, Dict[str, Any]]],
                           output_path: Union[str, Path], title: Optional[str] = None,
                           author: Optional[str] = None) -> Path:
        """
        Build a multi-slide presentation.

        All slides are validated before the first one is drawn.

        Args:
            slides: Slide contents in deck order
            output_path: Output .pptx path (parent directories are created)
            title: Document title
            author: Document author

        Returns:
            Path of the written file
        """
        if not slides:
            raise ContentSchemaError('slides', 'at least one slide is required')
        contents = [parse_slide_content(slide, f"slides.{idx}") for idx, slide in enumerate(slides)]

        generator = self._new_generator(title, author, "Presentation")
        for content in contents:
            self.build_slide(generator, content)

        logger.info(f"Built presentation with {generator.get_slide_count()} slide(s)")
        return generator.save(output_path)

    def get_color_palette(self) -> Dict[str, str]:
        """Get the color palette."""
        return self.theme.palette.to_dict()

    def get_design_specs(self) -> Dict[str, Any]:
        """Get design constants, including the physical slide size."""
        design = self.theme.design
        specs = design.to_dict()
        specs['slide'] = {'width_in': design.slide_width_in, 'height_in': design.slide_height_in}
        specs['font_face'] = self.theme.font_face
        return specs
