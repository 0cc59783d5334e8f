"""
deckbuilder - themed PowerPoint slides from structured content.
"""

from .builder import SlideBuilder
from .config import load_config, theme_from_config
from .errors import ArchiveIOError, ConfigurationError, ContentSchemaError, DeckBuilderError
from .layout import DesignConstants, TemplateMetrics, Theme, compute_layout
from .mapper import Palette
from .model import SlideContent, CardContent, parse_slide_content
from .postprocess import normalize_and_write

__version__ = "1.0.0"

__all__ = [
    'SlideBuilder',
    'load_config',
    'theme_from_config',
    'ArchiveIOError',
    'ConfigurationError',
    'ContentSchemaError',
    'DeckBuilderError',
    'DesignConstants',
    'TemplateMetrics',
    'Theme',
    'compute_layout',
    'Palette',
    'SlideContent',
    'CardContent',
    'parse_slide_content',
    'normalize_and_write',
]
