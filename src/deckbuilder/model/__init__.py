"""
Model Module
Slide content input models and the drawing-primitive slide model.
"""

from .content import (
    CardVariant, HeaderContent, IconItem, JourneyStep, Metric, CardContent,
    AskContent, SlideContent, parse_slide_content, parse_card_content,
)
from .slide_model import Shadow, ShapePrimitive, TextPrimitive, SlideModel

__all__ = [
    'CardVariant', 'HeaderContent', 'IconItem', 'JourneyStep', 'Metric', 'CardContent',
    'AskContent', 'SlideContent', 'parse_slide_content', 'parse_card_content',
    'Shadow', 'ShapePrimitive', 'TextPrimitive', 'SlideModel',
]
