"""
Slide Model - Intermediate representation of a PowerPoint slide
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from ..layout.layout_engine import Region

logger = logging.getLogger(__name__)

SHAPE_KINDS = ('rect', 'roundRect', 'ellipse')
ALIGNMENTS = ('left', 'center', 'right')


@dataclass(frozen=True)
class Shadow:
    """Outer shadow. Blur and offset in points, angle in degrees, opacity 0-1."""

    opacity: float
    blur: float
    offset: float
    angle: float = 90
    color: str = "000000"


@dataclass(frozen=True)
class ShapePrimitive:
    """A filled rectangle, rounded rectangle or ellipse."""

    kind: str
    region: Region
    fill: str
    line_color: Optional[str] = None
    line_width: Optional[float] = None
    radius: Optional[float] = None
    shadow: Optional[Shadow] = None
    fill_opacity: float = 1.0
    line_opacity: float = 1.0
    role: str = ''

    def __post_init__(self):
        if self.kind not in SHAPE_KINDS:
            raise ValueError(f"Unknown shape kind: {self.kind}")


@dataclass(frozen=True)
class TextPrimitive:
    """A single-run text box."""

    region: Region
    text: str
    font_face: str
    size_pt: float
    color: str
    bold: bool = False
    align: str = 'left'
    char_spacing: Optional[float] = None
    role: str = ''

    def __post_init__(self):
        if self.align not in ALIGNMENTS:
            raise ValueError(f"Unknown alignment: {self.align}")


DrawingPrimitive = Union[ShapePrimitive, TextPrimitive]
Fold = Tuple[List[DrawingPrimitive], float]


class SlideModel:
    """
    Ordered, append-only list of drawing primitives for one slide.
    Acts as a bridge between the template renderer and PPTX generation.
    """

    def __init__(self, slide_number: int, width: float = 10.0, height: float = 5.625):
        """
        Initialize a slide model.

        Args:
            slide_number: Zero-based slide number
            width: Slide width in inches
            height: Slide height in inches
        """
        self.slide_number = slide_number
        self.width = width
        self.height = height
        self.background_color: Optional[str] = None
        self.title: Optional[str] = None
        self._elements: List[DrawingPrimitive] = []

    @property
    def elements(self) -> Tuple[DrawingPrimitive, ...]:
        return tuple(self._elements)

    def add(self, primitive: DrawingPrimitive) -> DrawingPrimitive:
        if not isinstance(primitive, (ShapePrimitive, TextPrimitive)):
            raise TypeError(f"Not a drawing primitive: {primitive!r}")
        self._elements.append(primitive)
        return primitive

    def extend(self, primitives: Iterable[DrawingPrimitive]):
        for primitive in primitives:
            self.add(primitive)

    def set_background(self, color: str):
        self.background_color = color

    def set_title(self, title: str):
        self.title = title

    def shapes(self, role: Optional[str] = None) -> List[ShapePrimitive]:
        return [e for e in self._elements
                if isinstance(e, ShapePrimitive) and (role is None or e.role == role)]

    def texts(self, role: Optional[str] = None) -> List[TextPrimitive]:
        return [e for e in self._elements
                if isinstance(e, TextPrimitive) and (role is None or e.role == role)]

    def to_dict(self) -> Dict[str, Any]:
        """Convert slide model to dictionary representation."""
        elements = []
        for element in self._elements:
            data = asdict(element)
            data['type'] = 'shape' if isinstance(element, ShapePrimitive) else 'text'
            elements.append(data)
        return {
            'slide_number': self.slide_number,
            'width': self.width,
            'height': self.height,
            'title': self.title,
            'background_color': self.background_color,
            'elements': elements,
        }

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"SlideModel(slide={self.slide_number}, elements={len(self._elements)})"
