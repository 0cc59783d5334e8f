"""
Layout Engine - Computes slide regions from design constants
"""

import logging
from dataclasses import dataclass

from ..errors import ConfigurationError
from .design import DesignConstants
from .units import MIN_BOX_PX, px_to_in

logger = logging.getLogger(__name__)

# Header sub-regions, as fractions of the content width / offsets in pixels
HEADER_TEXT_WIDTH_RATIO = 0.72
EYEBROW_OFFSET_PX, EYEBROW_HEIGHT_PX = 0, 20
TITLE_OFFSET_PX, TITLE_HEIGHT_PX = 22, 40
SUBTITLE_OFFSET_PX, SUBTITLE_HEIGHT_PX = 66, 24
BADGE_RIGHT_INSET_PX = 260
BADGE_OFFSET_PX = 6
BADGE_WIDTH_PX, BADGE_HEIGHT_PX = 250, 48
BADGE_RADIUS_PX = 14


@dataclass(frozen=True)
class Region:
    """A rectangle in inches."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Box:
    """A rectangle on the design canvas, in pixels."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def inset(self, dx: float, dy: float) -> "Box":
        return Box(self.x + dx, self.y + dy, self.width - 2 * dx, self.height - 2 * dy)

    def to_region(self, px_per_in: float) -> Region:
        return as_region(self.x, self.y, self.width, self.height, px_per_in)


def as_region(x_px: float, y_px: float, w_px: float, h_px: float, px_per_in: float) -> Region:
    """
    Convert a pixel box to an inch region.

    Width and height are floored at a few pixels so the serializer never
    receives a degenerate shape.
    """
    return Region(
        x=px_to_in(x_px, px_per_in),
        y=px_to_in(y_px, px_per_in),
        width=px_to_in(max(w_px, MIN_BOX_PX), px_per_in),
        height=px_to_in(max(h_px, MIN_BOX_PX), px_per_in),
    )


@dataclass(frozen=True)
class HeaderLayout:
    band: Box
    eyebrow: Box
    title: Box
    subtitle: Box
    badge: Box


@dataclass(frozen=True)
class LayoutTree:
    """Named regions of one slide: shell > content > header, cards, ask."""

    shell: Box
    content: Box
    header: HeaderLayout
    left_card: Box
    right_card: Box
    ask: Box
    px_per_in: float
    split_equally: bool

    def region(self, box: Box) -> Region:
        return box.to_region(self.px_per_in)


def card_widths(design: DesignConstants, split_equally: bool):
    """Return (left, right) card widths in pixels."""
    available = design.content_width_px - design.column_gap_px
    if split_equally:
        half = available / 2
        return half, half

    left_share, right_share = design.split_ratio
    total = left_share + right_share
    left = available * left_share / total
    return left, available - left


def compute_layout(design: DesignConstants, split_equally: bool = False) -> LayoutTree:
    """
    Compute every region of the slide template.

    Args:
        design: Design constants
        split_equally: Give both cards the same width instead of the
            configured asymmetric split

    Returns:
        LayoutTree in canvas pixels

    Raises:
        ConfigurationError: if the constants leave no room for the cards
    """
    shell = Box(
        design.shell_margin_x_px,
        design.shell_margin_y_px,
        design.width_px - 2 * design.shell_margin_x_px,
        design.height_px - 2 * design.shell_margin_y_px,
    )
    content = shell.inset(design.padding_x_px, design.padding_y_px)

    cards_height = content.height - design.header_height_px - design.ask_height_px - 2 * design.vertical_gap_px
    if cards_height <= 0 or content.width <= design.column_gap_px:
        raise ConfigurationError(
            f"Design constants leave no room for content cards "
            f"(content {content.width}x{content.height}px, card height {cards_height}px)"
        )

    text_width = content.width * HEADER_TEXT_WIDTH_RATIO
    header = HeaderLayout(
        band=Box(content.x, content.y, content.width, design.header_height_px),
        eyebrow=Box(content.x, content.y + EYEBROW_OFFSET_PX, text_width, EYEBROW_HEIGHT_PX),
        title=Box(content.x, content.y + TITLE_OFFSET_PX, text_width, TITLE_HEIGHT_PX),
        subtitle=Box(content.x, content.y + SUBTITLE_OFFSET_PX, text_width, SUBTITLE_HEIGHT_PX),
        badge=Box(content.right - BADGE_RIGHT_INSET_PX, content.y + BADGE_OFFSET_PX,
                  BADGE_WIDTH_PX, BADGE_HEIGHT_PX),
    )

    left_width, right_width = card_widths(design, split_equally)
    cards_y = content.y + design.header_height_px + design.vertical_gap_px
    left_card = Box(content.x, cards_y, left_width, cards_height)
    right_card = Box(content.x + left_width + design.column_gap_px, cards_y, right_width, cards_height)

    ask = Box(content.x, cards_y + cards_height + design.vertical_gap_px, content.width, design.ask_height_px)

    logger.debug(f"Layout (split_equally={split_equally}): content {content.width:.1f}x{content.height:.1f}px, "
                 f"cards {left_width:.1f}/{right_width:.1f}x{cards_height:.1f}px")

    return LayoutTree(
        shell=shell,
        content=content,
        header=header,
        left_card=left_card,
        right_card=right_card,
        ask=ask,
        px_per_in=design.px_per_in,
        split_equally=split_equally,
    )
