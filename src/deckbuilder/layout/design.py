"""
Design constants for the card slide template.

All values are immutable and validated on construction: a theme whose
constants would leave no room for the content cards is rejected before any
shape is drawn.
"""

import logging
from dataclasses import dataclass, field, fields, asdict
from typing import Any, Dict, Tuple

from ..errors import ConfigurationError
from ..mapper.palette import Palette

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DesignConstants:
    """Canvas size, margins, paddings and gaps in canvas pixels."""

    width_px: float = 1280
    height_px: float = 720
    slide_width_in: float = 10.0
    slide_height_in: float = 5.625
    shell_margin_x_px: float = 28
    shell_margin_y_px: float = 24
    shell_radius_px: float = 26
    padding_x_px: float = 44
    padding_y_px: float = 40
    column_gap_px: float = 20
    vertical_gap_px: float = 26
    header_height_px: float = 100
    ask_height_px: float = 76
    card_padding_px: float = 24
    metric_gap_px: float = 12
    split_ratio: Tuple[float, float] = (1.1, 0.9)

    def __post_init__(self):
        issues = self.validate()
        if issues:
            raise ConfigurationError(issues)

    @property
    def px_per_in(self) -> float:
        return self.width_px / self.slide_width_in

    @property
    def content_width_px(self) -> float:
        return self.width_px - 2 * (self.shell_margin_x_px + self.padding_x_px)

    @property
    def content_height_px(self) -> float:
        return self.height_px - 2 * (self.shell_margin_y_px + self.padding_y_px)

    @property
    def cards_height_px(self) -> float:
        return (self.content_height_px - self.header_height_px
                - self.ask_height_px - 2 * self.vertical_gap_px)

    def validate(self) -> list:
        """Return a list of problems with these constants (empty if valid)."""
        issues = []
        for f in fields(self):
            if f.name == 'split_ratio':
                continue
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                issues.append(f"{f.name} must be a number, got {value!r}")
            elif value < 0:
                issues.append(f"{f.name} must be non-negative, got {value}")
        if issues:
            return issues

        if self.width_px <= 0 or self.height_px <= 0:
            issues.append("canvas width and height must be positive")
        if self.slide_width_in <= 0 or self.slide_height_in <= 0:
            issues.append("slide width and height must be positive")

        ratio = self.split_ratio
        if (len(ratio) != 2 or any(isinstance(r, bool) or not isinstance(r, (int, float)) for r in ratio)
                or min(ratio) <= 0):
            issues.append(f"split_ratio must be two positive numbers, got {ratio!r}")

        if self.content_width_px - self.column_gap_px <= 0:
            issues.append(
                f"content width ({self.content_width_px}px) leaves no room for two cards "
                f"with a {self.column_gap_px}px column gap"
            )
        if self.cards_height_px <= 0:
            issues.append(
                f"card height would be {self.cards_height_px}px: content height "
                f"{self.content_height_px}px - header {self.header_height_px}px - ask "
                f"{self.ask_height_px}px - 2 x gap {self.vertical_gap_px}px must be positive"
            )
        return issues

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['split_ratio'] = list(self.split_ratio)
        data['px_per_in'] = self.px_per_in
        return data


@dataclass(frozen=True)
class TemplateMetrics:
    """Fixed sizes (canvas pixels) used by the card templates."""

    icon_size_px: float = 54
    icon_row_height_px: float = 68
    icon_text_gap_px: float = 14
    card_title_advance_px: float = 28
    pill_height_px: float = 32
    pill_gap_px: float = 12
    pill_row_advance_px: float = 46
    journey_gap_px: float = 14
    journey_height_px: float = 90
    journey_badge_px: float = 44
    journey_row_advance_px: float = 104
    metric_height_px: float = 58
    metric_bottom_offset_px: float = 66

    def __post_init__(self):
        issues = []
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                issues.append(f"renderer.{f.name} must be a non-negative number, got {value!r}")
        if issues:
            raise ConfigurationError(issues)


@dataclass(frozen=True)
class Theme:
    """Everything the renderer and generator need to style a slide."""

    design: DesignConstants = field(default_factory=DesignConstants)
    metrics: TemplateMetrics = field(default_factory=TemplateMetrics)
    palette: Palette = field(default_factory=Palette)
    font_face: str = "Segoe UI"

    @property
    def px_per_in(self) -> float:
        return self.design.px_per_in
