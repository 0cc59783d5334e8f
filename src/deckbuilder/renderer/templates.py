"""
Template Renderer - Turns slide content into positioned drawing primitives
"""

import logging
from typing import List, Optional, Sequence

from ..errors import ContentSchemaError
from ..layout.design import Theme
from ..layout.layout_engine import Box, LayoutTree, Region, as_region, compute_layout
from ..layout.units import opacity_to_decimal, px_radius_to_in, px_to_pt
from ..model.content import (
    AskContent, CardContent, CardVariant, HeaderContent, IconItem, JourneyStep, Metric,
    SlideContent, JOURNEY_STEPS, MAX_METRICS, MAX_PILLS,
)
from ..model.slide_model import DrawingPrimitive, Fold, Shadow, ShapePrimitive, SlideModel, TextPrimitive

logger = logging.getLogger(__name__)


class TemplateRenderer:
    """
    Renders the card slide template.

    Every method is pure: it returns new primitives (and, for sections that
    stack vertically, the cursor where the next section starts) without
    touching any slide object.
    """

    def __init__(self, theme: Theme):
        """
        Initialize Template Renderer.

        Args:
            theme: Theme with design constants, template metrics and palette
        """
        self.theme = theme
        self.design = theme.design
        self.metrics = theme.metrics
        self.palette = theme.palette
        self.px_per_in = theme.px_per_in

    # ------------------------------------------------------------------
    # Primitive factories
    # ------------------------------------------------------------------

    def _region(self, x: float, y: float, w: float, h: float) -> Region:
        return as_region(x, y, w, h, self.px_per_in)

    def _shadow(self, opacity_pct: float, blur: float, offset: float) -> Shadow:
        return Shadow(opacity=opacity_to_decimal(opacity_pct), blur=blur, offset=offset)

    def _shape(self, kind: str, x: float, y: float, w: float, h: float, fill: str,
               line_color: Optional[str] = None, line_width: Optional[float] = None,
               radius_px: Optional[float] = None, shadow: Optional[Shadow] = None,
               fill_opacity: float = 1.0, line_opacity: float = 1.0,
               role: str = '') -> ShapePrimitive:
        return ShapePrimitive(
            kind=kind,
            region=self._region(x, y, w, h),
            fill=fill,
            line_color=line_color,
            line_width=line_width,
            radius=px_radius_to_in(radius_px, self.px_per_in) if radius_px is not None else None,
            shadow=shadow,
            fill_opacity=fill_opacity,
            line_opacity=line_opacity,
            role=role,
        )

    def _text(self, text: str, x: float, y: float, w: float, h: float, size_px: float, color: str,
              bold: bool = False, align: str = 'left', char_spacing: Optional[float] = None,
              role: str = '') -> TextPrimitive:
        return TextPrimitive(
            region=self._region(x, y, w, h),
            text=text,
            font_face=self.theme.font_face,
            size_pt=px_to_pt(size_px),
            color=color,
            bold=bold,
            align=align,
            char_spacing=char_spacing,
            role=role,
        )

    # ------------------------------------------------------------------
    # Slide frame
    # ------------------------------------------------------------------

    def render_shell(self, layout: LayoutTree) -> List[DrawingPrimitive]:
        shell = layout.shell
        return [
            self._shape('roundRect', shell.x, shell.y, shell.width, shell.height,
                        fill=self.palette.shell_fill,
                        line_color=self.palette.shell_border, line_width=1,
                        radius_px=self.design.shell_radius_px,
                        shadow=self._shadow(24, 12, 0.3), role='shell'),
        ]

    def render_header(self, layout: LayoutTree, header: HeaderContent) -> List[DrawingPrimitive]:
        p = self.palette
        h = layout.header
        badge = h.badge
        return [
            self._text(header.eyebrow.upper(), h.eyebrow.x, h.eyebrow.y, h.eyebrow.width, h.eyebrow.height,
                       12, p.muted, bold=True, char_spacing=3.2, role='eyebrow'),
            self._text(header.title, h.title.x, h.title.y, h.title.width, h.title.height,
                       34, p.deep_navy, bold=True, role='title'),
            self._text(header.subtitle, h.subtitle.x, h.subtitle.y, h.subtitle.width, h.subtitle.height,
                       17, p.muted, role='subtitle'),
            self._shape('roundRect', badge.x, badge.y, badge.width, badge.height,
                        fill=p.deep_navy, line_color=p.deep_navy, radius_px=14,
                        shadow=self._shadow(25, 7, 0.15), role='badge'),
            self._shape('ellipse', badge.x + 14, badge.y + 18, 12, 12,
                        fill=p.gold, line_color=p.gold,
                        shadow=self._shadow(18, 4, 0.02), role='badge_dot'),
            self._text(header.badge, badge.x + 34, badge.y + 12, badge.width - 44, 24,
                       14, p.white, bold=True, role='badge_text'),
        ]

    def render_ask(self, layout: LayoutTree, ask: AskContent) -> List[DrawingPrimitive]:
        p = self.palette
        bar = layout.ask
        return [
            self._shape('roundRect', bar.x, bar.y, bar.width, bar.height,
                        fill=p.deep_navy, line_color=p.deep_navy, radius_px=18,
                        shadow=self._shadow(22, 8, 0.15), role='ask'),
            self._shape('roundRect', bar.x + 18, bar.y + 14, 48, 48,
                        fill=p.white, line_color=p.white, radius_px=14,
                        fill_opacity=0.12, line_opacity=0.12, role='ask_icon'),
            self._text(ask.icon, bar.x + 18, bar.y + 20, 48, 36, 22, p.white,
                       align='center', role='ask_glyph'),
            self._text(ask.title, bar.x + 80, bar.y + 12, bar.width * 0.6, 24, 18, p.white,
                       bold=True, role='ask_title'),
            self._text(ask.text, bar.x + 80, bar.y + 38, bar.width * 0.6, 24, 14, p.ask_text,
                       role='ask_text'),
            self._shape('roundRect', bar.right - 130, bar.y + 18, 110, 40,
                        fill=p.gold, line_color=p.gold, radius_px=12,
                        shadow=self._shadow(35, 6, 0.15), role='cta'),
            self._text(ask.cta.upper(), bar.right - 125, bar.y + 24, 100, 28, 12, p.cta_text,
                       bold=True, align='center', char_spacing=0.4, role='cta_label'),
        ]

    # ------------------------------------------------------------------
    # Card content variants
    # ------------------------------------------------------------------

    def render_icon_grid(self, x: float, y: float, width: float, items: Sequence[IconItem]) -> Fold:
        """
        Render a vertical list of icon rows.

        Returns:
            (primitives, next_y) where next_y = y + row_height * len(items)
        """
        p = self.palette
        m = self.metrics
        icon = m.icon_size_px
        text_x = x + icon + m.icon_text_gap_px
        text_w = width - icon - m.icon_text_gap_px

        primitives: List[DrawingPrimitive] = []
        cursor = y
        for item in items:
            primitives.extend([
                self._shape('roundRect', x, cursor, icon, icon,
                            fill=p.mid_navy, line_color=p.mid_navy, radius_px=16,
                            shadow=self._shadow(30, 6, 0.1), role='icon'),
                self._text(item.icon, x, cursor + 12, icon, 30, 22, p.white,
                           align='center', role='icon_glyph'),
                self._text(item.title, text_x, cursor + 4, text_w, 22, 16, p.deep_navy,
                           bold=True, role='item_title'),
                self._text(item.detail, text_x, cursor + 26, text_w, 38, 13, p.muted,
                           role='item_detail'),
            ])
            cursor += m.icon_row_height_px
        return primitives, cursor

    def render_pill_row(self, x: float, y: float, width: float, pills: Sequence[str]) -> Fold:
        """Render up to three capsule labels in one row."""
        if len(pills) > MAX_PILLS:
            raise ContentSchemaError('pills', f"at most {MAX_PILLS} pills fit in a row, got {len(pills)}")

        p = self.palette
        m = self.metrics
        gap = m.pill_gap_px
        pill_w = (width - gap * (MAX_PILLS - 1)) / MAX_PILLS

        primitives: List[DrawingPrimitive] = []
        for idx, pill in enumerate(pills):
            pill_x = x + idx * (pill_w + gap)
            primitives.extend([
                self._shape('roundRect', pill_x, y, pill_w, m.pill_height_px,
                            fill=p.pill_bg, line_color=p.pill_bg, radius_px=999, role='pill'),
                self._text(pill.upper(), pill_x + 8, y + 6, pill_w - 16, 20, 12, p.pill_color,
                           bold=True, align='center', char_spacing=0.4, role='pill_label'),
            ])
        return primitives, y + m.pill_row_advance_px

    def render_journey(self, x: float, y: float, width: float, steps: Sequence[JourneyStep]) -> Fold:
        """Render the four-step journey strip."""
        if len(steps) != JOURNEY_STEPS:
            raise ContentSchemaError('journey', f"needs exactly {JOURNEY_STEPS} steps, got {len(steps)}")

        p = self.palette
        m = self.metrics
        gap = m.journey_gap_px
        step_w = (width - gap * (JOURNEY_STEPS - 1)) / JOURNEY_STEPS
        badge = m.journey_badge_px

        primitives: List[DrawingPrimitive] = []
        for idx, step in enumerate(steps):
            step_x = x + idx * (step_w + gap)
            badge_x = step_x + (step_w - badge) / 2
            primitives.extend([
                self._shape('roundRect', step_x, y, step_w, m.journey_height_px,
                            fill=p.journey_fill, line_color=p.metric_border, line_width=1,
                            radius_px=16, role='journey_step'),
                self._shape('roundRect', badge_x, y + 10, badge, badge,
                            fill=p.pill_bg, line_color=p.pill_bg, radius_px=14, role='journey_badge'),
                self._text(step.step, badge_x, y + 20, badge, 24, 14, p.pill_color,
                           bold=True, align='center', role='journey_number'),
                self._text(step.title, step_x + 4, y + 56, step_w - 8, 16, 13, p.deep_navy,
                           bold=True, align='center', role='journey_title'),
                self._text(step.label, step_x + 4, y + 72, step_w - 8, 14, 12, p.muted,
                           align='center', role='journey_label'),
            ])
        return primitives, y + m.journey_row_advance_px

    def render_sparkline(self, x: float, y: float, width: float,
                         metrics: Sequence[Metric]) -> List[DrawingPrimitive]:
        """Render up to three metric boxes starting at y."""
        if len(metrics) > MAX_METRICS:
            raise ContentSchemaError('sparkline', f"at most {MAX_METRICS} metrics fit in a row, got {len(metrics)}")

        p = self.palette
        gap = self.design.metric_gap_px
        item_w = (width - gap * (MAX_METRICS - 1)) / MAX_METRICS
        item_h = self.metrics.metric_height_px

        primitives: List[DrawingPrimitive] = []
        for idx, metric in enumerate(metrics):
            item_x = x + idx * (item_w + gap)
            primitives.extend([
                self._shape('roundRect', item_x, y, item_w, item_h,
                            fill=p.soft_gray, line_color=p.metric_border, line_width=1,
                            radius_px=16, role='metric'),
                self._text(metric.value, item_x + 8, y + 8, item_w - 16, 24, 20, p.deep_navy,
                           bold=True, align='center', role='metric_value'),
                self._text(metric.label.upper(), item_x + 8, y + 34, item_w - 16, 18, 12, p.muted,
                           align='center', char_spacing=0.6, role='metric_label'),
            ])
        return primitives

    # ------------------------------------------------------------------
    # Cards
    # ------------------------------------------------------------------

    def render_card_content(self, x: float, y: float, width: float, card: CardContent,
                            field: str = 'card') -> Fold:
        """
        Render the variant-specific body of a card.

        Raises:
            ContentSchemaError: if the field required by the variant is missing
        """
        def required(name: str):
            value = getattr(card, name)
            if value is None:
                raise ContentSchemaError(f"{field}.{name}",
                                         f"required when type is '{card.variant.value}'")
            return value

        if card.variant is CardVariant.PILLS:
            primitives, cursor = self.render_pill_row(x, y, width, required('pills'))
            if card.items:
                grid, cursor = self.render_icon_grid(x, cursor, width, card.items)
                primitives = primitives + grid
            return primitives, cursor

        if card.variant is CardVariant.JOURNEY:
            try:
                return self.render_journey(x, y, width, required('journey'))
            except ContentSchemaError as e:
                if e.field == 'journey':
                    raise ContentSchemaError(f"{field}.journey", e.message) from e
                raise

        if card.variant is CardVariant.ICON_GRID:
            return self.render_icon_grid(x, y, width, required('items'))

        raise ContentSchemaError(f"{field}.type", f"unknown card type {card.variant!r}")

    def render_card(self, box: Box, card: CardContent, field: str = 'card') -> List[DrawingPrimitive]:
        """
        Render one content card inside `box`.

        Args:
            box: Card box in canvas pixels
            card: Card content
            field: Field path used in error messages

        Returns:
            Primitives in drawing order
        """
        p = self.palette
        pad = self.design.card_padding_px
        inner_x = box.x + pad
        inner_w = box.width - pad * 2
        cursor = box.y + pad

        primitives: List[DrawingPrimitive] = [
            self._shape('roundRect', box.x, box.y, box.width, box.height,
                        fill=p.card_bg, line_color=p.card_border, line_width=1, radius_px=18,
                        shadow=self._shadow(16, 8, 0.15), role='card'),
            self._text(card.title.upper(), inner_x, cursor, inner_w, 22, 18, p.deep_navy,
                       bold=True, char_spacing=0.3, role='card_title'),
        ]
        cursor += self.metrics.card_title_advance_px

        body, cursor = self.render_card_content(inner_x, cursor, inner_w, card, field)
        primitives.extend(body)

        if card.sparkline:
            sparkline_y = box.bottom - pad - self.metrics.metric_bottom_offset_px
            if cursor > sparkline_y:
                logger.warning(f"{field}: content ends at {cursor:.0f}px, below the sparkline row "
                               f"at {sparkline_y:.0f}px")
            primitives.extend(self.render_sparkline(inner_x, sparkline_y, inner_w, card.sparkline))

        return primitives

    # ------------------------------------------------------------------
    # Whole slide
    # ------------------------------------------------------------------

    def render_slide(self, content: SlideContent, slide_number: int = 0) -> SlideModel:
        """
        Render a complete slide: shell, header, both cards and the ask bar.

        Args:
            content: Validated slide content
            slide_number: Zero-based position in the deck

        Returns:
            SlideModel holding the primitives in drawing order
        """
        layout = compute_layout(self.design, content.split_columns)

        slide = SlideModel(slide_number, self.design.slide_width_in, self.design.slide_height_in)
        slide.set_background(self.palette.deep_navy)
        slide.set_title(content.header.title)

        slide.extend(self.render_shell(layout))
        slide.extend(self.render_header(layout, content.header))
        slide.extend(self.render_card(layout.left_card, content.left_card, 'leftCard'))
        slide.extend(self.render_card(layout.right_card, content.right_card, 'rightCard'))
        slide.extend(self.render_ask(layout, content.ask))

        logger.info(f"Rendered slide {slide_number + 1} '{content.header.title}' "
                    f"with {len(slide)} primitives")
        return slide
