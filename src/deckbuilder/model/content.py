"""
Slide content models.

Input arrives as JSON-like dictionaries (camelCase keys, as exposed by the
tool surface) and is validated into immutable pydantic models. Any
structural problem, including a card whose `type` does not match its
populated fields, is reported as a ContentSchemaError naming the field.
"""

import logging
from enum import Enum
from typing import Any, List, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic_core import PydanticCustomError

from ..errors import ContentSchemaError

logger = logging.getLogger(__name__)

MAX_PILLS = 3
MAX_METRICS = 3
JOURNEY_STEPS = 4


class CardVariant(str, Enum):
    ICON_GRID = "iconGrid"
    PILLS = "pills"
    JOURNEY = "journey"


_VARIANT_SPELLINGS = {
    'icongrid': CardVariant.ICON_GRID,
    'icon-grid': CardVariant.ICON_GRID,
    'icon_grid': CardVariant.ICON_GRID,
    'pills': CardVariant.PILLS,
    'journey': CardVariant.JOURNEY,
}


class ContentModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='ignore')


class HeaderContent(ContentModel):
    eyebrow: str
    title: str
    subtitle: str
    badge: str = Field(validation_alias=AliasChoices('badge', 'badgeText'))


class IconItem(ContentModel):
    icon: str
    title: str
    detail: str = ""


class JourneyStep(ContentModel):
    step: str = Field(validation_alias=AliasChoices('step', 'stepNumber'))
    title: str
    label: str = ""

    @field_validator('step', mode='before')
    @classmethod
    def _step_as_text(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return f"{value:02d}"
        return value


class Metric(ContentModel):
    value: str
    label: str


class CardContent(ContentModel):
    title: str
    variant: CardVariant = Field(validation_alias=AliasChoices('type', 'variant'))
    items: Optional[List[IconItem]] = None
    pills: Optional[List[str]] = None
    journey: Optional[List[JourneyStep]] = Field(
        default=None, validation_alias=AliasChoices('journey', 'journeySteps'))
    sparkline: Optional[List[Metric]] = Field(
        default=None, validation_alias=AliasChoices('sparkline', 'metrics'))

    @field_validator('variant', mode='before')
    @classmethod
    def _normalize_variant(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _VARIANT_SPELLINGS.get(value.strip().lower(), value)
        return value

    @model_validator(mode='after')
    def _check_variant_fields(self) -> "CardContent":
        required = {
            CardVariant.ICON_GRID: 'items',
            CardVariant.PILLS: 'pills',
            CardVariant.JOURNEY: 'journey',
        }[self.variant]
        if getattr(self, required) is None:
            raise PydanticCustomError(
                'variant_mismatch',
                "'{field}' is required when type is '{variant}'",
                {'field': required, 'variant': self.variant.value},
            )

        forbidden = {
            CardVariant.ICON_GRID: ('pills', 'journey'),
            CardVariant.PILLS: ('journey',),
            CardVariant.JOURNEY: ('items', 'pills'),
        }[self.variant]
        for name in forbidden:
            if getattr(self, name) is not None:
                raise PydanticCustomError(
                    'variant_mismatch',
                    "'{field}' cannot be used when type is '{variant}'",
                    {'field': name, 'variant': self.variant.value},
                )

        for name, limit in (('pills', MAX_PILLS), ('sparkline', MAX_METRICS)):
            values = getattr(self, name)
            if values is not None and len(values) > limit:
                raise PydanticCustomError(
                    'too_many',
                    "'{field}' holds at most {limit} entries, got {count}",
                    {'field': name, 'limit': limit, 'count': len(values)},
                )

        if self.journey is not None and len(self.journey) != JOURNEY_STEPS:
            raise PydanticCustomError(
                'journey_length',
                "'{field}' needs exactly {expected} steps, got {count}",
                {'field': 'journey', 'expected': JOURNEY_STEPS, 'count': len(self.journey)},
            )
        return self


class AskContent(ContentModel):
    icon: str
    title: str
    text: str
    cta: str = Field(validation_alias=AliasChoices('cta', 'ctaLabel'))


class SlideContent(ContentModel):
    header: HeaderContent
    left_card: CardContent = Field(validation_alias=AliasChoices('leftCard', 'left_card'))
    right_card: CardContent = Field(validation_alias=AliasChoices('rightCard', 'right_card'))
    ask: AskContent
    split_columns: bool = Field(
        default=False,
        validation_alias=AliasChoices('splitColumns', 'splitColumnsEqually', 'split_columns'),
    )


def _schema_error(exc: ValidationError, root: str) -> ContentSchemaError:
    """Convert the first pydantic error into a ContentSchemaError."""
    error = exc.errors()[0]
    path = [root] if root else []
    path.extend(str(part) for part in error.get('loc', ()))
    ctx = error.get('ctx') or {}
    if error.get('type') in ('variant_mismatch', 'journey_length', 'too_many') and 'field' in ctx:
        path.append(str(ctx['field']))
    field = '.'.join(path) or root or 'slide'
    return ContentSchemaError(field, error.get('msg', str(exc)))


def parse_slide_content(data: Any, root: str = "") -> SlideContent:
    """
    Validate a slide descriptor.

    Args:
        data: SlideContent or mapping with header/leftCard/rightCard/ask
        root: Prefix for field paths in error messages (e.g. 'slides.2')

    Returns:
        SlideContent

    Raises:
        ContentSchemaError: if the descriptor is structurally invalid
    """
    if isinstance(data, SlideContent):
        return data
    if not isinstance(data, Mapping):
        raise ContentSchemaError(root or 'slide', f"expected an object, got {type(data).__name__}")
    try:
        return SlideContent.model_validate(dict(data))
    except ValidationError as e:
        schema_error = _schema_error(e, root)
        logger.warning(str(schema_error))
        raise schema_error from e


def parse_card_content(data: Any, root: str = "card") -> CardContent:
    if isinstance(data, CardContent):
        return data
    if not isinstance(data, Mapping):
        raise ContentSchemaError(root, f"expected an object, got {type(data).__name__}")
    try:
        return CardContent.model_validate(dict(data))
    except ValidationError as e:
        raise _schema_error(e, root) from e
