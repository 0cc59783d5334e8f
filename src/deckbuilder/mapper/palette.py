"""
Palette - semantic colour names for the card slide theme
"""

import logging
import re
from dataclasses import dataclass, fields, asdict, replace
from typing import Dict, Mapping

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r'^[0-9A-Fa-f]{6}$')


@dataclass(frozen=True)
class Palette:
    """
    Immutable colour palette.

    Values are six-digit hex strings without the leading '#'.
    """

    # Primary
    deep_navy: str = "0F2439"
    mid_navy: str = "17395C"
    sky: str = "7FB4E0"
    gold: str = "E1B44C"

    # Neutrals
    soft_gray: str = "F4F6F8"
    text: str = "0C1B2A"
    muted: str = "4A5C70"
    white: str = "FFFFFF"
    card_bg: str = "FFFFFF"
    shell_bg: str = "F6F9FE"

    # Pills
    pill_bg: str = "FDF6E8"
    pill_color: str = "6F5316"

    # Theme accents
    accent1: str = "604878"
    accent2: str = "D86B77"
    accent3: str = "8EC182"
    accent4: str = "F9B268"
    accent5: str = "1B587C"
    accent6: str = "B26B02"
    hyperlink: str = "4EA5D8"

    # Brand
    deep_violet: str = "33018D"

    # Surfaces
    shell_fill: str = "F9FBFF"
    shell_border: str = "DCE3ED"
    card_border: str = "DDE5EF"
    metric_border: str = "E1E7EE"
    journey_fill: str = "F7F9FC"
    ask_text: str = "D5E2F2"
    cta_text: str = "1F1606"

    def __post_init__(self):
        issues = []
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str) or not _HEX_RE.match(value.lstrip('#')):
                issues.append(f"palette.{f.name} must be a 6-digit hex colour, got {value!r}")
            else:
                object.__setattr__(self, f.name, value.lstrip('#').upper())
        if issues:
            raise ConfigurationError(issues)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, str]) -> "Palette":
        """Build a palette from the defaults plus `overrides`."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigurationError([f"Unknown palette colour: {name}" for name in unknown])
        palette = replace(cls(), **dict(overrides))
        if overrides:
            logger.info(f"Palette built with {len(overrides)} override(s)")
        return palette
