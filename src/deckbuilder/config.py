"""
Configuration loading.

The YAML file has one section per pipeline stage:

    layout:     DesignConstants overrides (canvas, margins, gaps, split_ratio)
    palette:    colour overrides by semantic name
    renderer:   font_face and TemplateMetrics overrides
    generator:  default document title/author and an optional template path
"""

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import ConfigurationError
from .layout.design import DesignConstants, TemplateMetrics, Theme
from .mapper.palette import Palette

logger = logging.getLogger(__name__)

SECTIONS = ('layout', 'palette', 'renderer', 'generator')

DEFAULT_CONFIG: Dict[str, Any] = {
    'layout': {},
    'palette': {},
    'renderer': {'font_face': 'Segoe UI'},
    'generator': {'title': None, 'author': 'PowerPoint Generator', 'template': None},
}


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file; built-in defaults are used when it
            is missing

    Returns:
        Configuration dictionary with every section present

    Raises:
        ConfigurationError: if the file is not valid YAML or has unknown sections
    """
    config = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}

    if not config_path:
        return config
    path = Path(config_path)
    if not path.exists():
        logger.warning(f"Config file not found, using defaults: {path}")
        return config

    try:
        with open(path, 'r', encoding='utf-8') as f:
            loaded = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"{path}: invalid YAML: {e}") from e

    if not isinstance(loaded, dict):
        raise ConfigurationError(f"{path}: top level must be a mapping")

    unknown = sorted(set(loaded) - set(SECTIONS))
    if unknown:
        raise ConfigurationError([f"{path}: unknown section '{name}'" for name in unknown])

    for section in SECTIONS:
        values = loaded.get(section) or {}
        if not isinstance(values, dict):
            raise ConfigurationError(f"{path}: section '{section}' must be a mapping")
        config[section].update(values)

    logger.info(f"Loaded configuration from {path}")
    return config


def _check_keys(section: str, values: Dict[str, Any], allowed):
    unknown = sorted(set(values) - set(allowed))
    if unknown:
        raise ConfigurationError([f"{section}: unknown key '{key}'" for key in unknown])


def theme_from_config(config: Optional[Dict[str, Any]] = None) -> Theme:
    """
    Build a Theme from a configuration dictionary.

    Args:
        config: Dictionary as returned by load_config (None for defaults)

    Returns:
        Theme

    Raises:
        ConfigurationError: on unknown keys or invalid values
    """
    config = config or {}

    layout = dict(config.get('layout') or {})
    _check_keys('layout', layout, {f.name for f in fields(DesignConstants)})
    renderer = dict(config.get('renderer') or {})
    font_face = renderer.pop('font_face', None) or 'Segoe UI'
    _check_keys('renderer', renderer, {f.name for f in fields(TemplateMetrics)})

    try:
        if 'split_ratio' in layout:
            layout['split_ratio'] = tuple(layout['split_ratio'])
        design = DesignConstants(**layout)
        metrics = TemplateMetrics(**renderer)
    except TypeError as e:
        raise ConfigurationError(str(e)) from e

    palette = Palette.from_mapping(config.get('palette') or {})

    logger.debug(f"Theme: {design.width_px}x{design.height_px}px canvas, "
                 f"{design.slide_width_in}x{design.slide_height_in}in slide, font '{font_face}'")
    return Theme(design=design, metrics=metrics, palette=palette, font_face=font_face)
