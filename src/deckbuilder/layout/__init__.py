"""
Layout Module
Design constants, unit conversion and region computation.
"""

from .design import DesignConstants, TemplateMetrics, Theme
from .layout_engine import Box, Region, LayoutTree, compute_layout

__all__ = ['DesignConstants', 'TemplateMetrics', 'Theme', 'Box', 'Region', 'LayoutTree', 'compute_layout']
