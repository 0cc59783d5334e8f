"""
Post-processing Module
Fixes known serialization defects in generated archives.
"""

from .archive import normalize_group_extents, normalize_archive, normalize_and_write

__all__ = ['normalize_group_extents', 'normalize_archive', 'normalize_and_write']
