"""
Archive post-processing for generated .pptx files.

python-pptx leaves group-shape transforms (the slide tree root in layouts
and masters among them) with zero extents, <a:ext cx="0" cy="0"/> and
<a:chExt cx="0" cy="0"/>. Some viewers then draw grouped content invisible
or misplaced. Every saved archive is patched to carry the real slide size.
"""

import io
import logging
import os
import re
import stat
import tempfile
import zipfile
from pathlib import Path
from typing import Tuple, Union

from ..errors import ArchiveIOError
from ..layout.units import inches_to_emu

logger = logging.getLogger(__name__)

CONTENT_PREFIX = 'ppt/'
XML_SUFFIX = '.xml'

ZERO_EXTENT_RE = re.compile(r'<((?:[A-Za-z_][\w.-]*:)?(?:ext|chExt))\s+cx="0"\s+cy="0"\s*/>')


def normalize_group_extents(xml: str, cx: int, cy: int) -> str:
    """
    Replace zero-sized ext/chExt elements with the given extents.

    Args:
        xml: Part content
        cx: Width in EMU
        cy: Height in EMU

    Returns:
        Patched XML (the input object itself when nothing matched)
    """
    return ZERO_EXTENT_RE.sub(lambda m: f'<{m.group(1)} cx="{cx}" cy="{cy}"/>', xml)


def slide_extents(width_in: float, height_in: float) -> Tuple[int, int]:
    return inches_to_emu(width_in), inches_to_emu(height_in)


def normalize_archive(data: bytes, width_in: float, height_in: float) -> bytes:
    """
    Patch zero group extents in every ppt/*.xml part of a .pptx archive.

    Parts that do not change are copied with their original bytes.

    Args:
        data: Serialized .pptx archive
        width_in: Slide width in inches
        height_in: Slide height in inches

    Returns:
        New archive bytes

    Raises:
        ArchiveIOError: if data is not a readable zip archive
    """
    cx, cy = slide_extents(width_in, height_in)
    patched = 0

    try:
        source = zipfile.ZipFile(io.BytesIO(data))
    except (zipfile.BadZipFile, zipfile.LargeZipFile) as e:
        raise ArchiveIOError(f"Generated archive is not a valid package: {e}") from e

    output = io.BytesIO()
    try:
        with source, zipfile.ZipFile(output, 'w') as target:
            for info in source.infolist():
                content = source.read(info)

                if info.filename.startswith(CONTENT_PREFIX) and info.filename.endswith(XML_SUFFIX):
                    try:
                        xml = content.decode('utf-8')
                    except UnicodeDecodeError:
                        logger.warning(f"Skipping non UTF-8 part: {info.filename}")
                    else:
                        normalized = normalize_group_extents(xml, cx, cy)
                        if normalized != xml:
                            content = normalized.encode('utf-8')
                            patched += 1
                            logger.debug(f"Normalized group extents in {info.filename}")

                entry = zipfile.ZipInfo(info.filename, date_time=info.date_time)
                entry.compress_type = info.compress_type
                entry.external_attr = info.external_attr
                entry.comment = info.comment
                target.writestr(entry, content)
    except (zipfile.BadZipFile, zipfile.LargeZipFile, EOFError) as e:
        raise ArchiveIOError(f"Failed to read generated archive: {e}") from e

    logger.info(f"Normalized group extents to {cx}x{cy} EMU in {patched} part(s)")
    return output.getvalue()


def _output_mode(path: Path) -> int:
    """Mode of the file being replaced, else 0666 minus the process umask."""
    if path.is_file():
        return stat.S_IMODE(path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def normalize_and_write(data: bytes, width_in: float, height_in: float,
                        output_path: Union[str, Path]) -> Path:
    """
    Normalize a serialized archive and write it to `output_path`.

    The file is written to a temporary sibling and renamed into place, so a
    failure never leaves a partial file behind.

    Args:
        data: Serialized .pptx archive
        width_in: Slide width in inches
        height_in: Slide height in inches
        output_path: Destination file

    Returns:
        Path of the written file

    Raises:
        ArchiveIOError: if the archive is invalid or cannot be written
    """
    normalized = normalize_archive(data, width_in, height_in)
    path = Path(output_path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ArchiveIOError(f"Cannot create output directory: {e}", str(path.parent)) from e

    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(dir=path.parent, prefix=f'.{path.name}.', suffix='.tmp',
                                         delete=False) as tmp:
            tmp_name = tmp.name
            tmp.write(normalized)
            tmp.flush()
            os.fsync(tmp.fileno())
        # NamedTemporaryFile creates 0600
        os.chmod(tmp_name, _output_mode(path))
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise ArchiveIOError(f"Failed to write presentation: {e}", str(path)) from e

    logger.info(f"Wrote {len(normalized)} bytes to {path}")
    return path
