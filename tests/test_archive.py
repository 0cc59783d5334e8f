"""
Tests for the archive post-processor.
"""

import io
import os
import stat
import sys
import tempfile
import unittest
import zipfile
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from deckbuilder.errors import ArchiveIOError
from deckbuilder.postprocess.archive import (
    normalize_and_write, normalize_archive, normalize_group_extents, slide_extents,
)

SLIDE_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<p:sld xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main" '
    'xmlns:p="http://schemas.openxmlformats.org/presentationml/2006/main">'
    '<p:cSld><p:spTree><p:grpSpPr><a:xfrm><a:off x="0" y="0"/>'
    '<a:ext cx="0" cy="0"/><a:chOff x="0" y="0"/><a:chExt cx="0" cy="0"/>'
    '</a:xfrm></p:grpSpPr>'
    '<p:sp><p:spPr><a:xfrm><a:off x="10" y="10"/><a:ext cx="500" cy="0"/></a:xfrm></p:spPr></p:sp>'
    '</p:spTree></p:cSld></p:sld>'
)
PRESENTATION_XML = '<p:presentation xmlns:p="x"><p:sldSz cx="9144000" cy="5143500"/></p:presentation>'
CONTENT_TYPES_XML = '<Types><Default Extension="xml" ContentType="application/xml"/><ext cx="0" cy="0"/></Types>'


def build_archive(parts):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w', zipfile.ZIP_DEFLATED) as archive:
        for name, content in parts.items():
            archive.writestr(name, content)
    return buffer.getvalue()


def read_archive(data):
    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        return {name: archive.read(name) for name in archive.namelist()}


class TestNormalizeExtents(unittest.TestCase):

    def test_slide_extents_reference_size(self):
        self.assertEqual(slide_extents(10, 5.625), (9144000, 5143500))

    def test_prefixed_and_unprefixed_elements(self):
        xml = '<a:ext cx="0" cy="0"/><a:chExt cx="0"  cy="0" /><ext cx="0" cy="0"/>'
        self.assertEqual(
            normalize_group_extents(xml, 9144000, 5143500),
            '<a:ext cx="9144000" cy="5143500"/><a:chExt cx="9144000" cy="5143500"/>'
            '<ext cx="9144000" cy="5143500"/>',
        )

    def test_partial_zero_extent_is_kept(self):
        xml = '<a:ext cx="500" cy="0"/><a:ext cx="0" cy="12"/>'
        self.assertEqual(normalize_group_extents(xml, 1, 1), xml)

    def test_other_elements_untouched(self):
        xml = '<a:extLst/><p:ext uri="{ABC}"/><a:off x="0" y="0"/>'
        self.assertEqual(normalize_group_extents(xml, 1, 1), xml)


class TestNormalizeArchive(unittest.TestCase):

    def setUp(self):
        self.data = build_archive({
            '[Content_Types].xml': CONTENT_TYPES_XML,
            'ppt/presentation.xml': PRESENTATION_XML,
            'ppt/slides/slide1.xml': SLIDE_XML,
            'ppt/media/image1.png': b'\x89PNG\r\n\x1a\n<ext cx="0" cy="0"/>',
        })

    def test_slide_part_patched(self):
        parts = read_archive(normalize_archive(self.data, 10, 5.625))
        slide = parts['ppt/slides/slide1.xml'].decode('utf-8')

        self.assertNotIn('cx="0" cy="0"', slide)
        self.assertIn('<a:ext cx="9144000" cy="5143500"/>', slide)
        self.assertIn('<a:chExt cx="9144000" cy="5143500"/>', slide)
        self.assertIn('<a:ext cx="500" cy="0"/>', slide)

    def test_unchanged_parts_byte_identical(self):
        source = read_archive(self.data)
        parts = read_archive(normalize_archive(self.data, 10, 5.625))

        self.assertEqual(parts['ppt/presentation.xml'], source['ppt/presentation.xml'])
        self.assertEqual(parts['[Content_Types].xml'], source['[Content_Types].xml'])
        self.assertEqual(parts['ppt/media/image1.png'], source['ppt/media/image1.png'])

    def test_entry_order_preserved(self):
        with zipfile.ZipFile(io.BytesIO(normalize_archive(self.data, 10, 5.625))) as archive:
            names = archive.namelist()
        self.assertEqual(names, ['[Content_Types].xml', 'ppt/presentation.xml',
                                 'ppt/slides/slide1.xml', 'ppt/media/image1.png'])

    def test_custom_slide_size(self):
        parts = read_archive(normalize_archive(self.data, 13.333, 7.5))
        slide = parts['ppt/slides/slide1.xml'].decode('utf-8')
        self.assertIn('cy="6858000"', slide)

    def test_not_a_zip(self):
        with self.assertRaises(ArchiveIOError):
            normalize_archive(b'this is not a zip archive', 10, 5.625)


class TestNormalizeAndWrite(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmpdir.name)
        self.data = build_archive({'ppt/slides/slide1.xml': SLIDE_XML})

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_writes_into_new_directory(self):
        target = self.dir / 'nested' / 'out' / 'deck.pptx'
        written = normalize_and_write(self.data, 10, 5.625, target)

        self.assertEqual(written, target)
        self.assertTrue(target.exists())
        slide = read_archive(target.read_bytes())['ppt/slides/slide1.xml'].decode('utf-8')
        self.assertNotIn('<a:ext cx="0" cy="0"/>', slide)
        self.assertEqual(os.listdir(target.parent), ['deck.pptx'])

    def test_overwrites_existing_file(self):
        target = self.dir / 'deck.pptx'
        target.write_bytes(b'old')
        normalize_and_write(self.data, 10, 5.625, target)
        self.assertTrue(zipfile.is_zipfile(target))

    @unittest.skipIf(os.name != 'posix', 'POSIX permission bits')
    def test_new_file_mode_follows_umask(self):
        target = self.dir / 'deck.pptx'
        previous = os.umask(0o022)
        try:
            normalize_and_write(self.data, 10, 5.625, target)
        finally:
            os.umask(previous)
        self.assertEqual(stat.S_IMODE(target.stat().st_mode), 0o644)

    @unittest.skipIf(os.name != 'posix', 'POSIX permission bits')
    def test_replaced_file_keeps_its_mode(self):
        target = self.dir / 'deck.pptx'
        target.write_bytes(b'old')
        os.chmod(target, 0o640)
        normalize_and_write(self.data, 10, 5.625, target)
        self.assertEqual(stat.S_IMODE(target.stat().st_mode), 0o640)

    def test_invalid_archive_leaves_nothing(self):
        target = self.dir / 'deck.pptx'
        with self.assertRaises(ArchiveIOError):
            normalize_and_write(b'garbage', 10, 5.625, target)
        self.assertEqual(os.listdir(self.dir), [])

    def test_unwritable_target_cleans_temp_file(self):
        target = self.dir / 'deck.pptx'
        target.mkdir()
        with self.assertRaises(ArchiveIOError) as ctx:
            normalize_and_write(self.data, 10, 5.625, target)

        self.assertEqual(ctx.exception.path, str(target))
        self.assertEqual(os.listdir(self.dir), ['deck.pptx'])
        self.assertTrue(target.is_dir())


if __name__ == '__main__':
    unittest.main()
