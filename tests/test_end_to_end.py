"""
End-to-end tests: content dictionaries to .pptx files on disk.
"""

import json
import re
import sys
import tempfile
import unittest
import zipfile
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))
sys.path.insert(0, str(Path(__file__).parent))

from pptx import Presentation
from pptx.util import Inches

from deckbuilder.builder import SlideBuilder
from deckbuilder.config import load_config
from deckbuilder.errors import ContentSchemaError
from fixtures import journey_slide, strategy_slide

ZERO_EXTENT = re.compile(r'<(?:\w+:)?(?:ext|chExt)\s+cx="0"\s+cy="0"\s*/>')


def slide_texts(slide):
    return [shape.text_frame.text for shape in slide.shapes if shape.has_text_frame]


def zero_extent_parts(path):
    with zipfile.ZipFile(path) as archive:
        return [name for name in archive.namelist()
                if name.startswith('ppt/') and name.endswith('.xml')
                and ZERO_EXTENT.search(archive.read(name).decode('utf-8'))]


class TestSingleSlide(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmpdir.name)
        self.builder = SlideBuilder()

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_strategy_slide(self):
        path = self.builder.build_single_slide(strategy_slide(), self.dir / 'out' / 'slide.pptx')

        self.assertTrue(path.exists())
        self.assertGreater(path.stat().st_size, 0)

        prs = Presentation(str(path))
        self.assertEqual(len(prs.slides), 1)
        self.assertEqual(prs.slide_width, Inches(10))
        self.assertEqual(prs.slide_height, Inches(5.625))

        texts = slide_texts(prs.slides[0])
        self.assertIn("PowerPoint Generator Test", texts)
        self.assertIn("TEST CATEGORY", texts)
        self.assertIn("TEST FEATURES", texts)
        self.assertIn("CATEGORY B", texts)
        self.assertIn("100%", texts)

    def test_title_defaults_to_header(self):
        path = self.builder.build_single_slide(strategy_slide(), self.dir / 'slide.pptx')
        self.assertEqual(Presentation(str(path)).core_properties.title, "PowerPoint Generator Test")

    def test_no_zero_extents_remain(self):
        path = self.builder.build_single_slide(strategy_slide(), self.dir / 'slide.pptx')
        self.assertEqual(zero_extent_parts(path), [])

    def test_shape_names_carry_roles(self):
        path = self.builder.build_single_slide(journey_slide(), self.dir / 'journey.pptx')
        names = [shape.name for shape in Presentation(str(path)).slides[0].shapes]

        self.assertTrue(names[0].startswith('shell '))
        self.assertEqual(sum(1 for n in names if n.startswith('journey_step ')), 4)
        self.assertTrue(names[-1].startswith('cta_label '))

    def test_ask_icon_border_alpha_written(self):
        path = self.builder.build_single_slide(strategy_slide(), self.dir / 'slide.pptx')
        shapes = Presentation(str(path)).slides[0].shapes
        icon = next(shape for shape in shapes if shape.name.startswith('ask_icon '))

        ln = icon.element.spPr.ln
        self.assertEqual(ln.xpath('./a:solidFill/a:srgbClr/@val'), ['FFFFFF'])
        self.assertEqual(ln.xpath('./a:solidFill/a:srgbClr/a:alpha/@val'), ['12000'])

    def test_invalid_content_writes_nothing(self):
        content = strategy_slide()
        del content['leftCard']['items']
        target = self.dir / 'bad.pptx'

        with self.assertRaises(ContentSchemaError) as ctx:
            self.builder.build_single_slide(content, target)
        self.assertIn('leftCard', ctx.exception.field)
        self.assertFalse(target.exists())


class TestPresentation(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmpdir.name)
        self.builder = SlideBuilder()

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_two_slides_in_order(self):
        path = self.builder.build_presentation(
            [strategy_slide(), journey_slide()], self.dir / 'deck.pptx',
            title="Quarterly Review", author="Strategy Team",
        )

        prs = Presentation(str(path))
        self.assertEqual(len(prs.slides), 2)
        self.assertEqual(prs.core_properties.title, "Quarterly Review")
        self.assertEqual(prs.core_properties.author, "Strategy Team")
        self.assertIn("PowerPoint Generator Test", slide_texts(prs.slides[0]))
        self.assertIn("Journey Test Slide", slide_texts(prs.slides[1]))
        self.assertEqual(zero_extent_parts(path), [])

    def test_default_properties(self):
        path = self.builder.build_presentation([strategy_slide()], self.dir / 'deck.pptx')
        prs = Presentation(str(path))
        self.assertEqual(prs.core_properties.title, "Presentation")
        self.assertEqual(prs.core_properties.author, "PowerPoint Generator")

    def test_configured_title_applies_when_none_given(self):
        config = load_config()
        config['generator']['title'] = "Board Deck"
        builder = SlideBuilder(config=config)

        deck = builder.build_presentation([strategy_slide()], self.dir / 'deck.pptx')
        self.assertEqual(Presentation(str(deck)).core_properties.title, "Board Deck")

        named = builder.build_presentation([strategy_slide()], self.dir / 'named.pptx', title="Q3")
        self.assertEqual(Presentation(str(named)).core_properties.title, "Q3")

        single = builder.build_single_slide(strategy_slide(), self.dir / 'slide.pptx')
        self.assertEqual(Presentation(str(single)).core_properties.title, "Board Deck")

    def test_empty_deck_rejected(self):
        with self.assertRaises(ContentSchemaError) as ctx:
            self.builder.build_presentation([], self.dir / 'deck.pptx')
        self.assertEqual(ctx.exception.field, 'slides')

    def test_bad_slide_reported_by_index(self):
        bad = journey_slide()
        bad['leftCard']['journey'] = bad['leftCard']['journey'][:3]
        target = self.dir / 'deck.pptx'

        with self.assertRaises(ContentSchemaError) as ctx:
            self.builder.build_presentation([strategy_slide(), bad], target)
        self.assertTrue(ctx.exception.field.startswith('slides.1'))
        self.assertFalse(target.exists())


class TestCommandLine(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmpdir.name)

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_convert_single_slide_file(self):
        from main import convert_content_to_pptx

        source = self.dir / 'slide.json'
        source.write_text(json.dumps(strategy_slide()), encoding='utf-8')
        output = self.dir / 'slide.pptx'

        self.assertTrue(convert_content_to_pptx(str(source), str(output), load_config()))
        self.assertEqual(len(Presentation(str(output)).slides), 1)

    def test_convert_deck_file(self):
        from main import convert_content_to_pptx

        source = self.dir / 'deck.json'
        source.write_text(json.dumps({"title": "Deck", "slides": [strategy_slide(), journey_slide()]}),
                          encoding='utf-8')
        output = self.dir / 'deck.pptx'

        self.assertTrue(convert_content_to_pptx(str(source), str(output), load_config()))
        prs = Presentation(str(output))
        self.assertEqual(len(prs.slides), 2)
        self.assertEqual(prs.core_properties.title, "Deck")

    def test_convert_reports_failure(self):
        from main import convert_content_to_pptx

        source = self.dir / 'broken.json'
        source.write_text('{"header": ', encoding='utf-8')
        self.assertFalse(convert_content_to_pptx(str(source), str(self.dir / 'x.pptx'), load_config()))


if __name__ == '__main__':
    unittest.main()
