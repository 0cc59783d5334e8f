"""
Tests for configuration loading and theme construction.
"""

import sys
import tempfile
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from deckbuilder.config import DEFAULT_CONFIG, load_config, theme_from_config
from deckbuilder.errors import ConfigurationError
from deckbuilder.mapper.palette import Palette

REPO_CONFIG = Path(__file__).parent.parent / 'config' / 'config.yaml'


class TestLoadConfig(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmpdir.name)

    def tearDown(self):
        self.tmpdir.cleanup()

    def write(self, text):
        path = self.dir / 'config.yaml'
        path.write_text(text, encoding='utf-8')
        return path

    def test_defaults_without_path(self):
        config = load_config()
        self.assertEqual(set(config), set(DEFAULT_CONFIG))
        self.assertEqual(config['renderer']['font_face'], 'Segoe UI')

    def test_missing_file_falls_back(self):
        config = load_config(self.dir / 'nope.yaml')
        self.assertEqual(config['generator']['author'], 'PowerPoint Generator')

    def test_repository_config_matches_defaults(self):
        theme = theme_from_config(load_config(REPO_CONFIG))
        default = theme_from_config(None)
        self.assertEqual(theme.design, default.design)
        self.assertEqual(theme.metrics, default.metrics)
        self.assertEqual(theme.palette, default.palette)

    def test_sections_merge(self):
        config = load_config(self.write("generator:\n  title: Board Deck\n"))
        self.assertEqual(config['generator']['title'], 'Board Deck')
        self.assertEqual(config['generator']['author'], 'PowerPoint Generator')

    def test_empty_file(self):
        config = load_config(self.write(""))
        self.assertEqual(config['layout'], {})

    def test_invalid_yaml(self):
        with self.assertRaises(ConfigurationError):
            load_config(self.write("layout: [unclosed\n"))

    def test_unknown_section(self):
        with self.assertRaises(ConfigurationError) as ctx:
            load_config(self.write("themes:\n  dark: true\n"))
        self.assertIn("themes", str(ctx.exception))

    def test_top_level_list(self):
        with self.assertRaises(ConfigurationError):
            load_config(self.write("- layout\n"))


class TestThemeFromConfig(unittest.TestCase):

    def test_overrides(self):
        theme = theme_from_config({
            'layout': {'split_ratio': [1, 1], 'column_gap_px': 30},
            'palette': {'gold': '#abcdef'},
            'renderer': {'font_face': 'Inter', 'icon_row_height_px': 72},
        })
        self.assertEqual(theme.design.split_ratio, (1, 1))
        self.assertEqual(theme.design.column_gap_px, 30)
        self.assertEqual(theme.palette.gold, 'ABCDEF')
        self.assertEqual(theme.font_face, 'Inter')
        self.assertEqual(theme.metrics.icon_row_height_px, 72)

    def test_unknown_layout_key(self):
        with self.assertRaises(ConfigurationError):
            theme_from_config({'layout': {'gutter_px': 10}})

    def test_unknown_renderer_key(self):
        with self.assertRaises(ConfigurationError):
            theme_from_config({'renderer': {'icon_colour': 'red'}})

    def test_unknown_color(self):
        with self.assertRaises(ConfigurationError):
            theme_from_config({'palette': {'neon': 'FF00FF'}})

    def test_invalid_color(self):
        with self.assertRaises(ConfigurationError):
            theme_from_config({'palette': {'gold': 'gold'}})

    def test_impossible_layout(self):
        with self.assertRaises(ConfigurationError) as ctx:
            theme_from_config({'layout': {'header_height_px': 600}})
        self.assertIn("card height", str(ctx.exception))

    def test_default_palette(self):
        self.assertEqual(theme_from_config({}).palette, Palette())


if __name__ == '__main__':
    unittest.main()
