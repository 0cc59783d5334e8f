#!/usr/bin/env python3
"""
deckbuilder - Main Entry Point
Builds themed PowerPoint slides from a JSON content file.
"""

import sys
import json
import argparse
import logging
from pathlib import Path
from typing import Dict, Any, Optional

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / 'src'))

from deckbuilder.builder import SlideBuilder
from deckbuilder.config import load_config
from deckbuilder.errors import DeckBuilderError


DEFAULT_CONFIG_PATH = Path(__file__).parent / 'config' / 'config.yaml'


def setup_logging(level: str = "INFO"):
    """
    Setup logging configuration.

    Args:
        level: Logging level
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler('deckbuilder.log')
        ]
    )


def convert_content_to_pptx(content_path: str, output_path: str, config: Dict[str, Any],
                            split_columns: Optional[bool] = None, title: Optional[str] = None,
                            author: Optional[str] = None) -> bool:
    """
    Build a PPTX from a JSON content file.

    The file holds either a single slide descriptor or an object with a
    "slides" list (and optional "title" / "author").

    Args:
        content_path: Path to input JSON file
        output_path: Path to output PPTX file
        config: Configuration dictionary
        split_columns: Force equal (True) or asymmetric (False) card widths
        title: Document title, overrides the file's
        author: Document author, overrides the file's

    Returns:
        True if successful
    """
    logger = logging.getLogger(__name__)

    try:
        with open(content_path, 'r', encoding='utf-8') as f:
            content = json.load(f)

        builder = SlideBuilder(config=config)

        if isinstance(content, dict) and 'slides' in content:
            slides = content['slides']
            if split_columns is not None:
                slides = [dict(slide, splitColumns=split_columns) if isinstance(slide, dict) else slide
                          for slide in slides]
            path = builder.build_presentation(
                slides,
                output_path,
                title=title or content.get('title'),
                author=author or content.get('author'),
            )
            count = len(slides)
        else:
            path = builder.build_single_slide(content, output_path, split_columns)
            count = 1

        logger.info("=" * 60)
        logger.info("Build complete!")
        logger.info(f"Input:  {content_path}")
        logger.info(f"Output: {path}")
        logger.info(f"Slides: {count}")
        logger.info("=" * 60)

        return True

    except (OSError, json.JSONDecodeError, DeckBuilderError) as e:
        logger.error(f"Build failed: {e}")
        return False
    except Exception as e:
        logger.error(f"Build failed: {e}", exc_info=True)
        return False


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='Build themed PowerPoint slides from JSON content',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py slide.json output.pptx
  python main.py deck.json output.pptx --config custom_config.yaml
  python main.py slide.json output.pptx --split --log-level DEBUG
        """
    )

    parser.add_argument('input', help='Input JSON content file')
    parser.add_argument('output', help='Output PPTX file path')
    parser.add_argument('--config', help='Path to configuration file')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: INFO)')
    parser.add_argument('--split', dest='split_columns', action='store_const', const=True,
                        help='Give both cards equal width')
    parser.add_argument('--title', help='Presentation title')
    parser.add_argument('--author', help='Presentation author')

    args = parser.parse_args()

    # Setup logging
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    # Validate input file
    if not Path(args.input).exists():
        logger.error(f"Input file not found: {args.input}")
        return 1

    # Load configuration
    try:
        config = load_config(args.config or DEFAULT_CONFIG_PATH)
    except DeckBuilderError as e:
        logger.error(str(e))
        return 1

    success = convert_content_to_pptx(args.input, args.output, config,
                                      split_columns=args.split_columns,
                                      title=args.title, author=args.author)

    return 0 if success else 1


if __name__ == '__main__':
    sys.exit(main())
