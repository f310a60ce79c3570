#!/usr/bin/env python3
"""
Wink Render - command line entry point.

Renders an HTML file with optional style sheets, prints the layout tree
and/or paints it to an image.
"""

import argparse
import sys
from typing import List, Optional

from render_engine.css import RenderEngineError
from render_engine.engine import RenderEngine
from render_engine.utils.config import Config
from render_engine.utils.logging import get_default_log_file, log_exception, setup_logging


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Wink Render - style and lay out an HTML document")
    parser.add_argument('html', help='HTML file to render')
    parser.add_argument('--css', action='append', default=[], metavar='FILE',
                        help='Style sheet to apply (repeatable, applied in order)')
    parser.add_argument('--width', type=int, default=None, help='Viewport width in pixels')
    parser.add_argument('--height', type=int, default=None, help='Viewport height in pixels')
    parser.add_argument('--output', '-o', default=None, metavar='PNG', help='Paint the result to an image file')
    parser.add_argument('--dump', action='store_true', help='Print the layout tree')
    parser.add_argument('--fragment', action='store_true', help='Parse the HTML as a fragment')
    parser.add_argument('--strict-ids', action='store_true',
                        help='Do not let id selectors match elements without an id')
    parser.add_argument('--config', default=None, help='Path to a JSON configuration file')
    parser.add_argument('--log-file', default=None, help='Write a detailed log to this file')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def _read(path: str) -> str:
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = parse_arguments(argv)

    config = Config(args.config)
    console_level = "DEBUG" if args.debug else config.get('logging.console_level', "INFO")
    log_file = args.log_file
    if log_file is None and config.get('logging.log_to_file', False):
        log_file = get_default_log_file()
    logger = setup_logging(
        log_file=log_file,
        console_level=console_level,
        file_level=config.get('logging.file_level', "DEBUG"),
    )

    if args.width is not None:
        config.set('viewport.width', args.width)
    if args.height is not None:
        config.set('viewport.height', args.height)
    if args.strict_ids:
        config.set('cascade.strict_id_matching', True)

    engine = RenderEngine(config)
    viewport = engine.default_viewport()

    try:
        html_content = _read(args.html)
        css_text = "\n".join(_read(path) for path in args.css)
    except OSError as e:
        log_exception(logger, e, "Could not read input")
        return 1

    try:
        result = engine.render(html_content, css_text, viewport=viewport, fragment=args.fragment)

        if args.dump:
            print(result.debug_tree())

        if args.output:
            image = engine.paint(result.layout, viewport)
            image.save(args.output)
            logger.info(f"Wrote {viewport.width}x{viewport.height} image to {args.output}")
    except RenderEngineError as e:
        log_exception(logger, e, "Rendering failed")
        return 1
    except OSError as e:
        log_exception(logger, e, "Could not write output")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
