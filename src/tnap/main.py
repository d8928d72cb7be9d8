"""
Main entry point for the tnap slideshow.
"""

import argparse
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .app import SlideshowApp
from .config.prompts import read_prompt
from .config.settings import Settings, load_settings
from .errors import TnapError
from .ui.theme import ICONS, THEME
from .utils.logging_config import setup_logging

DEFAULT_THEME = "cat"

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tnap",
        description=(
            "You can use sample themes for tnap and generate images with "
            "default prompts or your own prompts."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-t",
        "--theme",
        type=str,
        help="Use the sample theme without generating images",
    )
    parser.add_argument(
        "-k",
        "--key",
        type=str,
        help="Generate images using the prompt stored under KEY in the config file",
    )
    parser.add_argument(
        "-p",
        "--prompt",
        type=str,
        help="Generate images with your own prompt",
    )
    parser.add_argument(
        "-a",
        "--ascii",
        action="store_true",
        help="Show images as ASCII art (toggle with 'a' while running)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging to the log file",
    )
    return parser


def main(args: argparse.Namespace, settings: Settings) -> None:
    """
    Run the slideshow selected by the parsed arguments.

    Args:
        args: Parsed command line arguments
        settings: Runtime settings
    """
    app = SlideshowApp(settings, console=console)

    if args.key is not None:
        prompt = read_prompt(args.key, settings.config_path)
        app.display_generated_images(prompt, args.ascii)
    elif args.prompt is not None:
        app.display_generated_images(args.prompt, args.ascii)
    else:
        app.display_theme(args.theme or DEFAULT_THEME, args.ascii)


def cli(argv: Optional[List[str]] = None) -> int:
    """CLI entry point with argument parsing."""
    parser = build_parser()
    args = parser.parse_args(argv)

    sources = [args.theme, args.key, args.prompt]
    if sum(source is not None for source in sources) > 1:
        parser.error("Invalid arguments combination.")

    try:
        settings = load_settings()
        setup_logging(verbose=args.verbose, log_file=settings.log_file)
        main(args, settings)
    except TnapError as e:
        console.print(f"  [{THEME['error']}]{ICONS['error']} Error: {escape(str(e))}[/]")
        return 1
    except KeyboardInterrupt:
        console.print(f"\n  [{THEME['muted']}]Interrupted[/]")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(cli())
